"""
C library translator.

Produces a C header declaring the flattened library, a C++ implementation
wrapping every native function behind its mangled symbol, and a build script
for the shared library.
"""

from loguru import logger

from sklibgen.adapters import to_abi_adapter, to_native_adapter
from sklibgen.arrays import flatten, index_expr
from sklibgen.declarations import (
    render_enum,
    render_parameter_list,
    render_signature,
    render_struct_field,
)
from sklibgen.mangler import mangle
from sklibgen.mapper import map_type
from sklibgen.models import (
    EnumDescriptor,
    FunctionDescriptor,
    StructDescriptor,
    TypeDescriptor,
    TypedefDescriptor,
)
from sklibgen.translators.base import Translator, translating
from sklibgen.types import TypeCategory, classify

BANNER = [
    "//",
    "// Generated C library code",
    "// DO NOT MODIFY",
    "//",
    "",
]

# Primitive field types get a namespaced typedef so struct fields can always
# be declared as <abi-namespace>_<type>
PRIMITIVE_FIELD_TYPES: dict[str, str] = {
    "int": "int",
    "float": "float",
    "double": "double",
    "bool": "int",
    "byte": "unsigned char",
}

PARAM_PREFIX = "__skparam__"
RETURN_VAR = "__skreturn"


class CLibTranslator(Translator):
    """Generates the ABI-stable C library for an API description."""

    name = "clib"

    def render_templates(self) -> dict[str, str]:
        return {
            self.config.header_name: self.render_header(),
            self.config.implementation_name: self.render_implementation(),
            self.config.build_script_name: self.render_build_script(),
        }

    def post_execute_message(self) -> str | None:
        return (
            f"Run the generated {self.config.build_script_name} to build "
            f"the {self.config.library_name} dynamic C library."
        )

    def signature_for(self, function: FunctionDescriptor) -> str:
        with translating(f"function {function.name}"):
            return render_signature(function, self.registry, self.config)

    def enum_signature_for(self, enum: EnumDescriptor) -> str | None:
        return render_enum(enum, self.config)

    # === header ===

    def render_header(self) -> str:
        """Render the declaration header of the library."""
        guard = f"{self.config.abi_namespace}_h"
        lines = [*BANNER, f"#ifndef {guard}", f"#define {guard}", ""]
        lines.append(f"typedef void *{self.config.opaque_pointer_token};")
        for type_name, c_type in PRIMITIVE_FIELD_TYPES.items():
            lines.append(f"typedef {c_type} {self.config.abi_name(type_name)};")
        lines.extend(
            [
                "",
                "typedef struct {",
                "    char *str;",
                "    int size;",
                f"}} {self.config.string_token};",
                "",
            ]
        )

        for enum in self.description.enums:
            lines.append(render_enum(enum, self.config))
            lines.append("")
        for struct in self._ordered_structs():
            lines.extend(self._render_struct(struct))
            lines.append("")
        for element in self._vector_element_types():
            lines.extend(self._render_vector(element))
            lines.append("")
        for typedef in self.description.function_pointers:
            lines.append(self._render_function_pointer(typedef))
        if self.description.function_pointers:
            lines.append("")

        lines.extend(["#ifdef __cplusplus", 'extern "C" {', "#endif", ""])
        for function in self.description.functions:
            lines.append(f"{self.signature_for(function)};")
        lines.extend(["", "#ifdef __cplusplus", "}", "#endif", ""])
        lines.append(f"#endif /* {guard} */")
        return "\n".join(lines) + "\n"

    def _render_function_pointer(self, typedef: TypedefDescriptor) -> str:
        with translating(f"typedef {typedef.name}"):
            return_type = map_type(typedef.returns, self.registry, self.config)
            parameter_list = render_parameter_list(
                typedef.parameters, self.registry, self.config
            )
        return (
            f"typedef {return_type} "
            f"(*{self.config.abi_name(typedef.name)})({parameter_list});"
        )

    def _render_struct(self, struct: StructDescriptor) -> list[str]:
        lines = ["typedef struct {"]
        for field_name, descriptor in struct.fields:
            field = render_struct_field(field_name, descriptor, self.config)
            lines.append(f"    {field};")
        lines.append(f"}} {self.config.abi_name(struct.name)};")
        return lines

    def _ordered_structs(self) -> list[StructDescriptor]:
        """Structs ordered so every struct follows the structs its fields use.

        Structs with no pending dependency keep their document order. Structs
        left in a dependency cycle are appended in document order.
        """
        remaining = list(self.description.structs)
        declared: set[str] = set()
        ordered: list[StructDescriptor] = []
        while remaining:
            ready = [s for s in remaining if self._struct_dependencies(s) <= declared]
            if not ready:
                names = [s.name for s in remaining]
                logger.warning(f"Circular struct dependencies: {names}")
                ready = remaining
            ordered.extend(ready)
            declared.update(s.name for s in ready)
            remaining = [s for s in remaining if s not in ready]
        return ordered

    def _struct_dependencies(self, struct: StructDescriptor) -> set[str]:
        return {
            descriptor.type
            for _, descriptor in struct.fields
            if descriptor.type in self.registry.structs
            and descriptor.type != struct.name
        }

    def _render_vector(self, element: str) -> list[str]:
        with translating(f"vector<{element}>"):
            element_type = map_type(
                TypeDescriptor(type=element), self.registry, self.config
            )
        return [
            "typedef struct {",
            f"    {element_type} *data;",
            "    unsigned int size;",
            f"}} {self.config.abi_name(f'vector_{element}')};",
        ]

    def _vector_element_types(self) -> list[str]:
        """Element types of every vector in use, in first-use order."""
        descriptors: list[TypeDescriptor] = []
        for function in self.description.functions:
            descriptors.extend(p.type for p in function.parameters)
            descriptors.append(function.returns)
        for typedef in self.description.function_pointers:
            descriptors.extend(p.type for p in typedef.parameters)
            descriptors.append(typedef.returns)
        for struct in self.description.structs:
            descriptors.extend(descriptor for _, descriptor in struct.fields)

        elements: list[str] = []
        for descriptor in descriptors:
            if descriptor.type_p is None or descriptor.type_p in elements:
                continue
            category = classify(descriptor, self.registry).category
            if category == TypeCategory.GENERIC_CONTAINER:
                elements.append(descriptor.type_p)
        logger.debug(f"Vector element types: {elements}")
        return elements

    # === implementation ===

    def render_implementation(self) -> str:
        """Render the C++ implementation wrapping the native library."""
        lines = [
            *BANNER,
            f'#include "{self.config.native_header}"',
            f'#include "{self.config.adapters_header}"',
            f'#include "{self.config.header_name}"',
            "",
        ]
        for struct in self._ordered_structs():
            with translating(f"struct {struct.name}"):
                lines.extend(self._render_struct_adapters(struct))
        for function in self.description.functions:
            lines.extend(self._render_function_wrapper(function))
        return "\n".join(lines)

    def _render_struct_adapters(self, struct: StructDescriptor) -> list[str]:
        struct_type = TypeDescriptor(type=struct.name)
        abi_type = self.config.abi_name(struct.name)

        abi_name = to_abi_adapter(struct_type, self.registry, self.config)
        native_name = to_native_adapter(struct_type, self.config)

        to_abi = [
            f"{abi_type} {abi_name}({struct.name} v)",
            "{",
            f"    {abi_type} result;",
        ]
        to_native = [
            f"{struct.name} {native_name}({abi_type} v)",
            "{",
            f"    {struct.name} result;",
        ]
        for field_name, descriptor in struct.fields:
            abi_adapter = to_abi_adapter(descriptor, self.registry, self.config)
            native_adapter = to_native_adapter(descriptor, self.config)
            if descriptor.is_array:
                sizes = descriptor.array_dimension_sizes
                for idx in range(flatten(sizes)):
                    native_idx = index_expr(sizes, idx)
                    to_abi.append(
                        f"    result.{field_name}[{idx}] = "
                        f"{abi_adapter}(v.{field_name}{native_idx});"
                    )
                    to_native.append(
                        f"    result.{field_name}{native_idx} = "
                        f"{native_adapter}(v.{field_name}[{idx}]);"
                    )
            else:
                to_abi.append(
                    f"    result.{field_name} = {abi_adapter}(v.{field_name});"
                )
                to_native.append(
                    f"    result.{field_name} = {native_adapter}(v.{field_name});"
                )
        to_abi.extend(["    return result;", "}", ""])
        to_native.extend(["    return result;", "}", ""])
        return to_abi + to_native

    def _render_function_wrapper(self, function: FunctionDescriptor) -> list[str]:
        lines = [self.signature_for(function), "{"]
        with translating(f"function {function.name}"):
            arguments: list[str] = []
            write_back: list[str] = []
            for parameter in function.parameters:
                descriptor = parameter.type
                local = f"{PARAM_PREFIX}{parameter.name}"
                source = parameter.name
                if descriptor.is_reference:
                    source = f"*{parameter.name}"
                adapter = to_native_adapter(descriptor, self.config)
                lines.append(f"    auto {local} = {adapter}({source});")
                arguments.append(local)
                if descriptor.is_reference and not descriptor.is_const:
                    back = to_abi_adapter(descriptor, self.registry, self.config)
                    write_back.append(f"    *{parameter.name} = {back}({local});")

            call = f"{function.name}({', '.join(arguments)})"
            return_type = map_type(function.returns, self.registry, self.config)
            returns_value = return_type != "void"
            if returns_value:
                lines.append(f"    auto {RETURN_VAR} = {call};")
            else:
                lines.append(f"    {call};")
            lines.extend(write_back)
            if returns_value:
                back = to_abi_adapter(function.returns, self.registry, self.config)
                lines.append(f"    return {back}({RETURN_VAR});")
        lines.extend(["}", ""])
        logger.debug(f"Wrapped {function.name} as {mangle(function, self.config)}")
        return lines

    # === build script ===

    def render_build_script(self) -> str:
        """Render the CMake script building the shared library."""
        library = self.config.library_name
        return "\n".join(
            [
                "cmake_minimum_required(VERSION 3.5)",
                f"project({library})",
                "",
                "set(CMAKE_CXX_STANDARD 14)",
                "",
                f"add_library({library} SHARED {self.config.implementation_name})",
                f"target_include_directories({library} PUBLIC "
                "${CMAKE_CURRENT_SOURCE_DIR})",
                "",
            ]
        )
