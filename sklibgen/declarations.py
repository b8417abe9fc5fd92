"""
C declaration fragments for the generated library.

These builders compose mapped type tokens with modifier tokens. References are
lowered to pointers since C has no reference type.
"""

from sklibgen.arrays import flatten
from sklibgen.config import GeneratorConfig
from sklibgen.mangler import mangle
from sklibgen.mapper import map_type
from sklibgen.models import (
    EnumDescriptor,
    FunctionDescriptor,
    ParameterDescriptor,
    TypeDescriptor,
)
from sklibgen.types import TypeRegistry


def render_parameter(
    parameter: ParameterDescriptor,
    registry: TypeRegistry,
    config: GeneratorConfig,
) -> str:
    """Render one parameter, e.g. ``"const int *p"``."""
    descriptor = parameter.type
    type_token = map_type(descriptor, registry, config)
    ptr = "*" if descriptor.is_pointer or descriptor.is_reference else ""
    const = "const " if descriptor.is_const else ""
    return f"{const}{type_token} {ptr}{parameter.name}"


def render_parameter_list(
    parameters: tuple[ParameterDescriptor, ...],
    registry: TypeRegistry,
    config: GeneratorConfig,
) -> str:
    """Render a parameter list; an empty list renders as ``""``."""
    return ", ".join(render_parameter(p, registry, config) for p in parameters)


def render_signature(
    function: FunctionDescriptor,
    registry: TypeRegistry,
    config: GeneratorConfig,
) -> str:
    """Render the full C library signature of a function.

    Args:
        function: Function to render
        registry: Names declared by the API description
        config: Generator configuration

    Returns:
        Signature text, e.g. ``"void __sklib__f__int(int x)"``

    Raises:
        UnmappedTypeError: If the return or a parameter type cannot be mapped
    """
    return_type = map_type(function.returns, registry, config)
    name = mangle(function, config)
    parameter_list = render_parameter_list(function.parameters, registry, config)
    return f"{return_type} {name}({parameter_list})"


def render_struct_field(
    field_name: str,
    descriptor: TypeDescriptor,
    config: GeneratorConfig,
) -> str:
    """Render a struct field; N-D arrays become one flat dimension."""
    if descriptor.is_void_pointer:
        return f"{config.opaque_pointer_token} {field_name}"

    ptr = "*" if descriptor.is_pointer else ""
    array_decl = (
        f"[{flatten(descriptor.array_dimension_sizes)}]" if descriptor.is_array else ""
    )
    return f"{config.abi_name(descriptor.type)} {ptr}{field_name}{array_decl}"


def render_enum(enum: EnumDescriptor, config: GeneratorConfig) -> str:
    """Render an enum as a C typedef block."""
    lines = ["typedef enum {"]
    for constant in enum.constants:
        if constant.value is None:
            lines.append(f"    {constant.name},")
        else:
            lines.append(f"    {constant.name} = {constant.value},")
    lines.append(f"}} {config.abi_name(enum.name)};")
    return "\n".join(lines)
