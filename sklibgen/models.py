"""
Data models for the API description consumed by the generator.

The description arrives as an already-validated JSON document mapping header
names to header records. These dataclasses give the translators an immutable,
typed view of the parts that carry type information; the raw records are kept
alongside for consumers that only fold over them (the documentation tree).
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class TypeDescriptor:
    """Declared type of a parameter, field or return value.

    Attributes:
        type: Declared type name, e.g. ``"float"`` or ``"unsigned int"``
        type_p: Element type of a single-parameter generic container
        is_pointer: Declared as a pointer
        is_reference: Declared as a reference
        is_array: Declared as a fixed-size array
        is_const: Declared const
        array_dimension_sizes: Size of each array dimension, outermost first
    """

    type: str
    type_p: str | None = None
    is_pointer: bool = False
    is_reference: bool = False
    is_array: bool = False
    is_const: bool = False
    array_dimension_sizes: tuple[int, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypeDescriptor":
        is_array = bool(data.get("is_array", False))
        sizes = tuple(int(size) for size in data.get("array_dimension_sizes") or ())
        if is_array and not sizes:
            raise ValueError(
                f"Array of `{data.get('type')}` declared without dimension sizes"
            )
        return cls(
            type=data["type"],
            type_p=data.get("type_p"),
            is_pointer=bool(data.get("is_pointer", False)),
            is_reference=bool(data.get("is_reference", False)),
            is_array=is_array,
            is_const=bool(data.get("is_const", False)),
            array_dimension_sizes=sizes,
        )

    @property
    def is_void_pointer(self) -> bool:
        return self.type == "void" and self.is_pointer


VOID = TypeDescriptor(type="void")


@dataclass(frozen=True)
class ParameterDescriptor:
    name: str
    type: TypeDescriptor


@dataclass(frozen=True)
class FunctionDescriptor:
    """A function entry; parameter order is significant."""

    name: str
    parameters: tuple[ParameterDescriptor, ...] = ()
    returns: TypeDescriptor = VOID

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FunctionDescriptor":
        return cls(
            name=data["name"],
            parameters=_parameters_from_dict(data.get("parameters")),
            returns=_return_from_dict(data.get("return")),
        )


@dataclass(frozen=True)
class StructDescriptor:
    name: str
    fields: tuple[tuple[str, TypeDescriptor], ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StructDescriptor":
        fields = tuple(
            (field_name, TypeDescriptor.from_dict(field_data))
            for field_name, field_data in (data.get("fields") or {}).items()
        )
        return cls(name=data["name"], fields=fields)


@dataclass(frozen=True)
class EnumConstant:
    name: str
    value: int | None = None
    description: str = ""


@dataclass(frozen=True)
class EnumDescriptor:
    name: str
    constants: tuple[EnumConstant, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EnumDescriptor":
        constants = tuple(
            EnumConstant(
                name=const_name,
                value=(details or {}).get("number"),
                description=(details or {}).get("description") or "",
            )
            for const_name, details in (data.get("constants") or {}).items()
        )
        return cls(name=data["name"], constants=constants)


@dataclass(frozen=True)
class TypedefDescriptor:
    """A typedef; function-pointer typedefs may carry their signature."""

    name: str
    type: str
    is_function_pointer: bool = False
    parameters: tuple[ParameterDescriptor, ...] = ()
    returns: TypeDescriptor = VOID

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TypedefDescriptor":
        return cls(
            name=data["name"],
            type=data.get("type") or "",
            is_function_pointer=bool(data.get("is_function_pointer", False)),
            parameters=_parameters_from_dict(data.get("parameters")),
            returns=_return_from_dict(data.get("return")),
        )


@dataclass(frozen=True)
class ApiDescription:
    """The whole API description for one generation pass.

    Attributes:
        headers: Raw header records, keyed by header name
        functions: Every function, in document order
        structs: Every struct, in document order
        enums: Every enum, in document order
        typedefs: Every typedef, in document order
    """

    headers: dict[str, dict[str, Any]] = field(default_factory=dict)
    functions: tuple[FunctionDescriptor, ...] = ()
    structs: tuple[StructDescriptor, ...] = ()
    enums: tuple[EnumDescriptor, ...] = ()
    typedefs: tuple[TypedefDescriptor, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiDescription":
        if not isinstance(data, dict):
            raise ValueError("API description root must be an object")

        functions: list[FunctionDescriptor] = []
        structs: list[StructDescriptor] = []
        enums: list[EnumDescriptor] = []
        typedefs: list[TypedefDescriptor] = []
        for header in data.values():
            functions.extend(
                FunctionDescriptor.from_dict(f) for f in header.get("functions") or []
            )
            structs.extend(
                StructDescriptor.from_dict(s) for s in header.get("structs") or []
            )
            enums.extend(EnumDescriptor.from_dict(e) for e in header.get("enums") or [])
            typedefs.extend(
                TypedefDescriptor.from_dict(t) for t in header.get("typedefs") or []
            )

        return cls(
            headers=data,
            functions=tuple(functions),
            structs=tuple(structs),
            enums=tuple(enums),
            typedefs=tuple(typedefs),
        )

    @property
    def function_pointers(self) -> tuple[TypedefDescriptor, ...]:
        return tuple(t for t in self.typedefs if t.is_function_pointer)


def load_description(path: Path) -> ApiDescription:
    """Load an API description from a JSON file.

    Args:
        path: Path to the JSON document

    Returns:
        The parsed ApiDescription

    Raises:
        ValueError: If the document is not a JSON object
    """
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return ApiDescription.from_dict(payload)


def _parameters_from_dict(
    data: dict[str, Any] | None,
) -> tuple[ParameterDescriptor, ...]:
    return tuple(
        ParameterDescriptor(name=name, type=TypeDescriptor.from_dict(type_data))
        for name, type_data in (data or {}).items()
    )


def _return_from_dict(data: dict[str, Any] | None) -> TypeDescriptor:
    return TypeDescriptor.from_dict(data) if data else VOID
