"""
Type classification for the C library generator.

Every declared type name is sorted into exactly one category before it is
mapped to an ABI token. Structural categories are checked first, then the
semantic kind of the name is looked up in the registry built from the API
description.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto

from loguru import logger

from sklibgen.errors import UnmappedTypeError
from sklibgen.models import ApiDescription, TypeDescriptor

UNSIGNED_PATTERN = re.compile(r"^unsigned\s+\w+")

GENERIC_CONTAINER = "vector"


class TypeCategory(Enum):
    """Shape of a declared type."""

    UNSIGNED_PRIMITIVE = auto()  # "unsigned <word>", already ABI-safe
    VOID_POINTER = auto()  # void *, opaque
    KNOWN_FUNCTION_POINTER = auto()  # typedef'd function pointer
    GENERIC_CONTAINER = auto()  # vector<type_p>
    DIRECT = auto()  # resolved through DirectKind


class DirectKind(Enum):
    """Semantic kind of a type name in the direct-type table."""

    VOID = "void"
    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    BYTE = "byte"
    BOOL = "bool"
    ENUM = "enum"
    STRUCT = "struct"
    STRING = "string"
    TYPEALIAS = "typealias"


# Names that are their own semantic kind
PRIMITIVE_KINDS: dict[str, DirectKind] = {
    "void": DirectKind.VOID,
    "int": DirectKind.INT,
    "float": DirectKind.FLOAT,
    "double": DirectKind.DOUBLE,
    "byte": DirectKind.BYTE,
    "bool": DirectKind.BOOL,
    "string": DirectKind.STRING,
}


@dataclass(frozen=True)
class TypeRegistry:
    """Read-only knowledge about the names declared by an API description.

    Attributes:
        function_pointers: Typedef names treated as opaque function pointers
        structs: Declared struct names
        enums: Declared enum names
        typealiases: Typedef names that are not function pointers
    """

    function_pointers: frozenset[str] = frozenset()
    structs: frozenset[str] = frozenset()
    enums: frozenset[str] = frozenset()
    typealiases: frozenset[str] = frozenset()

    @classmethod
    def from_description(cls, description: ApiDescription) -> "TypeRegistry":
        registry = cls(
            function_pointers=frozenset(t.name for t in description.function_pointers),
            structs=frozenset(s.name for s in description.structs),
            enums=frozenset(e.name for e in description.enums),
            typealiases=frozenset(
                t.name for t in description.typedefs if not t.is_function_pointer
            ),
        )
        logger.debug(
            f"Registry: {len(registry.function_pointers)} function pointers, "
            f"{len(registry.structs)} structs, {len(registry.enums)} enums, "
            f"{len(registry.typealiases)} typealiases"
        )
        return registry

    def semantic_kind(self, type_name: str) -> DirectKind | None:
        """Look up the semantic kind of a declared type name."""
        if type_name in PRIMITIVE_KINDS:
            return PRIMITIVE_KINDS[type_name]
        if type_name in self.enums:
            return DirectKind.ENUM
        if type_name in self.structs:
            return DirectKind.STRUCT
        if type_name in self.typealiases:
            return DirectKind.TYPEALIAS
        return None


@dataclass(frozen=True)
class Classification:
    """Result of classifying a TypeDescriptor.

    Attributes:
        category: Structural category of the type
        name: Declared type name
        kind: Semantic kind, set only for DIRECT
        element: Element type name, set only for GENERIC_CONTAINER
    """

    category: TypeCategory
    name: str
    kind: DirectKind | None = None
    element: str | None = None


def is_unsigned(type_name: str) -> bool:
    return UNSIGNED_PATTERN.match(type_name) is not None


def classify(descriptor: TypeDescriptor, registry: TypeRegistry) -> Classification:
    """Classify a type descriptor; the first matching rule wins.

    Args:
        descriptor: Type to classify
        registry: Names declared by the API description

    Returns:
        The classification of the descriptor

    Raises:
        UnmappedTypeError: If the name has no semantic kind
    """
    name = descriptor.type
    if is_unsigned(name):
        return Classification(TypeCategory.UNSIGNED_PRIMITIVE, name)
    if descriptor.is_void_pointer:
        return Classification(TypeCategory.VOID_POINTER, name)
    if name in registry.function_pointers:
        return Classification(TypeCategory.KNOWN_FUNCTION_POINTER, name)
    if name == GENERIC_CONTAINER and descriptor.type_p is not None:
        return Classification(
            TypeCategory.GENERIC_CONTAINER, name, element=descriptor.type_p
        )

    kind = registry.semantic_kind(name)
    if kind is None:
        raise UnmappedTypeError(name)
    return Classification(TypeCategory.DIRECT, name, kind=kind)
