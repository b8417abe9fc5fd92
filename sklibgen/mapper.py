"""Mapping of declared types to flattened C library type tokens."""

from sklibgen.config import GeneratorConfig
from sklibgen.errors import UnmappedTypeError
from sklibgen.models import TypeDescriptor
from sklibgen.types import (
    Classification,
    DirectKind,
    TypeCategory,
    TypeRegistry,
    classify,
)


def direct_token(kind: DirectKind, type_name: str, config: GeneratorConfig) -> str:
    """Get the ABI token of a semantic kind from the direct-type table."""
    match kind:
        case DirectKind.VOID:
            return "void"
        case DirectKind.INT | DirectKind.BOOL | DirectKind.ENUM:
            return "int"
        case DirectKind.FLOAT:
            return "float"
        case DirectKind.DOUBLE:
            return "double"
        case DirectKind.BYTE:
            return "unsigned char"
        case DirectKind.STRUCT:
            return config.abi_name(type_name)
        case DirectKind.STRING:
            return config.string_token
        case DirectKind.TYPEALIAS:
            return config.opaque_pointer_token
        case _:
            raise UnmappedTypeError(type_name)


def token_for(classification: Classification, config: GeneratorConfig) -> str:
    """Get the ABI token for an already classified type."""
    match classification:
        case Classification(category=TypeCategory.UNSIGNED_PRIMITIVE, name=name):
            return name
        case Classification(category=TypeCategory.VOID_POINTER):
            return config.opaque_pointer_token
        case Classification(category=TypeCategory.KNOWN_FUNCTION_POINTER, name=name):
            return config.abi_name(name)
        case Classification(category=TypeCategory.GENERIC_CONTAINER, element=element):
            return config.abi_name(f"vector_{element}")
        case Classification(category=TypeCategory.DIRECT, kind=DirectKind() as kind):
            return direct_token(kind, classification.name, config)
        case _:
            raise UnmappedTypeError(classification.name)


def map_type(
    descriptor: TypeDescriptor,
    registry: TypeRegistry,
    config: GeneratorConfig,
) -> str:
    """Map a declared type to its C library type token.

    Args:
        descriptor: Declared type of a parameter, field or return value
        registry: Names declared by the API description
        config: Generator configuration providing the ABI namespace

    Returns:
        The ABI token, e.g. ``"__sklib_circle"`` or ``"unsigned char"``

    Raises:
        UnmappedTypeError: If the type cannot be represented in the C library
    """
    return token_for(classify(descriptor, registry), config)
