"""
Names of the adapter functions converting values across the library boundary.

One adapter converts a C library value into its native form, the other goes
the opposite way. Both names are pure functions of the declared type.
"""

import re

from sklibgen.config import GeneratorConfig
from sklibgen.mapper import map_type
from sklibgen.models import TypeDescriptor
from sklibgen.types import TypeRegistry, is_unsigned

WHITESPACE = re.compile(r"\s")


def native_token(descriptor: TypeDescriptor, config: GeneratorConfig) -> str:
    """Get the token naming the native form of a type."""
    if descriptor.is_void_pointer:
        return config.native_opaque_token
    if is_unsigned(descriptor.type):
        return WHITESPACE.sub("_", descriptor.type)
    if descriptor.type == "byte":
        return "unsigned_char"
    if descriptor.type_p is not None:
        return f"{descriptor.type}_{descriptor.type_p}"
    return descriptor.type


def abi_token(
    descriptor: TypeDescriptor,
    registry: TypeRegistry,
    config: GeneratorConfig,
) -> str:
    """Get the token naming the C library form of a type.

    Raises:
        UnmappedTypeError: If the type cannot be mapped
    """
    token = map_type(descriptor, registry, config).removeprefix("__")
    return WHITESPACE.sub("_", token)


def to_native_adapter(descriptor: TypeDescriptor, config: GeneratorConfig) -> str:
    """Name of the adapter producing the native value.

    E.g. ``__skadapter__to_circle``.
    """
    return config.adapter_name(native_token(descriptor, config))


def to_abi_adapter(
    descriptor: TypeDescriptor,
    registry: TypeRegistry,
    config: GeneratorConfig,
) -> str:
    """Name of the adapter producing the C library value.

    E.g. ``__skadapter__to_sklib_circle``.
    """
    return config.adapter_name(abi_token(descriptor, registry, config))
