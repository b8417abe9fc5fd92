"""
Symbol mangling for C library functions.

Overloads are flattened into distinct C symbols by folding the declared
parameter types into the function name:

    my_function(int p1, float p2) => __sklib__my_function__int__float

Declared type names are used rather than ABI tokens, so mangled names stay
stable when the ABI mapping changes. Return types and parameter names never
take part.
"""

import re

from sklibgen.config import GeneratorConfig
from sklibgen.models import FunctionDescriptor, ParameterDescriptor

WHITESPACE = re.compile(r"\s")


def parameter_token(parameter: ParameterDescriptor) -> str:
    """Build the mangling token of one parameter."""
    descriptor = parameter.type
    token = WHITESPACE.sub("_", descriptor.type)
    ref = "_ref" if descriptor.is_reference else ""
    ptr = "_ptr" if descriptor.is_pointer else ""
    arr = "_array" if descriptor.is_array else ""
    return f"{token}{ref}{ptr}{arr}"


def mangle_tokens(function: FunctionDescriptor, config: GeneratorConfig) -> list[str]:
    """Fold a function into its ordered list of name tokens."""
    tokens = [config.abi_namespace, function.name]
    tokens.extend(parameter_token(parameter) for parameter in function.parameters)
    return tokens


def mangle(function: FunctionDescriptor, config: GeneratorConfig) -> str:
    """Get the C library symbol name of a function.

    Args:
        function: Function to mangle
        config: Generator configuration providing the ABI namespace

    Returns:
        The mangled name, e.g. ``"__sklib__move_circle__circle_ref__float"``
    """
    return "__".join(mangle_tokens(function, config))
