from sklibgen.config import GeneratorConfig, create_default_config
from sklibgen.errors import UnmappedTypeError
from sklibgen.generator import generate, write_artifacts
from sklibgen.models import (
    ApiDescription,
    FunctionDescriptor,
    ParameterDescriptor,
    StructDescriptor,
    TypeDescriptor,
    load_description,
)

__version__ = "0.1.0"


__all__ = [
    "ApiDescription",
    "FunctionDescriptor",
    "GeneratorConfig",
    "ParameterDescriptor",
    "StructDescriptor",
    "TypeDescriptor",
    "UnmappedTypeError",
    "create_default_config",
    "generate",
    "load_description",
    "write_artifacts",
]
