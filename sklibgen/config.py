"""Configuration shared by every translator of a generation pass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratorConfig:
    """Names used when flattening an API into a C library.

    Attributes:
        abi_namespace: Prefix of every ABI type and mangled function name
        adapter_namespace: Prefix of the conversion adapter functions
        opaque_pointer_token: ABI token used for ``void *``
        library_name: Name of the shared library target in the build script
        header_name: File name of the generated declaration header
        implementation_name: File name of the generated implementation
        build_script_name: File name of the generated build script
        docs_name: File name of the generated documentation tree
        native_header: Header of the native library the wrappers call into
        adapters_header: Header declaring the primitive adapter functions
    """

    abi_namespace: str = "__sklib"
    adapter_namespace: str = "__skadapter"
    opaque_pointer_token: str = "__sklib_ptr"
    library_name: str = "SplashKitBackend"
    header_name: str = "sk_clib.h"
    implementation_name: str = "sk_clib.cpp"
    build_script_name: str = "CMakeLists.txt"
    docs_name: str = "api.json"
    native_header: str = "splashkit.h"
    adapters_header: str = "sk_adapters.h"

    @property
    def native_opaque_token(self) -> str:
        """Adapter token naming the opaque pointer on the native side."""
        return self.opaque_pointer_token.removeprefix("__")

    @property
    def string_token(self) -> str:
        return f"{self.abi_namespace}_string"

    def abi_name(self, name: str) -> str:
        """Prefix a declared name with the ABI namespace."""
        return f"{self.abi_namespace}_{name}"

    def adapter_name(self, token: str) -> str:
        """Build the name of an adapter converting to ``token``."""
        return f"{self.adapter_namespace}__to_{token}"


def create_default_config() -> GeneratorConfig:
    """Create the configuration reproducing the SplashKit C library names."""
    return GeneratorConfig()
