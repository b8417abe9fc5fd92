"""
Exceptions raised while translating an API description.

Type mapping is the only validation gate of the generator, so a single error
kind is defined here and propagated unchanged to the caller.
"""

from typing import Optional


class UnmappedTypeError(Exception):
    """Raised when a declared type has no C library representation.

    The error is fatal for the current generation pass: there is no partial
    output mode, so callers either get every artifact or this exception.
    For example, `UnmappedTypeError("char")` reads "The type `char` cannot
    yet be translated into a compatible C-type for the C library".
    """

    def __init__(self, type_name: str, context: Optional[str] = None):
        """Initialize the exception with the offending type name.

        Args:
            type_name: Declared type name that could not be mapped
            context: Optional description of the entry being translated
        """
        self.type_name = type_name
        self.context = context
        self.message = (
            f"The type `{type_name}` cannot yet be translated into a "
            "compatible C-type for the C library"
        )
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} (in {self.context})"
        return self.message

    def with_context(self, context: str) -> "UnmappedTypeError":
        """Create a new UnmappedTypeError for the same type in another context.

        Args:
            context: Entry being translated, e.g. ``"function move_circle"``

        Returns:
            A new UnmappedTypeError instance carrying the context
        """
        return UnmappedTypeError(self.type_name, context)
