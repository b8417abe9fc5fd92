"""Base interfaces shared by the generator's translators."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from loguru import logger

from sklibgen.config import GeneratorConfig
from sklibgen.errors import UnmappedTypeError
from sklibgen.models import ApiDescription, EnumDescriptor, FunctionDescriptor
from sklibgen.types import TypeRegistry


class SignatureProvider(Protocol):
    """A target able to render per-entry signatures for the documentation.

    Targets may also define ``enum_signature_for(enum) -> str | None``; the
    documentation only records enum signatures for targets that do.
    """

    name: str

    def signature_for(self, function: FunctionDescriptor) -> str:
        """Render the signature of a function in this target."""
        ...


class Translator(ABC):
    """Turns an API description into text artifacts keyed by file name."""

    name: str = ""

    def __init__(
        self,
        description: ApiDescription,
        config: GeneratorConfig,
        registry: TypeRegistry | None = None,
    ) -> None:
        """Initialize with the description and configuration of the pass.

        Args:
            description: API description to translate
            config: Generator configuration
            registry: Registry of declared names; derived from the
                description when omitted
        """
        self.description = description
        self.config = config
        self.registry = registry or TypeRegistry.from_description(description)

    @abstractmethod
    def render_templates(self) -> dict[str, str]:
        """Render every artifact of this translator.

        Returns:
            Mapping of file name to file content
        """
        pass

    def enum_signature_for(self, enum: EnumDescriptor) -> str | None:
        """Render an enum declaration, or None if the target has no syntax for it."""
        return None

    def post_execute_message(self) -> str | None:
        """Hint shown to the user once the artifacts are produced."""
        return None

    def execute(self) -> dict[str, str]:
        """Render the artifacts of this translator."""
        logger.debug(f"Running {self.name} translator")
        artifacts = self.render_templates()
        logger.debug(f"{self.name} produced: {sorted(artifacts)}")
        message = self.post_execute_message()
        if message:
            logger.info(message)
        return artifacts


@contextmanager
def translating(entry: str) -> Iterator[None]:
    """Attach the entry being translated to an UnmappedTypeError."""
    try:
        yield
    except UnmappedTypeError as err:
        raise err.with_context(entry) from err
