"""Translator management module.

This module provides the factory for creating translator instances.
"""

from enum import Enum

from sklibgen.config import GeneratorConfig
from sklibgen.models import ApiDescription
from sklibgen.translators.base import SignatureProvider, Translator, translating
from sklibgen.translators.clib import CLibTranslator
from sklibgen.translators.docs import DocsTranslator
from sklibgen.types import TypeRegistry


class TranslatorType(Enum):
    """Supported translators, by name."""

    CLIB = "clib"
    DOCS = "docs"


def create_translator(
    translator_type: TranslatorType,
    description: ApiDescription,
    config: GeneratorConfig,
    registry: TypeRegistry | None = None,
) -> Translator:
    """Create a translator instance based on type.

    Args:
        translator_type: The type of translator to create
        description: API description to translate
        config: Generator configuration
        registry: Registry of declared names, shared between translators

    Returns:
        An instance of the requested translator

    Raises:
        ValueError: If the translator type is not supported
    """
    registry = registry or TypeRegistry.from_description(description)
    if translator_type == TranslatorType.CLIB:
        return CLibTranslator(description, config, registry)
    elif translator_type == TranslatorType.DOCS:
        targets = [CLibTranslator(description, config, registry)]
        return DocsTranslator(description, config, targets, registry)
    else:
        raise ValueError(f"Unsupported translator type: {translator_type}")


__all__ = [
    "CLibTranslator",
    "DocsTranslator",
    "SignatureProvider",
    "Translator",
    "TranslatorType",
    "create_translator",
    "translating",
]
