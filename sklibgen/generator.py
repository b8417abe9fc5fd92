"""
Top-level interface for generating the C library artifacts.

A generation pass is a pure function of the API description and the
configuration; writing the artifacts to disk is a separate step.
"""

from collections.abc import Iterable
from pathlib import Path

from loguru import logger

from sklibgen.config import GeneratorConfig, create_default_config
from sklibgen.models import ApiDescription
from sklibgen.translators import TranslatorType, create_translator
from sklibgen.types import TypeRegistry

DEFAULT_TARGETS = (TranslatorType.CLIB, TranslatorType.DOCS)


def generate(
    description: ApiDescription,
    targets: Iterable[TranslatorType] = DEFAULT_TARGETS,
    config: GeneratorConfig | None = None,
) -> dict[str, str]:
    """Run the requested translators over an API description.

    Args:
        description: API description to translate
        targets: Translators to run, in order
        config: Generator configuration; defaults to the SplashKit names

    Returns:
        Mapping of file name to file content for every artifact

    Raises:
        UnmappedTypeError: If any declared type cannot be translated
    """
    config = config or create_default_config()
    registry = TypeRegistry.from_description(description)

    artifacts: dict[str, str] = {}
    for target in targets:
        translator = create_translator(target, description, config, registry)
        artifacts.update(translator.execute())
    return artifacts


def write_artifacts(artifacts: dict[str, str], output_dir: Path) -> list[Path]:
    """Write generated artifacts below an output directory.

    Args:
        artifacts: Mapping of file name to file content
        output_dir: Directory receiving the files

    Returns:
        Paths of the written files
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for file_name, content in artifacts.items():
        path = output_dir / file_name
        path.write_text(content, encoding="utf-8")
        logger.info(f"Wrote {path}")
        written.append(path)
    return written
