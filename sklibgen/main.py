"""Command line interface for sklibgen.

This module provides a command-line interface for turning an API description
into the C library and documentation artifacts.
"""

from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional, TypeVar, cast

import typer
from loguru import logger

from sklibgen.config import create_default_config
from sklibgen.errors import UnmappedTypeError
from sklibgen.generator import DEFAULT_TARGETS, generate, write_artifacts
from sklibgen.models import ApiDescription, load_description
from sklibgen.translators import CLibTranslator, TranslatorType

# Define type variables for TypedCallable
F = TypeVar("F", bound=Callable[..., Any])


def typed_command(app_command: Any) -> Callable[[F], F]:
    """Wrap typer command with proper typing for mypy."""

    def decorator(func: F) -> F:
        return cast(F, app_command(func))

    return decorator


app = typer.Typer(
    name="sklibgen",
    help="Flatten an API description into an ABI-stable C library.",
    add_completion=False,
)


def _map_targets(targets: Optional[list[str]]) -> list[TranslatorType]:
    """Map target strings to translator types, skipping unknown ones.

    Args:
        targets: Target names ("clib", "docs")

    Returns:
        Translator types in the requested order, defaulting to all of them
    """
    if not targets:
        return list(DEFAULT_TARGETS)

    mapped: list[TranslatorType] = []
    for target in targets:
        try:
            translator_type = TranslatorType(target.lower())
        except ValueError:
            logger.warning(f"Unknown target: {target}. Ignoring.")
            continue
        if translator_type not in mapped:
            mapped.append(translator_type)
    return mapped


def _load(api_file: Path) -> ApiDescription:
    try:
        return load_description(api_file)
    except OSError as e:
        logger.error(f"Failed to read API description: {e}")
        raise typer.Exit(1) from e
    except ValueError as e:
        logger.error(f"Invalid API description: {e}")
        raise typer.Exit(1) from e


@typed_command(app.command("generate"))
def generate_command(
    api_file: Path = typer.Argument(..., help="JSON API description"),
    output_dir: Optional[Path] = typer.Argument(
        None, help="Directory for the generated files (stdout if omitted)"
    ),
    target: Optional[list[str]] = typer.Option(
        None, "--target", "-t", help="Translator to run (clib, docs); repeatable"
    ),
) -> None:
    """Generate the C library and documentation artifacts.

    Example: sklibgen generate api_description.json out/ --target clib
    """
    description = _load(api_file)
    translator_types = _map_targets(target)
    if not translator_types:
        logger.error("No valid targets requested")
        raise typer.Exit(1)

    logger.info(f"Translating {len(description.functions)} functions")
    try:
        artifacts = generate(description, translator_types, create_default_config())
    except UnmappedTypeError as e:
        logger.error(f"Translation error: {e}")
        raise typer.Exit(1) from e

    if output_dir is None:
        for file_name, content in artifacts.items():
            typer.echo(f"// ===== {file_name} =====")
            typer.echo(content)
    else:
        write_artifacts(artifacts, output_dir)


@typed_command(app.command("signature"))
def signature_command(
    api_file: Path = typer.Argument(..., help="JSON API description"),
    function: str = typer.Argument(..., help="Name of the function"),
) -> None:
    """Print the C library signature of every overload of a function.

    Example: sklibgen signature api_description.json move_circle
    """
    description = _load(api_file)
    overloads = [f for f in description.functions if f.name == function]
    if not overloads:
        logger.error(f"Function '{function}' not found in the API description")
        raise typer.Exit(1)

    translator = CLibTranslator(description, create_default_config())
    try:
        for overload in overloads:
            typer.echo(translator.signature_for(overload))
    except UnmappedTypeError as e:
        logger.error(f"Translation error: {e}")
        raise typer.Exit(1) from e


if __name__ == "__main__":
    app()
