"""
Pytest configuration and shared fixtures for translator tests.
"""

import pytest

from sklibgen.translators import CLibTranslator


@pytest.fixture
def clib(description, config, registry) -> CLibTranslator:
    """Fixture providing a C library translator for the sample description."""
    return CLibTranslator(description, config, registry)


@pytest.fixture
def header(clib) -> str:
    return clib.render_header()


@pytest.fixture
def implementation(clib) -> str:
    return clib.render_implementation()
