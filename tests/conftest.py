"""
Pytest configuration and shared fixtures.

The sample description covers every type shape the generator understands:
structs (including a 2-D array field), an enum, a function-pointer typedef,
a typealias, vectors, unsigned primitives and void pointers.
"""

import copy
from typing import Any

import pytest

from sklibgen.config import GeneratorConfig, create_default_config
from sklibgen.models import ApiDescription
from sklibgen.types import TypeRegistry


def t(type_name: str, **modifiers: Any) -> dict[str, Any]:
    """Build raw type data the way the upstream parser emits it."""
    return {"type": type_name, **modifiers}


API_DATA: dict[str, Any] = {
    "circle_drawing": {
        "group": "graphics",
        "brief": "Circle drawing.",
        "description": "Functions for circles.",
        "functions": [
            {
                "name": "move_circle",
                "parameters": {
                    "circle": t("circle", is_reference=True),
                    "dx": t("float"),
                },
                "return": t("void"),
            },
            {
                "name": "draw_circle",
                "parameters": {
                    "clr": t("color"),
                    "c": t("circle", is_reference=True, is_const=True),
                },
                "return": None,
            },
            {
                "name": "circle_at",
                "parameters": {"x": t("double"), "y": t("double")},
                "return": t("circle"),
            },
        ],
        "structs": [
            {"name": "point_2d", "fields": {"x": t("double"), "y": t("double")}},
            {
                "name": "circle",
                "fields": {"center": t("point_2d"), "radius": t("double")},
            },
            {
                "name": "color",
                "fields": {"r": t("float"), "g": t("float"), "b": t("float")},
            },
        ],
    },
    "matrix": {
        "group": "graphics",
        "brief": "",
        "description": " Matrices.",
        "structs": [
            {
                "name": "matrix_2d",
                "fields": {
                    "elements": t(
                        "double", is_array=True, array_dimension_sizes=[3, 3]
                    )
                },
            }
        ],
        "functions": [
            {
                "name": "identity_matrix",
                "parameters": {},
                "return": t("matrix_2d"),
            }
        ],
    },
    "input": {
        "group": "input",
        "brief": "Keyboard input.",
        "description": "",
        "functions": [
            {
                "name": "key_name",
                "parameters": {"key": t("key_code")},
                "return": t("string"),
            },
            {
                "name": "register_callback_on_key_down",
                "parameters": {"callback": t("key_callback")},
                "return": t("void"),
            },
        ],
        "typedefs": [
            {
                "name": "key_callback",
                "type": "void",
                "is_function_pointer": True,
                "parameters": {"code": t("int")},
                "return": t("void"),
            },
        ],
        "enums": [
            {
                "name": "key_code",
                "constants": {
                    "A_KEY": {"number": 97, "description": "The a key."},
                    "B_KEY": {"number": 98, "description": "The b key."},
                },
            }
        ],
    },
    "utilities": {
        "group": "utilities",
        "brief": "Utilities.",
        "description": "",
        "functions": [
            {
                "name": "split",
                "parameters": {
                    "text": t("string", is_reference=True, is_const=True),
                    "delimiter": t("string"),
                },
                "return": t("vector", type_p="string"),
            },
            {
                "name": "free_memory",
                "parameters": {"ptr": t("void", is_pointer=True)},
                "return": t("void"),
            },
            {
                "name": "rnd",
                "parameters": {"ubound": t("unsigned int")},
                "return": t("unsigned int"),
            },
            {"name": "read_byte", "parameters": {}, "return": t("byte")},
            {
                "name": "bitmap_named",
                "parameters": {"name": t("string")},
                "return": t("bitmap"),
            },
            {
                "name": "is_valid",
                "parameters": {"bmp": t("bitmap")},
                "return": t("bool"),
            },
        ],
        "typedefs": [
            {"name": "bitmap", "type": "_bitmap_data", "is_function_pointer": False},
        ],
        "defines": [{"name": "SK_VERSION", "value": "1"}],
    },
}


@pytest.fixture
def api_data() -> dict[str, Any]:
    """Fixture providing a fresh copy of the raw sample description."""
    return copy.deepcopy(API_DATA)


@pytest.fixture
def description(api_data: dict[str, Any]) -> ApiDescription:
    """Fixture providing the parsed sample description."""
    return ApiDescription.from_dict(api_data)


@pytest.fixture
def registry(description: ApiDescription) -> TypeRegistry:
    """Fixture providing the registry of the sample description."""
    return TypeRegistry.from_description(description)


@pytest.fixture
def config() -> GeneratorConfig:
    """Fixture providing the default generator configuration."""
    return create_default_config()


@pytest.fixture
def functions(description: ApiDescription) -> dict[str, Any]:
    """Fixture mapping function names of the sample to their descriptors."""
    return {function.name: function for function in description.functions}
