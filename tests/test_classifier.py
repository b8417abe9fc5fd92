"""Tests for the type classifier."""

import pytest

from sklibgen.errors import UnmappedTypeError
from sklibgen.models import TypeDescriptor
from sklibgen.types import (
    Classification,
    DirectKind,
    TypeCategory,
    TypeRegistry,
    classify,
    is_unsigned,
)


class TestTypeRegistry:
    """Tests for building the registry from a description."""

    def test_function_pointers_are_separated_from_typealiases(self, registry):
        assert registry.function_pointers == frozenset({"key_callback"})
        assert registry.typealiases == frozenset({"bitmap"})

    def test_structs_and_enums(self, registry):
        assert registry.structs == frozenset(
            {"point_2d", "circle", "color", "matrix_2d"}
        )
        assert registry.enums == frozenset({"key_code"})

    @pytest.mark.parametrize(
        "type_name,kind",
        [
            ("void", DirectKind.VOID),
            ("int", DirectKind.INT),
            ("float", DirectKind.FLOAT),
            ("double", DirectKind.DOUBLE),
            ("byte", DirectKind.BYTE),
            ("bool", DirectKind.BOOL),
            ("string", DirectKind.STRING),
            ("key_code", DirectKind.ENUM),
            ("circle", DirectKind.STRUCT),
            ("bitmap", DirectKind.TYPEALIAS),
        ],
    )
    def test_semantic_kind(self, registry, type_name, kind):
        assert registry.semantic_kind(type_name) == kind

    def test_unknown_name_has_no_kind(self, registry):
        assert registry.semantic_kind("char") is None
        assert registry.semantic_kind("key_callback") is None


class TestIsUnsigned:
    def test_unsigned_names(self):
        assert is_unsigned("unsigned int")
        assert is_unsigned("unsigned  char")

    def test_other_names(self):
        assert not is_unsigned("unsigned")
        assert not is_unsigned("int")
        assert not is_unsigned("unsignedint")


class TestClassify:
    """Tests for the classification order."""

    def test_unsigned_primitive(self, registry):
        result = classify(TypeDescriptor("unsigned int"), registry)
        assert result == Classification(TypeCategory.UNSIGNED_PRIMITIVE, "unsigned int")

    def test_unsigned_wins_over_pointer(self, registry):
        result = classify(TypeDescriptor("unsigned char", is_pointer=True), registry)
        assert result.category == TypeCategory.UNSIGNED_PRIMITIVE

    def test_void_pointer(self, registry):
        result = classify(TypeDescriptor("void", is_pointer=True), registry)
        assert result.category == TypeCategory.VOID_POINTER

    def test_plain_void_is_direct(self, registry):
        result = classify(TypeDescriptor("void"), registry)
        assert result.category == TypeCategory.DIRECT
        assert result.kind == DirectKind.VOID

    def test_known_function_pointer(self, registry):
        result = classify(TypeDescriptor("key_callback"), registry)
        assert result.category == TypeCategory.KNOWN_FUNCTION_POINTER

    def test_generic_container(self, registry):
        result = classify(TypeDescriptor("vector", type_p="string"), registry)
        assert result.category == TypeCategory.GENERIC_CONTAINER
        assert result.element == "string"

    def test_vector_without_element_type_is_unmapped(self, registry):
        with pytest.raises(UnmappedTypeError) as excinfo:
            classify(TypeDescriptor("vector"), registry)
        assert excinfo.value.type_name == "vector"

    def test_direct_struct(self, registry):
        result = classify(TypeDescriptor("circle", is_reference=True), registry)
        assert result == Classification(
            TypeCategory.DIRECT, "circle", kind=DirectKind.STRUCT
        )

    def test_unknown_type_raises(self, registry):
        with pytest.raises(UnmappedTypeError):
            classify(TypeDescriptor("char"), registry)

    def test_registry_is_explicit(self):
        """The same name classifies differently under different registries."""
        descriptor = TypeDescriptor("on_event")
        fn_registry = TypeRegistry(function_pointers=frozenset({"on_event"}))
        alias_registry = TypeRegistry(typealiases=frozenset({"on_event"}))

        assert classify(descriptor, fn_registry).category == (
            TypeCategory.KNOWN_FUNCTION_POINTER
        )
        assert classify(descriptor, alias_registry).kind == DirectKind.TYPEALIAS
        with pytest.raises(UnmappedTypeError):
            classify(descriptor, TypeRegistry())
