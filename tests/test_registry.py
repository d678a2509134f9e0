import pytest

from schemagraph import ArtifactSource, SchemaRegistry, build_registry

from tests.helpers.definitions import directive_def, type_def


def test_lookup_by_identifier_and_name():
    registry = build_registry([type_def("user", "User"), directive_def("auth", "requiresAuth")])

    assert registry.lookup_type("user") is registry.lookup_type("User")
    assert registry.lookup_directive("auth") is registry.lookup_directive("requiresAuth")
    assert registry.lookup_type("auth") is None
    assert registry.lookup_directive("user") is None
    assert registry.lookup_type("missing") is None


def test_identifier_takes_precedence_over_name():
    registry = build_registry([type_def("User", "Person"), type_def("person", "User")])

    assert registry.lookup_type("User").identifier == "User"
    assert registry.lookup_type("Person").identifier == "User"


def test_registry_views_are_read_only():
    registry = build_registry([type_def("user", "User", interfaces=["node"])])

    with pytest.raises(TypeError):
        registry.type_map()["post"] = "Post"  # type: ignore[index]
    with pytest.raises(TypeError):
        registry.implementors()["node"] = frozenset()  # type: ignore[index]
    with pytest.raises(AttributeError):
        registry.exports().add("post")  # type: ignore[attr-defined]
    assert isinstance(registry.errors(), tuple)


def test_registry_is_an_artifact_source():
    registry = build_registry([])
    assert isinstance(registry, ArtifactSource)
    assert isinstance(registry, SchemaRegistry)
    assert "errors=0" in repr(registry)
