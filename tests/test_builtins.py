import threading

from schemagraph import BUILTINS
from schemagraph.builtins import BuiltinLibrary


def test_builtin_scalars_and_directives():
    assert BUILTINS.lookup_type("string").name == "String"
    assert BUILTINS.lookup_type("Int").identifier == "integer"
    assert BUILTINS.lookup_type("ID").kind == "scalar"
    assert BUILTINS.lookup_directive("skip").attrs["locations"] == ["field", "fragment_spread", "inline_fragment"]
    assert BUILTINS.lookup_type("skip") is None
    assert not BUILTINS.registry.has_errors()


def test_builtin_registry_exports_its_own_definitions():
    assert "string" in BUILTINS.registry.exports()


def test_concurrent_first_access_builds_once():
    library = BuiltinLibrary()
    seen = []

    def read():
        seen.append(library.registry)

    threads = [threading.Thread(target=read) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len({id(registry) for registry in seen}) == 1
