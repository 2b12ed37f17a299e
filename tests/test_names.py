import threading

from churchy.names import (
    NameRegistry,
    NamingContext,
    UniqueNameGenerator,
    current_context,
    naming_context,
)
from churchy.term import Lam, Var


def test_lookup_falls_back_to_name():
    registry = NameRegistry()
    assert registry.lookup("x") == "x"
    assert "x" not in registry
    assert len(registry) == 0


def test_record_last_write_wins():
    registry = NameRegistry()
    registry.record("u1", "x")
    registry.record("u1", "y")
    assert registry.lookup("u1") == "y"
    assert len(registry) == 1


def test_generate_counts_up_and_records_original():
    registry = NameRegistry()
    generator = UniqueNameGenerator(registry)

    assert generator.generate(Var("x")) == Var("u1")
    assert generator.generate(Var("y")) == Var("u2")
    assert generator.count == 2
    assert registry.lookup("u1") == "x"
    assert registry.lookup("u2") == "y"


def test_generated_name_of_generated_name_looks_back_one_level():
    registry = NameRegistry()
    generator = UniqueNameGenerator(registry)
    first = generator.generate(Var("x"))
    second = generator.generate(first)
    assert second == Var("u2")
    assert registry.lookup("u2") == "u1"
    assert registry.lookup("u1") == "x"


def test_prefix():
    context = NamingContext(prefix="v")
    assert context.generator.generate(Var("x")).name == "v1"
    assert context.registry.lookup("v1") == "x"


def test_naming_context_is_scoped():
    outer = current_context()
    with naming_context() as context:
        assert current_context() is context
        assert Lam(Var("x"), Var("x")).sub(Var("y"), Var("z")) == Lam(
            Var("u1"), Var("u1")
        )
        assert context.generator.count == 1
    assert current_context() is outer


def test_naming_context_accepts_existing_context():
    context = NamingContext()
    with naming_context(context) as active:
        assert active is context
        Lam(Var("x"), Var("x")).sub(Var("y"), Var("z"))
    with naming_context(context):
        result = Lam(Var("x"), Var("x")).sub(Var("y"), Var("z"))
    assert result.param == Var("u2")


def test_generator_is_thread_safe():
    generator = UniqueNameGenerator(NameRegistry())
    names = []
    lock = threading.Lock()

    def work():
        local = [generator.generate(Var("x")).name for _ in range(200)]
        with lock:
            names.extend(local)

    threads = [threading.Thread(target=work) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(names)) == 1600
    assert generator.count == 1600
    assert len(generator.registry) == 1600
