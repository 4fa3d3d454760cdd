"""Unit tests for the testing utilities."""

import sys

import pytest

from miraveja_registrar.domain import IServiceCollection, Lifetime, OutputDocument
from miraveja_registrar.infrastructure.testing import (
    GeneratedModuleScope,
    GeneratedSourceLoader,
    RecordingServiceCollection,
    load_generated_module,
    register_all,
)

SOURCE = '''
from typing import Iterable


class Greeter:
    pass


def register_services(services, variants: Iterable[str] = ()):
    services.add_singleton(Greeter, Greeter)
    if "DEBUG" in frozenset(variants):
        services.add_transient(object, Greeter)
    return services
'''


class TestRecordingServiceCollection:
    """Test cases for RecordingServiceCollection."""

    def test_implements_service_collection(self):
        """Test that the recorder satisfies the collection contract."""
        assert isinstance(RecordingServiceCollection(), IServiceCollection)

    def test_records_bindings_in_call_order(self):
        """Test that every add call is recorded with its lifetime."""
        services = RecordingServiceCollection()

        services.add_singleton(str, str).add_scoped(int, bool).add_transient(float, float)

        assert [binding.lifetime for binding in services.bindings] == [
            Lifetime.SINGLETON,
            Lifetime.SCOPED,
            Lifetime.TRANSIENT,
        ]
        assert services.pairs() == [(str, str), (int, bool), (float, float)]

    def test_contains_checks_identity_and_lifetime(self):
        """Test binding lookups with and without a lifetime."""
        services = RecordingServiceCollection()
        services.add_scoped(int, bool)

        assert services.contains(int, bool)
        assert services.contains(int, bool, Lifetime.SCOPED)
        assert not services.contains(int, bool, Lifetime.SINGLETON)
        assert not services.contains(bool, int)


class TestGeneratedModuleLoading:
    """Test cases for loading generated source."""

    def test_load_from_text(self):
        """Test executing source text into a module."""
        module = load_generated_module(SOURCE, "greeter_registrations")

        assert module.__name__ == "greeter_registrations"
        assert "greeter_registrations" not in sys.modules
        assert callable(module.register_services)

    def test_load_from_document(self):
        """Test executing an output document."""
        document = OutputDocument(namespace="greeter", text=SOURCE)

        module = load_generated_module(document)

        assert hasattr(module, "Greeter")

    def test_register_all_passes_variants(self):
        """Test running register_services against a recorder."""
        module = load_generated_module(SOURCE)

        plain = register_all(module)
        debug = register_all(module, variants=["DEBUG"])

        assert plain.pairs() == [(module.Greeter, module.Greeter)]
        assert debug.contains(object, module.Greeter, Lifetime.TRANSIENT)

    def test_module_is_imported_through_a_loader(self):
        """Test that the module carries an import spec backed by the in-memory source."""
        module = load_generated_module(SOURCE, "greeter_registrations")

        assert module.__spec__.name == "greeter_registrations"
        assert module.__spec__.origin == "<greeter_registrations>"
        assert isinstance(module.__loader__, GeneratedSourceLoader)
        assert module.__loader__.get_source("greeter_registrations") == SOURCE

    def test_errors_name_the_generated_module(self):
        """Test that failures while running the source point at the module name."""
        with pytest.raises(NameError) as exc_info:
            load_generated_module("undefined_name\n", "broken_registrations")

        assert exc_info.traceback[-1].frame.code.raw.co_filename == "<broken_registrations>"


class TestGeneratedModuleScope:
    """Test cases for GeneratedModuleScope."""

    def test_module_is_installed_for_the_block(self):
        """Test that the module is importable inside the block and removed afterwards."""
        with GeneratedModuleScope(SOURCE, "scoped_greeter_registrations") as module:
            assert sys.modules["scoped_greeter_registrations"] is module

        assert "scoped_greeter_registrations" not in sys.modules

    def test_previous_module_is_restored(self, monkeypatch):
        """Test that an existing module under the same name is put back."""
        previous = load_generated_module(SOURCE, "shadowed_registrations")
        monkeypatch.setitem(sys.modules, "shadowed_registrations", previous)

        with GeneratedModuleScope(SOURCE, "shadowed_registrations") as module:
            assert sys.modules["shadowed_registrations"] is module

        assert sys.modules["shadowed_registrations"] is previous

    def test_errors_propagate(self):
        """Test that exceptions raised in the block are not swallowed."""
        with pytest.raises(RuntimeError):
            with GeneratedModuleScope(SOURCE, "failing_registrations"):
                raise RuntimeError("inside scope")

        assert "failing_registrations" not in sys.modules
