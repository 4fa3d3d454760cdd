"""Unit tests for the registration decorators."""

from abc import ABC

from miraveja_registrar.domain import Lifetime, RegistrationMode
from miraveja_registrar.infrastructure.decorators import (
    REGISTRATIONS_ATTRIBUTE,
    get_annotations,
    injectable,
    scoped_service,
    singleton_service,
    transient_service,
)


class IRepository(ABC):
    pass


class TestInjectable:
    """Test cases for the injectable decorator."""

    def test_records_positional_values(self):
        """Test that lifetime, mode and interfaces are recorded positionally."""

        @injectable(Lifetime.SCOPED, RegistrationMode.MANUAL, IRepository)
        class Repository(IRepository):
            pass

        (annotation,) = get_annotations(Repository)
        assert annotation.kind == "injectable"
        assert annotation.positional == (Lifetime.SCOPED, RegistrationMode.MANUAL, (IRepository,))
        assert annotation.named == {}

    def test_build_variant_is_named(self):
        """Test that a build variant is recorded as a named value."""

        @injectable(0, build_variant="DEBUG")
        class Repository:
            pass

        (annotation,) = get_annotations(Repository)
        assert annotation.positional == (0, RegistrationMode.AUTO, ())
        assert annotation.named == {"build_variant": "DEBUG"}

    def test_returns_the_same_class(self):
        """Test that decoration does not replace the class."""

        class Repository:
            pass

        assert injectable(Lifetime.TRANSIENT)(Repository) is Repository


class TestLifetimeDecorators:
    """Test cases for the lifetime specific decorators."""

    def test_bare_usage(self):
        """Test decorating without calling."""

        @transient_service
        class Formatter:
            pass

        (annotation,) = get_annotations(Formatter)
        assert annotation.kind == "transient_service"
        assert annotation.positional == ()

    def test_called_with_mode_and_interfaces(self):
        """Test decorating with a mode, interfaces and variant."""

        @singleton_service(RegistrationMode.MANUAL, IRepository, build_variant="DEBUG")
        class Repository(IRepository):
            pass

        (annotation,) = get_annotations(Repository)
        assert annotation.kind == "singleton_service"
        assert annotation.positional == (RegistrationMode.MANUAL, (IRepository,))
        assert annotation.named == {"build_variant": "DEBUG"}

    def test_called_without_arguments(self):
        """Test decorating with empty parentheses."""

        @scoped_service()
        class Session:
            pass

        (annotation,) = get_annotations(Session)
        assert annotation.positional == (RegistrationMode.AUTO, ())

    def test_decorator_names(self):
        """Test that the decorators are named after their kinds."""
        assert transient_service.__name__ == "transient_service"
        assert scoped_service.__name__ == "scoped_service"
        assert singleton_service.__name__ == "singleton_service"


class TestAnnotationStacking:
    """Test cases for several decorators on one class."""

    def test_annotations_keep_source_order(self):
        """Test that the top decorator comes first."""

        @scoped_service(RegistrationMode.INSTANCE)
        @transient_service(RegistrationMode.FIRST_INTERFACE, build_variant="DEBUG")
        @injectable(Lifetime.SINGLETON)
        class Clock:
            pass

        assert [a.kind for a in get_annotations(Clock)] == ["scoped_service", "transient_service", "injectable"]

    def test_annotations_are_not_inherited(self):
        """Test that subclasses of decorated classes carry no annotations."""

        @transient_service
        class Base:
            pass

        class Derived(Base):
            pass

        assert hasattr(Derived, REGISTRATIONS_ATTRIBUTE)
        assert get_annotations(Derived) == ()

    def test_decorating_a_subclass_does_not_touch_the_base(self):
        """Test that a decorated subclass keeps its own annotations only."""

        @transient_service
        class Base:
            pass

        @scoped_service
        class Derived(Base):
            pass

        assert [a.kind for a in get_annotations(Base)] == ["transient_service"]
        assert [a.kind for a in get_annotations(Derived)] == ["scoped_service"]

    def test_undecorated_class_has_no_annotations(self):
        """Test the empty default."""

        class Plain:
            pass

        assert get_annotations(Plain) == ()
