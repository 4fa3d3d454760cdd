"""Unit tests for domain enums."""

import pytest

from miraveja_registrar.domain.enums import (
    AnnotationKind,
    DiagnosticCode,
    DiagnosticSeverity,
    Lifetime,
    RegistrationMode,
)


class TestLifetimeEnum:
    """Test cases for the Lifetime enum."""

    def test_lifetime_values(self):
        """Test that lifetimes have the expected string values."""
        assert Lifetime.SINGLETON.value == "singleton"
        assert Lifetime.SCOPED.value == "scoped"
        assert Lifetime.TRANSIENT.value == "transient"

    def test_lifetime_string_representation(self):
        """Test string representation of lifetime enums."""
        assert str(Lifetime.SINGLETON) == "singleton"
        assert str(Lifetime.SCOPED) == "scoped"

    def test_invalid_lifetime_value_raises_error(self):
        """Test that an invalid value raises ValueError through the constructor."""
        with pytest.raises(ValueError, match="'invalid' is not a valid Lifetime"):
            Lifetime("invalid")

    @pytest.mark.parametrize(
        "code, expected",
        [(0, Lifetime.SINGLETON), (1, Lifetime.SCOPED), (2, Lifetime.TRANSIENT)],
    )
    def test_coerce_ordinal_codes(self, code, expected):
        """Test that legacy ordinal codes map to lifetimes."""
        assert Lifetime.coerce(code) == expected

    def test_coerce_member_is_identity(self):
        """Test that coercing a member returns it unchanged."""
        assert Lifetime.coerce(Lifetime.SCOPED) is Lifetime.SCOPED

    def test_coerce_value_string(self):
        """Test that value strings are accepted case-insensitively."""
        assert Lifetime.coerce("singleton") == Lifetime.SINGLETON
        assert Lifetime.coerce("Scoped") == Lifetime.SCOPED

    @pytest.mark.parametrize("value", [7, -1, "0", "forever", None, True, 1.0])
    def test_coerce_unknown_falls_back_to_transient(self, value):
        """Test that unknown codes and stringified ordinals default to TRANSIENT."""
        assert Lifetime.coerce(value) == Lifetime.TRANSIENT


class TestRegistrationModeEnum:
    """Test cases for the RegistrationMode enum."""

    def test_mode_members_in_declaration_order(self):
        """Test that modes are declared in ordinal order."""
        assert list(RegistrationMode) == [
            RegistrationMode.AUTO,
            RegistrationMode.FIRST_INTERFACE,
            RegistrationMode.ALL_INTERFACES,
            RegistrationMode.INSTANCE,
            RegistrationMode.MANUAL,
        ]

    @pytest.mark.parametrize(
        "code, expected",
        [
            (0, RegistrationMode.AUTO),
            (1, RegistrationMode.FIRST_INTERFACE),
            (2, RegistrationMode.ALL_INTERFACES),
            (3, RegistrationMode.INSTANCE),
            (4, RegistrationMode.MANUAL),
        ],
    )
    def test_coerce_ordinal_codes(self, code, expected):
        """Test that ordinal codes map to modes."""
        assert RegistrationMode.coerce(code) == expected

    def test_coerce_value_string(self):
        """Test that value strings are accepted."""
        assert RegistrationMode.coerce("all_interfaces") == RegistrationMode.ALL_INTERFACES

    @pytest.mark.parametrize("value", [5, "3", "everything", None, Lifetime.SINGLETON])
    def test_coerce_unknown_falls_back_to_auto(self, value):
        """Test that unknown mode values default to AUTO."""
        assert RegistrationMode.coerce(value) == RegistrationMode.AUTO


class TestAnnotationKindEnum:
    """Test cases for the AnnotationKind enum."""

    def test_injectable_has_no_implied_lifetime(self):
        """Test that the generic kind carries its lifetime explicitly."""
        assert AnnotationKind.INJECTABLE.implied_lifetime is None

    def test_specialised_kinds_imply_lifetime(self):
        """Test that specialised kinds imply a fixed lifetime."""
        assert AnnotationKind.TRANSIENT_SERVICE.implied_lifetime == Lifetime.TRANSIENT
        assert AnnotationKind.SCOPED_SERVICE.implied_lifetime == Lifetime.SCOPED
        assert AnnotationKind.SINGLETON_SERVICE.implied_lifetime == Lifetime.SINGLETON

    def test_kind_compares_equal_to_tag(self):
        """Test that kinds compare equal to their string tags."""
        assert AnnotationKind.SCOPED_SERVICE == "scoped_service"


class TestDiagnosticEnums:
    """Test cases for diagnostic enums."""

    def test_required_codes_exist(self):
        """Test that the codes reported to the host exist."""
        codes = {code.value for code in DiagnosticCode}
        assert {"START", "FOUND", "MISSING_BASE_KIND", "EMPTY_RESULT"} <= codes

    def test_severity_string_representation(self):
        """Test string representation of severities."""
        assert str(DiagnosticSeverity.FATAL) == "fatal"
