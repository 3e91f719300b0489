# -*- coding: utf-8 -*-
"""
tests/test_exceptions.py
==========================
Tests for the hierarchical exception system.
All pure Python — no engine or Qt needed.
"""
import pytest
from exceptions import (
    DesignStateError,
    ConfigurationError,
    ValidationError, InvalidValueError,
    StateError, ReentrantMutationError, MissingDesignScopeError,
)


# ── inheritance hierarchy ─────────────────────────────────────────────────────

class TestInheritance:

    def test_all_inherit_from_root(self):
        errs = [
            ConfigurationError,
            ValidationError, InvalidValueError,
            StateError, ReentrantMutationError, MissingDesignScopeError,
        ]
        for err_cls in errs:
            assert issubclass(err_cls, DesignStateError), f"{err_cls} must inherit DesignStateError"

    def test_validation_chain(self):
        assert issubclass(InvalidValueError, ValidationError)

    def test_state_chain(self):
        assert issubclass(ReentrantMutationError, StateError)
        assert issubclass(MissingDesignScopeError, StateError)


# ── DesignStateError attributes ──────────────────────────────────────────────

class TestDesignStateError:

    def test_message_stored(self):
        e = DesignStateError("test message")
        assert e.message == "test message"
        assert str(e) == "test message"

    def test_code_and_detail(self):
        e = DesignStateError("msg", code="ERR_001", detail="extra info")
        assert e.code == "ERR_001"
        assert str(e) == "msg | extra info"

    def test_defaults(self):
        e = DesignStateError()
        assert (e.message, e.code, e.detail) == ("", "", "")


# ── concrete error types ─────────────────────────────────────────────────────

class TestConcreteErrors:

    def test_invalid_value_message(self):
        e = InvalidValueError("language", "", "expected an alphabetic language code")
        assert e.field == "language"
        assert e.value == ""
        assert "language" in str(e)
        assert "expected an alphabetic" in str(e)

    def test_invalid_value_without_value(self):
        e = InvalidValueError("brand.main")
        assert str(e) == "Invalid value for field 'brand.main'"

    def test_reentrant_mutation(self):
        e = ReentrantMutationError("toggle_theme")
        assert e.code == "REENTRANT_MUTATION"
        assert e.operation == "toggle_theme"
        assert "toggle_theme" in str(e)

    def test_missing_scope_default_message(self):
        e = MissingDesignScopeError()
        assert e.code == "NO_DESIGN_SCOPE"
        assert "No design engine" in str(e)

    def test_configuration_caught_as_root(self):
        with pytest.raises(DesignStateError):
            raise ConfigurationError("no locales", code="NO_LOCALES")
