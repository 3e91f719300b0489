"""
exceptions.py
=============
Design State — Hierarchical Exception System

All package exceptions inherit from DesignStateError so callers
can catch the full hierarchy with a single except clause when needed.

Structure
---------
DesignStateError
├── ConfigurationError
├── ValidationError
│   └── InvalidValueError
└── StateError
    ├── ReentrantMutationError
    └── MissingDesignScopeError
"""


# ─── Root ────────────────────────────────────────────────────────────────────

class DesignStateError(Exception):
    """Base exception for all design-state errors."""

    def __init__(self, message: str = "", *, code: str = "", detail: str = ""):
        super().__init__(message)
        self.message = message
        self.code = code          # machine-readable code e.g. "NO_LOCALES"
        self.detail = detail      # extra context for logging

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} | {self.detail}"
        return self.message


# ─── Configuration ───────────────────────────────────────────────────────────

class ConfigurationError(DesignStateError):
    """Raised when the engine cannot be built from the given inputs."""


# ─── Validation ──────────────────────────────────────────────────────────────

class ValidationError(DesignStateError):
    """Raised when caller-provided data fails validation."""

    def __init__(self, message: str = "", *, field: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.field = field


class InvalidValueError(ValidationError):
    """Raised when a value is out of range or has an invalid format."""

    def __init__(self, field: str, value=None, reason: str = "", **kwargs):
        msg = f"Invalid value for field '{field}'"
        if value is not None:
            msg += f": {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, field=field, **kwargs)
        self.value = value
        self.reason = reason


# ─── State ───────────────────────────────────────────────────────────────────

class StateError(DesignStateError):
    """Base for errors raised while operating on a live engine."""


class ReentrantMutationError(StateError):
    """Raised when a listener tries to mutate the engine that is notifying it."""

    def __init__(self, operation: str = "", **kwargs):
        msg = "Engine mutation from inside a state listener is not allowed"
        if operation:
            msg += f": '{operation}'"
        super().__init__(msg, code="REENTRANT_MUTATION", **kwargs)
        self.operation = operation


class MissingDesignScopeError(StateError):
    """Raised when a design lookup happens outside any design_scope()."""

    def __init__(self, message: str = "No design engine is bound to the current context", **kwargs):
        super().__init__(message, code="NO_DESIGN_SCOPE", **kwargs)
