"""
Design Context
==============

Context-scoped access to a DesignStateEngine, in place of a process-wide
singleton. Each scope binds one engine to the current context (thread or
asyncio task); scopes nest and restore the outer binding on exit, so
several engines (e.g. one per test) can coexist.

Usage:
    with design_scope(engine):
        tokens = current_tokens()
        current_engine().toggle_theme()
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from config.themes.design_tokens import DesignTokens
from core.design_state import AppDesignState, DesignStateEngine
from exceptions import MissingDesignScopeError

_current_engine: ContextVar[Optional[DesignStateEngine]] = ContextVar(
    "design_state_engine", default=None
)


@contextmanager
def design_scope(engine: DesignStateEngine, close_on_exit: bool = False) -> Iterator[DesignStateEngine]:
    """Bind ``engine`` for the duration of the ``with`` block."""
    token = _current_engine.set(engine)
    try:
        yield engine
    finally:
        _current_engine.reset(token)
        if close_on_exit:
            engine.close()


def current_engine() -> DesignStateEngine:
    engine = _current_engine.get()
    if engine is None:
        raise MissingDesignScopeError()
    return engine


def find_engine() -> Optional[DesignStateEngine]:
    """Like current_engine(), but returns None outside a scope."""
    return _current_engine.get()


def current_state() -> AppDesignState:
    return current_engine().current_state()


def current_tokens() -> DesignTokens:
    return current_engine().current_state().tokens
