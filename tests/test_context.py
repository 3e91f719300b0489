# -*- coding: utf-8 -*-
"""
tests/test_context.py
=====================
Context-scoped engine lookup.
"""
import threading

import pytest

from config.themes import DEFAULT_BRAND, MONOCHROME_BRAND
from core.context import current_engine, current_state, current_tokens, design_scope, find_engine
from core.design_state import DesignStateEngine
from exceptions import MissingDesignScopeError, StateError


class TestDesignScope:

    def test_lookup_outside_scope_raises(self):
        with pytest.raises(MissingDesignScopeError):
            current_engine()
        with pytest.raises(StateError):
            current_tokens()

    def test_find_engine_outside_scope(self):
        assert find_engine() is None

    def test_binds_engine(self, engine):
        with design_scope(engine) as bound:
            assert bound is engine
            assert current_engine() is engine
            assert current_tokens() is engine.current_state().tokens
            assert current_state() is engine.current_state()
        assert find_engine() is None

    def test_tokens_follow_mutations(self, engine):
        with design_scope(engine):
            before = current_tokens()
            current_engine().toggle_theme()
            assert current_tokens() is not before
            assert current_tokens().is_dark

    def test_nested_scopes_restore_outer(self, supported):
        outer = DesignStateEngine(DEFAULT_BRAND, supported)
        inner = DesignStateEngine(MONOCHROME_BRAND, supported)
        with design_scope(outer):
            with design_scope(inner):
                assert current_engine() is inner
            assert current_engine() is outer

    def test_scope_reset_on_error(self, engine):
        with pytest.raises(RuntimeError):
            with design_scope(engine):
                raise RuntimeError("boom")
        assert find_engine() is None

    def test_close_on_exit(self, engine, recorder):
        engine.subscribe(recorder)
        with design_scope(engine, close_on_exit=True):
            pass
        assert engine.listener_count == 0

    def test_scope_not_shared_with_other_threads(self, engine):
        seen = []
        with design_scope(engine):
            t = threading.Thread(target=lambda: seen.append(find_engine()))
            t.start()
            t.join()
        assert seen == [None]
