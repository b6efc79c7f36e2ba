"""Shared fixtures: a scripted random source so spawning is deterministic."""

import pytest


class ScriptedRandom:
    """Returns the given values in order, then keeps repeating the last one."""

    def __init__(self, *values):
        self._values = list(values) or [0.0]
        self.calls = 0

    def random(self):
        i = min(self.calls, len(self._values) - 1)
        self.calls += 1
        return self._values[i]


@pytest.fixture
def make_rng():
    return ScriptedRandom


class FakeRoot:
    """Stands in for tk.Tk: records bindings and pending after() callbacks."""

    def __init__(self):
        self.bindings = {}
        self.pending = {}
        self._next_id = 0

    def bind(self, sequence, func):
        self.bindings[sequence] = func

    def focus_set(self):
        pass

    def after(self, ms, func):
        self._next_id += 1
        after_id = f"after#{self._next_id}"
        self.pending[after_id] = func
        return after_id

    def after_cancel(self, after_id):
        self.pending.pop(after_id, None)

    def send(self, sequence):
        self.bindings[sequence](None)

    def run_pending(self):
        """Fire every callback scheduled so far (one round of the event loop)."""
        due, self.pending = self.pending, {}
        for func in due.values():
            func()


@pytest.fixture
def fake_root():
    return FakeRoot()
