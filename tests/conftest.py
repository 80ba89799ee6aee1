"""Shared fakes for projdeck tests."""

from datetime import datetime

import pytest

from projdeck.board.manager import ProjectManager
from projdeck.board.models import ProjectDraft
from projdeck.lib.storage import MemoryStore


FIXED_NOW = datetime(2026, 3, 15, 12, 0, 0)


class FakeRenderer:
    """Records everything the manager renders."""

    def __init__(self):
        self.views = []
        self.stats = []
        self.active_filters = []

    def render(self, view):
        self.views.append(view)

    def show_stats(self, stats):
        self.stats.append(stats)

    def show_active_filter(self, current_filter):
        self.active_filters.append(current_filter)


class FakeNotifier:
    def __init__(self):
        self.shown = []

    def show(self, message, kind="info"):
        self.shown.append((message, kind))


class FakeForm:
    def __init__(self, **values):
        self.draft = ProjectDraft(**values)
        self.reset_count = 0

    def read(self):
        return self.draft

    def reset(self):
        self.reset_count += 1


class FakeConfirm:
    """Answers every confirmation with a fixed value."""

    def __init__(self, answer=True):
        self.answer = answer
        self.messages = []

    def __call__(self, message, on_result):
        self.messages.append(message)
        on_result(self.answer)


class FakeScheduler:
    """Collects scheduled callbacks and runs them as time advances."""

    def __init__(self):
        self.now = 0.0
        self.pending = []

    def __call__(self, delay, callback):
        self.pending.append((self.now + delay, callback))

    def advance(self, seconds):
        """Run every callback due before now + seconds, each at its own time.

        Callbacks scheduled from inside a callback are timed from when
        it fired, not from the end of the advance.
        """
        target = self.now + seconds
        while True:
            due = [item for item in self.pending if item[0] <= target + 1e-9]
            if not due:
                self.now = target
                return
            item = min(due, key=lambda item: item[0])
            self.pending.remove(item)
            self.now = item[0]
            item[1]()


class CountingIds:
    def __init__(self, values=None):
        self.values = list(values) if values else None
        self.count = 0

    def __call__(self):
        if self.values:
            return self.values.pop(0)
        self.count += 1
        return f"p{self.count}"


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def confirm():
    return FakeConfirm(answer=True)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def make_manager(store, renderer, notifier, confirm):
    def _make(**kwargs):
        kwargs.setdefault("clock", lambda: FIXED_NOW)
        kwargs.setdefault("id_factory", CountingIds())
        return ProjectManager(
            kwargs.pop("store", store),
            renderer=renderer,
            notifier=notifier,
            confirm=kwargs.pop("confirm", confirm),
            **kwargs,
        )
    return _make


@pytest.fixture
def manager(make_manager):
    return make_manager()
