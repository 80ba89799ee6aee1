"""Tests for projdeck.board.manager."""

from datetime import date

import pytest

from projdeck.board.filters import FILTERS
from projdeck.board.manager import (
    CONFIRM_DELETE,
    MSG_ADDED,
    MSG_COMPLETED,
    MSG_DELETED,
    MSG_REACTIVATED,
)
from projdeck.board.models import Project
from projdeck.lib.storage import MemoryStore

from conftest import FIXED_NOW, CountingIds, FakeConfirm, FakeForm


def add(manager, name="X", **values):
    return manager.add_project(FakeForm(name=name, **values))


class TestAddProject:
    """Tests for add_project."""

    def test_appends_record_with_defaults(self, manager):
        project = add(manager, "Site", technology="React", priority="high",
                      deadline="2026-07-15", description="Portfolio")

        assert manager.projects == [project]
        assert project.id == "p1"
        assert project.name == "Site"
        assert project.technology == "React"
        assert project.priority == "high"
        assert project.deadline == date(2026, 7, 15)
        assert project.description == "Portfolio"
        assert project.completed is False
        assert project.created_at == FIXED_NOW.isoformat()

    def test_empty_deadline_means_none(self, manager):
        project = add(manager, deadline="")
        assert project.deadline is None

    def test_blank_name_is_accepted(self, manager):
        """Required-field checks belong to the form, not the manager."""
        project = add(manager, name="")
        assert project.name == ""
        assert len(manager.projects) == 1

    def test_unknown_priority_falls_back_to_medium(self, manager, caplog):
        project = add(manager, priority="urgent")
        assert project.priority == "medium"
        assert "Unknown priority 'urgent'" in caplog.text

    def test_saves_renders_resets_and_notifies(self, manager, store, renderer, notifier):
        form = FakeForm(name="X", priority="low")
        manager.add_project(form)

        assert [p.name for p in store.load()] == ["X"]
        assert len(renderer.views) == 1
        assert renderer.stats[-1].total == 1
        assert form.reset_count == 1
        assert notifier.shown == [(MSG_ADDED, "success")]

    def test_ids_are_unique(self, manager):
        """Ids stay pairwise distinct over many additions."""
        projects = [add(manager, f"P{i}") for i in range(50)]
        ids = [p.id for p in projects]
        assert len(set(ids)) == len(ids)

    def test_duplicate_generated_id_is_regenerated(self, make_manager):
        manager = make_manager(id_factory=CountingIds(["a", "a", "b"]))
        first = add(manager, "One")
        second = add(manager, "Two")
        assert (first.id, second.id) == ("a", "b")

    def test_deleted_ids_are_not_reused(self, make_manager):
        manager = make_manager(id_factory=CountingIds(["a", "a", "b"]))
        first = add(manager, "One")
        manager.delete_project(first.id)
        second = add(manager, "Two")
        assert second.id == "b"

    def test_loaded_ids_are_not_reused(self, make_manager, renderer):
        existing = Project(id="a", name="Old", priority="low", created_at="2026-01-01T00:00:00")
        manager = make_manager(store=MemoryStore([existing]), id_factory=CountingIds(["a", "b"]))
        project = add(manager, "New")
        assert project.id == "b"

    def test_preserves_creation_order(self, manager):
        names = ["A", "B", "C", "D"]
        for name in names:
            add(manager, name)
        assert [p.name for p in manager.projects] == names


class TestDeleteProject:
    """Tests for delete_project."""

    def test_confirmed_delete_removes_record(self, manager, notifier, confirm):
        a = add(manager, "A")
        add(manager, "B")

        manager.delete_project(a.id)

        assert [p.name for p in manager.projects] == ["B"]
        assert confirm.messages == [CONFIRM_DELETE]
        assert notifier.shown[-1] == (MSG_DELETED, "info")

    def test_delete_preserves_survivor_order(self, manager):
        projects = [add(manager, name) for name in "ABCDE"]
        manager.delete_project(projects[1].id)
        manager.delete_project(projects[3].id)
        assert [p.name for p in manager.projects] == ["A", "C", "E"]

    def test_declined_delete_changes_nothing(self, make_manager, store, renderer, notifier):
        """Declining is a normal path: nothing saved, rendered or notified."""
        manager = make_manager(confirm=FakeConfirm(answer=False))
        project = add(manager, "X", priority="high")
        views_before = len(renderer.views)
        stats_before = manager.update_stats()
        notifications_before = list(notifier.shown)

        manager.delete_project(project.id)

        assert manager.projects == [project]
        assert [p.id for p in store.load()] == [project.id]
        assert manager.update_stats() == stats_before
        assert len(renderer.views) == views_before
        assert notifier.shown == notifications_before

    def test_unknown_id_is_silent(self, manager, notifier):
        add(manager, "A")
        manager.delete_project("missing")
        assert [p.name for p in manager.projects] == ["A"]
        assert notifier.shown[-1] == (MSG_DELETED, "info")

    def test_delete_updates_stats(self, manager, renderer):
        a = add(manager, "A")
        manager.delete_project(a.id)
        assert renderer.stats[-1].total == 0


class TestToggleComplete:
    """Tests for toggle_complete."""

    def test_toggle_flips_and_notifies(self, manager, notifier):
        project = add(manager)

        manager.toggle_complete(project.id)
        assert project.completed is True
        assert notifier.shown[-1] == (MSG_COMPLETED, "success")

        manager.toggle_complete(project.id)
        assert project.completed is False
        assert notifier.shown[-1] == (MSG_REACTIVATED, "success")

    def test_double_toggle_restores_flag(self, manager):
        project = add(manager)
        original = project.completed
        manager.toggle_complete(project.id)
        manager.toggle_complete(project.id)
        assert project.completed == original

    def test_unknown_id_is_noop(self, manager, store, renderer, notifier):
        add(manager)
        views_before = len(renderer.views)
        shown_before = list(notifier.shown)

        assert manager.toggle_complete("missing") is None

        assert len(renderer.views) == views_before
        assert notifier.shown == shown_before

    def test_toggle_is_saved(self, manager, store):
        project = add(manager)
        manager.toggle_complete(project.id)
        assert store.load()[0].completed is True


class TestFilters:
    """Tests for set_filter and get_filtered_projects."""

    @pytest.fixture
    def populated(self, manager):
        add(manager, "HighActive", priority="high")
        add(manager, "Low", priority="low")
        done = add(manager, "MediumDone", priority="medium")
        add(manager, "HighDone", priority="high")
        manager.toggle_complete(done.id)
        manager.toggle_complete(manager.projects[3].id)
        return manager

    @pytest.mark.parametrize("value,expected", [
        ("all", ["HighActive", "Low", "MediumDone", "HighDone"]),
        ("active", ["HighActive", "Low"]),
        ("completed", ["MediumDone", "HighDone"]),
        ("high", ["HighActive", "HighDone"]),
        ("medium", ["MediumDone"]),
        ("low", ["Low"]),
        ("bogus", ["HighActive", "Low", "MediumDone", "HighDone"]),
    ])
    def test_filter_subsets(self, populated, value, expected):
        populated.set_filter(value)
        assert [p.name for p in populated.get_filtered_projects()] == expected

    def test_filtering_is_pure(self, populated):
        populated.set_filter("active")
        first = populated.get_filtered_projects()
        second = populated.get_filtered_projects()
        assert first == second
        assert len(populated.projects) == 4

    def test_set_filter_marks_active_control_and_renders(self, populated, renderer):
        views_before = len(renderer.views)
        stats_before = len(renderer.stats)

        populated.set_filter("high")

        assert renderer.active_filters[-1] == "high"
        assert len(renderer.views) == views_before + 1
        assert renderer.views[-1].current_filter == "high"
        assert len(renderer.stats) == stats_before

    def test_stats_ignore_filter(self, populated):
        populated.set_filter("low")
        stats = populated.update_stats()
        assert stats.total == 4

    def test_default_filter_is_all(self, manager):
        assert manager.current_filter == "all"
        assert "all" in FILTERS


class TestRender:
    """Tests for render and start."""

    def test_empty_collection_renders_empty_state(self, manager, renderer):
        manager.render()
        view = renderer.views[-1]
        assert view.is_empty
        assert view.empty_state is not None

    def test_filter_with_no_match_renders_empty_state(self, manager, renderer):
        add(manager, priority="low")
        manager.set_filter("high")
        assert renderer.views[-1].is_empty

    def test_cards_follow_filtered_order(self, manager, renderer):
        for name in "ABC":
            add(manager, name)
        manager.render()
        assert [c.name for c in renderer.views[-1].cards] == ["A", "B", "C"]

    def test_start_renders_filter_list_and_stats(self, make_manager, renderer):
        existing = Project(id="a", name="Old", priority="high", created_at="2026-01-01T00:00:00")
        manager = make_manager(store=MemoryStore([existing]))

        manager.start()

        assert renderer.active_filters == ["all"]
        assert [c.project_id for c in renderer.views[-1].cards] == ["a"]
        assert renderer.stats[-1].high_priority_active == 1


class TestScenarios:
    """End-to-end scenarios over the manager."""

    def test_add_high_priority_without_deadline(self, manager):
        project = add(manager, "X", priority="high", deadline="")

        stats = manager.update_stats()
        assert (stats.total, stats.active, stats.completed, stats.high_priority_active) == (1, 1, 0, 1)

        for value, visible in (("all", True), ("high", True), ("completed", False)):
            manager.set_filter(value)
            assert (project in manager.get_filtered_projects()) is visible

    def test_filter_high_between_low_and_high(self, manager):
        add(manager, "L", priority="low")
        high = add(manager, "H", priority="high")
        manager.set_filter("high")
        assert manager.get_filtered_projects() == [high]

    def test_toggle_twice_moves_counts_back(self, manager):
        project = add(manager)

        manager.toggle_complete(project.id)
        stats = manager.update_stats()
        assert (stats.completed, stats.active) == (1, 0)

        manager.toggle_complete(project.id)
        stats = manager.update_stats()
        assert (stats.active, stats.completed) == (1, 0)

    def test_past_deadline_overdue_until_completed(self, manager, renderer):
        project = add(manager, deadline="2020-01-01")
        manager.render()
        assert renderer.views[-1].cards[0].overdue is True

        manager.toggle_complete(project.id)
        assert renderer.views[-1].cards[0].overdue is False

    def test_declined_delete_keeps_collection_and_stats(self, make_manager):
        manager = make_manager(confirm=FakeConfirm(answer=False))
        a = add(manager, "A")
        add(manager, "B", priority="high")
        before = (list(manager.projects), manager.update_stats())

        manager.delete_project(a.id)

        assert (manager.projects, manager.update_stats()) == before
