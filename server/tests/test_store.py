"""Tests for the in-memory document store."""

import dataclasses
import threading

import pytest

from server.core.models import AttachedMedia, Document, Section
from server.core.store import DocumentStore
from server.core.templates import seed_content


class TestDefaults:
    def test_initial_document(self, store):
        assert store.get() == Document()
        assert store.get().project_name == ""
        assert store.get().description == ""
        assert store.get().attached_media is None
        assert store.get().sections == ()

    def test_get_has_no_side_effects(self, store):
        store.add_section("Features")
        assert store.get() == store.get()


class TestPatch:
    def test_patch_description_only(self, store):
        store.patch(project_name="Foo", attached_media=AttachedMedia("logo.png", "/media/abc.png"))
        store.add_section("Features")
        before = store.get()

        after = store.patch(description="d")

        assert after.description == "d"
        assert after.project_name == before.project_name
        assert after.attached_media == before.attached_media
        assert after.sections == before.sections

    def test_patch_without_fields_is_noop(self, store):
        store.patch(project_name="Foo")
        before = store.get()
        assert store.patch() is before

    def test_patch_none_clears_media(self, store):
        store.patch(attached_media=AttachedMedia("logo.png", "blob:1"))
        assert store.patch(attached_media=None).attached_media is None

    def test_unknown_field_is_rejected_at_call_site(self, store):
        with pytest.raises(TypeError):
            store.patch(title="nope")


class TestSections:
    def test_add_returns_id_and_appends(self, store):
        section_id = store.add_section("Usage")
        (section,) = store.get().sections
        assert section.id == section_id
        assert section.title == "Usage"
        assert section.content == ""

    def test_template_title_is_seeded(self, store):
        section_id = store.add_section("Installation")
        assert store.section(section_id).content == seed_content("Installation")

    def test_blank_title_is_allowed(self, store):
        section_id = store.add_section("")
        assert store.section(section_id).title == ""

    def test_order_matches_call_order(self, store):
        titles = ["Features", "Usage", "Installation", "Features", "FAQ"]
        for title in titles:
            store.add_section(title)
        assert [s.title for s in store.get().sections] == titles

    def test_ids_are_unique_for_identical_titles(self, store):
        ids = [store.add_section("Features") for _ in range(50)]
        assert len(set(ids)) == 50

    def test_ids_not_reused_after_removal(self, store):
        first = store.add_section("A")
        store.remove_section(first)
        second = store.add_section("A")
        assert second != first

    def test_update_content(self, store):
        keep = store.add_section("A")
        target = store.add_section("B")
        assert store.update_section_content(target, "## B\n\nbody") is True
        assert store.section(target).content == "## B\n\nbody"
        assert store.section(target).title == "B"
        assert store.section(keep).content == ""

    def test_update_content_many_times(self, store):
        section_id = store.add_section("A")
        for text in ("one", "two", "three"):
            store.update_section_content(section_id, text)
        assert store.section(section_id).content == "three"

    def test_remove_middle_preserves_order(self, store):
        a = store.add_section("A")
        b = store.add_section("B")
        c = store.add_section("C")
        assert store.remove_section(b) is True
        assert store.get().section_ids() == (a, c)

    def test_unknown_id_is_noop(self, store):
        store.patch(project_name="Foo")
        store.add_section("Features")
        before = store.get()

        assert store.update_section_content("nonexistent", "x") is False
        assert store.remove_section("nonexistent") is False

        assert store.get() == before
        assert store.section("nonexistent") is None


class TestReset:
    def test_reset_restores_defaults(self, store):
        store.patch(project_name="Foo", description="Bar", attached_media=AttachedMedia("a.png", "/media/a.png"))
        section_id = store.add_section("Features")
        store.update_section_content(section_id, "changed")

        assert store.reset() == Document()
        assert store.get() == Document()


class TestSnapshots:
    def test_snapshots_are_immutable(self, store):
        store.add_section("Features")
        snapshot = store.get()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.project_name = "changed"
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.sections[0].content = "changed"
        assert store.get().project_name == ""

    def test_old_snapshot_unchanged_by_later_mutation(self, store):
        section_id = store.add_section("Features")
        snapshot = store.get()
        store.update_section_content(section_id, "new")
        store.patch(project_name="Foo")
        assert snapshot.sections[0].content == seed_content("Features")
        assert snapshot.project_name == ""

    def test_initial_document_can_be_injected(self):
        document = Document(project_name="Seeded", sections=(Section(id="s1", title="A", content="a"),))
        store = DocumentStore(document)
        assert store.get() is document


def test_concurrent_adds_are_not_lost(store):
    def worker():
        for _ in range(100):
            store.add_section("Features")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = store.get().section_ids()
    assert len(ids) == 800
    assert len(set(ids)) == 800


class TestAttachedMedia:
    def test_requires_both_fields(self):
        with pytest.raises(ValueError):
            AttachedMedia("", "/media/a.png")
        with pytest.raises(ValueError):
            AttachedMedia("a.png", "  ")

    def test_to_dict(self):
        assert AttachedMedia("a.png", "/media/a.png").to_dict() == {
            "file_name": "a.png",
            "file_url": "/media/a.png",
        }
