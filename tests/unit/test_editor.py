"""Unit tests for editor draft state and autocomplete."""

import asyncio
from datetime import datetime, timezone

import pytest

from domain.exceptions import InvalidDifficultyError
from domain.models import CatalogEntry, Difficulty, ProblemDetail
from services.editor import QUICK_TOPICS, AutocompleteSession, ProblemDraft


class TestProblemDraft:
    def test_add_tag_trims_and_rejects_duplicates(self):
        """Test that tags are trimmed and added once."""
        draft = ProblemDraft.blank()

        assert draft.add_tag("  Array ")
        assert not draft.add_tag("Array")
        assert not draft.add_tag("   ")
        assert draft.tags == ["Array"]

    def test_remove_tag_by_index(self):
        """Test removing a tag by position."""
        draft = ProblemDraft(tags=["Array", "Stack", "Heap"])

        draft.remove_tag(1)
        draft.remove_tag(10)

        assert draft.tags == ["Array", "Heap"]

    def test_tag_suggestions_exclude_tags_on_draft(self):
        """Test that suggestions skip tags already on the draft."""
        draft = ProblemDraft(tags=["Hash Table"])
        known = ["Array", "Hash Table", "Hash Function", "Sorting"]

        assert draft.tag_suggestions(known, "hash") == ["Hash Function"]
        assert draft.tag_suggestions(known, " ") == []

    def test_quick_topics_only_while_few_tags(self):
        """Test that quick topics disappear once the draft has three tags."""
        draft = ProblemDraft(tags=["Array"])

        topics = draft.quick_topics()
        assert len(topics) == 8
        assert "Array" not in topics
        assert topics[0] == QUICK_TOPICS[1]

        draft.tags = ["Array", "String", "DP"]
        assert draft.quick_topics() == []

    def test_update_rejects_unknown_fields(self):
        """Test that unknown and read-only fields are rejected."""
        draft = ProblemDraft.blank()
        draft.update(title="Two Sum", tags=("Array",))

        assert draft.title == "Two Sum"
        assert draft.tags == ["Array"]
        with pytest.raises(AttributeError):
            draft.update(id="sneaky")

    def test_apply_catalog_entry_fills_form(self):
        """Test that picking a catalog entry fills the form."""
        draft = ProblemDraft(notes="keep me")
        entry = CatalogEntry("146", "LRU Cache", "lru-cache", "Medium", ("Design", "Hash Table"))

        draft.apply_catalog_entry(entry)

        assert draft.number == "146"
        assert draft.title == "LRU Cache"
        assert draft.difficulty == "Medium"
        assert draft.tags == ["Design", "Hash Table"]
        assert draft.url == "https://leetcode.com/problems/lru-cache/"
        assert draft.notes == "keep me"

    def test_apply_remote_detail_caches_metadata(self, problem_detail_payload):
        """Test that a remote problem fills the draft and caches metadata."""
        draft = ProblemDraft(tags=["Array", "Favourites"])

        draft.apply_remote_detail(ProblemDetail.from_api(problem_detail_payload))

        assert draft.title == "Two Sum"
        assert draft.tags == ["Array", "Favourites", "Hash Table"]
        assert draft.description == "Given an array of integers nums."
        assert draft.remote.likes == 100
        assert draft.remote.hints == ["Use a hash map"]

    def test_apply_remote_detail_keeps_existing_description(self, problem_detail_payload):
        """Test that a typed description is not overwritten."""
        draft = ProblemDraft(description="my own summary")

        draft.apply_remote_detail(ProblemDetail.from_api(problem_detail_payload))

        assert draft.description == "my own summary"
        assert draft.remote.content_html.startswith("<p>")

    def test_to_record_for_new_problem(self):
        """Test record defaults for a new problem."""
        now = datetime(2024, 5, 1, tzinfo=timezone.utc)

        record = ProblemDraft.blank().to_record(now)

        assert record.id
        assert record.title == "Untitled"
        assert record.difficulty is Difficulty.EASY
        assert record.date_added == now
        assert record.date_edited == now

    def test_to_record_keeps_identity_and_added_date(self, make_record):
        """Test that editing keeps the id and added date."""
        original = make_record("abc", "Two Sum", notes_height=90)
        draft = ProblemDraft.from_record(original)
        draft.update(notes="new notes")
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)

        record = draft.to_record(now)

        assert record.id == "abc"
        assert record.date_added == original.date_added
        assert record.date_edited == now
        assert record.notes == "new notes"
        assert record.notes_height == 90

    def test_to_record_never_edits_before_added(self, make_record):
        """Test that the edited time never precedes the added time."""
        draft = ProblemDraft.from_record(make_record("abc"))

        record = draft.to_record(datetime(2000, 1, 1, tzinfo=timezone.utc))

        assert record.date_edited == record.date_added

    def test_to_record_rejects_invalid_difficulty(self):
        """Test that an invalid difficulty is rejected on save."""
        with pytest.raises(InvalidDifficultyError):
            ProblemDraft(difficulty="Impossible").to_record()


class TestAutocompleteSession:
    @pytest.mark.asyncio
    async def test_applies_results(self):
        """Test that results of the latest query become predictions."""
        async def search(text):
            return [text.upper()]

        session = AutocompleteSession(search)

        assert await session.query("two")
        assert session.predictions == ["TWO"]

    @pytest.mark.asyncio
    async def test_blank_input_clears_without_searching(self):
        """Test that blank input clears predictions without a search."""
        calls = []

        async def search(text):
            calls.append(text)
            return [text]

        session = AutocompleteSession(search)
        await session.query("two")

        assert await session.query("  ")
        assert session.predictions == []
        assert calls == ["two"]

    @pytest.mark.asyncio
    async def test_slow_earlier_response_does_not_overwrite_newer_one(self):
        """Test that the latest query wins over a slower earlier one."""
        release_first = asyncio.Event()

        async def search(text):
            if text == "tw":
                await release_first.wait()
                return ["stale"]
            return ["fresh"]

        session = AutocompleteSession(search)

        first = asyncio.create_task(session.query("tw"))
        await asyncio.sleep(0)
        applied_second = await session.query("two")
        release_first.set()
        applied_first = await first

        assert applied_second is True
        assert applied_first is False
        assert session.predictions == ["fresh"]
        assert session.latest_sequence == 2

    @pytest.mark.asyncio
    async def test_clear_invalidates_in_flight_search(self):
        """Test that clearing drops results still in flight."""
        release = asyncio.Event()

        async def search(text):
            await release.wait()
            return [text]

        session = AutocompleteSession(search)
        pending = asyncio.create_task(session.query("two"))
        await asyncio.sleep(0)

        session.clear()
        release.set()

        assert await pending is False
        assert session.predictions == []
