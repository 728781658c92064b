"""Tests for committing a selected user into the draft."""

from mentiontag.commit import commit
from mentiontag.models import Draft, QueryState, User

JEFF = User(2, "Jeff")


class TestCommit:
    """Test the splice and tag bookkeeping."""

    def test_replaces_partial_query(self):
        """Test that "Hi @je" becomes "Hi @Jeff" with Jeff tagged."""
        draft = Draft(text="Hi @je")
        state = QueryState(searching=True, query="je", trigger_index=3)

        result = commit(draft, state, JEFF)

        assert result.text == "Hi @Jeff"
        assert result.tags == {2: JEFF}

    def test_text_from_trigger_starts_with_mention(self):
        """Test that the committed text begins with "@name" at the trigger."""
        draft = Draft(text="ping @b")
        state = QueryState(searching=True, query="b", trigger_index=5)

        result = commit(draft, state, User(3, "Bryan"))

        assert result.text[state.trigger_index :].startswith("@Bryan")

    def test_empty_query(self):
        """Test committing straight after the "@"."""
        draft = Draft(text="@")
        result = commit(draft, QueryState(searching=True, trigger_index=0), JEFF)

        assert result.text == "@Jeff"

    def test_recommit_is_idempotent_for_tags(self):
        """Test that tagging the same user twice keeps one entry."""
        draft = Draft(text="@Jeff and @j", tags={2: JEFF})
        state = QueryState(searching=True, query="j", trigger_index=10)

        result = commit(draft, state, JEFF)

        assert result.text == "@Jeff and @Jeff"
        assert result.tags == {2: JEFF}

    def test_input_draft_not_mutated(self):
        """Test that commit returns a new draft."""
        draft = Draft(author_id=7, text="Hi @je")
        result = commit(draft, QueryState(searching=True, query="je", trigger_index=3), JEFF)

        assert draft.text == "Hi @je"
        assert draft.tags == {}
        assert result.author_id == 7

    def test_keeps_existing_tags(self):
        """Test that earlier tags survive a new commit."""
        kevin = User(1, "Kevin")
        draft = Draft(text="@Kevin @je", tags={1: kevin})

        result = commit(draft, QueryState(searching=True, query="je", trigger_index=7), JEFF)

        assert result.tags == {1: kevin, 2: JEFF}
