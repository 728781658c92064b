"""Tests for tag validation."""

from mentiontag.models import User
from mentiontag.validator import is_mentioned, validate

JEFF = User(2, "Jeff")
BRYAN = User(3, "Bryan")


class TestValidate:
    """Test that tags follow the text."""

    def test_keeps_present_mentions(self):
        """Test that mentioned users are kept."""
        tags = {2: JEFF, 3: BRYAN}

        assert validate("Hi @Jeff and @Bryan", tags) == tags

    def test_drops_removed_mention(self):
        """Test that deleting the "@" untags the user."""
        assert validate("Hi Jeff", {2: JEFF}) == {}

    def test_case_insensitive(self):
        """Test that mention case does not matter."""
        tags = {2: JEFF, 3: BRYAN}

        assert validate("@jeff, and @BRYAN", tags) == tags

    def test_longer_word_is_not_a_mention(self):
        """Test that "@Jeffrey" does not count as a mention of Jeff."""
        assert validate("@Jeffrey", {2: JEFF}) == {}
        assert validate("@Jeffrey and @Jeff.", {2: JEFF}) == {2: JEFF}

    def test_idempotent(self):
        """Test that validating twice changes nothing."""
        tags = {2: JEFF, 3: BRYAN}
        text = "only @bryan here"

        once = validate(text, tags)

        assert once == {3: BRYAN}
        assert validate(text, once) == once

    def test_does_not_mutate_input(self):
        """Test that the input mapping is left alone."""
        tags = {2: JEFF}
        validate("nothing", tags)

        assert tags == {2: JEFF}

    def test_never_adds(self):
        """Test that untagged mentions are not picked up."""
        assert validate("@Jeff @Bryan", {3: BRYAN}) == {3: BRYAN}

    def test_is_mentioned_needs_token_boundary(self):
        """Test that a mention must end where the name ends."""
        assert is_mentioned("cc @jeff!", JEFF) is True
        assert is_mentioned("cc @Jeff_2", JEFF) is False
        assert is_mentioned("cc Jeff", JEFF) is False
