"""Tests for gup.message.grammar module."""

import re

import pytest

from gup.message import (
    GrammarError,
    InvalidCommitMessageError,
    InvalidKindError,
    Message,
    MessageError,
    MessageKind,
    StoryId,
    parse_branch,
    parse_message,
)
from gup.message import grammar


class TestParseBranch:
    """Tests for parse_branch function."""

    def test_plain_story(self):
        """Test that a bare team-id branch defaults to feat."""
        assert str(parse_branch("team-123")) == "feat: team-123 "

    def test_kind_with_slash(self):
        assert str(parse_branch("fix/team-123")) == "fix: team-123 "

    def test_kind_with_dash(self):
        assert str(parse_branch("chore-team-123")) == "chore: team-123 "

    def test_trailing_words_discarded(self):
        """Test that words after the id are dropped."""
        assert str(parse_branch("team-123-something-else")) == "feat: team-123 "

    def test_kind_and_trailing_words(self):
        assert str(parse_branch("chore/team-123-something-else")) == "chore: team-123 "

    def test_forced_kind_wins_over_branch_kind(self):
        """Test that force_kind replaces an explicit branch kind."""
        result = parse_branch("chore/team-123-something-else", MessageKind.FIX)
        assert str(result) == "fix: team-123 "

    def test_forced_kind_ignored_without_branch_kind(self):
        """Test that force_kind never supplies a kind the branch lacks."""
        result = parse_branch("team-123-something-else", MessageKind.CHORE)
        assert result.kind is MessageKind.FEATURE

    def test_forced_kind_overrides_unknown_branch_kind(self):
        result = parse_branch("flag/team-123", MessageKind.FIX)
        assert str(result) == "fix: team-123 "

    def test_body_is_empty(self):
        result = parse_branch("fix/team-9-long-description")
        assert result == Message(MessageKind.FIX, StoryId("team", 9), "")

    @pytest.mark.parametrize(
        "branch",
        [
            "just a string of some sort",
            "123-something-else",
            "flag/something-123-else",
            "",
            "main",
        ],
    )
    def test_invalid_branches_fail(self, branch):
        """Test branches without a leading team-id pair."""
        with pytest.raises(MessageError):
            parse_branch(branch)

    def test_no_story_raises_invalid_commit_message(self):
        with pytest.raises(InvalidCommitMessageError):
            parse_branch("just a string of some sort")

    def test_unknown_kind_raises_invalid_kind(self):
        """Test that an explicit unknown branch kind is a hard error."""
        with pytest.raises(InvalidKindError) as exc_info:
            parse_branch("feature/team-123-login")

        assert exc_info.value.token == "feature"


class TestParseMessage:
    """Tests for parse_message function."""

    def test_full_message_unchanged(self):
        result = parse_message("feat: team-123 something")
        assert str(result) == "feat: team-123 something"

    def test_fix_message_unchanged(self):
        result = parse_message("fix: team-123 something")
        assert str(result) == "fix: team-123 something"

    def test_missing_kind_defaults_to_feat(self):
        assert str(parse_message("team-123 something")) == "feat: team-123 something"

    def test_missing_kind_uses_default_kind(self):
        result = parse_message("team-123 something", MessageKind.CHORE)
        assert str(result) == "chore: team-123 something"

    def test_unknown_kind_falls_back_to_default(self):
        """Test that an unknown kind prefix degrades instead of failing."""
        result = parse_message("wip: team-123 something", MessageKind.FIX)
        assert result.kind is MessageKind.FIX
        assert str(result.story) == "team-123"

    def test_unknown_kind_falls_back_to_feat(self):
        result = parse_message("wip: team-123 something")
        assert result.kind is MessageKind.FEATURE

    def test_valid_kind_beats_default(self):
        result = parse_message("chore: team-123 something", MessageKind.FIX)
        assert result.kind is MessageKind.CHORE

    def test_kind_without_space(self):
        result = parse_message("fix:team-5 tidy up")
        assert str(result) == "fix: team-5 tidy up"

    def test_body_keeps_colons_and_spaces(self):
        result = parse_message("fix: team-1 api: handle  nulls")
        assert result.body == "api: handle  nulls"

    def test_fields(self):
        result = parse_message("chore: ABC-42 bump deps")
        assert result.kind is MessageKind.CHORE
        assert result.story == StoryId("ABC", 42)
        assert result.body == "bump deps"

    def test_id_rendered_as_integer(self):
        assert str(parse_message("team-007 x")) == "feat: team-7 x"

    @pytest.mark.parametrize(
        "message",
        [
            "chore:  something",
            "team-abc something",
            "something",
            "team-123",
            "",
            "feat: team-1 first\nsecond line",
        ],
    )
    def test_messages_without_story_fail(self, message):
        """Test that a message lacking a team-id pair always fails."""
        with pytest.raises(InvalidCommitMessageError):
            parse_message(message)

    def test_rendered_message_reparses(self):
        original = parse_message("fix: team-123 correct off-by-one")
        assert parse_message(str(original)) == original


class TestGrammarCompilation:
    """Tests for the compiled pattern cache."""

    def test_patterns_compiled_once(self):
        first = grammar._compile(grammar.MESSAGE_PATTERN)
        second = grammar._compile(grammar.MESSAGE_PATTERN)
        assert first is second

    def test_bad_pattern_raises_grammar_error(self):
        with pytest.raises(GrammarError) as exc_info:
            grammar._compile("(?P<unclosed")

        assert isinstance(exc_info.value, MessageError)
        assert isinstance(exc_info.value.__context__, re.error)
