"""
test_resolver.py
----------------
Unit tests for @mention resolution.

Covers the mention tokenizer, longest-match lookup across hyphenated and
underscored tokens, quoted mentions, ambiguity reporting and canonical
rewriting of descriptions.
"""
import pytest

from friendlog.core.exceptions import AmbiguousMentionError
from friendlog.dataclasses import Friend
from friendlog.journal.resolver import MentionResolver


@pytest.fixture
def resolver():
    """Resolver over a friend table with overlapping names."""
    return MentionResolver.from_friends(
        [
            Friend("Ann"),
            Friend("Anna", ["Banana"]),
            Friend("Grace Hopper", ["The Admiral"]),
            Friend("Jean-Pierre Martin"),
            Friend("Dr. Who"),
        ]
    )


class TestTokenizer:
    """Tests for which text counts as a mention."""

    def test_no_mentions(self, resolver):
        result = resolver.resolve("Quiet day at home.")
        assert result.friends == []
        assert result.description == "Quiet day at home."

    def test_email_address_is_not_a_mention(self, resolver):
        """An @ preceded by a word character is plain text."""
        result = resolver.resolve("Mailed ann@example.com")
        assert result.friends == []
        assert result.description == "Mailed ann@example.com"

    def test_lone_at_sign_is_text(self, resolver):
        result = resolver.resolve("Meet @ 5pm")
        assert result.friends == []

    def test_mention_at_start_of_text(self, resolver):
        assert resolver.resolve("@Anna came over").friends == ["Anna"]

    def test_trailing_punctuation_is_kept(self, resolver):
        result = resolver.resolve("Lunch with @anna.")
        assert result.description == "Lunch with @Anna."


class TestLongestMatch:
    """Tests for longest-match lookup of bare tokens."""

    def test_ann_and_anna_are_distinct(self, resolver):
        """@Ann never shadows @Anna and vice versa."""
        assert resolver.resolve("with @Anna").friends == ["Anna"]
        assert resolver.resolve("with @Ann").friends == ["Ann"]
        assert resolver.resolve("with @Ann and @Anna").friends == ["Ann", "Anna"]

    def test_hyphenated_full_name(self, resolver):
        result = resolver.resolve("Dinner with @grace-hopper")
        assert result.friends == ["Grace Hopper"]
        assert result.description == "Dinner with @Grace-Hopper"

    def test_underscored_full_name(self, resolver):
        result = resolver.resolve("Chess with @Jean-Pierre_Martin")
        assert result.friends == ["Jean-Pierre Martin"]
        assert result.description == "Chess with @Jean-Pierre_Martin"

    def test_all_hyphens_full_name(self, resolver):
        """Any separator spelling reaches the same friend."""
        result = resolver.resolve("Chess with @jean-pierre-martin")
        assert result.friends == ["Jean-Pierre Martin"]
        assert result.description == "Chess with @Jean-Pierre_Martin"

    def test_nickname_rewritten_to_canonical_name(self, resolver):
        result = resolver.resolve("Sailing with @The-Admiral and @banana")
        assert result.friends == ["Grace Hopper", "Anna"]
        assert result.description == "Sailing with @Grace-Hopper and @Anna"

    def test_partial_token_is_quoted(self, resolver):
        """A prefix match keeps the rest of the token as plain text."""
        result = resolver.resolve("Cake at @Anna-bakery")
        assert result.friends == ["Anna"]
        assert result.description == 'Cake at @"Anna"-bakery'

    def test_possessive(self, resolver):
        result = resolver.resolve("At @Anna's place")
        assert result.description == "At @Anna's place"

    def test_trailing_hyphen_is_plain_text(self, resolver):
        result = resolver.resolve("with @Anna-")
        assert result.friends == ["Anna"]
        assert result.description == 'with @"Anna"-'

    def test_repeated_mentions_listed_once(self, resolver):
        result = resolver.resolve("@Anna, then @banana again")
        assert result.friends == ["Anna"]
        assert result.description == "@Anna, then @Anna again"


class TestQuotedMentions:
    """Tests for @"Full Name" mentions."""

    def test_quoted_name(self, resolver):
        result = resolver.resolve('Tea with @"grace hopper"')
        assert result.friends == ["Grace Hopper"]
        assert result.description == 'Tea with @"Grace Hopper"'

    def test_name_with_punctuation(self, resolver):
        result = resolver.resolve('Watched TV with @"dr. who"')
        assert result.friends == ["Dr. Who"]
        assert result.description == 'Watched TV with @"Dr. Who"'

    def test_unknown_quoted_name(self, resolver):
        with pytest.raises(AmbiguousMentionError) as exc_info:
            resolver.resolve('Met @"Nobody Here"')
        assert exc_info.value.mention == "Nobody Here"
        assert exc_info.value.candidates == []


class TestAmbiguity:
    """Tests for unknown and ambiguous mentions."""

    def test_unknown_bare_mention(self, resolver):
        with pytest.raises(AmbiguousMentionError) as exc_info:
            resolver.resolve("Lunch with @Bob")
        assert exc_info.value.mention == "Bob"
        assert exc_info.value.candidates == []

    def test_colliding_lookup_keys_from_hand_built_table(self):
        """
        Journals refuse names that differ only by separators, but a resolver
        built straight from such a table still reports the clash instead of
        picking one friend.
        """
        resolver = MentionResolver.from_friends(
            [Friend("Marc-Antoine"), Friend("Marc Antoine")]
        )
        with pytest.raises(AmbiguousMentionError) as exc_info:
            resolver.resolve("with @Marc-Antoine")
        assert sorted(exc_info.value.candidates) == ["Marc Antoine", "Marc-Antoine"]

        with pytest.raises(AmbiguousMentionError):
            resolver.resolve('with @"Marc Antoine"')


class TestIdempotence:
    """Resolving a canonical description changes nothing."""

    @pytest.mark.parametrize(
        "text",
        [
            "Lunch with @anna and @the-admiral.",
            'Cake at @Anna-bakery with @"dr. who"',
            "Chess with @jean-pierre-martin's cousin",
            "with @Ann-Anna",
        ],
    )
    def test_resolve_twice(self, resolver, text):
        once = resolver.resolve(text)
        twice = resolver.resolve(once.description)
        assert twice.description == once.description
        assert twice.friends == once.friends
