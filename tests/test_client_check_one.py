"""
Tests for the single-result check of SpellCheckClient.

Covers short-circuiting on the first real misspelling, the contraction
fallback, and fail-open behaviour for every internal fault.
"""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace

import pytest

from spellcheck_bridge.client import SpellCheckClient
from spellcheck_bridge.models import LanguageConfig, TextSpan, VerdictKind, WordToken
from spellcheck_bridge.protocols import TextCheckingType
from spellcheck_bridge.segmenter_slot import SegmenterState

from .mocks import BrokenSegmenter, CountingWordIterator, FakeProvider, ScriptedSegmenter

ClientFactory = Callable[..., SpellCheckClient]


class TestFirstMisspelling:
    """The first candidate rejected by provider and fallback is reported."""

    def test_reports_exact_span_of_first_misspelling(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test that "qick" is reported at location 4 with length 4."""
        client = make_client(fox_provider)

        span = client.check_one("The qick brown fox")

        assert span == TextSpan(text="qick", start=4, length=4)
        assert span.to_range().location == 4
        assert span.to_range().length == 4

    def test_stops_scanning_after_first_misspelling(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test that words after the misspelling are never sent to the provider."""
        client = make_client(fox_provider)

        client.check_one("The qick brown fox")

        assert "brown" not in fox_provider.checked
        assert "fox" not in fox_provider.checked
        # Rejected once as a candidate, once as the only contraction component
        assert fox_provider.checked == ["The", "qick", "qick"]

    def test_reports_only_first_of_several_misspellings(self, make_client: ClientFactory) -> None:
        """Test that only the earliest misspelling is returned."""
        client = make_client(FakeProvider(known=["the"]))

        span = client.check_one("the qick brwn fox")

        assert span is not None
        assert span.text == "qick"

    def test_all_correct_returns_none(self, make_client: ClientFactory) -> None:
        """Test that a clean sentence yields no misspelling."""
        client = make_client(FakeProvider(known=["the", "quick", "brown", "fox"]))

        assert client.check_one("The quick brown fox") is None
        assert client.verdict_for("The quick brown fox").kind is VerdictKind.CORRECT

    def test_offsets_are_code_point_offsets(self, make_client: ClientFactory) -> None:
        """Test that spans count code points, not bytes."""
        client = make_client(FakeProvider(known=["naïve"]))

        span = client.check_one("naïve caféx")

        assert span is not None
        assert span.start == 6
        assert span.length == len("caféx")

    def test_misspelled_verdict_carries_span(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test that verdict_for returns a MISSPELLED verdict with the span."""
        verdict = make_client(fox_provider).verdict_for("The qick brown fox")

        assert verdict.is_misspelled
        assert verdict.span == TextSpan(text="qick", start=4, length=4)


class TestContractionFallback:
    """Candidates rejected by the provider are retried as contractions."""

    def test_concatenation_of_valid_words_is_accepted(self, make_client: ClientFactory) -> None:
        """Test that "hello:hello" passes when "hello" is known."""
        provider = FakeProvider(known=["hello"])
        client = make_client(provider)

        assert client.check_one("hello:hello") is None
        assert provider.checked == ["hello:hello", "hello", "hello"]

    def test_concatenation_with_invalid_part_is_reported(self, make_client: ClientFactory) -> None:
        """Test that the whole candidate is reported when one component fails."""
        client = make_client(FakeProvider(known=["eat", "in", "out", "now"]))

        span = client.check_one("eat in'n'out now")

        assert span == TextSpan(text="in'n'out", start=4, length=8)

    def test_is_valid_contraction_with_accepting_provider(self, make_client: ClientFactory) -> None:
        """Test that a provider accepting "hello" makes "hello:hello" valid."""
        client = make_client(FakeProvider(known=["hello"]))

        assert client.is_valid_contraction("hello:hello") is True

    def test_is_valid_contraction_with_rejecting_provider(
        self, make_client: ClientFactory
    ) -> None:
        """Test that a provider rejecting "hello" makes "hello:hello" invalid."""
        client = make_client(FakeProvider(known=[]))

        assert client.is_valid_contraction("hello:hello") is False


class TestFailOpen:
    """Internal faults never produce a misspelling."""

    def test_empty_text_returns_none_without_calling_provider(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test that empty input short-circuits."""
        client = make_client(fox_provider)

        assert client.check_one("") is None
        assert client.verdict_for("").kind is VerdictKind.CORRECT
        assert fox_provider.checked == []
        assert client.text_segmenter.state is SegmenterState.UNINITIALIZED

    @pytest.mark.parametrize("provider", [None, object(), SimpleNamespace(spell_check="nope")])
    def test_missing_spell_check_callable(
        self, make_client: ClientFactory, provider: object
    ) -> None:
        """Test that a provider without a callable check is indeterminate."""
        client = make_client(provider)

        assert client.check_one("The qick brown fox") is None
        assert client.verdict_for("The qick brown fox").kind is VerdictKind.INDETERMINATE

    def test_raising_provider_treats_word_as_correct(self, make_client: ClientFactory) -> None:
        """Test that a provider exception never yields a misspelling."""

        def spell_check(word: str) -> bool:
            raise ConnectionError("provider went away")

        client = make_client(SimpleNamespace(spell_check=spell_check))

        assert client.check_one("The qick brown fox") is None

    def test_non_boolean_answer_treats_word_as_correct(self, make_client: ClientFactory) -> None:
        """Test that a malformed provider answer is treated as correct."""
        client = make_client(SimpleNamespace(spell_check=lambda word: "no"))

        assert client.check_one("The qick brown fox") is None

    @pytest.mark.parametrize("raise_error", [False, True])
    def test_text_segmenter_failure_is_sticky(
        self, make_client: ClientFactory, fox_provider: FakeProvider, raise_error: bool
    ) -> None:
        """Test that a failed initialization is never retried."""
        segmenter = BrokenSegmenter(raise_error=raise_error)
        client = make_client(fox_provider, text_segmenter=segmenter)

        assert client.check_one("The qick brown fox") is None
        assert client.verdict_for("The qick brown fox").kind is VerdictKind.INDETERMINATE
        assert client.check_one("The qick brown fox") is None

        assert segmenter.initialize_calls == 1
        assert segmenter.set_text_calls == 0
        assert client.text_segmenter.state is SegmenterState.DISABLED
        assert fox_provider.checked == []

    def test_contraction_segmenter_failure_treats_candidate_as_valid(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test that a broken contraction segmenter accepts rejected words."""
        segmenter = BrokenSegmenter()
        client = make_client(fox_provider, contraction_segmenter=segmenter)

        assert client.check_one("The qick brown fox") is None
        assert client.check_one("qick again") is None

        assert segmenter.initialize_calls == 1
        assert client.contraction_segmenter.state is SegmenterState.DISABLED

    def test_language_without_table_disables_segmenters(self, fox_provider: FakeProvider) -> None:
        """Test that an empty language leaves the client unable to segment."""
        client = SpellCheckClient(LanguageConfig(default_language=""), fox_provider)

        assert client.verdict_for("The qick brown fox").kind is VerdictKind.INDETERMINATE

    def test_out_of_range_tokens_are_skipped(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test that a segmenter span past the end of the text is ignored."""
        segmenter = ScriptedSegmenter([WordToken(word="qick", start=10, length=4)])
        client = make_client(fox_provider, text_segmenter=segmenter)

        assert client.check_one("qick") is None
        assert fox_provider.checked == []


class TestIdempotence:
    """Repeated calls give the same answer and initialize segmenters once."""

    def test_same_result_and_single_initialization(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test repeated check_one calls."""
        text_segmenter = CountingWordIterator()
        contraction_segmenter = CountingWordIterator()
        client = make_client(
            fox_provider,
            text_segmenter=text_segmenter,
            contraction_segmenter=contraction_segmenter,
        )

        first = client.check_one("The qick brown fox")
        second = client.check_one("The qick brown fox")

        assert first == second
        assert text_segmenter.initialize_calls == 1
        assert contraction_segmenter.initialize_calls == 1

    def test_contraction_segmenter_is_lazy(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test that the contraction segmenter is untouched while every word passes."""
        contraction_segmenter = CountingWordIterator()
        client = make_client(fox_provider, contraction_segmenter=contraction_segmenter)

        assert client.check_one("the brown fox") is None
        assert contraction_segmenter.initialize_calls == 0


class TestCheckParagraph:
    """Full-scan check through the client's own segmenter."""

    def test_reports_every_misspelling_in_order(self, make_client: ClientFactory) -> None:
        """Test that the scan does not stop at the first misspelling."""
        client = make_client(FakeProvider(known=["the", "fox", "hello"]))

        ranges = client.check_paragraph("The qick brwn fox said hello:hello")

        assert [(r.location, r.length) for r in ranges] == [(4, 4), (9, 4), (18, 4)]

    def test_mask_without_spelling_returns_nothing(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test that a grammar-only mask performs no check."""
        client = make_client(fox_provider)

        assert client.check_paragraph("The qick brown fox", TextCheckingType.GRAMMAR) == []
        assert fox_provider.checked == []

    def test_combined_mask_checks_spelling(
        self, make_client: ClientFactory, fox_provider: FakeProvider
    ) -> None:
        """Test that a mask including SPELLING checks spelling."""
        client = make_client(fox_provider)
        mask = TextCheckingType.SPELLING | TextCheckingType.GRAMMAR

        assert len(client.check_paragraph("The qick brown fox", mask)) == 1

    def test_unavailable_provider_returns_nothing(self, make_client: ClientFactory) -> None:
        """Test fail-open behaviour of the paragraph scan."""
        assert make_client(None).check_paragraph("The qick brown fox") == []
