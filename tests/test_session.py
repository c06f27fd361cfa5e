"""Tests for HighlightSession and complexity display helpers."""

import pytest

from boltzmann_lens.analysis.models import Span
from boltzmann_lens.highlights.color import Color
from boltzmann_lens.highlights.models import Highlight
from boltzmann_lens.session import HighlightSession, complexity_badge, format_complexity, inset_title


@pytest.fixture
def highlights():
    color = Color.for_complexity(1.0, 0.3)
    return [
        Highlight(span=Span(0, 0, 3, 0), hover_text="Complexity: 9.00", color=color),
        Highlight(span=Span(5, 0, 6, 0), hover_text="Complexity: 4.00", color=color),
    ]


class TestHighlightSession:
    """Enable/disable state and the displayed highlight set."""

    def test_starts_disabled_and_empty(self):
        session = HighlightSession()
        assert not session.enabled
        assert session.highlights == ()
        assert session.total_complexity == 0
        assert session.status_text() is None

    def test_register_ignored_while_disabled(self, highlights):
        session = HighlightSession()
        assert session.register(highlights, 12.0, "app.py") is False
        assert session.highlights == ()

    def test_register_when_enabled(self, highlights):
        session = HighlightSession(enabled=True)
        assert session.register(highlights, 12.0, "app.py") is True
        assert session.highlights == tuple(highlights)
        assert session.total_complexity == 12.0
        assert session.filename == "app.py"
        assert session.status_text() == "12.00Ω"
        assert session.status_tooltip() == "Total file complexity: 12.00Ω (app.py)"

    def test_register_replaces_previous(self, highlights):
        session = HighlightSession(enabled=True)
        session.register(highlights, 12.0, "app.py")
        session.register(highlights[:1], 3.5, "lib.py")
        assert len(session.highlights) == 1
        assert session.status_text() == "3.50Ω"

    def test_toggle(self, highlights):
        session = HighlightSession()
        assert session.toggle() is True
        session.register(highlights, 7.0, "app.py")
        assert session.toggle() is False
        assert session.highlights == ()
        assert session.status_text() is None
        assert session.status_tooltip() is None

    def test_clear_keeps_enabled(self, highlights):
        session = HighlightSession(enabled=True)
        session.register(highlights, 7.0, "app.py")
        session.clear()
        assert session.enabled
        assert session.highlights == ()
        assert session.filename is None

    def test_sessions_are_independent(self, highlights):
        first = HighlightSession(enabled=True)
        second = HighlightSession(enabled=True)
        first.register(highlights, 1.0, "a.py")
        assert second.highlights == ()


class TestDisplayHelpers:
    """Badges and inset titles for total file complexity."""

    @pytest.mark.parametrize(
        "value, badge",
        [
            (0, "0"),
            (12.4, "12"),
            (12.5, "13"),
            (99.6, "100"),
            (999.4, "999"),
            (1500, "2k"),
            (12_345, "12k"),
            (2_400_000, "2m"),
        ],
    )
    def test_badge(self, value, badge):
        assert complexity_badge(value) == badge

    def test_inset_title(self):
        assert inset_title(12.5) == "File Complexity: 12.50Ω"

    def test_inset_title_hidden_for_zero(self):
        assert inset_title(0) is None

    def test_format_complexity(self):
        assert format_complexity(3) == "3.00Ω"
