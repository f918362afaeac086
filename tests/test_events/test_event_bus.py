"""Tests for the event bus."""

from splitcss.events import types as events
from splitcss.events.bus import EventBus
from splitcss.model.diagnostic import Diagnostic, Severity


class TestEventBus:
    def test_subscribe_by_type(self) -> None:
        bus = EventBus()
        received: list[object] = []
        bus.subscribe(events.FragmentWritten, received.append)
        bus.emit(events.FragmentWritten(index=0, path="a-0.css"))
        bus.emit(events.SplitCompleted(fragment_count=1, selector_count=2))
        assert received == [events.FragmentWritten(index=0, path="a-0.css")]

    def test_catch_all_runs_first(self) -> None:
        bus = EventBus()
        order: list[str] = []
        bus.subscribe(events.SplitCompleted, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("all"))
        bus.emit(events.SplitCompleted(fragment_count=0, selector_count=0))
        assert order == ["all", "typed"]

    def test_unsubscribe(self) -> None:
        bus = EventBus()
        received: list[object] = []
        bus.subscribe(events.SplitStarted, received.append)
        bus.unsubscribe(events.SplitStarted, received.append)
        bus.unsubscribe(events.SplitCompleted, received.append)
        bus.emit(events.SplitStarted(destination=None, selector_count=0))
        assert received == []


class TestDiagnosticEvents:
    def test_warning_event_carries_diagnostic(self) -> None:
        diagnostic = Diagnostic(
            rule="destination_missing", severity=Severity.WARNING, message="no destination"
        )
        event = events.WarningRaised(diagnostic=diagnostic)
        assert event.diagnostic.is_warning

    def test_diagnostic_text_names_the_fragment(self) -> None:
        diagnostic = Diagnostic(
            rule="destination_missing",
            severity=Severity.WARNING,
            message="no destination",
            fragment=2,
        )
        assert str(diagnostic) == "WARNING [fragment=2]: no destination"
        assert str(Diagnostic("r", Severity.WARNING, "plain")) == "WARNING: plain"
