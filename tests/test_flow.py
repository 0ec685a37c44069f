# =============================================================================
# Observable Channel Tests
# =============================================================================

import pytest

from conftest import Recorder
from mailsetup.ui.flow import EffectChannel, StateFlow
from mailsetup.ui.viewmodel import BaseViewModel


class TestStateFlow:

    def test_subscriber_gets_current_value_first(self, recorder):
        flow = StateFlow("a")

        flow.subscribe(recorder)

        assert recorder.items == ["a"]

    def test_late_subscriber_joins_at_current_value(self, recorder):
        flow = StateFlow(0)
        flow.emit(1)
        flow.emit(2)

        flow.subscribe(recorder)
        flow.emit(3)

        assert recorder.items == [2, 3]
        assert flow.value == 3

    def test_equal_value_is_not_republished(self, recorder):
        flow = StateFlow(1)
        flow.subscribe(recorder)

        flow.emit(1)

        assert recorder.items == [1]

    def test_unsubscribe_stops_delivery(self, recorder):
        flow = StateFlow(0)
        unsubscribe = flow.subscribe(recorder)

        unsubscribe()
        flow.emit(1)

        assert recorder.items == [0]


class TestEffectChannel:

    def test_effect_delivered_to_attached_observers(self):
        channel = EffectChannel()
        first, second = Recorder(), Recorder()
        channel.subscribe(first)
        channel.subscribe(second)

        channel.send("go")

        assert first.items == ["go"]
        assert second.items == ["go"]

    def test_effect_not_replayed_to_late_observer(self, recorder):
        channel = EffectChannel()
        channel.subscribe(Recorder())
        channel.send("go")

        channel.subscribe(recorder)

        assert recorder.items == []

    def test_effect_held_until_first_observer(self):
        channel = EffectChannel()
        channel.send("one")
        channel.send("two")
        first, second = Recorder(), Recorder()

        channel.subscribe(first)
        channel.subscribe(second)

        assert first.items == ["one", "two"]
        assert second.items == []


class EchoViewModel(BaseViewModel[tuple, str, str]):
    """Appends each event to its state; "ping" also emits an effect."""

    def __init__(self):
        super().__init__(())

    def handle_event(self, event):
        self.update_state(lambda state: state + (event,))
        if event == "ping":
            self.emit_effect("pong")


class FailingViewModel(EchoViewModel):
    """Raises on "boom" without touching state."""

    def handle_event(self, event):
        if event == "boom":
            raise RuntimeError("boom")
        super().handle_event(event)


class TestBaseViewModel:

    def test_events_update_state_in_order(self, recorder):
        view_model = EchoViewModel()
        view_model.state.subscribe(recorder)

        view_model.event("a")
        view_model.event("b")

        assert recorder.items == [(), ("a",), ("a", "b")]

    def test_effects_are_separate_from_state(self, recorder):
        view_model = EchoViewModel()
        view_model.effect.subscribe(recorder)

        view_model.event("ping")

        assert recorder.items == ["pong"]
        assert view_model.current_state == ("ping",)

    def test_reentrant_event_is_queued(self):
        view_model = EchoViewModel()
        seen = []

        def observer(state):
            seen.append(state)
            if state == ("a",):
                view_model.event("b")

        view_model.state.subscribe(observer)
        view_model.event("a")

        # "a" is fully published before "b" is handled
        assert seen == [(), ("a",), ("a", "b")]

    def test_failed_event_drops_events_queued_behind_it(self):
        view_model = FailingViewModel()

        def observer(state):
            if state == ("a",):
                view_model.event("boom")
                view_model.event("c")

        view_model.state.subscribe(observer)
        with pytest.raises(RuntimeError):
            view_model.event("a")

        view_model.event("d")

        assert view_model.current_state == ("a", "d")
