# =============================================================================
# Account Setup View Model Tests
# =============================================================================

from conftest import Recorder
from mailsetup.ui.setup import AccountSetupViewModel, Effect, Event, SetupStep, State


def steps(states):
    return [state.setup_step for state in states]


def test_default_initial_step():
    assert AccountSetupViewModel().current_state == State(setup_step=SetupStep.AUTO_CONFIG)


def test_forward_step_on_next_event():
    view_model = AccountSetupViewModel()
    states, effects = Recorder(), Recorder()
    view_model.state.subscribe(states)
    view_model.effect.subscribe(effects)

    seen = []
    for _ in range(4):
        view_model.event(Event.ON_NEXT)
        seen.append(view_model.current_state.setup_step)

    assert seen == [
        SetupStep.INCOMING_CONFIG,
        SetupStep.OUTGOING_CONFIG,
        SetupStep.OPTIONS,
        SetupStep.OPTIONS,
    ]
    assert steps(states.items) == [
        SetupStep.AUTO_CONFIG,
        SetupStep.INCOMING_CONFIG,
        SetupStep.OUTGOING_CONFIG,
        SetupStep.OPTIONS,
    ]
    assert effects.items == [Effect.NAVIGATE_NEXT]


def test_rewind_step_on_back_event():
    view_model = AccountSetupViewModel(State(setup_step=SetupStep.OPTIONS))
    states, effects = Recorder(), Recorder()
    view_model.state.subscribe(states)
    view_model.effect.subscribe(effects)

    for _ in range(3):
        view_model.event(Event.ON_BACK)
    assert effects.items == []

    view_model.event(Event.ON_BACK)

    assert steps(states.items) == [
        SetupStep.OPTIONS,
        SetupStep.OUTGOING_CONFIG,
        SetupStep.INCOMING_CONFIG,
        SetupStep.AUTO_CONFIG,
    ]
    assert view_model.current_state.setup_step is SetupStep.AUTO_CONFIG
    assert effects.items == [Effect.NAVIGATE_BACK]


def test_effect_emitted_once_per_boundary_event():
    view_model = AccountSetupViewModel(State(setup_step=SetupStep.OPTIONS))
    effects = Recorder()
    view_model.effect.subscribe(effects)

    view_model.event(Event.ON_NEXT)
    view_model.event(Event.ON_NEXT)

    assert effects.items == [Effect.NAVIGATE_NEXT, Effect.NAVIGATE_NEXT]


def test_effects_not_replayed_to_new_subscriber():
    view_model = AccountSetupViewModel()
    view_model.effect.subscribe(Recorder())
    view_model.event(Event.ON_BACK)

    late = Recorder()
    view_model.effect.subscribe(late)

    assert late.items == []


def test_back_and_forth():
    view_model = AccountSetupViewModel()

    view_model.event(Event.ON_NEXT)
    view_model.event(Event.ON_NEXT)
    view_model.event(Event.ON_BACK)

    assert view_model.current_state.setup_step is SetupStep.INCOMING_CONFIG


def test_step_order_helpers():
    assert SetupStep.first() is SetupStep.AUTO_CONFIG
    assert SetupStep.last() is SetupStep.OPTIONS
    assert SetupStep.AUTO_CONFIG.previous_step is None
    assert SetupStep.OPTIONS.next_step is None
    assert SetupStep.INCOMING_CONFIG.next_step is SetupStep.OUTGOING_CONFIG


def test_rewind_to_earlier_step():
    view_model = AccountSetupViewModel(State(setup_step=SetupStep.OPTIONS))
    effects = Recorder()
    view_model.effect.subscribe(effects)

    view_model.rewind_to(SetupStep.INCOMING_CONFIG)

    assert view_model.current_state.setup_step is SetupStep.INCOMING_CONFIG
    assert effects.items == []


def test_rewind_to_later_step_does_nothing():
    view_model = AccountSetupViewModel(State(setup_step=SetupStep.INCOMING_CONFIG))

    view_model.rewind_to(SetupStep.OPTIONS)

    assert view_model.current_state.setup_step is SetupStep.INCOMING_CONFIG
