import pytest

from smartconverter.config import HIGHLIGHT_DURATION_MS
from smartconverter.model.catalog import iter_conversions
from smartconverter.model.session import (
    ClearHighlight,
    Copy,
    ConversionSession,
    Feedback,
    ScheduleClear,
    SessionState,
    SetInput,
    WriteClipboard,
    derive_results,
    reduce,
)


def _result_texts(state):
    return {
        result.key: result.result_text
        for category in derive_results(state)
        for result in category.results
    }


def test_set_input_replaces_raw_text_without_validation():
    state, effects = reduce(SessionState(), SetInput("abc"))
    assert state.raw_input == "abc"
    assert state.value == 0.0
    assert effects == []


def test_copy_returns_effects_in_order():
    state = SessionState(raw_input="100")
    new_state, effects = reduce(state, Copy("fahrenheit_to_celsius"))
    assert new_state.highlighted_id == "fahrenheit_to_celsius"
    assert effects == [
        WriteClipboard("37.78"),
        Feedback(),
        ScheduleClear("fahrenheit_to_celsius", HIGHLIGHT_DURATION_MS),
    ]


def test_copy_of_empty_input_copies_zero():
    _, effects = reduce(SessionState(), Copy("celsius_to_fahrenheit"))
    assert effects[0] == WriteClipboard("0")


def test_copy_unknown_id_raises():
    with pytest.raises(KeyError):
        reduce(SessionState(), Copy("nope"))


def test_clear_highlight_is_identity_guarded():
    state = SessionState(raw_input="1", highlighted_id="kg_to_lbs")
    stale, _ = reduce(state, ClearHighlight("lbs_to_kg"))
    assert stale is state
    cleared, _ = reduce(state, ClearHighlight("kg_to_lbs"))
    assert cleared.highlighted_id is None
    assert cleared.raw_input == "1"


def test_temperature_scenario():
    texts = _result_texts(SessionState(raw_input="100"))
    assert texts["celsius_to_fahrenheit"] == "212"
    assert texts["fahrenheit_to_celsius"] == "37.78"


def test_empty_input_shows_zero_everywhere():
    categories = derive_results(SessionState())
    results = [r for c in categories for r in c.results]
    assert len(results) == 9
    assert all(r.result_text == "0" for r in results)
    assert all(r.input_text == "0" for r in results)
    assert not any(r.has_input for r in results)


def test_derived_results_follow_catalog_order():
    categories = derive_results(SessionState(raw_input="1"))
    assert [c.title for c in categories] == ["Temperature", "Length", "Weight", "Speed"]
    assert [r.key for c in categories for r in c.results] == [c.key for c in iter_conversions()]


def test_rederivation_is_idempotent():
    session = ConversionSession(clipboard=lambda text: None, schedule=lambda ms, cb: None)
    session.set_input("42.5")
    first = session.results()
    session.set_input("42.5")
    assert session.results() == first


def test_stale_timer_does_not_clear_newer_highlight(scheduler, clipboard):
    session = ConversionSession(clipboard=clipboard.append, schedule=scheduler)
    session.set_input("10")

    session.copy("meters_to_feet")
    assert session.state.highlighted_id == "meters_to_feet"
    session.copy("feet_to_meters")
    assert session.state.highlighted_id == "feet_to_meters"

    # The first copy's timer fires after the second copy
    scheduler.fire(0)
    assert session.state.highlighted_id == "feet_to_meters"

    scheduler.fire(1)
    assert session.state.highlighted_id is None

    assert clipboard == ["32.81", "3.05"]
    assert [delay for delay, _ in scheduler.pending] == [2000, 2000]


def test_copy_same_id_twice_is_cleared_by_first_timer(scheduler):
    session = ConversionSession(clipboard=lambda text: None, schedule=scheduler)
    session.copy("kg_to_lbs")
    session.copy("kg_to_lbs")
    scheduler.fire(0)
    assert session.state.highlighted_id is None
    scheduler.fire(1)
    assert session.state.highlighted_id is None


def test_highlight_marks_only_copied_card(scheduler):
    session = ConversionSession(clipboard=lambda text: None, schedule=scheduler)
    session.copy("mph_to_kmh")
    copied = [r.key for c in session.results() for r in c.results if r.is_copied]
    assert copied == ["mph_to_kmh"]


def test_clipboard_failure_is_ignored(scheduler):
    def broken_clipboard(text):
        raise RuntimeError("no clipboard")

    feedback_calls = []
    session = ConversionSession(
        clipboard=broken_clipboard,
        schedule=scheduler,
        feedback=lambda: feedback_calls.append(True),
    )
    session.set_input("5")
    session.copy("kmh_to_mph")
    assert session.state.highlighted_id == "kmh_to_mph"
    assert feedback_calls == [True]
    assert len(scheduler.pending) == 1


def test_on_change_only_fires_for_real_changes(scheduler):
    changes = []
    session = ConversionSession(
        clipboard=lambda text: None,
        schedule=scheduler,
        on_change=lambda old, new: changes.append((old, new)),
    )
    session.set_input("1")
    session.set_input("1")
    assert len(changes) == 1
    assert changes[0][1].raw_input == "1"
