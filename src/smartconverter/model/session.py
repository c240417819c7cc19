"""
Conversion Session (State + Reducer)
====================================
The runtime state of one interaction sequence and the only transitions it has.

Why is this file needed?
------------------------
1. Determinism: `reduce()` is a pure function. External actions (clipboard,
   timers) are returned as effect records instead of being performed, so the
   copy-highlight race is testable without a GUI.
2. Decoupling: The Qt store (app/state.py) executes effects; this module has no
   knowledge of Qt widgets, the clipboard or the event loop.

Transitions:
    SetInput(text)          -> replace raw_input
    Copy(conversion_id)     -> highlight + WriteClipboard, Feedback, ScheduleClear
    ClearHighlight(id)      -> clear highlight only if it still equals id
"""
from __future__ import annotations

from dataclasses import dataclass, replace, field
import logging
from typing import Callable, List, Optional, Tuple, Union

from smartconverter.config import HIGHLIGHT_DURATION_MS
from smartconverter.model.catalog import Category, ConversionDefinition, find_conversion, get_catalog
from smartconverter.model.formatting import display_input, format_value, parse_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    raw_input: str = ""
    highlighted_id: Optional[str] = None

    @property
    def value(self) -> float:
        return parse_value(self.raw_input)

    @property
    def has_input(self) -> bool:
        return bool(self.raw_input)


# ------------------------------------------------------------------------------
# Actions
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class SetInput:
    text: str


@dataclass(frozen=True)
class Copy:
    conversion_id: str


@dataclass(frozen=True)
class ClearHighlight:
    """Fired by the one-shot timer scheduled by Copy."""
    conversion_id: str


Action = Union[SetInput, Copy, ClearHighlight]


# ------------------------------------------------------------------------------
# Effects
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class WriteClipboard:
    text: str


@dataclass(frozen=True)
class Feedback:
    pass


@dataclass(frozen=True)
class ScheduleClear:
    conversion_id: str
    delay_ms: int = HIGHLIGHT_DURATION_MS


Effect = Union[WriteClipboard, Feedback, ScheduleClear]


def format_conversion(state: SessionState, conversion: ConversionDefinition) -> str:
    return format_value(state.raw_input, conversion.convert(state.value))


def reduce(state: SessionState, action: Action) -> Tuple[SessionState, List[Effect]]:
    """Apply one action. Returns the new state and the effects to perform, in order."""
    match action:
        case SetInput(text=text):
            return replace(state, raw_input=text), []
        case Copy(conversion_id=conversion_id):
            text = format_conversion(state, find_conversion(conversion_id))
            effects: List[Effect] = [
                WriteClipboard(text),
                Feedback(),
                ScheduleClear(conversion_id),
            ]
            return replace(state, highlighted_id=conversion_id), effects
        case ClearHighlight(conversion_id=conversion_id):
            # A newer copy owns the highlight; this timer is stale.
            if state.highlighted_id != conversion_id:
                return state, []
            return replace(state, highlighted_id=None), []
        case _:
            raise TypeError(f"Unsupported action: {action!r}")


# ------------------------------------------------------------------------------
# Derived display
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class ConversionResult:
    """Everything a conversion card shows."""
    key: str
    label: str
    from_unit: str
    to_unit: str
    input_text: str
    result_text: str
    is_copied: bool
    has_input: bool


@dataclass(frozen=True)
class CategoryResult:
    title: str
    icon_name: str
    gradient: Tuple[str, str]
    results: Tuple[ConversionResult, ...] = field(default_factory=tuple)


def derive_results(state: SessionState, catalog: Tuple[Category, ...] | None = None) -> List[CategoryResult]:
    """Recompute every card from the state. Pure; equal states give equal results."""
    categories = catalog if catalog is not None else get_catalog()
    input_text = display_input(state.raw_input)

    derived: List[CategoryResult] = []
    for category in categories:
        results = tuple(
            ConversionResult(
                key=conversion.key,
                label=conversion.label,
                from_unit=conversion.from_unit,
                to_unit=conversion.to_unit,
                input_text=input_text,
                result_text=format_conversion(state, conversion),
                is_copied=state.highlighted_id == conversion.key,
                has_input=state.has_input,
            )
            for conversion in category.conversions
        )
        derived.append(CategoryResult(
            title=category.title,
            icon_name=category.icon_name,
            gradient=category.gradient,
            results=results,
        ))
    return derived


# ------------------------------------------------------------------------------
# Runner
# ------------------------------------------------------------------------------
Scheduler = Callable[[int, Callable[[], None]], None]


class ConversionSession:
    """
    Holds a SessionState and performs the effects returned by `reduce()`.

    Args:
        clipboard: Writes text to the system clipboard.
        schedule: Calls the callback once after the given number of milliseconds
            on the same thread that dispatches actions.
        feedback: Optional cosmetic hook fired on copy.
        on_change: Optional callback receiving (old_state, new_state) after every
            dispatch that changed the state.
    """

    def __init__(
        self,
        clipboard: Callable[[str], None],
        schedule: Scheduler,
        feedback: Optional[Callable[[], None]] = None,
        on_change: Optional[Callable[[SessionState, SessionState], None]] = None,
    ) -> None:
        self.state = SessionState()
        self._clipboard = clipboard
        self._schedule = schedule
        self._feedback = feedback
        self._on_change = on_change

    def dispatch(self, action: Action) -> SessionState:
        old = self.state
        self.state, effects = reduce(old, action)
        if self.state != old and self._on_change is not None:
            self._on_change(old, self.state)
        for effect in effects:
            self._perform(effect)
        return self.state

    def set_input(self, text: str) -> SessionState:
        return self.dispatch(SetInput(text))

    def copy(self, conversion_id: str) -> SessionState:
        return self.dispatch(Copy(conversion_id))

    def results(self) -> List[CategoryResult]:
        return derive_results(self.state)

    def _perform(self, effect: Effect) -> None:
        match effect:
            case WriteClipboard(text=text):
                try:
                    self._clipboard(text)
                except Exception:
                    # Fire-and-forget: the highlight still shows.
                    logger.warning("Clipboard write failed", exc_info=True)
                else:
                    logger.debug(f"Copied {text!r} to clipboard")
            case Feedback():
                if self._feedback is None:
                    return
                try:
                    self._feedback()
                except Exception:
                    logger.warning("Copy feedback failed", exc_info=True)
            case ScheduleClear(conversion_id=conversion_id, delay_ms=delay_ms):
                self._schedule(delay_ms, lambda: self.dispatch(ClearHighlight(conversion_id)))
