"""Pure logic for the Pomodoro timer state machine.

States are immutable values. Every transition is a plain function that
takes the current state and returns the next one, so the owner can swap
its single state slot in one assignment.
"""

from dataclasses import dataclass
from typing import Tuple, Union

SECS_PER_MINUTE = 60
SECS_PER_HOUR = 3600

WORK_DURATION = 25 * SECS_PER_MINUTE
SHORT_BREAK = 5 * SECS_PER_MINUTE
LONG_BREAK = 15 * SECS_PER_MINUTE
LONG_BREAK_EVERY = 4


@dataclass(frozen=True)
class Working:
    """A work interval counting down."""
    tally: int
    remaining: int


@dataclass(frozen=True)
class OnBreak:
    """A short or long break counting down."""
    tally: int
    remaining: int


@dataclass(frozen=True)
class Paused:
    """A frozen Working or OnBreak state."""
    inner: Union[Working, OnBreak]


@dataclass(frozen=True)
class Stopped:
    """Halted; only the tally survives."""
    tally: int


TimerState = Union[Working, OnBreak, Paused, Stopped]


def format_secs(secs: int) -> str:
    """Format seconds as H:MM:SS.

    >>> format_secs(3753)
    '1:02:33'
    """
    hours = secs // SECS_PER_HOUR
    minutes = (secs - SECS_PER_HOUR * hours) // SECS_PER_MINUTE
    seconds = secs % SECS_PER_MINUTE
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def _unknown(state: object) -> TypeError:
    return TypeError(f"not a timer state: {state!r}")


def tally(state: TimerState) -> int:
    """Completed work intervals carried by the state."""
    if isinstance(state, (Working, OnBreak, Stopped)):
        return state.tally
    if isinstance(state, Paused):
        return state.inner.tally
    raise _unknown(state)


def remaining(state: TimerState) -> int:
    """Seconds left in the current interval.

    Stopped reports what a fresh work interval would show.
    """
    if isinstance(state, (Working, OnBreak)):
        return state.remaining
    if isinstance(state, Paused):
        return state.inner.remaining
    if isinstance(state, Stopped):
        return WORK_DURATION
    raise _unknown(state)


def is_active(state: TimerState) -> bool:
    """True while the state consumes ticks."""
    if isinstance(state, (Working, OnBreak)):
        return True
    if isinstance(state, (Paused, Stopped)):
        return False
    raise _unknown(state)


def is_break(state: TimerState) -> bool:
    if isinstance(state, OnBreak):
        return True
    if isinstance(state, (Working, Paused, Stopped)):
        return False
    raise _unknown(state)


def label(state: TimerState) -> str:
    """Human-readable status label."""
    if isinstance(state, Working):
        return "Keep Going!"
    if isinstance(state, OnBreak):
        return "On Break"
    if isinstance(state, Paused):
        return f"Paused ({label(state.inner)})"
    if isinstance(state, Stopped):
        return "Stopped"
    raise _unknown(state)


def break_duration(completed: int) -> int:
    """Break length after the given number of completed work intervals."""
    if completed % LONG_BREAK_EVERY == 0:
        return LONG_BREAK
    return SHORT_BREAK


def tick(state: TimerState) -> Tuple[TimerState, bool]:
    """Advance one second.

    Returns:
        The next state and whether a work/break boundary was crossed.
    """
    if isinstance(state, Working):
        left = state.remaining - 1
        if left > 0:
            return Working(state.tally, left), False
        completed = state.tally + 1
        return OnBreak(completed, break_duration(completed)), True
    if isinstance(state, OnBreak):
        left = state.remaining - 1
        if left > 0:
            return OnBreak(state.tally, left), False
        return Working(state.tally, WORK_DURATION), True
    if isinstance(state, (Paused, Stopped)):
        return state, False
    raise _unknown(state)


def toggle(state: TimerState) -> TimerState:
    """Pause a running interval, resume a paused one, or start from Stopped."""
    if isinstance(state, (Working, OnBreak)):
        return Paused(state)
    if isinstance(state, Paused):
        return state.inner
    if isinstance(state, Stopped):
        return Working(state.tally, WORK_DURATION)
    raise _unknown(state)


def stop(state: TimerState) -> TimerState:
    """Halt and keep the tally. Stopping twice clears the tally."""
    if isinstance(state, (Working, OnBreak, Paused)):
        return Stopped(tally(state))
    if isinstance(state, Stopped):
        return Stopped(0)
    raise _unknown(state)
