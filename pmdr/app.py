"""Facade owning the single current timer state."""

import logging

from . import timer
from .timer import TimerState, Working

logger = logging.getLogger(__name__)


class PMDRApp:
    """Pomodoro timer driven by one external control loop.

    The caller invokes tick() once per second and the other operations
    after user actions. Each operation replaces the state in one
    assignment, so a caller never sees a half-finished transition.
    """

    def __init__(self) -> None:
        self._state: TimerState = Working(tally=0, remaining=timer.WORK_DURATION)

    @property
    def state(self) -> TimerState:
        """Current timer state."""
        return self._state

    def tick(self) -> bool:
        """Advance one second.

        Returns:
            True if a work/break boundary was crossed.
        """
        self._state, crossed = timer.tick(self._state)
        if crossed:
            logger.info(
                "Boundary crossed: %s, tally=%d",
                timer.label(self._state),
                timer.tally(self._state),
            )
        return crossed

    def toggle(self) -> bool:
        """Toggle between ticking and paused.

        Returns:
            True if the timer is ticking afterwards.
        """
        self._state = timer.toggle(self._state)
        logger.debug("Toggled to %r", self._state)
        return timer.is_active(self._state)

    def stop(self) -> None:
        """Stop the timer, keeping the tally unless already stopped."""
        self._state = timer.stop(self._state)
        logger.debug("Stopped with tally=%d", timer.tally(self._state))

    def countdown_text(self) -> str:
        return timer.format_secs(timer.remaining(self._state))

    def tally(self) -> int:
        return timer.tally(self._state)

    def ticking(self) -> bool:
        return timer.is_active(self._state)

    def state_label(self) -> str:
        return timer.label(self._state)

    def on_break(self) -> bool:
        return timer.is_break(self._state)
