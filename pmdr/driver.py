"""Per-second driving loop policy around the timer facade.

The state machine only reports boundary crossings. Reacting to them,
notifying the user and pausing before work resumes, happens here.
"""

import logging
from typing import Callable, Optional

from .app import PMDRApp

logger = logging.getLogger(__name__)

# (title, message, timeout in seconds; 0 never expires)
Notifier = Callable[[str, str, int], None]

GREETING = ("Get to it!", "Work interval started.", 10)
BREAK_NOTICE = ("TIME FOR A BREAK", "Step away from the screen.", 10)
WORK_NOTICE = ("HEY, GET BACK TO WORK!", "Press Play to start the next interval.", 0)

PAUSE_LABEL = "Pause"
PLAY_LABEL = "Play"
STOP_LABEL = "Stop"
RESET_TALLY_LABEL = "Reset Tally"


class Driver:
    """Drives a PMDRApp from a one-second interval and user actions."""

    def __init__(
        self,
        pomodoro: Optional[PMDRApp] = None,
        notifier: Optional[Notifier] = None,
    ) -> None:
        """Initialize the driver.

        Args:
            pomodoro: Facade to drive; a fresh one by default.
            notifier: Callback(title, message, timeout) for desktop
                notifications, or None to stay quiet.
        """
        self.pomodoro = pomodoro if pomodoro is not None else PMDRApp()
        self.notifier = notifier
        self._stop_label = STOP_LABEL

    @property
    def pause_button_label(self) -> str:
        return PAUSE_LABEL if self.pomodoro.ticking() else PLAY_LABEL

    @property
    def stop_button_label(self) -> str:
        return self._stop_label

    @property
    def tally_text(self) -> str:
        return f"Tally: {self.pomodoro.tally()}"

    def greet(self) -> None:
        """Send the start-up notification."""
        self._notify(*GREETING)

    def second(self) -> bool:
        """Handle one elapsed second.

        Returns:
            True if a work/break boundary was crossed.
        """
        crossed = self.pomodoro.tick()
        self._sync_stop_label()

        if crossed:
            if self.pomodoro.on_break():
                self._notify(*BREAK_NOTICE)
            else:
                # Wait for the user before the next work interval.
                self.pomodoro.toggle()
                logger.info("Break over, paused until resumed")
                self._notify(*WORK_NOTICE)
        return crossed

    def toggle(self) -> bool:
        """Play/Pause button action.

        Returns:
            True if the timer is ticking afterwards.
        """
        ticking = self.pomodoro.toggle()
        self._sync_stop_label()
        return ticking

    def stop(self) -> None:
        """Stop button action. Pressing it again resets the tally."""
        self.pomodoro.stop()
        self._stop_label = RESET_TALLY_LABEL

    def _sync_stop_label(self) -> None:
        if self.pomodoro.ticking():
            self._stop_label = STOP_LABEL

    def _notify(self, title: str, message: str, timeout: int) -> None:
        if self.notifier is None:
            return
        logger.debug("Notifying: %s", title)
        self.notifier(title, message, timeout)
