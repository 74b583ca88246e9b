"""Tests for the Textual UI, driven through Textual's test pilot."""

import asyncio

from pmdr.driver import Driver
from pmdr.timer import WORK_DURATION, Paused, Stopped, Working
from pmdr.ui import PMDRTui
from textual.widgets import Button


def run_scenario(scenario) -> None:
    """Run an async pilot scenario against a fresh app with a quiet driver."""
    app = PMDRTui(Driver())

    async def main():
        async with app.run_test() as pilot:
            # Seconds are driven by hand.
            app._tick_timer.pause()
            await scenario(app, pilot)

    asyncio.run(main())


def button_label(app: PMDRTui, button_id: str) -> str:
    return str(app.query_one(f"#{button_id}", Button).label)


class TestButtons:
    """Test the Play/Pause and Stop buttons."""

    def test_initial_labels(self):
        """A fresh app is running with Pause and Stop buttons."""

        async def scenario(app, pilot):
            assert button_label(app, "pause") == "Pause"
            assert button_label(app, "stop") == "Stop"

        run_scenario(scenario)

    def test_pause_and_resume(self):
        """The pause button toggles the timer and its own label."""

        async def scenario(app, pilot):
            await pilot.click("#pause")
            await pilot.pause()
            assert isinstance(app.driver.pomodoro.state, Paused)
            assert button_label(app, "pause") == "Play"

            await pilot.click("#pause")
            await pilot.pause()
            assert isinstance(app.driver.pomodoro.state, Working)
            assert button_label(app, "pause") == "Pause"

        run_scenario(scenario)

    def test_stop_then_reset_tally(self):
        """Stop relabels itself and a second press clears the tally."""

        async def scenario(app, pilot):
            for _ in range(WORK_DURATION):
                app._tick()
            assert app.driver.pomodoro.tally() == 1
            assert app.query_one("#timer-container").has_class("on-break")

            await pilot.click("#stop")
            await pilot.pause()
            assert app.driver.pomodoro.state == Stopped(tally=1)
            assert button_label(app, "stop") == "Reset Tally"
            assert button_label(app, "pause") == "Play"
            assert not app.query_one("#timer-container").has_class("on-break")

            await pilot.click("#stop")
            await pilot.pause()
            assert app.driver.pomodoro.state == Stopped(tally=0)

            await pilot.click("#pause")
            await pilot.pause()
            assert button_label(app, "stop") == "Stop"
            assert button_label(app, "pause") == "Pause"

        run_scenario(scenario)


class TestBindings:
    """Test keyboard shortcuts."""

    def test_stop_key(self):
        """The s key stops the timer."""

        async def scenario(app, pilot):
            await pilot.press("s")
            await pilot.pause()
            assert app.driver.pomodoro.state == Stopped(tally=0)
            assert button_label(app, "stop") == "Reset Tally"

        run_scenario(scenario)
