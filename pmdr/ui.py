"""Textual-based UI for the Pomodoro timer."""

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.timer import Timer
from textual.widgets import Button, Footer, Static

from .driver import Driver


class PMDRTui(App):
    """Pomodoro timer application."""

    TITLE = "PMDR"

    CSS = """
    #main {
        align: center middle;
    }
    #timer-container {
        width: 32;
        height: auto;
        border: round $primary;
        padding: 1 2;
    }
    #timer-container.on-break {
        border: round $success;
    }
    #state-label, #countdown, #tally {
        width: 100%;
        content-align: center middle;
    }
    #countdown {
        text-style: bold;
        padding: 1 0;
    }
    #buttons {
        height: auto;
        align: center middle;
        margin-top: 1;
    }
    #buttons Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("space", "toggle", "Play/Pause"),
        Binding("s", "stop", "Stop"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, driver: Driver) -> None:
        super().__init__()
        self.driver = driver
        self._tick_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Container(id="main"):
            with Vertical(id="timer-container"):
                yield Static(id="state-label")
                yield Static(id="countdown")
                yield Static(id="tally")
                with Horizontal(id="buttons"):
                    yield Button(self.driver.pause_button_label, id="pause")
                    yield Button(self.driver.stop_button_label, id="stop", variant="error")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_display()
        self.driver.greet()
        self._tick_timer = self.set_interval(1.0, self._tick)

    def _tick(self) -> None:
        """Called every second."""
        self.driver.second()
        self._refresh_display()

    def _refresh_display(self) -> None:
        """Update all display elements."""
        pomodoro = self.driver.pomodoro
        self.query_one("#state-label", Static).update(pomodoro.state_label())
        self.query_one("#countdown", Static).update(pomodoro.countdown_text())
        self.query_one("#tally", Static).update(self.driver.tally_text)
        self.query_one("#pause", Button).label = self.driver.pause_button_label
        self.query_one("#stop", Button).label = self.driver.stop_button_label
        self.query_one("#timer-container").set_class(pomodoro.on_break(), "on-break")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "pause":
            self.action_toggle()
        elif event.button.id == "stop":
            self.action_stop()

    def action_toggle(self) -> None:
        """Toggle timer play/pause."""
        self.driver.toggle()
        self._refresh_display()

    def action_stop(self) -> None:
        """Stop the timer, or reset the tally when already stopped."""
        self.driver.stop()
        self._refresh_display()


def run_ui(driver: Driver) -> None:
    """Run the Pomodoro UI.

    Args:
        driver: Driving loop wrapping the timer.
    """
    app = PMDRTui(driver)
    app.run()
