"""Desktop notification support for the Pomodoro timer."""

import logging
import platform
import subprocess
import sys
from typing import List, Optional

logger = logging.getLogger(__name__)

NOTIFICATION_SOUND = "complete"


def _send_bell() -> None:
    """Send terminal bell."""
    sys.stdout.write("\a")
    sys.stdout.flush()


def _run(command: List[str]) -> Optional[subprocess.CompletedProcess]:
    try:
        return subprocess.run(command, capture_output=True, text=True, timeout=5)
    except (subprocess.SubprocessError, FileNotFoundError, OSError) as exc:
        logger.debug("Notification command %s failed: %s", command[0], exc)
        return None


def _applescript_quote(text: str) -> str:
    """Quote text as an AppleScript string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _send_macos_notification(
    title: str, message: str, sound: Optional[str] = None
) -> bool:
    """Send macOS notification via osascript.

    macOS decides on its own when a banner expires.

    Returns:
        True if successful, False otherwise.
    """
    script = (
        f"display notification {_applescript_quote(message)}"
        f" with title {_applescript_quote(title)}"
    )
    if sound:
        script += f" sound name {_applescript_quote(sound)}"
    return _run(["osascript", "-e", script]) is not None


def _send_linux_notification(
    title: str,
    message: str,
    timeout: Optional[int] = None,
    sound: Optional[str] = None,
    replace_id: Optional[int] = None,
) -> Optional[int]:
    """Send Linux notification via notify-send.

    Args:
        timeout: Seconds before the notification expires; 0 never expires.
        replace_id: Id of an earlier notification to replace on screen.

    Returns:
        The id notify-send printed, or None on failure.
    """
    command = ["notify-send", "--print-id"]
    if replace_id is not None:
        command.append(f"--replace-id={replace_id}")
    if timeout is not None:
        command.append(f"--expire-time={timeout * 1000}")
    if sound:
        command.append(f"--hint=string:sound-name:{sound}")
    command.extend([title, message])

    result = _run(command)
    if result is None:
        return None
    printed = (result.stdout or "").strip()
    return int(printed) if printed.isdigit() else None


def notify(
    title: str,
    message: str,
    bell: bool = True,
    timeout: Optional[int] = None,
    sound: Optional[str] = NOTIFICATION_SOUND,
    replace_id: Optional[int] = None,
) -> Optional[int]:
    """Send a notification.

    Attempts to send both a terminal bell and a native notification.
    Fails silently if native notifications are not available.

    Args:
        title: Notification title.
        message: Notification message.
        bell: Whether to ring terminal bell.
        timeout: Seconds the notification stays up; 0 keeps it until
            dismissed, None leaves it to the desktop.
        sound: Sound name to play, if the platform supports it.
        replace_id: Linux only: id of the notification to replace.

    Returns:
        The notification id when the desktop reports one.
    """
    if bell:
        _send_bell()

    system = platform.system()
    if system == "Darwin":
        _send_macos_notification(title, message, sound)
        return None
    if system == "Linux":
        return _send_linux_notification(title, message, timeout, sound, replace_id)
    # Windows and other platforms: bell only
    return None


class Notification:
    """One desktop notification that is updated in place.

    Later updates replace the banner on screen instead of stacking new ones.
    """

    def __init__(self, bell: bool = True) -> None:
        self.bell = bell
        self.id: Optional[int] = None

    def update(self, title: str, message: str, timeout: int) -> None:
        notification_id = notify(
            title,
            message,
            bell=self.bell,
            timeout=timeout,
            replace_id=self.id,
        )
        if notification_id is not None:
            self.id = notification_id
        logger.debug("Updated notification %r (id=%s)", title, self.id)
