"""Non-blocking single-key input for the timer controls."""

import sys
from typing import Optional

try:
    import termios
    import tty
except ImportError:  # Windows
    termios = None
    tty = None


class KeyboardHandler:
    """Reads keys from a terminal put in cbreak mode."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._setup()

    def _setup(self):
        """Put the terminal in cbreak mode so keys arrive unbuffered."""
        if termios is None:
            return
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error:
            # stdin is not a TTY
            self.old_settings = None

    def get_key(self) -> Optional[str]:
        """
        Get a single keypress without blocking.

        Returns the lower-cased key or None if no key is waiting.
        """
        import select

        try:
            if select.select([sys.stdin], [], [], 0)[0]:
                key = sys.stdin.read(1)
                return key.lower() if key else None
        except (OSError, ValueError):
            return None
        return None

    def suspend(self):
        """Restore line-buffered input, e.g. while prompting for text."""
        self.stop()

    def resume(self):
        """Re-enter cbreak mode after ``suspend``."""
        self._setup()

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings and termios is not None:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    def __init__(self):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None

    def get_key(self) -> Optional[str]:
        """Get key on Windows."""
        if not self.msvcrt:
            return None

        if self.msvcrt.kbhit():
            key = self.msvcrt.getch()
            if isinstance(key, bytes):
                key = key.decode("utf-8", errors="ignore")
            return key.lower()
        return None

    def suspend(self):
        """No terminal mode to restore on Windows."""

    def resume(self):
        """No terminal mode to restore on Windows."""

    def stop(self):
        """No cleanup needed on Windows."""


def create_keyboard_handler():
    """Return the handler suited to the current platform."""
    if termios is None:
        return WindowsKeyboardHandler()
    return KeyboardHandler()
