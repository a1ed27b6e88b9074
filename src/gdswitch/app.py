"""Application entry point."""

from __future__ import annotations

import logging
import sys

import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Adw, Gio

from .utils import APP_ID

NOTIFY_TITLE = "Display Switcher"


class SwitcherApp(Adw.Application):
    """Main application class."""

    def __init__(self) -> None:
        super().__init__(
            application_id=APP_ID,
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
        )

    def do_activate(self) -> None:
        win = self.get_active_window()
        if win is None:
            from .window import SwitcherWindow
            win = SwitcherWindow(self)
        win.present()

    def show_notification(self, message: str) -> None:
        """Show *message* as a desktop notification."""
        notification = Gio.Notification.new(NOTIFY_TITLE)
        notification.set_body(message)
        self.send_notification("display-mode", notification)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [gdswitch] %(levelname)s %(message)s",
    )
    app = SwitcherApp()
    app.run(sys.argv)
