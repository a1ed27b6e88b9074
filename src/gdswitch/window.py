"""Main application window."""

from __future__ import annotations

import logging

import gi
gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")
from gi.repository import Gtk, Adw, GLib, Gio

from .jobs import JobRunner
from .menu import SECTION_MODE, SECTION_POSITION, MenuEntry, render_menu
from .models import JoinPosition, Mode
from .switcher import DisplaySwitcher, SwitchResult
from .utils import load_join_position, save_join_position

log = logging.getLogger(__name__)

_POSITIONS = [p.value for p in JoinPosition]


class SwitcherWindow(Adw.ApplicationWindow):
    """Mode list, join-position selector and status line.

    Holds no arrangement logic: every redraw comes from ``render_menu``.
    """

    __gtype_name__ = "SwitcherWindow"

    def __init__(self, app: Adw.Application) -> None:
        super().__init__(application=app, title="Display Switcher", default_width=380, default_height=460)
        self._app = app
        self._switcher = DisplaySwitcher(notify=self._on_notify)
        self._mode = Mode.UNKNOWN
        self._position = load_join_position()
        self._jobs = JobRunner(GLib.idle_add)
        self._inhibit: bool = False
        self._mode_checks: dict[str, Gtk.CheckButton] = {}

        self._build_ui()
        self._setup_actions()
        self._render()
        self._detect()

    # ── UI Construction ──────────────────────────────────────────────

    def _build_ui(self) -> None:
        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        self.set_content(main_box)

        header = Adw.HeaderBar()
        header.set_title_widget(Adw.WindowTitle(title="Display Switcher", subtitle="gdctl"))
        main_box.append(header)

        btn_detect = Gtk.Button(icon_name="view-refresh-symbolic", tooltip_text="Detect current mode")
        btn_detect.connect("clicked", lambda *_: self._detect())
        header.pack_end(btn_detect)

        page = Adw.PreferencesPage()

        modes = Adw.PreferencesGroup(title="Mode")
        group_leader: Gtk.CheckButton | None = None
        for entry in render_menu(Mode.UNKNOWN, self._position):
            if entry.section != SECTION_MODE:
                continue
            check = Gtk.CheckButton()
            if group_leader is None:
                group_leader = check
            else:
                check.set_group(group_leader)
            check.connect("toggled", self._on_mode_toggled, entry.key)
            self._mode_checks[entry.key] = check

            row = Adw.ActionRow(title=entry.label)
            row.add_prefix(check)
            row.set_activatable_widget(check)
            modes.add(row)
        page.add(modes)

        positions = Adw.PreferencesGroup(title="Join")
        self._position_row = Adw.ComboRow(
            title="Place next display",
            subtitle="Used by both join modes",
            model=Gtk.StringList.new(_POSITIONS),
        )
        self._position_row.connect("notify::selected", self._on_position_selected)
        positions.add(self._position_row)
        page.add(positions)

        self._toast_overlay = Adw.ToastOverlay()
        self._toast_overlay.set_child(page)
        self._toast_overlay.set_vexpand(True)
        main_box.append(self._toast_overlay)

        self._status = Gtk.Label(label="Ready", xalign=0)
        self._status.set_margin_start(12)
        self._status.set_margin_end(12)
        self._status.set_margin_top(4)
        self._status.set_margin_bottom(4)
        self._status.add_css_class("dim-label")
        main_box.append(self._status)

    def _setup_actions(self) -> None:
        """Set up keyboard shortcuts."""
        action_detect = Gio.SimpleAction(name="detect")
        action_detect.connect("activate", lambda *_: self._detect())
        self.add_action(action_detect)

        app = self.get_application()
        app.set_accels_for_action("win.detect", ["<Control>r"])

    # ── Rendering ────────────────────────────────────────────────────

    def _render(self) -> None:
        """Reflect the current mode and join position in the widgets."""
        entries: list[MenuEntry] = render_menu(self._mode, self._position)
        self._inhibit = True
        try:
            for entry in entries:
                if entry.section == SECTION_MODE:
                    self._mode_checks[entry.key].set_active(entry.checked)
                elif entry.section == SECTION_POSITION and entry.checked:
                    self._position_row.set_selected(_POSITIONS.index(entry.key))
        finally:
            self._inhibit = False
        self._set_status(f"Current mode: {self._mode.label}")

    # ── Background work ──────────────────────────────────────────────

    def _detect(self) -> None:
        if self._jobs.start(self._switcher.current_mode, self._on_detected):
            self._set_status("Detecting…")

    def _on_detected(self, mode: Mode | None) -> None:
        self._mode = mode or Mode.UNKNOWN
        self._render()

    # ── Signal handlers ──────────────────────────────────────────────

    def _on_mode_toggled(self, check: Gtk.CheckButton, key: str) -> None:
        if self._inhibit or not check.get_active():
            return
        mode = Mode(key)
        if mode == self._mode:
            return
        position = self._position
        if self._jobs.start(lambda: self._switcher.switch(mode, position), self._on_switched):
            self._set_status(f"Switching to {mode.label}…")
        else:
            self._render()

    def _on_switched(self, result: SwitchResult | None) -> None:
        if result is None:
            self._toast("Switch failed, see the log for details.")
        elif result.applied:
            self._mode = result.mode
        else:
            self._toast(result.message)
        self._render()

    def _on_position_selected(self, row: Adw.ComboRow, pspec) -> None:
        if self._inhibit:
            return
        idx = row.get_selected()
        if idx == Gtk.INVALID_LIST_POSITION:
            return
        self._position = save_join_position(_POSITIONS[idx])
        log.info("Join position set to %s", self._position.value)

    def _on_notify(self, message: str) -> None:
        """Called from the worker thread by DisplaySwitcher."""
        show = getattr(self._app, "show_notification", None)
        if show is not None:
            GLib.idle_add(show, message)

    # ── Helpers ──────────────────────────────────────────────────────

    def _set_status(self, text: str) -> None:
        self._status.set_label(text)

    def _toast(self, message: str) -> None:
        toast = Adw.Toast(title=message, timeout=3)
        self._toast_overlay.add_toast(toast)
