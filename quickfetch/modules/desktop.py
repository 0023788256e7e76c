#!/usr/bin/env python3
"""
Desktop related information modules: display, desktop environment, window
manager, theming and terminal.
"""

import os
from typing import Any, Dict

from .base import InfoModule, UNKNOWN, strip_quotes

# Checked in order, first substring match wins
DESKTOP_NAMES = [
    ("zorin", "Zorin"),
    ("gnome", "GNOME"),
    ("kde", "KDE Plasma"),
    ("xfce", "XFCE"),
    ("lxqt", "LXQt"),
    ("lxde", "LXDE"),
    ("mate", "MATE"),
    ("cinnamon", "Cinnamon"),
    ("budgie", "Budgie"),
    ("pantheon", "Pantheon"),
]

GNOME_INTERFACE = "org.gnome.desktop.interface"


def desktop_session() -> str:
    """Return the lowercased desktop session name, or an empty string."""
    session = os.environ.get("DESKTOP_SESSION") or os.environ.get("XDG_CURRENT_DESKTOP") or ""
    return session.lower()


class DesktopModule(InfoModule):
    """Module for display, desktop environment and window manager information."""

    def __init__(self):
        super().__init__(
            "desktop",
            "Display & Desktop Environment"
        )

    def run(self) -> Dict[str, Any]:
        return {
            "resolution": self.get_resolution(),
            "desktop_environment": self.get_desktop_environment(),
            "window_manager": self.get_window_manager(),
            "wm_theme": self.get_window_manager_theme(),
        }

    def get_resolution(self) -> str:
        xrandr = self.safe_run_command(["xrandr"])
        if xrandr:
            for line in xrandr.splitlines():
                if "*" in line:
                    tokens = line.split()
                    if tokens:
                        return tokens[0]

        xdpyinfo = self.safe_run_command(["xdpyinfo"])
        if xdpyinfo:
            for line in xdpyinfo.splitlines():
                if "dimensions:" in line:
                    tokens = line.split()
                    if len(tokens) > 1:
                        return tokens[1]

        return UNKNOWN

    def get_desktop_environment(self) -> str:
        session = desktop_session()
        if not session:
            return UNKNOWN

        for needle, name in DESKTOP_NAMES:
            if needle in session:
                return name

        return session[0].upper() + session[1:]

    def get_window_manager(self) -> str:
        session_type = os.environ.get("XDG_SESSION_TYPE", "").lower()

        if session_type == "wayland":
            return "Wayland"

        if session_type == "x11":
            wmctrl = self.safe_run_command(["wmctrl", "-m"])
            if wmctrl:
                for line in wmctrl.splitlines():
                    if "Name:" in line:
                        return line.split(":", 1)[1].strip() or UNKNOWN

        return UNKNOWN

    def get_window_manager_theme(self) -> str:
        session = desktop_session()

        if "gnome" in session or "zorin" in session:
            return self.gsettings_get("org.gnome.desktop.wm.preferences", "theme") or UNKNOWN

        if "kde" in session:
            output = self.safe_run_command(["kreadconfig5", "--group", "WM", "--key", "theme"])
            if output and output.strip():
                return output.strip()

        return UNKNOWN


class ThemeModule(InfoModule):
    """Module for GTK, icon and font theming and the terminal in use."""

    def __init__(self):
        super().__init__(
            "theme",
            "Theming & Terminal"
        )

    def run(self) -> Dict[str, Any]:
        return {
            "gtk_theme": self.get_gtk_theme(),
            "icon_theme": self.get_icon_theme(),
            "terminal": self.get_terminal(),
            "terminal_font": self.get_terminal_font(),
            "system_font": self.get_system_font(),
        }

    def get_gtk_theme(self) -> str:
        return self.gsettings_get(GNOME_INTERFACE, "gtk-theme") or UNKNOWN

    def get_icon_theme(self) -> str:
        return self.gsettings_get(GNOME_INTERFACE, "icon-theme") or UNKNOWN

    def get_terminal(self) -> str:
        for var in ("TERMINAL", "COLORTERM", "TERM"):
            value = os.environ.get(var)
            if value:
                return value
        return UNKNOWN

    def get_terminal_font(self) -> str:
        font = self.gsettings_get(GNOME_INTERFACE, "monospace-font-name")
        if font:
            return font

        # Konsole: read the font of the first listed profile
        profiles = self.safe_run_command(["konsole", "--list-profiles"])
        if profiles and profiles.strip():
            profile = profiles.splitlines()[0].strip()
            font = self.safe_run_command(["konsoleprofile", "Profile", profile, "-p", "Font"])
            if font and font.strip():
                return strip_quotes(font)

        return UNKNOWN

    def get_system_font(self) -> str:
        session = desktop_session()

        if "gnome" in session:
            return self.gsettings_get(GNOME_INTERFACE, "font-name") or UNKNOWN

        if "kde" in session:
            output = self.safe_run_command(["kreadconfig5", "--group", "General", "--key", "font"])
            if output and output.strip():
                return output.strip()

        return UNKNOWN
