#!/usr/bin/env python3
"""
Report Generator for QuickFetch.
"""

import logging
from typing import Any, Dict, List

from ..modules.base import InfoModule, UNKNOWN
from ..modules.power import NO_BATTERY
from ..modules.system import NO_GPU
from .artwork import get_distro_logo

logger = logging.getLogger("quickfetch.report")

GIB = 1024 ** 3

# Bright red, green, yellow, blue, magenta, cyan and white, twice over
STRIP_COLORS = [
    "\x1b[91m", "\x1b[92m", "\x1b[93m", "\x1b[94m", "\x1b[95m", "\x1b[96m", "\x1b[97m",
    "\x1b[91m", "\x1b[92m", "\x1b[93m", "\x1b[94m", "\x1b[95m", "\x1b[96m", "\x1b[97m",
]
RESET = "\x1b[0m"


def format_gib(used: int, total: int) -> str:
    """Format a used/total byte pair as "1.50GiB / 8.00GiB"."""
    return f"{used / GIB:.2f}GiB / {total / GIB:.2f}GiB"


def capitalize(name: str) -> str:
    """Upper-case the first letter only, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def color_strip() -> str:
    """Return a row of colored blocks followed by a color reset."""
    return "".join(f"{color}█" for color in STRIP_COLORS) + RESET


class ReportGenerator:
    """Collects module results and renders the summary."""

    def __init__(self, modules: List[InfoModule]):
        self.modules = modules

    def collect(self) -> Dict[str, Any]:
        """Run each module and merge the results into one dictionary."""
        info = {}

        for module in self.modules:
            logger.debug(f"Running module: {module.name}")
            try:
                info.update(module.run())
            except Exception as e:
                logger.error(f"Error running module {module.name}: {str(e)}")

        return info

    def generate(self, info: Dict[str, Any], experimental: bool = False) -> str:
        """Render the collected information, with artwork if requested and available."""
        if experimental:
            logo = get_distro_logo(info.get("os", UNKNOWN))
            if logo is not None:
                return self.generate_with_artwork(info, logo)

        report = self.header_lines(info)
        report.extend(self.disk_lines(info))
        report.extend(self.connectivity_lines(info))
        report.extend(self.package_lines(info))
        report.append(color_strip())
        return "\n".join(report)

    def generate_with_artwork(self, info: Dict[str, Any], logo: str) -> str:
        report = [""]
        report.extend(logo.strip("\n").splitlines())
        report.append("")
        report.extend(self.header_lines(info))
        report.extend(self.connectivity_lines(info))
        report.extend(self.disk_lines(info))
        report.extend(self.package_lines(info))
        report.append("")
        report.append(color_strip())
        return "\n".join(report)

    def header_lines(self, info: Dict[str, Any]) -> List[str]:
        """Lines from the user through the system font."""
        cpu_name, cpu_cores = info.get("cpu", (UNKNOWN, 0))
        mem_total, mem_used = info.get("memory", (0, 0))
        swap_total, swap_used = info.get("swap", (0, 0))

        return [
            f"User: {info.get('user', UNKNOWN)}@{info.get('hostname', UNKNOWN)}",
            f"OS: {info.get('os', UNKNOWN)}",
            f"Kernel: {info.get('kernel', UNKNOWN)}",
            f"Architecture: {info.get('architecture', UNKNOWN)}",
            f"CPU: {cpu_name} ({cpu_cores} cores)",
            f"GPU: {info.get('gpu', NO_GPU)}",
            f"Memory: {format_gib(mem_used, mem_total)}",
            f"Swap: {format_gib(swap_used, swap_total)}",
            f"Uptime: {info.get('uptime', UNKNOWN)}",
            f"Resolution: {info.get('resolution', UNKNOWN)}",
            f"DE: {info.get('desktop_environment', UNKNOWN)}",
            f"WM: {info.get('window_manager', UNKNOWN)}",
            f"WM Theme: {info.get('wm_theme', UNKNOWN)}",
            f"Theme: {info.get('gtk_theme', UNKNOWN)}",
            f"Icons: {info.get('icon_theme', UNKNOWN)}",
            f"Terminal: {info.get('terminal', UNKNOWN)}",
            f"Terminal Font: {info.get('terminal_font', UNKNOWN)}",
            f"System Font: {info.get('system_font', UNKNOWN)}",
        ]

    def disk_lines(self, info: Dict[str, Any]) -> List[str]:
        return [
            f"Disk ({mount_point}): {format_gib(used, total)}"
            for mount_point, total, used in info.get("disks", [])
        ]

    def connectivity_lines(self, info: Dict[str, Any]) -> List[str]:
        return [
            f"Local IP: {info.get('local_ip', UNKNOWN)}",
            f"Battery: {info.get('battery', NO_BATTERY)}",
            f"Locale: {info.get('locale', UNKNOWN)}",
        ]

    def package_lines(self, info: Dict[str, Any]) -> List[str]:
        return [
            f"{capitalize(manager)}: {count} packages"
            for manager, count in info.get("packages", [])
        ]
