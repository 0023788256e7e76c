#!/usr/bin/env python3
"""
Package management information modules.
"""

import logging
from typing import Any, Dict, List, Tuple

from .base import InfoModule

logger = logging.getLogger("quickfetch.modules.packages")

# (manager, command, filter for lines that are packages rather than headers)
PACKAGE_MANAGERS = [
    ("dpkg", ["dpkg-query", "-f", ".\\n", "-W"], None),
    ("apt", ["apt", "list", "--installed"],
     lambda line: not line.startswith("Listing")),
    ("rpm", ["rpm", "-qa"], None),
    ("pacman", ["pacman", "-Q"], None),
    ("dnf", ["dnf", "list", "installed"],
     lambda line: not line.startswith("Installed Packages") and not line.startswith("Last metadata")),
    ("snap", ["snap", "list"],
     lambda line: not line.startswith("Name ")),
    ("flatpak", ["flatpak", "list"], None),
]


class PackageManagementModule(InfoModule):
    """Module for installed package counts per package manager."""

    def __init__(self):
        super().__init__(
            "package_management",
            "Package Management"
        )

    def run(self) -> Dict[str, Any]:
        return {"packages": self.get_package_manager_info()}

    def get_package_manager_info(self) -> List[Tuple[str, int]]:
        """Return (manager, installed count) for every manager with at least one package."""
        installed_packages = []

        for manager, command, filter_func in PACKAGE_MANAGERS:
            output = self.safe_run_command(command, filter_func=filter_func)
            if output is None:
                continue

            count = sum(1 for line in output.splitlines() if line.strip())
            logger.debug(f"{manager}: {count} packages")
            if count > 0:
                installed_packages.append((manager, count))

        return installed_packages
