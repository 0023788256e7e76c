#!/usr/bin/env python3
"""
Module initialization - imports all information modules and provides a function to get all module instances.
"""

from .base import InfoModule

from .system import SystemModule, HardwareInfoModule
from .desktop import DesktopModule, ThemeModule
from .storage import DiskUsageModule
from .network import NetworkModule
from .power import BatteryModule
from .packages import PackageManagementModule


def get_all_modules():
    """Return a list of all module instances."""
    return [
        # System modules
        SystemModule(),
        HardwareInfoModule(),

        # Desktop modules
        DesktopModule(),
        ThemeModule(),

        # Storage modules
        DiskUsageModule(),

        # Network modules
        NetworkModule(),

        # Power modules
        BatteryModule(),

        # Package modules
        PackageManagementModule()
    ]
