#!/usr/bin/env python3
"""
Power related information modules.
"""

import logging
from typing import Any, Dict, Optional

import psutil

from .base import InfoModule, UNKNOWN

logger = logging.getLogger("quickfetch.modules.power")

NO_BATTERY = "No Battery"
UPOWER_BATTERY_DEVICE = "/org/freedesktop/UPower/devices/battery_BAT0"


class BatteryModule(InfoModule):
    """Module for battery charge and state."""

    def __init__(self):
        super().__init__(
            "battery",
            "Battery"
        )

    def run(self) -> Dict[str, Any]:
        return {"battery": self.get_battery_info()}

    def get_battery_info(self) -> str:
        """Return the battery as "<percentage> [<state>]", e.g. "87% [discharging]"."""
        return self._upower_battery() or self._sensor_battery() or NO_BATTERY

    def _upower_battery(self) -> Optional[str]:
        output = self.safe_run_command(["upower", "-i", UPOWER_BATTERY_DEVICE])
        if output is None:
            return None

        percentage = None
        state = UNKNOWN
        for line in output.splitlines():
            if "percentage:" in line:
                percentage = line.split(":", 1)[1].strip() or UNKNOWN
            if "state:" in line:
                state = line.split(":", 1)[1].strip() or UNKNOWN

        # upower prints an empty record for a missing device
        if percentage is None:
            return None

        return f"{percentage} [{state}]"

    def _sensor_battery(self) -> Optional[str]:
        try:
            battery = psutil.sensors_battery()
        except (psutil.Error, OSError, AttributeError) as e:
            logger.debug(f"Unable to read battery sensor: {str(e)}")
            return None

        if battery is None:
            return None

        if battery.power_plugged:
            state = "fully-charged" if battery.percent >= 100 else "charging"
        elif battery.power_plugged is None:
            state = UNKNOWN
        else:
            state = "discharging"

        return f"{battery.percent:.0f}% [{state}]"
