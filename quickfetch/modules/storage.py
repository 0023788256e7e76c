#!/usr/bin/env python3
"""
Storage related information modules.
"""

import logging
from typing import Any, Dict, List, Tuple

import psutil

from .base import InfoModule

logger = logging.getLogger("quickfetch.modules.storage")

# Snap packages are loop-mounted squashfs images, one mount each
SKIPPED_MOUNT_PREFIXES = ("/snap",)


class DiskUsageModule(InfoModule):
    """Module for per-mount disk usage."""

    def __init__(self):
        super().__init__(
            "disk_usage",
            "Disk Usage"
        )

    def run(self) -> Dict[str, Any]:
        return {"disks": self.get_disk_usage_info()}

    def get_disk_usage_info(self) -> List[Tuple[str, int, int]]:
        """
        Return (mount point, total bytes, used bytes) for each mounted partition.

        Used space is total minus the space available to unprivileged users,
        so blocks reserved for root count as used.
        """
        try:
            partitions = psutil.disk_partitions(all=False)
        except (psutil.Error, OSError) as e:
            logger.debug(f"Unable to list partitions: {str(e)}")
            return []

        disk_usage = []
        for partition in partitions:
            mount_point = partition.mountpoint
            if mount_point.startswith(SKIPPED_MOUNT_PREFIXES):
                continue

            try:
                usage = psutil.disk_usage(mount_point)
            except (PermissionError, OSError) as e:
                logger.debug(f"Unable to stat {mount_point}: {str(e)}")
                continue

            disk_usage.append((mount_point, usage.total, usage.total - usage.free))

        return disk_usage
