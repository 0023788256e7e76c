#!/usr/bin/env python3
"""
System related information modules: OS, kernel, hardware and session.
"""

import os
import time
import socket
import getpass
import platform
import logging
from typing import Any, Dict, Tuple

import psutil

from .base import InfoModule, UNKNOWN

logger = logging.getLogger("quickfetch.modules.system")

NO_GPU = "No GPU found"


class SystemModule(InfoModule):
    """Module for operating system, kernel and session information."""

    def __init__(self):
        super().__init__(
            "system",
            "Operating System & Session"
        )

    def run(self) -> Dict[str, Any]:
        return {
            "os": self.get_os_info(),
            "kernel": self.get_kernel_info(),
            "architecture": self.get_arch_info(),
            "uptime": self.get_uptime_info(),
            "hostname": self.get_hostname_info(),
            "user": self.get_user_info(),
            "locale": self.get_locale_info(),
        }

    def get_os_info(self) -> str:
        system = platform.system()

        if system != "Linux":
            return f"{system} {platform.release() or UNKNOWN}"

        os_release = self.safe_read_file("/etc/os-release")
        if os_release is None:
            return "Linux"

        fields = {}
        for line in os_release.splitlines():
            if "=" in line:
                key, value = line.split("=", 1)
                fields[key.strip()] = value.strip().strip('"')

        return fields.get("PRETTY_NAME") or fields.get("NAME") or "Linux"

    def get_kernel_info(self) -> str:
        return platform.release() or UNKNOWN

    def get_arch_info(self) -> str:
        return platform.machine() or UNKNOWN

    def get_uptime_info(self) -> str:
        """Uptime as hours, minutes and seconds; hours are not folded into days."""
        try:
            uptime = int(time.time() - psutil.boot_time())
        except (psutil.Error, OSError) as e:
            logger.debug(f"Unable to read boot time: {str(e)}")
            return UNKNOWN

        uptime = max(uptime, 0)
        hours, remainder = divmod(uptime, 3600)
        minutes, seconds = divmod(remainder, 60)
        return f"{hours}h {minutes}m {seconds}s"

    def get_hostname_info(self) -> str:
        try:
            return socket.gethostname() or UNKNOWN
        except OSError as e:
            logger.debug(f"Unable to read hostname: {str(e)}")
            return UNKNOWN

    def get_user_info(self) -> str:
        try:
            return getpass.getuser()
        except (KeyError, OSError) as e:
            # getuser() falls back to the password database, which may not list the uid
            logger.debug(f"Unable to determine user: {str(e)}")
            return UNKNOWN

    def get_locale_info(self) -> str:
        return os.environ.get("LANG") or UNKNOWN


class HardwareInfoModule(InfoModule):
    """Module for CPU, GPU and memory information."""

    def __init__(self):
        super().__init__(
            "hardware_info",
            "Hardware Information"
        )

    def run(self) -> Dict[str, Any]:
        return {
            "cpu": self.get_cpu_info(),
            "gpu": self.get_gpu_info(),
            "memory": self.get_memory_info(),
            "swap": self.get_swap_info(),
        }

    def get_cpu_info(self) -> Tuple[str, int]:
        """Return the CPU brand string and the number of logical cores."""
        cpu_name = None

        cpu_info = self.safe_read_file("/proc/cpuinfo",
                                       filter_func=lambda line: line.startswith("model name"))
        if cpu_info:
            cpu_name = cpu_info.splitlines()[0].split(":", 1)[-1].strip()

        if not cpu_name:
            cpu_name = platform.processor() or UNKNOWN

        try:
            cores = psutil.cpu_count(logical=True) or 0
        except (psutil.Error, OSError) as e:
            logger.debug(f"Unable to count CPUs: {str(e)}")
            cores = 0

        return cpu_name, cores

    def get_gpu_info(self) -> str:
        lspci = self.safe_run_command(["lspci"])
        if lspci is None:
            return NO_GPU

        for line in lspci.splitlines():
            if "VGA" in line or "3D controller" in line:
                pos = line.find(": ")
                if pos != -1:
                    return line[pos + 2:].strip()

        return NO_GPU

    def get_memory_info(self) -> Tuple[int, int]:
        """Return (total, used) physical memory in bytes."""
        try:
            memory = psutil.virtual_memory()
        except (psutil.Error, OSError) as e:
            logger.debug(f"Unable to read memory statistics: {str(e)}")
            return 0, 0
        return memory.total, memory.used

    def get_swap_info(self) -> Tuple[int, int]:
        """Return (total, used) swap in bytes."""
        try:
            swap = psutil.swap_memory()
        except (psutil.Error, OSError) as e:
            logger.debug(f"Unable to read swap statistics: {str(e)}")
            return 0, 0
        return swap.total, swap.used
