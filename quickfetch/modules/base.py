#!/usr/bin/env python3
"""
Base module for all information modules.
"""

import subprocess
import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger("quickfetch.modules")

UNKNOWN = "Unknown"
COMMAND_TIMEOUT = 10


def strip_quotes(value: str) -> str:
    """Trim whitespace and the quotes gsettings wraps string values in."""
    return value.strip().strip("'\"")


class InfoModule:
    """Base class for all information modules."""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description

    def run(self) -> Dict[str, Any]:
        """Run every probe of the module and return the collected fields."""
        raise NotImplementedError("Subclasses must implement this method")

    def safe_run_command(self, command: List[str],
                         filter_func: Optional[Callable[[str], bool]] = None) -> Optional[str]:
        """
        Run a command safely, handling errors and filtering output.

        Args:
            command: Command to run as a list of strings
            filter_func: Function to filter lines (should return True to keep line)

        Returns:
            Command stdout, or None if the command is missing, fails or times out
        """
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
                timeout=COMMAND_TIMEOUT
            )
        except FileNotFoundError:
            logger.debug(f"Command not found: {command[0]}")
            return None
        except subprocess.TimeoutExpired:
            logger.debug(f"Command timed out after {COMMAND_TIMEOUT} seconds: {' '.join(command)}")
            return None
        except Exception as e:
            logger.debug(f"Failed to run command {' '.join(command)}: {str(e)}")
            return None

        if result.returncode != 0:
            logger.debug(f"Command {' '.join(command)} exited with {result.returncode}: {result.stderr.strip()}")
            return None

        output = result.stdout

        if filter_func:
            lines = output.splitlines()
            output = "\n".join(line for line in lines if filter_func(line))

        return output

    def safe_read_file(self, file_path: str,
                       filter_func: Optional[Callable[[str], bool]] = None) -> Optional[str]:
        """
        Read a file safely, handling errors and filtering output.

        Args:
            file_path: Path to the file
            filter_func: Function to filter lines (should return True to keep line)

        Returns:
            File content, or None if the file cannot be read
        """
        try:
            with open(file_path, 'r', errors="replace") as f:
                content = f.read()
        except FileNotFoundError:
            logger.debug(f"File not found: {file_path}")
            return None
        except PermissionError:
            logger.debug(f"Permission denied: {file_path}")
            return None
        except Exception as e:
            logger.debug(f"Failed to read file {file_path}: {str(e)}")
            return None

        if filter_func:
            lines = content.splitlines()
            content = "\n".join(line for line in lines if filter_func(line))

        return content

    def gsettings_get(self, schema: str, key: str) -> Optional[str]:
        """Read a GNOME setting, returning None when gsettings is unavailable or empty."""
        output = self.safe_run_command(["gsettings", "get", schema, key])
        if output is None:
            return None
        value = strip_quotes(output)
        return value or None
