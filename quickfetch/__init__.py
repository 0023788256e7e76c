#!/usr/bin/env python3
"""
QuickFetch

A small system information tool that prints a summary of the host (OS,
hardware, desktop, theming, network, battery and packages) to the terminal,
optionally next to distribution artwork.
"""

__version__ = "1.0.0"
