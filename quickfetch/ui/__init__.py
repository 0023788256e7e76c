#!/usr/bin/env python3
"""
UI module initialization for QuickFetch.
"""

from .report import ReportGenerator
from .artwork import get_distro_logo
