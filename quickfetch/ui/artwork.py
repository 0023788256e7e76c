#!/usr/bin/env python3
"""
ASCII artwork for the experimental layout.
"""

from typing import Optional

ZORIN_LOGO = r"""
        ██████████
    ████████████████
  ████████████████████
████████████████████████
████████████████████████
████████████████████████
████████████████████████
  ████████████████████
    ████████████████
        ██████████
"""

UBUNTU_LOGO = r"""
           _
       ---(_)
   _/  ---  \
  (_) |   |
    \  --- _/
       ---(_)
"""

DEBIAN_LOGO = r"""
    _____
   /  __ \
  |  /    |
  |  \___-
  -_
    --_
"""

ARCH_LOGO = r"""
       /\
      /  \
     /\   \
    /      \
   /   ,,   \
  /   |  |  -\
 /_-''    ''-_\
"""

FEDORA_LOGO = r"""
      _____
     /   __)\
     |  /  \ \
  ___|  |__/ /
 / (_    _)_/
/ /  |  |
\ \__/  |
 \(_____/
"""

# Checked in order against the OS name, first substring match wins
DISTRO_LOGOS = [
    ("Zorin", ZORIN_LOGO),
    ("Ubuntu", UBUNTU_LOGO),
    ("Debian", DEBIAN_LOGO),
    ("Arch", ARCH_LOGO),
    ("Fedora", FEDORA_LOGO),
]


def get_distro_logo(distro_name: str) -> Optional[str]:
    """Return the artwork for a distribution, or None if there is none."""
    for needle, logo in DISTRO_LOGOS:
        if needle in distro_name:
            return logo
    return None
