"""
Configuration subsystem for LeftWM configuration files.

Modules:
- ron: Read and pretty-print Rusty Object Notation
- loader: Resolve, load, save and migrate config files
- validator: Check keybinds, workspace IDs and the mousekey
"""

from .loader import ConfigLoader
from .validator import ConfigValidator

__all__ = [
    "ConfigLoader",
    "ConfigValidator",
]
