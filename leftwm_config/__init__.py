"""
LeftWM Config

Configuration editor and validator for the LeftWM window manager.
Reads config.ron (or legacy config.toml), checks keybinds and workspace
settings, and offers a terminal editor for the common settings.
"""

__version__ = "0.1.0"
__author__ = "leftwm-config contributors"
