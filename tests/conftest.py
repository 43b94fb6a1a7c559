"""
Pytest configuration and fixtures for leftwm-config tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from leftwm_config.commands import BaseCommand
from leftwm_config.config.loader import ConfigLoader
from leftwm_config.document import ConfigDocument
from leftwm_config.models import Keybind


@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """Create temporary LeftWM configuration directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "leftwm"


@pytest.fixture
def search_path(tmp_path) -> str:
    """Search path with a fake alacritty and loginctl on it."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    for program in ("alacritty", "loginctl"):
        (bin_dir / program).touch()
    return str(bin_dir)


@pytest.fixture
def loader(temp_config_dir, search_path) -> ConfigLoader:
    """Config loader rooted in a temporary directory."""
    return ConfigLoader(config_dir=temp_config_dir, search_path=search_path)


@pytest.fixture
def default_document(search_path) -> ConfigDocument:
    """Built-in default document for a known search path."""
    return ConfigDocument.default(search_path)


def bind(command, value="", modifier=None, key="q") -> Keybind:
    return Keybind(command=command, value=value, modifier=modifier, key=key)


@pytest.fixture
def make_keybind():
    """Build a keybind; modifier defaults to none, key to q."""
    return bind


@pytest.fixture
def make_document():
    """Build a document holding exactly the given keybinds."""
    def _make(*keybinds, **settings) -> ConfigDocument:
        return ConfigDocument(keybind=list(keybinds), **settings)
    return _make


@pytest.fixture
def conflicting_keybinds():
    """Two commands bound to modkey+Shift+q."""
    return [
        bind(BaseCommand.CLOSE_WINDOW, modifier=["modkey", "Shift"], key="q"),
        bind(BaseCommand.SOFT_RELOAD, modifier=["modkey", "Shift"], key="q"),
    ]


@pytest.fixture
def sample_ron() -> str:
    """Hand-written RON config using a few of the optional syntax forms."""
    return """
// leftwm config
#![enable(implicit_some)]
(
    modkey: "Mod1",
    mousekey: Some("Mod4"),
    tags: ["web", "code", "chat"],
    max_window_width: 0.75,
    layouts: [MainAndVertStack, Monocle],
    layout_mode: Workspace,
    workspaces: [
        (x: 0, y: 0, width: 1920, height: 1080, id: Some(1)),
        (x: 1920, y: 0, width: 1920, height: 1080, id: 2),
    ],
    /* comments may appear anywhere */
    disable_current_tag_swap: true,
    keybind: [
        (command: Execute, value: "dmenu_run", modifier: ["modkey"], key: "p"),
        (command: GotoTag, value: "2", modifier: ["modkey"], key: "2"),
        (command: CloseWindow, value: "", modifier: ["modkey", "Shift"], key: "q"),
    ],
)
"""


@pytest.fixture
def sample_toml() -> str:
    """Legacy TOML config."""
    return """
modkey = "Mod4"
mousekey = "Mod4"
tags = ["1", "2", "3"]

[[workspaces]]
x = 0
y = 0
width = 1280
height = 720

[[keybind]]
command = "Execute"
value = "alacritty"
modifier = ["modkey", "Shift"]
key = "Return"

[[keybind]]
command = "MoveToTag"
value = "3"
modifier = ["modkey", "Shift"]
key = "3"
"""
