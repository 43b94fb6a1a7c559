"""TUI interaction tests using the Textual Pilot API.

- Saving from the home screen
- Toggling a boolean setting
- Deleting a keybind from the keybind screen
"""

import pytest

from leftwm_config.tui.app import ConfigEditorApp
from leftwm_config.tui.fields import EditableField
from leftwm_config.tui.screens import HomeScreen, KeybindScreen


@pytest.fixture
def app(loader, default_document):
    return ConfigEditorApp(document=default_document, loader=loader, path=loader.ron_path)


@pytest.mark.asyncio
async def test_app_opens_home_screen(app):
    async with app.run_test() as pilot:
        await pilot.pause()
        assert isinstance(app.screen, HomeScreen)
        assert not app.dirty


@pytest.mark.asyncio
async def test_save_writes_document(app, loader):
    async with app.run_test() as pilot:
        await pilot.press("ctrl+s")
        await pilot.pause()

    assert loader.load(loader.ron_path) == app.document


@pytest.mark.asyncio
async def test_toggle_marks_dirty(app):
    row = list(EditableField).index(EditableField.DISABLE_CURRENT_TAG_SWAP)

    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press(*(["down"] * row), "enter")
        await pilot.pause()

        assert app.document.disable_current_tag_swap is True
        assert app.dirty

        await pilot.press("ctrl+s")
        await pilot.pause()
        assert not app.dirty


@pytest.mark.asyncio
async def test_delete_keybind(app):
    count = len(app.document.keybind)

    async with app.run_test() as pilot:
        await pilot.pause()
        await pilot.press("k")
        await pilot.pause()
        assert isinstance(app.screen, KeybindScreen)

        await pilot.press("d")
        await pilot.pause()

        assert len(app.document.keybind) == count - 1
        assert app.dirty


def test_toml_documents_save_as_ron(loader, default_document):
    app = ConfigEditorApp(document=default_document, loader=loader, path=loader.toml_path)
    assert app.save_path() == loader.ron_path
