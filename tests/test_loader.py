"""
Configuration loader test suite.

Tests cover:
- Saving and reloading documents
- Config file resolution (RON, legacy TOML, generated default)
- Fallback to the default document
- Generating and migrating config files
"""

import pytest

from leftwm_config.config.loader import HEADER, ConfigLoader, serialize
from leftwm_config.document import ConfigDocument
from leftwm_config.errors import ConfigLoadError, RonSyntaxError, UnsupportedFormatError
from leftwm_config.models import Layout, LayoutMode, Workspace


class TestSaveAndLoad:
    """Test writing and reading back documents."""

    def test_default_document_reloads_equal(self, loader, default_document):
        path = loader.save(default_document)

        assert path == loader.ron_path
        assert loader.load(path) == default_document

    def test_saved_file_starts_with_header(self, loader, default_document):
        loader.save(default_document)

        text = loader.ron_path.read_text()
        assert text.startswith(HEADER)
        assert "#![enable(implicit_some)]" in text

    def test_modified_document_reloads_equal(self, loader, default_document):
        default_document.modkey = "Mod1"
        default_document.max_window_width = 0.5
        default_document.workspaces = [Workspace(x=0, y=0, width=800, height=600, id=1)]
        default_document.create_follows_cursor = True

        loader.save(default_document)

        assert loader.load(loader.ron_path) == default_document

    def test_absent_keys_take_defaults(self, loader, default_document):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text('(modkey: "Mod1")')

        document = loader.load(loader.ron_path)

        assert document.modkey == "Mod1"
        assert document.tags == default_document.tags
        assert document.layouts == default_document.layouts
        assert len(document.keybind) == len(default_document.keybind)

    def test_sample_ron(self, loader, sample_ron):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text(sample_ron)

        document = loader.load(loader.ron_path)

        assert document.modkey == "Mod1"
        assert document.mousekey == "Mod4"
        assert document.layouts == [Layout.MAIN_AND_VERT_STACK, Layout.MONOCLE]
        assert document.layout_mode == LayoutMode.WORKSPACE
        assert document.workspace_ids() == [1, 2]
        assert document.disable_current_tag_swap is True
        assert [k.command.value for k in document.keybind] == ["Execute", "GotoTag", "CloseWindow"]

    def test_sample_toml(self, loader, sample_toml):
        loader.config_dir.mkdir(parents=True)
        loader.toml_path.write_text(sample_toml)

        document = loader.load(loader.toml_path)

        assert document.tags == ["1", "2", "3"]
        assert document.workspace_ids() == [None]
        assert document.keybind[1].value == "3"

    def test_unknown_keys_are_ignored(self, loader):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text('(layout_definitions: [(name: "Custom")], modkey: "Mod1")')

        assert loader.load(loader.ron_path).modkey == "Mod1"

    def test_serialize_has_no_header(self, default_document):
        text = serialize(default_document)

        assert text.startswith("#![enable(implicit_some)]")
        assert text.endswith(")\n")


class TestLoadErrors:
    """Test fatal load failures."""

    def test_missing_file(self, loader, temp_config_dir):
        with pytest.raises(ConfigLoadError):
            loader.load(temp_config_dir / "absent.ron")

    def test_ron_syntax_error(self, loader):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text("(modkey: ")

        with pytest.raises(RonSyntaxError):
            loader.load(loader.ron_path)

    def test_toml_syntax_error(self, loader):
        loader.config_dir.mkdir(parents=True)
        loader.toml_path.write_text("modkey = ")

        with pytest.raises(ConfigLoadError):
            loader.load(loader.toml_path)

    def test_wrong_field_type(self, loader):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text("(tags: 5)")

        with pytest.raises(ConfigLoadError) as exc_info:
            loader.load(loader.ron_path)

        assert "tags" in exc_info.value.message

    def test_top_level_not_a_struct(self, loader):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text("[1, 2]")

        with pytest.raises(ConfigLoadError):
            loader.load(loader.ron_path)

    def test_invalid_utf8(self, loader):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_bytes(b"(modkey: \"\xff\xfe\")")

        with pytest.raises(ConfigLoadError) as exc_info:
            loader.load(loader.ron_path)

        assert "UTF-8" in exc_info.value.message


class TestResolvePath:
    """Test config file discovery."""

    def test_creates_default_when_absent(self, loader, default_document):
        path = loader.resolve_path()

        assert path == loader.ron_path
        assert path.exists()
        assert loader.load(path) == default_document

    def test_prefers_ron(self, loader, sample_ron, sample_toml):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text(sample_ron)
        loader.toml_path.write_text(sample_toml)

        assert loader.resolve_path() == loader.ron_path

    def test_falls_back_to_toml(self, loader, sample_toml, caplog):
        loader.config_dir.mkdir(parents=True)
        loader.toml_path.write_text(sample_toml)

        assert loader.resolve_path() == loader.toml_path
        assert "deprecated" in caplog.text
        assert not loader.ron_path.exists()

    def test_load_without_path_resolves(self, loader, default_document):
        assert loader.load() == default_document


class TestLoadOrDefault:
    """Test fallback to the built-in default."""

    def test_bad_syntax_gives_default(self, loader, default_document):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text("(modkey: ")

        assert loader.load_or_default(loader.ron_path) == default_document

    def test_invalid_utf8_gives_default(self, loader, default_document):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_bytes(b"\xff\xfe")

        assert loader.load_or_default(loader.ron_path) == default_document

    def test_duplicate_workspace_ids_give_default(self, loader, default_document):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text(
            '(modkey: "Mod1", workspaces: [(x: 0, y: 0, width: 1, height: 1, id: 1),'
            " (x: 1, y: 0, width: 1, height: 1, id: 1)])"
        )

        assert loader.load_or_default(loader.ron_path) == default_document

    def test_partial_workspace_ids_give_default(self, loader, default_document):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text(
            "(workspaces: [(x: 0, y: 0, width: 1, height: 1, id: 1), (x: 1, y: 0, width: 1, height: 1)])"
        )

        assert loader.load_or_default(loader.ron_path) == default_document

    def test_valid_document_is_kept(self, loader, sample_ron):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text(sample_ron)

        assert loader.load_or_default(loader.ron_path).modkey == "Mod1"


class TestGenerateNew:
    """Test writing a fresh default config."""

    def test_writes_when_absent(self, loader):
        asked = []

        assert loader.generate_new(lambda: asked.append(True) or False)
        assert loader.ron_path.exists()
        assert asked == []

    def test_keeps_existing_without_confirmation(self, loader):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text('(modkey: "Mod1")')

        assert not loader.generate_new(lambda: False)
        assert loader.ron_path.read_text() == '(modkey: "Mod1")'

    def test_overwrites_with_confirmation(self, loader, default_document):
        loader.config_dir.mkdir(parents=True)
        loader.ron_path.write_text('(modkey: "Mod1")')

        assert loader.generate_new(lambda: True)
        assert loader.load(loader.ron_path) == default_document


class TestMigrate:
    """Test TOML to RON migration."""

    def test_migrate_toml(self, loader, sample_toml):
        loader.config_dir.mkdir(parents=True)
        loader.toml_path.write_text(sample_toml)

        path = loader.migrate()

        assert path == loader.ron_path
        assert loader.load(loader.ron_path) == loader.load(loader.toml_path)

    def test_migrate_rejects_non_toml(self, loader, temp_config_dir):
        with pytest.raises(UnsupportedFormatError):
            loader.migrate(toml_path=temp_config_dir / "config.yaml")

    def test_migrate_missing_source(self, loader):
        with pytest.raises(ConfigLoadError):
            loader.migrate()


class TestDefaultDocument:
    """Test the default document as seen through the loader."""

    def test_loader_default_uses_search_path(self, loader):
        document = loader.default_document()
        assert document.keybind[1].value == "alacritty"

    def test_default_config_dir(self):
        loader = ConfigLoader()
        assert loader.ron_path.name == "config.ron"
        assert loader.config_dir.name == "leftwm"

    def test_document_defaults_match(self):
        assert ConfigDocument().tags == ConfigDocument.default().tags
