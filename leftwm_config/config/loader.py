"""
Configuration loader for LeftWM configuration files.

Loads and saves:
- config.ron (RON format, current)
- config.toml (TOML format, deprecated, read-only)

Files live under $XDG_CONFIG_HOME/leftwm/ unless an explicit path is
given.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Callable, Optional

from pydantic import ValidationError
from xdg.BaseDirectory import xdg_config_home

from ..document import ConfigDocument
from ..errors import ConfigError, ConfigLoadError, ConfigSaveError, UnsupportedFormatError
from . import ron
from .validator import workspace_ids_valid

logger = logging.getLogger(__name__)

CONFIG_NAME = "config"

HEADER = r"""//  _        ___                                      ___ _
// | |      / __)_                                   / __|_)
// | | ____| |__| |_ _ _ _ ____      ____ ___  ____ | |__ _  ____    ____ ___  ____
// | |/ _  )  __)  _) | | |    \    / ___) _ \|  _ \|  __) |/ _  |  / ___) _ \|  _ \
// | ( (/ /| |  | |_| | | | | | |  ( (__| |_| | | | | |  | ( ( | |_| |  | |_| | | | |
// |_|\____)_|   \___)____|_|_|_|   \____)___/|_| |_|_|  |_|\_|| (_)_|   \___/|_| |_|
// A WindowManager for Adventurers                         (____/
// For info about configuration please visit https://github.com/leftwm/leftwm/wiki
"""

TOML_DEPRECATION = (
    "TOML as config format is about to be deprecated. "
    "Please consider migrating to RON manually or by using `leftwm-config --migrate`."
)


def default_config_dir() -> Path:
    """Return $XDG_CONFIG_HOME/leftwm."""
    return Path(xdg_config_home) / "leftwm"


class ConfigLoader:
    """Loads and saves LeftWM configuration documents."""

    def __init__(self, config_dir: Optional[Path] = None, search_path: Optional[str] = None):
        """
        Initialize configuration loader.

        Args:
            config_dir: Path to LeftWM configuration directory
                (~/.config/leftwm/ by default)
            search_path: Search path used when building default documents;
                defaults to $PATH
        """
        self.config_dir = config_dir or default_config_dir()
        self.ron_path = self.config_dir / f"{CONFIG_NAME}.ron"
        self.toml_path = self.config_dir / f"{CONFIG_NAME}.toml"
        self.search_path = search_path

    def default_document(self) -> ConfigDocument:
        return ConfigDocument.default(self.search_path)

    def resolve_path(self) -> Path:
        """
        Find the configuration file to use.

        Prefers config.ron, then the legacy config.toml. When neither
        exists, a default config.ron is written and returned.

        Returns:
            Path to an existing configuration file

        Raises:
            ConfigSaveError: If the default file cannot be written
        """
        if self.ron_path.exists():
            logger.debug(f"Using config file {self.ron_path}")
            return self.ron_path
        if self.toml_path.exists():
            logger.warning(TOML_DEPRECATION)
            return self.toml_path

        logger.info(f"No config file found, writing defaults to {self.ron_path}")
        self.save(self.default_document(), self.ron_path)
        return self.ron_path

    def load(self, path: Optional[Path] = None) -> ConfigDocument:
        """
        Load a configuration document.

        Args:
            path: File to load; resolved with resolve_path() when omitted

        Returns:
            Parsed ConfigDocument; absent keys take their default values

        Raises:
            ConfigLoadError: If the file cannot be read or does not
                describe a valid document
            RonSyntaxError: If a RON file is syntactically invalid
        """
        path = Path(path) if path is not None else self.resolve_path()
        logger.debug(f"Loading config from {path}")

        try:
            contents = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigLoadError(str(path), e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise ConfigLoadError(str(path), f"not valid UTF-8: {e.reason} at byte {e.start}") from e

        data = self.parse(contents, path)
        if not isinstance(data, dict):
            raise ConfigLoadError(str(path), "top level value is not a struct")

        try:
            return ConfigDocument.model_validate(data)
        except ValidationError as e:
            raise ConfigLoadError(str(path), _describe_validation_error(e)) from e

    def parse(self, contents: str, path: Path) -> Any:
        """
        Decode file contents by extension.

        `.ron` files are RON; anything else is treated as legacy TOML.
        """
        if path.suffix == ".ron":
            return ron.loads(contents)

        try:
            return tomllib.loads(contents)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(str(path), str(e)) from e

    def load_or_default(self, path: Optional[Path] = None) -> ConfigDocument:
        """
        Load a document, substituting the default on failure.

        The built-in default replaces the loaded document when loading
        fails outright or when its workspace IDs are inconsistent.

        Args:
            path: File to load; resolved with resolve_path() when omitted

        Returns:
            Loaded or default ConfigDocument
        """
        try:
            document = self.load(path)
        except ConfigError as e:
            logger.error(f"ERROR LOADING CONFIG: {e.message}")
            return self.default_document()

        if not workspace_ids_valid(document):
            logger.warning("Invalid workspace ID configuration. Falling back to default config.")
            return self.default_document()

        return document

    def save(self, document: ConfigDocument, path: Optional[Path] = None) -> Path:
        """
        Write a document as RON, prefixed by the header banner.

        Args:
            document: Document to write
            path: Target file (config.ron by default)

        Returns:
            Path that was written

        Raises:
            ConfigSaveError: If the file cannot be written
        """
        path = Path(path) if path is not None else self.ron_path
        text = HEADER + serialize(document)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise ConfigSaveError(str(path), e.strerror or str(e)) from e

        logger.debug(f"Saved config to {path}")
        return path

    def generate_new(self, confirm: Callable[[], bool], path: Optional[Path] = None) -> bool:
        """
        Write a fresh default config.ron.

        Args:
            confirm: Asked before overwriting an existing file
            path: Target file (config.ron by default)

        Returns:
            True if a file was written
        """
        path = Path(path) if path is not None else self.ron_path
        if path.exists() and not confirm():
            logger.info("Keeping existing config file")
            return False

        self.save(self.default_document(), path)
        return True

    def migrate(self, toml_path: Optional[Path] = None, ron_path: Optional[Path] = None) -> Path:
        """
        Convert a legacy TOML config into RON.

        Args:
            toml_path: Source file (config.toml by default)
            ron_path: Target file (config.ron by default)

        Returns:
            Path of the written RON file

        Raises:
            ConfigLoadError: If the TOML file cannot be loaded
            UnsupportedFormatError: If the source is not a TOML file
        """
        toml_path = Path(toml_path) if toml_path is not None else self.toml_path
        ron_path = Path(ron_path) if ron_path is not None else self.ron_path

        if toml_path.suffix != ".toml":
            raise UnsupportedFormatError(str(toml_path))

        document = self.load(toml_path)
        logger.info(f"Migrating {toml_path} to {ron_path}")
        return self.save(document, ron_path)


def serialize(document: ConfigDocument) -> str:
    """Pretty RON text for a document, without the header banner."""
    return ron.dumps(document.model_dump(mode="python")) + "\n"


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
