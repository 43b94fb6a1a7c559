#!/usr/bin/env python3
"""
LeftWM Config CLI

Command-line interface for creating, checking and editing the LeftWM
configuration file.
"""

import argparse
import logging
import os
import shutil
import subprocess
import sys
import tempfile
from pathlib import Path
from typing import Callable, Optional

from . import __version__
from . import formatters
from .config import ConfigLoader, ConfigValidator
from .environment import check_current_environment, get_leftwm_version
from .errors import ConfigError

logger = logging.getLogger(__name__)

REOPEN_PROMPT = "Do you want to reopen your editor? [Y/n] "
OVERWRITE_PROMPT = "A config file already exists, do you want to override it? [y/N] "


class LeftwmConfigCLI:
    """CLI for managing the LeftWM config file."""

    def __init__(self, loader: Optional[ConfigLoader] = None, input_func: Callable[[str], str] = input):
        """
        Initialize CLI.

        Args:
            loader: Config loader (XDG config directory by default)
            input_func: Used for yes/no prompts
        """
        self.loader = loader or ConfigLoader()
        self.input = input_func
        self.validator = ConfigValidator()

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description="a tool for managing your LeftWM config",
            prog="leftwm-config"
        )
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

        actions = parser.add_mutually_exclusive_group()
        actions.add_argument("-n", "--new", dest="command", action="store_const", const="new",
                             help="Generate a new config file")
        actions.add_argument("-e", "--editor", dest="command", action="store_const", const="editor",
                             help="Open the current config file in the default editor (default)")
        actions.add_argument("-t", "--tui", dest="command", action="store_const", const="tui",
                             help="Open the current config file in the TUI")
        actions.add_argument("-c", "--check", dest="command", action="store_const", const="check",
                             help="Check if the current config is valid")
        actions.add_argument("--migrate", dest="command", action="store_const", const="migrate",
                             help="Migrate an old .toml config to the RON format")

        parser.add_argument("-v", "--verbose", action="store_true", help="Output the received configuration")
        parser.add_argument("--file", type=Path, help="Use this config file instead of the default one")
        return parser

    def run(self, argv: Optional[list] = None) -> int:
        """Run CLI."""
        args = self.build_parser().parse_args(argv)

        if args.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        cmd_map = {
            "new": self.cmd_new,
            "editor": self.cmd_editor,
            "tui": self.cmd_tui,
            "check": self.cmd_check,
            "migrate": self.cmd_migrate,
        }
        handler = cmd_map[args.command or "editor"]

        try:
            return handler(args)
        except KeyboardInterrupt:
            print("\nInterrupted")
            return 130
        except ConfigError as e:
            formatters.print_error(e.message)
            if e.suggestion:
                logger.info(e.suggestion)
            return 1
        except (OSError, RuntimeError) as e:
            formatters.print_error(str(e))
            return 1

    def config_path(self, args) -> Path:
        if args.file is not None:
            formatters.print_step(f"Note: Using file {args.file}")
            return args.file
        return self.loader.resolve_path()

    def cmd_new(self, args) -> int:
        """Write a default config, asking before overwriting."""
        if self.loader.generate_new(self._confirm_overwrite, args.file):
            formatters.print_success("New config file written")
        return 0

    def _confirm_overwrite(self) -> bool:
        answer = self.input(OVERWRITE_PROMPT)
        return "y" in answer.lower()

    def cmd_check(self, args) -> int:
        """Load and validate the config, then check the environment."""
        return self.check(self.config_path(args), args.verbose)

    def check(self, path: Path, verbose: bool = False) -> int:
        """
        Print a check report for one config file.

        Args:
            path: Config file to check
            verbose: Also dump the loaded document

        Returns:
            1 on a fatal load error or any error-severity finding, else 0
        """
        for line in formatters.format_version(get_leftwm_version()):
            formatters.console.print(line)

        formatters.print_step("Loading configuration . . .")
        try:
            document = self.loader.load(path)
        except ConfigError as e:
            formatters.print_error(f"Configuration failed. Reason: {e.message}")
            return 1
        formatters.print_success("Configuration loaded OK")

        if verbose:
            formatters.console.print(formatters.format_document(document))

        formatters.print_step("Checking configuration . . .")
        result = self.validator.validate(document)
        if verbose:
            formatters.console.print(formatters.format_keybind_table(result, document))
        formatters.print_report(result)

        # Environment problems are reported but never change the exit code.
        formatters.print_step("Checking environment . . .")
        formatters.console.print(formatters.format_environment(check_current_environment()))

        return 0 if result.valid else 1

    def cmd_editor(self, args) -> int:
        """Edit a temporary copy of the config in $EDITOR until it checks out."""
        editor = os.environ.get("EDITOR")
        if not editor:
            formatters.print_error("EDITOR is not set")
            return 1

        path = self.config_path(args)
        fd, tmp_name = tempfile.mkstemp(prefix="leftwm-config-", suffix=path.suffix)
        os.close(fd)
        tmp_file = Path(tmp_name)

        try:
            shutil.copyfile(path, tmp_file)
            self._run_editor(editor, tmp_file)

            while self.check(tmp_file, args.verbose) != 0:
                answer = self.input(REOPEN_PROMPT).strip()
                if answer[:1] in ("n", "N"):
                    break
                self._run_editor(editor, tmp_file)

            shutil.copyfile(tmp_file, path)
        finally:
            tmp_file.unlink(missing_ok=True)

        return 0

    def _run_editor(self, editor: str, file: Path) -> None:
        completed = subprocess.run([editor, str(file)], check=False)
        if completed.returncode != 0:
            raise RuntimeError(f"Failed to run {editor}")

    def cmd_tui(self, args) -> int:
        """Open the interactive editor."""
        from .tui.app import ConfigEditorApp

        path = self.config_path(args)
        document = self.loader.load_or_default(path)
        app = ConfigEditorApp(document=document, loader=self.loader, path=path)
        app.run()
        return 0

    def cmd_migrate(self, args) -> int:
        """Convert config.toml to config.ron."""
        formatters.print_step("Migrating configuration . . .")
        target = self.loader.migrate(args.file)
        formatters.print_success(f"Wrote {target}")
        return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    cli = LeftwmConfigCLI()
    return cli.run(argv)


if __name__ == "__main__":
    sys.exit(main())
