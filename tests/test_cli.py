"""
CLI tests: check, new, migrate and the editor loop.
"""

import subprocess
from pathlib import Path

import pytest

from leftwm_config import cli as cli_module
from leftwm_config.cli import OVERWRITE_PROMPT, REOPEN_PROMPT, LeftwmConfigCLI
from leftwm_config.environment import EnvironmentReport, EnvironmentStatus, VersionInfo

VALID_CONFIG = '(keybind: [(command: CloseWindow, modifier: ["modkey"], key: "q")])'
CONFLICTING_CONFIG = (
    "(keybind: ["
    '(command: CloseWindow, modifier: ["modkey", "Shift"], key: "q"), '
    '(command: SoftReload, modifier: ["Shift", "modkey"], key: "q")'
    "])"
)


class Prompts:
    """Scripted answers for yes/no prompts."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []

    def __call__(self, prompt):
        self.asked.append(prompt)
        return self.answers.pop(0)


@pytest.fixture(autouse=True)
def quiet_probes(monkeypatch):
    """Keep the check command away from the host's leftwm and session."""
    monkeypatch.setattr(cli_module, "get_leftwm_version", lambda: VersionInfo("0.5.1", "abc123"))
    monkeypatch.setattr(
        cli_module,
        "check_current_environment",
        lambda: EnvironmentReport(EnvironmentStatus.ERROR, "no session", None, False),
    )


@pytest.fixture
def write_config(temp_config_dir):
    def _write(text, name="config.ron"):
        temp_config_dir.mkdir(parents=True, exist_ok=True)
        path = temp_config_dir / name
        path.write_text(text)
        return path
    return _write


class TestCheck:
    """Test --check exit codes and report."""

    def test_valid_config(self, loader, write_config, capsys):
        path = write_config(VALID_CONFIG)

        code = LeftwmConfigCLI(loader).run(["--check", "--file", str(path)])

        out = capsys.readouterr().out
        assert code == 0
        assert "LeftWM version: 0.5.1" in out
        assert "Configuration loaded OK" in out
        assert "configuration is valid" in out

    def test_environment_problems_do_not_fail(self, loader, write_config, capsys):
        path = write_config(VALID_CONFIG)

        assert LeftwmConfigCLI(loader).run(["-c", "--file", str(path)]) == 0
        assert "no session" in capsys.readouterr().out

    def test_conflict_fails(self, loader, write_config, capsys):
        path = write_config(CONFLICTING_CONFIG)

        code = LeftwmConfigCLI(loader).run(["--check", "--file", str(path)])

        out = capsys.readouterr().out
        assert code == 1
        assert "FAIL" in out
        assert "CloseWindow" in out

    def test_syntax_error_fails(self, loader, write_config, capsys):
        path = write_config("(keybind: [")

        assert LeftwmConfigCLI(loader).run(["--check", "--file", str(path)]) == 1
        assert "Configuration failed" in capsys.readouterr().out

    def test_warning_only_passes(self, loader, write_config):
        path = write_config('(mousekey: "")')

        assert LeftwmConfigCLI(loader).run(["--check", "--file", str(path)]) == 0

    def test_default_path_is_created(self, loader):
        assert LeftwmConfigCLI(loader).run(["--check"]) == 0
        assert loader.ron_path.exists()

    def test_verbose_dump(self, loader, write_config, capsys):
        path = write_config(VALID_CONFIG)

        assert LeftwmConfigCLI(loader).check(path, verbose=True) == 0

        out = capsys.readouterr().out
        assert "Loaded configuration" in out
        assert "Keybinds" in out


class TestNew:
    """Test --new."""

    def test_writes_new_file(self, loader):
        prompts = Prompts()

        assert LeftwmConfigCLI(loader, prompts).run(["--new"]) == 0
        assert loader.ron_path.exists()
        assert prompts.asked == []

    @pytest.mark.parametrize("answer,overwritten", [("y", True), ("Yes", True), ("n", False), ("", False)])
    def test_overwrite_prompt(self, loader, write_config, answer, overwritten):
        write_config('(modkey: "Mod1")')
        prompts = Prompts(answer)

        assert LeftwmConfigCLI(loader, prompts).run(["-n"]) == 0

        assert prompts.asked == [OVERWRITE_PROMPT]
        assert (loader.ron_path.read_text() != '(modkey: "Mod1")') is overwritten


class TestMigrate:
    """Test --migrate."""

    def test_migrates_toml(self, loader, write_config, sample_toml):
        write_config(sample_toml, "config.toml")

        assert LeftwmConfigCLI(loader).run(["--migrate"]) == 0
        assert loader.load(loader.ron_path).tags == ["1", "2", "3"]

    def test_rejects_other_formats(self, loader, write_config, capsys):
        path = write_config("modkey: Mod4", "config.yaml")

        assert LeftwmConfigCLI(loader).run(["--migrate", "--file", str(path)]) == 1
        assert "Unsupported" in capsys.readouterr().out

    def test_missing_toml(self, loader):
        assert LeftwmConfigCLI(loader).run(["--migrate"]) == 1


class TestArguments:
    """Test argument parsing."""

    def test_actions_are_exclusive(self, loader):
        with pytest.raises(SystemExit):
            LeftwmConfigCLI(loader).run(["--new", "--check"])

    def test_editor_is_default(self, loader, monkeypatch, capsys):
        monkeypatch.delenv("EDITOR", raising=False)

        assert LeftwmConfigCLI(loader).run([]) == 1
        assert "EDITOR is not set" in capsys.readouterr().out


class FakeEditor:
    """Stands in for $EDITOR, writing one scripted text per invocation."""

    def __init__(self, *texts, returncode=0):
        self.texts = list(texts)
        self.returncode = returncode
        self.files = []

    def __call__(self, args, **kwargs):
        editor, file = args
        self.files.append(file)
        if self.texts:
            with open(file, "w") as f:
                f.write(self.texts.pop(0))
        return subprocess.CompletedProcess(args, self.returncode)


class TestEditor:
    """Test the edit, check, reopen loop."""

    @pytest.fixture(autouse=True)
    def editor_env(self, monkeypatch):
        monkeypatch.setenv("EDITOR", "fake-editor")

    def test_valid_edit_is_copied_back(self, loader, write_config, monkeypatch):
        path = write_config(VALID_CONFIG)
        editor = FakeEditor('(modkey: "Mod1")')
        monkeypatch.setattr(cli_module.subprocess, "run", editor)
        prompts = Prompts()

        assert LeftwmConfigCLI(loader, prompts).run(["--file", str(path)]) == 0

        assert path.read_text() == '(modkey: "Mod1")'
        assert prompts.asked == []
        assert editor.files[0] != str(path)
        assert editor.files[0].endswith(".ron")

    def test_reopens_until_valid(self, loader, write_config, monkeypatch):
        path = write_config(VALID_CONFIG)
        editor = FakeEditor(CONFLICTING_CONFIG, '(modkey: "Mod1")')
        monkeypatch.setattr(cli_module.subprocess, "run", editor)
        prompts = Prompts("")

        assert LeftwmConfigCLI(loader, prompts).run(["-e", "--file", str(path)]) == 0

        assert prompts.asked == [REOPEN_PROMPT]
        assert len(editor.files) == 2
        assert path.read_text() == '(modkey: "Mod1")'

    def test_declining_keeps_edit(self, loader, write_config, monkeypatch):
        path = write_config(VALID_CONFIG)
        monkeypatch.setattr(cli_module.subprocess, "run", FakeEditor(CONFLICTING_CONFIG))
        prompts = Prompts("n")

        assert LeftwmConfigCLI(loader, prompts).run(["--file", str(path)]) == 0

        assert path.read_text() == CONFLICTING_CONFIG

    def test_temporary_file_is_removed(self, loader, write_config, monkeypatch):
        path = write_config(VALID_CONFIG)
        editor = FakeEditor()
        monkeypatch.setattr(cli_module.subprocess, "run", editor)

        LeftwmConfigCLI(loader).run(["--file", str(path)])

        assert not Path(editor.files[0]).exists()

    def test_editor_failure(self, loader, write_config, monkeypatch, capsys):
        path = write_config(VALID_CONFIG)
        monkeypatch.setattr(cli_module.subprocess, "run", FakeEditor(returncode=1))

        assert LeftwmConfigCLI(loader).run(["--file", str(path)]) == 1
        assert "Failed to run fake-editor" in capsys.readouterr().out
        assert path.read_text() == VALID_CONFIG
