"""
Error taxonomy for LeftWM configuration checking.

Validation findings (missing values, unresolved keys, chord conflicts,
workspace ID problems) are raised as ConfigError subclasses by the
normalizer and collected by the validator; they never abort a batch.
Fatal errors (unreadable or unparseable files) prevent a document from
existing at all.
"""

from enum import Enum
from typing import Any, Dict, Optional, Sequence


class ErrorCode(Enum):
    """
    Error codes for LeftWM configuration checking.

    Ranges:
    - 1000-1099: Keybind findings
    - 1100-1199: Document findings
    - 1200-1299: File system and format errors
    """

    # Keybind findings (1000-1099)
    MISSING_VALUE = 1000
    INVALID_VALUE_TYPE = 1001
    UNRESOLVED_MODIFIER = 1002
    UNRESOLVED_KEY = 1003
    CHORD_CONFLICT = 1004

    # Document findings (1100-1199)
    PARTIAL_WORKSPACE_IDS = 1100
    DUPLICATE_WORKSPACE_ID = 1101
    EMPTY_MOUSEKEY = 1102

    # File system and format errors (1200-1299)
    CONFIG_LOAD_FAILED = 1200
    CONFIG_SAVE_FAILED = 1201
    RON_SYNTAX_ERROR = 1202
    UNSUPPORTED_FORMAT = 1203


class Severity(str, Enum):
    """How a finding affects the outcome of a check."""
    ERROR = "error"
    WARNING = "warning"


class ConfigError(Exception):
    """Base exception for configuration errors."""

    severity = Severity.ERROR

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize configuration error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for locating the problem
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to a plain dictionary.

        Returns:
            Dictionary with code, severity, message, suggestion and context
        """
        result = {
            "code": self.code.value,
            "severity": self.severity.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


# Keybind findings

class MissingValueError(ConfigError):
    """A command that requires a value received an empty one."""

    def __init__(self, command: str):
        super().__init__(
            code=ErrorCode.MISSING_VALUE,
            message=f"Command {command} requires a value, but none was given",
            suggestion=f"Set `value` for the {command} keybind",
            context={"command": command}
        )
        self.command = command


class InvalidValueTypeError(ConfigError):
    """A command value failed to parse as the type the command requires."""

    def __init__(self, command: str, raw_value: str, expected_type: str):
        super().__init__(
            code=ErrorCode.INVALID_VALUE_TYPE,
            message=f"Invalid value `{raw_value}` for command {command}: expected {expected_type}",
            suggestion=f"Use a value of type {expected_type}",
            context={"command": command, "value": raw_value, "expected_type": expected_type}
        )
        self.command = command
        self.raw_value = raw_value
        self.expected_type = expected_type


class UnresolvedModifierError(ConfigError):
    """A modifier name has no symbol table entry."""

    def __init__(self, modifier: str):
        super().__init__(
            code=ErrorCode.UNRESOLVED_MODIFIER,
            message=f"Modifier `{modifier}` is not valid",
            suggestion="Use one of Shift, Control, Alt, Mod1, Mod3, Mod4, Mod5, Super, modkey or mousekey",
            context={"modifier": modifier}
        )
        self.modifier = modifier


class UnresolvedKeyError(ConfigError):
    """A key name has no symbol table entry."""

    def __init__(self, key: str):
        super().__init__(
            code=ErrorCode.UNRESOLVED_KEY,
            message=f"Key `{key}` is not valid",
            suggestion="Key names are X keysym names and are case-sensitive (e.g. Return, q, F1)",
            context={"key": key}
        )
        self.key = key


class ChordConflictError(ConfigError):
    """Two keybinds share the same modifier set and key."""

    def __init__(self, modifiers: Sequence[str], key: str, first_command: str, second_command: str):
        chord = "+".join(list(modifiers) + [key])
        super().__init__(
            code=ErrorCode.CHORD_CONFLICT,
            message=(
                f"Multiple commands bound to key combination {chord}: "
                f"{first_command} and {second_command}"
            ),
            suggestion="Change one of the keybindings to something else",
            context={
                "modifiers": list(modifiers),
                "key": key,
                "commands": [first_command, second_command],
            }
        )
        self.modifiers = list(modifiers)
        self.key = key
        self.first_command = first_command
        self.second_command = second_command


# Document findings

class PartialWorkspaceIdsError(ConfigError):
    """Some, but not all, workspaces declare an ID."""

    def __init__(self, declared: int, total: int):
        super().__init__(
            code=ErrorCode.PARTIAL_WORKSPACE_IDS,
            message=(
                f"Your config specifies an ID for some but not all workspaces ({declared} of {total}). "
                "This can lead to ID collisions and is not allowed. The default config will be used instead."
            ),
            suggestion="Give every workspace an ID, or remove all workspace IDs",
            context={"declared": declared, "total": total}
        )


class DuplicateWorkspaceIdError(ConfigError):
    """All workspaces declare an ID, but some IDs repeat."""

    def __init__(self, duplicates: Sequence[int]):
        ids = ", ".join(str(i) for i in duplicates)
        super().__init__(
            code=ErrorCode.DUPLICATE_WORKSPACE_ID,
            message=(
                f"Your config contains duplicate workspace IDs ({ids}). "
                "The default config will be used instead."
            ),
            suggestion="Please assign unique IDs to workspaces",
            context={"duplicates": list(duplicates)}
        )
        self.duplicates = list(duplicates)


class EmptyMousekeyWarning(ConfigError):
    """The mousekey is set, but to nothing."""

    severity = Severity.WARNING

    def __init__(self):
        super().__init__(
            code=ErrorCode.EMPTY_MOUSEKEY,
            message=(
                "Your mousekey is set to nothing, this will cause windows "
                "to move/resize with just a mouse press."
            ),
            suggestion="Set mousekey to a modifier such as \"Mod4\", or remove it to use the default"
        )


# Fatal errors

class ConfigLoadError(ConfigError):
    """Configuration loading error."""

    def __init__(self, file_path: str, reason: str):
        """
        Initialize configuration load error.

        Args:
            file_path: Path to configuration file
            reason: Reason for load failure
        """
        super().__init__(
            code=ErrorCode.CONFIG_LOAD_FAILED,
            message=f"Failed to load configuration from {file_path}: {reason}",
            suggestion="Check file syntax and permissions",
            context={"file_path": file_path, "reason": reason}
        )


class ConfigSaveError(ConfigError):
    """Configuration saving error."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(
            code=ErrorCode.CONFIG_SAVE_FAILED,
            message=f"Failed to save configuration to {file_path}: {reason}",
            suggestion="Check that the config directory is writable",
            context={"file_path": file_path, "reason": reason}
        )


class RonSyntaxError(ConfigError):
    """RON document could not be parsed."""

    def __init__(self, reason: str, line: int, column: int):
        super().__init__(
            code=ErrorCode.RON_SYNTAX_ERROR,
            message=f"{reason} at line {line}, column {column}",
            suggestion="Check for missing commas, brackets or quotes near the reported position",
            context={"line": line, "column": column}
        )
        self.reason = reason
        self.line = line
        self.column = column


class UnsupportedFormatError(ConfigError):
    """File extension does not name a supported serialization."""

    def __init__(self, file_path: str):
        super().__init__(
            code=ErrorCode.UNSUPPORTED_FORMAT,
            message=f"Unsupported or unknown config language: {file_path}",
            suggestion="Use a .ron file (or a legacy .toml file)",
            context={"file_path": file_path}
        )
