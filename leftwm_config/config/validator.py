"""
Configuration validator for LeftWM configurations.

Provides:
- Keybind checks: command values, key and modifier names
- Chord conflict detection across the whole keybind list
- Document checks: workspace ID consistency, mousekey sanity

The validator only reports. It never raises on a finding and never
replaces the document it was given.
"""

import logging
from collections import Counter
from typing import Dict, List

from ..document import ConfigDocument
from ..errors import (
    ChordConflictError,
    ConfigError,
    DuplicateWorkspaceIdError,
    EmptyMousekeyWarning,
    PartialWorkspaceIdsError,
    UnresolvedKeyError,
    UnresolvedModifierError,
)
from ..keybind import KeybindNormalizer, KeyChord
from ..keysyms import into_keysym, into_mod, is_placeholder
from ..models import Keybind, ValidationFinding, ValidationResult, modifier_is_empty

logger = logging.getLogger(__name__)


class ConfigValidator:
    """Validates LeftWM configuration documents."""

    def validate(self, document: ConfigDocument) -> ValidationResult:
        """
        Run every check against a document.

        Args:
            document: Loaded configuration document

        Returns:
            ValidationResult holding all findings and the bindings that
            normalized cleanly
        """
        result = ValidationResult()
        self.validate_keybinds(document, result)
        result.findings.extend(self.check_workspace_ids(document))
        result.findings.extend(self.check_mousekey(document))

        logger.debug(
            f"Validation finished: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s), {len(result.bindings)} binding(s) normalized"
        )
        return result

    def validate_keybinds(self, document: ConfigDocument, result: ValidationResult) -> None:
        """
        Normalize and check every keybind, then look for chord conflicts.

        Args:
            document: Document owning the keybinds
            result: Result to append findings and bindings to
        """
        normalizer = KeybindNormalizer(document)
        seen: Dict[KeyChord, Keybind] = {}

        for index, keybind in enumerate(document.keybind):
            logger.debug(f"Checking keybind {keybind.describe()}")

            try:
                result.bindings.append(normalizer.normalize(keybind))
            except ConfigError as e:
                result.findings.append(ValidationFinding.from_error(e, keybind, index))

            for modifier in keybind.modifiers():
                if is_placeholder(modifier):
                    continue
                if into_mod(modifier) is None:
                    result.findings.append(
                        ValidationFinding.from_error(UnresolvedModifierError(modifier), keybind, index)
                    )

            if into_keysym(keybind.key) is None:
                result.findings.append(
                    ValidationFinding.from_error(UnresolvedKeyError(keybind.key), keybind, index)
                )

            # Last declaration wins: a chain of three equal chords reports
            # (1, 2) and (2, 3) but never (1, 3).
            chord = KeyChord.of(keybind)
            previous = seen.get(chord)
            if previous is not None:
                conflict = ChordConflictError(
                    chord.modifiers, chord.key, previous.command.value, keybind.command.value
                )
                result.findings.append(ValidationFinding.from_error(conflict, keybind, index))
            seen[chord] = keybind

    def check_workspace_ids(self, document: ConfigDocument) -> List[ValidationFinding]:
        """
        Check workspace IDs are either all absent or all present and unique.

        Args:
            document: Document to check

        Returns:
            Empty list, or one PartialWorkspaceIds / DuplicateWorkspaceId finding
        """
        ids = document.workspace_ids()
        declared = [i for i in ids if i is not None]

        if not declared:
            return []

        if len(declared) != len(ids):
            return [ValidationFinding.from_error(PartialWorkspaceIdsError(len(declared), len(ids)))]

        duplicates = sorted(i for i, count in Counter(declared).items() if count > 1)
        if duplicates:
            return [ValidationFinding.from_error(DuplicateWorkspaceIdError(duplicates))]

        return []

    def check_mousekey(self, document: ConfigDocument) -> List[ValidationFinding]:
        """Warn when the mousekey is present but empty."""
        if document.mousekey is not None and modifier_is_empty(document.mousekey):
            return [ValidationFinding.from_error(EmptyMousekeyWarning())]
        return []


def workspace_ids_valid(document: ConfigDocument) -> bool:
    """True if the document's workspace IDs pass the consistency check."""
    return not ConfigValidator().check_workspace_ids(document)
