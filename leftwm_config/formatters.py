"""Rich formatters for leftwm-config output.

Provides formatted, colored output for the check report, the keybind
table and the verbose document dump.
"""

from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from .document import ConfigDocument
from .environment import EnvironmentReport, EnvironmentStatus, VersionInfo
from .errors import Severity
from .models import ValidationFinding, ValidationResult


# Global console instance
console = Console()


def format_step(message: str) -> Text:
    """Format a `:: step` heading."""
    return Text.assemble(("::", "bold blue"), " ", message)


def format_success(message: str) -> Text:
    """Format a success message with green checkmark.

    Args:
        message: The success message

    Returns:
        Rich Text object ready for display
    """
    return Text.assemble(("    ✓", "bold green"), " ", (message, "green"))


def format_error(message: str) -> Text:
    """Format an error message with red X.

    Args:
        message: The error message

    Returns:
        Rich Text object ready for display
    """
    return Text.assemble(("    ✗", "bold red"), " ", message)


def format_warning(message: str) -> Text:
    """Format a warning message with yellow warning symbol.

    Args:
        message: The warning message

    Returns:
        Rich Text object ready for display
    """
    return Text.assemble(("    ⚠", "bold yellow"), "  ", message)


def format_finding(finding: ValidationFinding) -> Text:
    """Format one validation finding as a single line.

    The offending keybind, when there is one, is appended so the entry
    can be found in the config file.
    """
    message = finding.message
    if finding.keybind is not None:
        message = f"{message} [{finding.keybind.describe()}]"
    if finding.severity == Severity.WARNING:
        return format_warning(message)
    return format_error(message)


def format_summary(result: ValidationResult) -> Text:
    """Final OK/FAIL line of a check."""
    errors = len(result.errors)
    warnings = len(result.warnings)
    if result.valid:
        detail = f" ({warnings} warning(s))" if warnings else ""
        return Text.assemble(("OK", "bold green"), f": configuration is valid{detail}")
    return Text.assemble(
        ("FAIL", "bold red"),
        f": {errors} error(s), {warnings} warning(s)",
    )


def format_version(info: VersionInfo) -> List[Text]:
    return [
        format_step(f"LeftWM version: {info.version}"),
        format_step(f"LeftWM git hash: {info.git_hash}"),
    ]


def format_environment(report: EnvironmentReport) -> Text:
    if report.status == EnvironmentStatus.ERROR:
        return format_error(report.message)
    if report.status == EnvironmentStatus.WARN:
        return format_warning(report.message)
    return format_success(report.message)


def format_keybind_table(result: ValidationResult, document: ConfigDocument) -> Table:
    """Format every keybind of a document with its finding count.

    Args:
        result: Validation result for the document
        document: The validated document

    Returns:
        Rich Table object ready for display
    """
    table = Table(title="Keybinds", show_header=True, header_style="bold cyan")

    table.add_column("#", justify="right", style="dim")
    table.add_column("Chord", style="bold green")
    table.add_column("Command", style="blue")
    table.add_column("Value", style="yellow")
    table.add_column("Problems", justify="right", style="red")

    for index, keybind in enumerate(document.keybind):
        problems = len(result.for_keybind(index))
        table.add_row(
            str(index),
            "+".join(keybind.modifiers() + [keybind.key]),
            keybind.command.value,
            keybind.value,
            str(problems) if problems else "",
        )

    return table


def format_document(document: ConfigDocument, title: Optional[str] = None) -> Panel:
    """Verbose dump of a loaded document."""
    return Panel(Pretty(document.model_dump(mode="json")), title=title or "Loaded configuration", border_style="dim")


def print_step(message: str) -> None:
    console.print(format_step(message))


def print_success(message: str) -> None:
    """Print a success message to console.

    Args:
        message: The success message
    """
    console.print(format_success(message))


def print_error(message: str) -> None:
    """Print an error message to console.

    Args:
        message: The error message
    """
    console.print(format_error(message))


def print_report(result: ValidationResult) -> None:
    """Print one line per finding followed by the summary."""
    for finding in result.findings:
        console.print(format_finding(finding))
    console.print(format_summary(result))
