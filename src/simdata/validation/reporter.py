"""
Console reporter for validation results.

Formats validation results using Rich for clear, colored output.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from simdata.validation.core import ValidationResult


class ConsoleReporter:
    """Formats and displays validation results to the console."""

    def __init__(self, console: Console) -> None:
        """
        Initialize console reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_results(self, results: list[ValidationResult]) -> None:
        """
        Print validation results as a formatted table.

        Args:
            results: List of validation results to display.
        """
        table = Table(title="Document Validation Results", show_header=True)
        table.add_column("Domain", style="cyan", no_wrap=True)
        table.add_column("Source", style="blue")
        table.add_column("Status", justify="center")
        table.add_column("Records", justify="right")

        for result in results:
            status = "[green]Pass[/green]" if result.valid else "[red]Fail[/red]"
            records = str(result.record_count) if result.record_count is not None else "-"
            table.add_row(result.domain.value, escape(result.source), status, records)

        self.console.print(table)
        self._print_summary(results)
        self._print_detailed_errors(results)

    def _print_summary(self, results: list[ValidationResult]) -> None:
        passed = sum(1 for r in results if r.valid)
        failed = len(results) - passed

        self.console.print()
        self.console.print("[bold]Summary:[/bold]")
        self.console.print(f"  Total documents: {len(results)}")
        self.console.print(f"  [green]Passed: {passed}[/green]")
        self.console.print(f"  [red]Failed: {failed}[/red]")

    def _print_detailed_errors(self, results: list[ValidationResult]) -> None:
        """
        Print one line per field error for failed documents.

        Source failures carry no field errors and print their message instead.
        """
        failed = [r for r in results if not r.valid]

        if not failed:
            return

        self.console.print()
        self.console.print("[bold red]Validation Errors:[/bold red]")

        for result in failed:
            self.console.print()
            self.console.print(f"[bold]{result.domain.value}[/bold] ({escape(result.source)}):")
            if result.errors:
                for error in result.errors:
                    self.console.print(
                        f"  [yellow]{escape(error.path)}[/yellow] [dim]({error.kind})[/dim] "
                        f"{escape(error.message)}",
                        highlight=False,
                    )
            elif result.error_message:
                self.console.print(f"  {result.error_message}", markup=False)
