"""
Report Service

Prints the persisted test report with a pass/fail summary.
"""

from typing import Optional

from rich.console import Console

from apitester.core.logger import get_logger
from apitester.models import ReportSummary, ResponseFailure
from apitester.stores.report_store import ReportStore
from apitester.utils.console import escape, get_console

logger = get_logger(__name__)


class ReportService:
    """Service class for reading back test reports."""

    def __init__(
        self,
        store: Optional[ReportStore] = None,
        console: Optional[Console] = None,
    ):
        self.store = store or ReportStore()
        self.console = console or get_console()

    def generate(self) -> ReportSummary:
        """
        Print every result in the saved report followed by totals.

        A missing or unreadable report prints as an empty one.

        Returns:
            ReportSummary for the printed report
        """
        results = self.store.load()
        logger.debug("Generating report for %d results", len(results))

        self.console.print("[blue]Test Report:[/blue]")
        for result in results:
            verdict = "[green]Passed[/green]" if result.passed else "[red]Failed[/red]"
            self.console.print(f"{escape(result.name)}: {verdict}")
            if isinstance(result.result, ResponseFailure):
                self.console.print("Status: N/A")
                self.console.print(f"[red]Error: {escape(result.result.error)}[/red]")
            else:
                self.console.print(f"Status: {result.result.status}")

        summary = ReportSummary.from_results(results)
        self.console.print(
            f"[cyan]Total: {summary.total}, Passed: {summary.passed}[/cyan]"
        )
        return summary


__all__ = ["ReportService"]
