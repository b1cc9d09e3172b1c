"""
api-tester - Main Entry Point

Command-line interface for sending ad-hoc requests, running JSON test suites,
saving environments and printing the last report.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Awaitable, Callable, Dict, List, Optional

from apitester.core.exceptions import ApplicationException
from apitester.core.logger import get_logger
from apitester.services import (
    EnvironmentService,
    InteractiveSession,
    ReportService,
    TestSuiteService,
)
from apitester.utils.console import escape, get_console

logger = get_logger(__name__)


async def run_interactive(args: argparse.Namespace) -> None:
    await InteractiveSession().run()


async def run_suite(args: argparse.Namespace) -> None:
    await TestSuiteService().run(Path(args.file))


async def run_save(args: argparse.Namespace) -> None:
    await EnvironmentService().prompt_and_save(args.name)


async def run_report(args: argparse.Namespace) -> None:
    ReportService().generate()


COMMANDS: Dict[str, Callable[[argparse.Namespace], Awaitable[None]]] = {
    "interactive": run_interactive,
    "run": run_suite,
    "save": run_save,
    "report": run_report,
}


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with one sub-command per operation.
    """
    parser = argparse.ArgumentParser(
        prog="api-test",
        description="api-tester - send HTTP requests and validate API responses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  api-test interactive            # Build and send one request step by step
  api-test run suite.json         # Run every test case in suite.json
  api-test save staging           # Save a base URL and API key as "staging"
  api-test report                 # Print the last test report
        """,
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    subparsers.add_parser("interactive", help="Start interactive API testing")

    run_parser = subparsers.add_parser("run", help="Run a test suite from a JSON file")
    run_parser.add_argument("file", help="JSON file holding an array of test cases")

    save_parser = subparsers.add_parser(
        "save", help="Save current environment variables"
    )
    save_parser.add_argument("name", help="Environment name")

    subparsers.add_parser("report", help="Generate test report")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point with CLI argument parsing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    console = get_console()

    if args.command is None:
        parser.print_help()
        console.print(
            '[cyan]Use the "interactive" command to start testing APIs![/cyan]'
        )
        return

    try:
        asyncio.run(COMMANDS[args.command](args))
    except KeyboardInterrupt:
        console.print("\n👋 Goodbye!")
        sys.exit(130)
    except ApplicationException as e:
        logger.debug("Command %s failed: %s", args.command, e.to_dict())
        console.print(f"[red]❌ Error: {escape(e.message)}[/red]")
        for detail in e.details.get("errors", []):
            console.print(f"  [red]- {escape(str(detail))}[/red]")
        sys.exit(e.exit_code)
    except Exception as e:
        logger.exception("Unexpected error in command %s", args.command)
        console.print(f"[red]❌ Unexpected error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
