"""
Console menu for the validation pipelines.

This module implements the numbered text menu that runs each pipeline on
its sample records. The menu loop never stops on an error: interaction and
run failures are reported and the menu is shown again.
"""

import asyncio
import logging
from collections.abc import Callable

from core import OPERATIONS, REQUESTS, TRANSACTIONS, RecordKind, orchestrate_pipeline
from core.model import RunReport
from core.protocol import Delay, ReporterProtocol
from infrastructure import ConsoleReporter, RandomLatency, load_records

logger = logging.getLogger(__name__)

OPTIONS = {"1": OPERATIONS, "2": REQUESTS, "3": TRANSACTIONS}
EXIT_OPTION = "4"

MENU_LINES = (
    "",
    "MAIN MENU",
    "Option 1. Process batch operations",
    "Option 2. Manage service requests",
    "Option 3. Analyze transactions and risk control",
    "Option 4. Exit",
)


async def run_exercise(
    kind: RecordKind, delay: Delay | None = None, reporter: ReporterProtocol | None = None
) -> RunReport:
    """
    Run one pipeline on its sample records.

    Parameters
    ----------
    kind : RecordKind
        Pipeline to run.
    delay : Delay | None
        Latency simulator, `RandomLatency()` by default.
    reporter : ReporterProtocol | None
        Reporter, `ConsoleReporter()` by default.

    Returns
    -------
    RunReport
        Report of the run.
    """
    records = load_records(kind.name)
    return await orchestrate_pipeline(
        kind=kind,
        records=records,
        delay=delay or RandomLatency(),
        reporter=reporter or ConsoleReporter(),
    )


def run_menu(
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    runner: Callable[[RecordKind], object] | None = None,
) -> None:
    """
    Show the menu until the user exits.

    Parameters
    ----------
    read : Callable[[str], str]
        Prompt reader, `input` by default.
    write : Callable[[str], None]
        Line writer, `print` by default.
    runner : Callable[[RecordKind], object] | None
        Runs the selected pipeline; by default `run_exercise` under
        `asyncio.run`, reporting through `write`.

    Notes
    -----
    Blank and unknown selections print a warning and show the menu again.
    End of input exits like the exit option.
    """
    if runner is None:

        def runner(kind: RecordKind) -> RunReport:
            return asyncio.run(run_exercise(kind, reporter=ConsoleReporter(write)))

    while True:
        for line in MENU_LINES:
            write(line)

        try:
            option = read("Select an option (1-4): ").strip()

            if not option:
                write("Empty input. Please enter a valid option (1, 2, 3 or 4).")
                continue

            if option == EXIT_OPTION:
                write("Exiting... see you soon!")
                return

            kind = OPTIONS.get(option)
            if kind is None:
                write("Invalid option. Please enter 1, 2, 3 or 4.")
                continue

            write(f"You chose option {option}: {kind.title}.")
            runner(kind)

        except EOFError:
            write("No more input. Exiting...")
            return
        except Exception as e:
            logger.error(f"Menu error: {e}")
            write(f"Menu error: {e}")
            write("Please try again.")


def main() -> None:
    """Entry point of the console menu."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    run_menu()


if __name__ == "__main__":
    main()
