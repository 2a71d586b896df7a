"""
Collects the outcomes of all jobs of a batch and writes the summary report.
"""

from datetime import datetime
from pathlib import Path

from tabulate import tabulate

from .logging import setup_logger
from .params import SUMMARY_FILENAME, RunMode
from .processing.results import JobOutcome, Skipped, Succeeded
from .utilities import display_path, format_time

logger = setup_logger(__name__)


class RunSummary:
    """
    Successful and skipped jobs of a batch in processing order.
    """

    def __init__(self, mode: RunMode):
        self.mode: RunMode = mode
        self.created: datetime = datetime.now()
        self._outcomes: list[JobOutcome] = []

    def record(self, outcome: JobOutcome) -> None:
        self._outcomes.append(outcome)

    @property
    def outcomes(self) -> list[JobOutcome]:
        return list(self._outcomes)

    @property
    def successful(self) -> list[Succeeded]:
        return [o for o in self._outcomes if isinstance(o, Succeeded)]

    @property
    def skipped(self) -> list[Skipped]:
        return [o for o in self._outcomes if isinstance(o, Skipped)]

    def __len__(self) -> int:
        return len(self._outcomes)

    def render(self, generated: datetime | None = None) -> str:
        """
        Render the summary report.

        :param generated: Generation timestamp printed in the header, defaults to the creation time of the summary.
        :return: The report text.
        """
        generated = generated or self.created
        lines = [
            "xtb batch summary",
            f"Run mode: {self.mode.value} ({self.mode.description})",
            f"Generated: {generated.strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            f"Successful jobs ({len(self.successful)}):",
        ]
        lines.extend(display_path(o.inp) for o in self.successful)
        lines.append("")
        lines.append(f"Skipped jobs ({len(self.skipped)}):")
        lines.extend(f"{display_path(o.inp)} [{o.reason}]" for o in self.skipped)

        return "\n".join(lines) + "\n"

    def write(self, root: Path) -> Path:
        """
        Write the report into the root folder, replacing the report of earlier runs.

        :param root: Root folder of the run.
        :return: Path of the written report.
        """
        path = Path(root) / SUMMARY_FILENAME
        path.write_text(self.render(), encoding="utf-8", errors="backslashreplace")
        logger.info(f"Wrote summary of {len(self)} job(s) to {display_path(path)}.")
        return path

    def table(self) -> str:
        """
        Overview of all jobs for the terminal.

        :return: Formatted table.
        """
        rows = [
            [
                display_path(o.inp.name),
                "ok" if isinstance(o, Succeeded) else "skipped",
                format_time(o.runtime),
                o.reason if isinstance(o, Skipped) else "",
            ]
            for o in self._outcomes
        ]
        if not rows:
            return "No input files found, no jobs were run."

        table = tabulate(
            rows,
            headers=["Input", "Status", "Runtime", "Reason"],
            colalign=["left", "center", "center", "left"],
            disable_numparse=True,
        )
        return (
            f"{table}\n\n{len(self.successful)} succeeded, "
            f"{len(self.skipped)} skipped, {len(self)} total"
        )
