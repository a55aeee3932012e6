"""
Console reporting and JSON export of verdicts.

Verdict lines are printed as they arrive; counts are accumulated on the
side so the evaluator itself never has to aggregate anything.
"""

import json
from datetime import datetime
from pathlib import Path

from .config import FAIL_MARK, PASS_MARK, PREVIEW_CHARS
from .errors import ReportError
from .models import Runtime, RunSummary, Verdict


def format_verdict(verdict: Verdict) -> str:
    """
    Format a verdict as a single console line.

    Args:
        verdict: Verdict to format.

    Returns:
        Line such as ``"basic passed ✅"``.
    """
    if verdict.passed:
        return f"{verdict.test_name} passed {PASS_MARK}"
    return f"{verdict.test_name} failed {FAIL_MARK}"


def _preview(text: str) -> str:
    text = text.strip()
    if len(text) > PREVIEW_CHARS:
        return text[:PREVIEW_CHARS] + "..."
    return text


class VerdictReporter:
    """
    Prints verdicts and collects them into a RunSummary.
    """

    def __init__(self, runtime: Runtime, verbose: bool = False) -> None:
        """
        Initialize the reporter.

        Args:
            runtime: Runtime used for the run, recorded in the summary.
            verbose: Print input/expected/actual previews for failures.
        """
        self.verbose = verbose
        self.summary = RunSummary(
            language=runtime.language,
            version=runtime.version,
            timestamp=datetime.now().isoformat(),
        )

    def __call__(self, verdict: Verdict) -> None:
        self.add_verdict(verdict)

    def add_verdict(self, verdict: Verdict) -> None:
        """
        Record a verdict and print its line.
        """
        self.summary.verdicts.append(verdict)
        self.summary.total += 1
        if verdict.passed:
            self.summary.passed += 1
        else:
            self.summary.failed += 1

        print(format_verdict(verdict))
        if self.verbose and not verdict.passed:
            print(f"    input:    {_preview(verdict.input)!r}")
            print(f"    expected: {_preview(verdict.expected)!r}")
            print(f"    actual:   {_preview(verdict.actual)!r}")

    def print_summary(self) -> None:
        """
        Print the closing summary block.
        """
        s = self.summary
        print("\n" + "=" * 60)
        print("GRADING COMPLETE")
        print("=" * 60)
        print(f"Runtime: {s.language} {s.version}")
        print(f"Verdicts: {s.total}")
        if s.total:
            print(f"Passed: {s.passed}/{s.total} ({100 * s.passed / s.total:.1f}%)")
            print(f"Failed: {s.failed}/{s.total}")

    def save(self, report_path: Path) -> Path:
        """
        Write the summary and every verdict as JSON.

        Args:
            report_path: Destination file; parent directories are created.

        Returns:
            The path written.

        Raises:
            ReportError: If the file or its parent directories cannot be written.
        """
        try:
            report_path.parent.mkdir(parents=True, exist_ok=True)
            with open(report_path, "w", encoding="utf-8") as f:
                json.dump(self.summary.model_dump(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ReportError(f"Cannot write report {report_path}: {e}") from e
        return report_path
