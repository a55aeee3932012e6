"""
Exercise Grader: run solution files against a Piston execution service

Usage:
  main.py <exercise_dir> <language> [options]
  main.py --list-runtimes [--config=PATH] [--api-url=URL] [--timeout=SECONDS]
  main.py (-h | --help)

Arguments:
  <exercise_dir>  Directory holding the solution files (and rules.toml).
  <language>      Runtime language identifier, e.g. python.

Options:
  --rules=PATH                Rules file (defaults to rules.toml inside <exercise_dir>).
  --config=PATH               YAML runner configuration (grader_config.yml is used if present).
  --runtime-version=VERSION   Require this exact runtime version.
  --api-url=URL               Base URL of the Piston API.
  --delay-ms=MS               Pause after every submission, in milliseconds.
  --timeout=SECONDS           Per-request timeout.
  --report=PATH               Write all verdicts and a summary as JSON.
  --strict                    Exit with status 3 if any verdict failed.
  --list-runtimes             Print the runtimes offered by the service and exit.
  -v --verbose                Print submission progress and failure details.
  -h --help                   Show this screen.
"""

import sys
from pathlib import Path

from docopt import docopt

from exercise_grader.config import (
    DEFAULT_CONFIG_FILENAME,
    EXIT_ERROR,
    EXIT_FAILED_VERDICTS,
    EXIT_INTERRUPTED,
    EXIT_OK,
)
from exercise_grader.config_loader import RunnerConfig, load_config
from exercise_grader.errors import FileSystemError, GraderError
from exercise_grader.evaluator import Evaluator
from exercise_grader.models import Exercise, RunSummary, Test
from exercise_grader.pacing import FixedIntervalPacer, Pacer
from exercise_grader.piston_client import PistonClient
from exercise_grader.rules_parser import load_rules
from exercise_grader.runtime_resolver import resolve_runtime
from exercise_grader.solution_loader import load_solution_files
from exercise_grader.verdict_report import VerdictReporter


def resolve_config(arguments: dict) -> RunnerConfig:
    """
    Build the runner configuration from YAML and command-line overrides.

    Args:
        arguments: Parsed docopt arguments.

    Returns:
        Validated RunnerConfig.
    """
    if arguments["--config"]:
        config = load_config(Path(arguments["--config"]))
        print(f"Loaded configuration from {arguments['--config']}")
    elif Path(DEFAULT_CONFIG_FILENAME).exists():
        config = load_config(Path(DEFAULT_CONFIG_FILENAME))
        print(f"Loaded configuration from {DEFAULT_CONFIG_FILENAME}")
    else:
        config = RunnerConfig()

    return config.with_overrides(
        api_url=arguments.get("--api-url"),
        request_timeout=arguments.get("--timeout"),
        pacing_interval_ms=arguments.get("--delay-ms"),
        verbose=True if arguments.get("--verbose") else None,
    )


def list_runtimes(client: PistonClient) -> None:
    """
    Print the runtime catalog of the service.
    """
    for runtime in client.fetch_runtimes():
        aliases = ", ".join(runtime.aliases)
        print(f"{runtime.language:<16} {runtime.version:<12} {aliases}")


def run_grading_pipeline(
    exercise_dir: Path,
    language: str,
    config: RunnerConfig,
    client: PistonClient,
    rules_path: Path | None = None,
    runtime_version: str | None = None,
    report_path: Path | None = None,
    pacer: Pacer | None = None,
) -> RunSummary:
    """
    Run the complete grading pipeline.

    Args:
        exercise_dir: Directory containing the solution files.
        language: Runtime language identifier.
        config: Runner configuration.
        client: Execution service client.
        rules_path: Rules file; defaults to the configured name inside exercise_dir.
        runtime_version: Optional exact runtime version.
        report_path: Optional JSON report destination.
        pacer: Pacing policy; defaults to the configured fixed interval.

    Returns:
        RunSummary with every verdict in emission order.

    Raises:
        GraderError: On the first failure of any stage.
    """
    if not exercise_dir.is_dir():
        raise FileSystemError(f"Exercise directory not found: {exercise_dir}")

    files = load_solution_files(exercise_dir)
    print(f"Found {len(files)} solution files in {exercise_dir}")

    rules_path = rules_path or exercise_dir / config.rules_filename
    module = load_rules(rules_path)
    print(f"Loaded {len(module.exercise)} exercises from {rules_path}")

    runtime = resolve_runtime(client, language, runtime_version)
    print(f"Using runtime {runtime.language} {runtime.version}\n")

    def show_progress(exercise: Exercise, test: Test, stdin: str) -> None:
        print(f"  [{exercise.name}] {test.test_name}: submitting stdin {stdin[:40]!r}")

    reporter = VerdictReporter(runtime, verbose=config.verbose)
    evaluator = Evaluator(
        client,
        runtime,
        pacer=pacer or FixedIntervalPacer(config.pacing_interval_ms),
        on_submit=show_progress if config.verbose else None,
    )
    evaluator.evaluate(module, files, reporter)

    reporter.print_summary()
    if report_path:
        saved = reporter.save(report_path)
        print(f"Report: {saved}")

    return reporter.summary


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entrypoint.

    Returns:
        Exit code (0 for success, 1 for error, 3 for failed verdicts with --strict).
    """
    arguments = docopt(__doc__, argv=argv)

    try:
        config = resolve_config(arguments)
        with PistonClient(config.api_url, timeout=config.request_timeout) as client:
            if arguments["--list-runtimes"]:
                list_runtimes(client)
                return EXIT_OK

            exercise_dir = Path(arguments["<exercise_dir>"])
            rules_path = Path(arguments["--rules"]) if arguments["--rules"] else None

            summary = run_grading_pipeline(
                exercise_dir=exercise_dir,
                language=arguments["<language>"],
                config=config,
                client=client,
                rules_path=rules_path,
                runtime_version=arguments["--runtime-version"],
                report_path=Path(arguments["--report"]) if arguments["--report"] else None,
            )
    except GraderError as e:
        print(f"\nError [{e.stage}]: {e.message}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nGrading interrupted by user.", file=sys.stderr)
        return EXIT_INTERRUPTED

    if arguments["--strict"] and summary.failed:
        return EXIT_FAILED_VERDICTS
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
