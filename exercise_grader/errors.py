"""
Error taxonomy for the grading run.

Every stage boundary raises its own subclass of GraderError so the CLI can
report which stage aborted the run.
"""


class GraderError(Exception):
    """Base class for all errors that abort a grading run."""

    stage: str = "grader"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(GraderError):
    """Rules file or runner configuration is missing or malformed."""

    stage = "config"


class FileSystemError(GraderError):
    """The solution directory or one of its entries cannot be read."""

    stage = "solutions"


class RuntimeNotFoundError(GraderError):
    """No runtime in the service catalog matches the requested language."""

    stage = "runtime"


class ExerciseFileMissingError(GraderError):
    """A declared exercise has no solution file of the same name."""

    stage = "matching"

    def __init__(self, exercise_name: str) -> None:
        super().__init__(f"No solution file named '{exercise_name}' for exercise '{exercise_name}'")
        self.exercise_name = exercise_name


class TransportError(GraderError):
    """The execution service could not be reached or returned an HTTP error."""

    stage = "execution"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseFormatError(GraderError):
    """The execution service returned a body that does not match the schema."""

    stage = "execution"


class ReportError(GraderError):
    """The JSON report could not be written."""

    stage = "report"
