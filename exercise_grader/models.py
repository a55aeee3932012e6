"""
Pydantic models for the Exercise Grader.

Defines the rules file schema (Module, Exercise, Test), the Piston request
and response payloads, and the verdicts produced by the evaluator.
"""

from pydantic import BaseModel, ConfigDict, Field


class Test(BaseModel):
    """
    A named group of stdin inputs and expected outputs.

    Every input is compared against every output (cross product), so a test
    with N inputs and M outputs yields N submissions and N*M verdicts.

    Attributes:
        test_name: Label printed with each verdict.
        input: Stdin strings, submitted one at a time.
        output: Expected outputs, each compared against every submission.
    """

    model_config = ConfigDict(frozen=True)

    # Not a pytest test class
    __test__ = False

    test_name: str = Field(..., description="Label used when reporting verdicts")
    input: tuple[str, ...] = Field(..., description="Stdin values to submit")
    output: tuple[str, ...] = Field(..., description="Expected outputs")


class Exercise(BaseModel):
    """
    A named programming task bound to the solution file of the same name.

    Attributes:
        name: Exercise name; must equal a solution file name.
        test: Tests to run against the solution, in declared order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Exercise name, matched against file names")
    test: tuple[Test, ...] = Field(..., description="Tests in declared order")


class Module(BaseModel):
    """
    Complete rules file: the ordered list of exercises to grade.
    """

    model_config = ConfigDict(frozen=True)

    exercise: tuple[Exercise, ...] = Field(..., description="Exercises in declared order")


class SolutionFile(BaseModel):
    """
    A candidate solution loaded from the exercise directory.

    Also used verbatim as an element of the Piston ``files`` array.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Base name of the file")
    content: str = Field(..., description="Full text content")


class Runtime(BaseModel):
    """
    A language/version pair offered by the execution service.
    """

    model_config = ConfigDict(frozen=True)

    language: str = Field(..., description="Language identifier, e.g. 'python'")
    version: str = Field(..., description="Runtime version, e.g. '3.10.0'")
    aliases: tuple[str, ...] = Field(default_factory=tuple, description="Alternative identifiers")


class ExecutionRequest(BaseModel):
    """
    Body of a single POST to the execute endpoint.
    """

    language: str
    version: str
    files: list[SolutionFile] = Field(..., min_length=1, max_length=1)
    stdin: str = ""

    @classmethod
    def build(cls, runtime: Runtime, file: SolutionFile, stdin: str) -> "ExecutionRequest":
        return cls(
            language=runtime.language,
            version=runtime.version,
            files=[SolutionFile(name=file.name, content=file.content)],
            stdin=stdin,
        )


class RunResult(BaseModel):
    """
    Captured output of the run stage.

    Attributes:
        stdout: Standard output.
        stderr: Standard error.
        code: Process exit code (None when killed by a signal).
        signal: Terminating signal name, if any.
        output: Interleaved stdout and stderr; the only field used for verdicts.
    """

    stdout: str = Field(..., description="Standard output")
    stderr: str = Field(..., description="Standard error")
    code: int | None = Field(..., description="Exit code")
    signal: str | None = Field(default=None, description="Terminating signal")
    output: str = Field(..., description="Combined stdout and stderr")


class ExecutionResult(BaseModel):
    """
    Response of the execute endpoint.
    """

    language: str
    version: str
    run: RunResult


class Verdict(BaseModel):
    """
    Outcome of comparing one execution's output against one expected value.

    Attributes:
        exercise: Exercise the verdict belongs to.
        test_name: Label of the test.
        input: Stdin that was submitted.
        expected: Expected output as declared.
        actual: Combined output returned by the service.
        passed: Whether the trimmed values are equal.
    """

    exercise: str = Field(..., description="Exercise name")
    test_name: str = Field(..., description="Test label")
    input: str = Field(..., description="Submitted stdin")
    expected: str = Field(..., description="Declared expected output")
    actual: str = Field(..., description="Output returned by the service")
    passed: bool = Field(..., description="Whether trimmed outputs matched")


class RunSummary(BaseModel):
    """
    Aggregate of all verdicts emitted during a run.
    """

    language: str = Field(..., description="Resolved runtime language")
    version: str = Field(..., description="Resolved runtime version")
    timestamp: str = Field(..., description="ISO timestamp of the run start")
    total: int = Field(default=0, ge=0)
    passed: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    verdicts: list[Verdict] = Field(default_factory=list)
