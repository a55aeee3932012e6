"""
Evaluation loop that drives every exercise, test and input through the
execution service and compares the results against expected outputs.

Submissions are strictly sequential: one request is outstanding at a time
and the pacer runs after each of them, including the last one.
"""

from collections.abc import Callable, Iterator, Sequence

from .exercise_matcher import find_exercise_file
from .models import Exercise, Module, Runtime, SolutionFile, Test, Verdict
from .pacing import Pacer, no_delay
from .piston_client import PistonClient


# Unicode White_Space property; str.strip() with no argument also drops U+001C..U+001F
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def trim(text: str) -> str:
    """Strip leading and trailing Unicode whitespace."""
    return text.strip(WHITESPACE)


def outputs_match(actual: str, expected: str) -> bool:
    """Compare outputs ignoring leading and trailing whitespace only."""
    return trim(actual) == trim(expected)


class Evaluator:
    """
    Runs a Module against a set of solution files with a single runtime.

    The evaluator keeps no state between iterations. The runtime and the
    solution files are only read.
    """

    def __init__(
        self,
        client: PistonClient,
        runtime: Runtime,
        pacer: Pacer = no_delay,
        on_submit: Callable[[Exercise, Test, str], None] | None = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            client: Execution client used for every submission.
            runtime: Resolved runtime shared by all submissions.
            pacer: Called once after every submission.
            on_submit: Optional hook called before each submission (progress output).
        """
        self.client = client
        self.runtime = runtime
        self.pacer = pacer
        self.on_submit = on_submit

    def iter_verdicts(self, module: Module, files: Sequence[SolutionFile]) -> Iterator[Verdict]:
        """
        Yield verdicts in declaration order: exercise, test, input, then output.

        Each input is submitted once and its output is compared against every
        expected output of the test. Errors from matching or execution
        propagate immediately and end the iteration.
        """
        for exercise in module.exercise:
            file = find_exercise_file(exercise.name, files)
            for test in exercise.test:
                yield from self._run_test(exercise, test, file)

    def evaluate(
        self,
        module: Module,
        files: Sequence[SolutionFile],
        on_verdict: Callable[[Verdict], None],
    ) -> None:
        """
        Run the whole module, handing each verdict to ``on_verdict`` as soon
        as it is computed.
        """
        for verdict in self.iter_verdicts(module, files):
            on_verdict(verdict)

    def _run_test(self, exercise: Exercise, test: Test, file: SolutionFile) -> Iterator[Verdict]:
        for stdin in test.input:
            if self.on_submit is not None:
                self.on_submit(exercise, test, stdin)

            result = self.client.execute(self.runtime, file, stdin)
            actual = result.run.output

            for expected in test.output:
                yield Verdict(
                    exercise=exercise.name,
                    test_name=test.test_name,
                    input=stdin,
                    expected=expected,
                    actual=actual,
                    passed=outputs_match(actual, expected),
                )

            self.pacer()
