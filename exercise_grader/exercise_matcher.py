"""
Binds declared exercises to their solution files by exact name.
"""

from collections.abc import Iterable

from .errors import ExerciseFileMissingError
from .models import SolutionFile


def find_exercise_file(exercise_name: str, files: Iterable[SolutionFile]) -> SolutionFile:
    """
    Return the solution file whose name equals the exercise name.

    If several files share the name, the first one in iteration order wins.

    Raises:
        ExerciseFileMissingError: If no file has that name.
    """
    for file in files:
        if file.name == exercise_name:
            return file
    raise ExerciseFileMissingError(exercise_name)
