"""
Loads candidate solution files from an exercise directory.
"""

from pathlib import Path

from .errors import FileSystemError
from .models import SolutionFile


def load_solution_files(exercise_dir: Path) -> list[SolutionFile]:
    """
    Read every direct file entry of a directory.

    Subdirectories are skipped and nothing is recursed into. Entries are
    returned sorted by name so that lookups are reproducible regardless of
    the order the filesystem reports them in.

    Args:
        exercise_dir: Directory containing the solution files.

    Returns:
        List of SolutionFile objects, one per file.

    Raises:
        FileSystemError: If the directory or any file cannot be read as UTF-8 text.
    """
    try:
        entries = sorted(exercise_dir.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FileSystemError(f"Cannot read directory {exercise_dir}: {e}") from e

    files: list[SolutionFile] = []
    for entry in entries:
        if entry.is_dir():
            continue

        try:
            content = entry.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise FileSystemError(f"File is not valid UTF-8 text: {entry}") from e
        except OSError as e:
            raise FileSystemError(f"Cannot read file {entry}: {e}") from e

        files.append(SolutionFile(name=entry.name, content=content))

    return files
