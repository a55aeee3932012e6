"""
Parser for the TOML rules file that declares exercises and their tests.

Expected layout:

    [[exercise]]
    name = "add"

    [[exercise.test]]
    test_name = "basic"
    input = ["1 2"]
    output = ["3"]
"""

import tomllib
from pathlib import Path

from pydantic import ValidationError

from .errors import ConfigError
from .models import Module


def parse_rules(text: str, source: str = "<rules>") -> Module:
    """
    Parse rules text into a Module.

    Parsing is all-or-nothing: either every exercise and test validates or
    ConfigError is raised and no Module is returned.

    Args:
        text: TOML document.
        source: Name used in error messages.

    Returns:
        Immutable Module with exercises in declared order.

    Raises:
        ConfigError: If the text is not valid TOML or a required field is missing.
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {source}: {e}") from e

    try:
        return Module.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid rules in {source}: {_format_validation_error(e)}") from e


def load_rules(rules_path: Path) -> Module:
    """
    Read and parse a rules file from disk.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed.
    """
    if not rules_path.is_file():
        raise ConfigError(f"Rules file not found: {rules_path}")

    try:
        text = rules_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read rules file {rules_path}: {e}") from e

    return parse_rules(text, source=str(rules_path))


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"])
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)
