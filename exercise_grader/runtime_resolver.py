"""
Selects the execution runtime for a run from the service catalog.
"""

from .errors import GraderError, RuntimeNotFoundError
from .models import Runtime
from .piston_client import PistonClient


def select_runtime(catalog: list[Runtime], language: str, version: str | None = None) -> Runtime:
    """
    Return the first runtime whose language (and version, if given) matches exactly.

    Aliases are not consulted.

    Raises:
        RuntimeNotFoundError: If nothing matches.
    """
    for runtime in catalog:
        if runtime.language != language:
            continue
        if version is not None and runtime.version != version:
            continue
        return runtime

    wanted = f"{language} {version}" if version else language
    available = sorted({r.language for r in catalog})
    raise RuntimeNotFoundError(
        f"No runtime found for '{wanted}'. Available languages: {', '.join(available) or 'none'}"
    )


def resolve_runtime(client: PistonClient, language: str, version: str | None = None) -> Runtime:
    """
    Fetch the catalog once and select the runtime for the run.

    Raises:
        RuntimeNotFoundError: If the catalog cannot be fetched or has no match.
    """
    try:
        catalog = client.fetch_runtimes()
    except GraderError as e:
        raise RuntimeNotFoundError(f"Could not query runtime catalog: {e.message}") from e
    return select_runtime(catalog, language, version)
