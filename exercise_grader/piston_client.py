"""
HTTP client for the Piston code-execution service.

Wraps an httpx.Client and maps transport and schema failures onto the
grader's error taxonomy. No request is ever retried.
"""

from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import DEFAULT_API_URL, EXECUTE_PATH, REQUEST_TIMEOUT_SECONDS, RUNTIMES_PATH
from .errors import ResponseFormatError, TransportError
from .models import ExecutionRequest, ExecutionResult, Runtime, SolutionFile

_RUNTIME_LIST = TypeAdapter(list[Runtime])


class PistonClient:
    """
    Client for the runtimes and execute endpoints.

    Endpoint URLs are derived from ``api_url`` so tests and self-hosted
    instances can point the client anywhere.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            api_url: Base URL of the Piston API (without trailing endpoint).
            timeout: Per-request timeout in seconds.
            http_client: Pre-built httpx client. It is not closed by this object.
        """
        base = api_url.rstrip("/")
        self.execute_url = base + EXECUTE_PATH
        self.runtimes_url = base + RUNTIMES_PATH
        self.timeout = timeout
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=timeout)

    def __enter__(self) -> "PistonClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def fetch_runtimes(self) -> list[Runtime]:
        """
        Query the runtime catalog.

        Raises:
            TransportError: On network failure or HTTP error status.
            ResponseFormatError: If the body is not a list of runtimes.
        """
        payload = self._request("GET", self.runtimes_url)
        try:
            return _RUNTIME_LIST.validate_python(payload)
        except ValidationError as e:
            raise ResponseFormatError(f"Unexpected runtime catalog format: {e}") from e

    def execute(self, runtime: Runtime, file: SolutionFile, stdin: str) -> ExecutionResult:
        """
        Submit one file with one stdin value and return the parsed result.

        Raises:
            TransportError: On network failure or HTTP error status.
            ResponseFormatError: If the body does not match the execute schema.
        """
        body = ExecutionRequest.build(runtime, file, stdin)
        payload = self._request("POST", self.execute_url, json=body.model_dump())
        try:
            return ExecutionResult.model_validate(payload)
        except ValidationError as e:
            raise ResponseFormatError(f"Unexpected execute response for '{file.name}': {e}") from e

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            resp = self._http.request(method, url, timeout=self.timeout, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {type(e).__name__}: {e}") from e

        if resp.status_code >= 400:
            detail = _error_message(resp)
            message = f"{method} {url} returned HTTP {resp.status_code}"
            if detail:
                message += f": {detail}"
            raise TransportError(message, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError as e:
            raise ResponseFormatError(f"{method} {url} returned a non-JSON body") from e


def _error_message(resp: httpx.Response) -> str:
    try:
        payload = resp.json()
    except ValueError:
        return resp.text[:200]
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    return ""
