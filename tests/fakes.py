from __future__ import annotations

import json
from collections.abc import Callable

import httpx

from exercise_grader.piston_client import PistonClient

API_URL = "http://piston.test/api/v2/piston"

RUNTIMES = [
    {"language": "bash", "version": "5.2.0", "aliases": ["sh"]},
    {"language": "python", "version": "3.10.0", "aliases": ["py", "py3", "python3"]},
    {"language": "python", "version": "3.12.0", "aliases": ["py"]},
]

RULES_TOML = """
[[exercise]]
name = "add"

[[exercise.test]]
test_name = "basic"
input = ["1 2"]
output = ["3"]
"""


class FakePiston:
    """In-memory Piston service served through httpx.MockTransport."""

    def __init__(self, runner: Callable[[str, str], str] | None = None):
        self.runtimes = list(RUNTIMES)
        self.runner = runner or (lambda name, stdin: "")
        self.requests: list[dict] = []
        self.events: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        if request.method == "GET" and request.url.path.endswith("/runtimes"):
            self.events.append("runtimes")
            return httpx.Response(200, json=self.runtimes)

        if request.method == "POST" and request.url.path.endswith("/execute"):
            body = json.loads(request.content)
            self.requests.append(body)
            self.events.append(f"execute:{body['files'][0]['name']}:{body['stdin']}")
            output = self.runner(body["files"][0]["name"], body["stdin"])
            return httpx.Response(
                200,
                json={
                    "language": body["language"],
                    "version": body["version"],
                    "run": {"stdout": output, "stderr": "", "code": 0, "signal": None, "output": output},
                },
            )

        return httpx.Response(404, json={"message": "not found"})

    def client(self) -> PistonClient:
        http = httpx.Client(transport=httpx.MockTransport(self.handler))
        return PistonClient(API_URL, timeout=5, http_client=http)


class RecordingPacer:
    def __init__(self, events: list[str] | None = None):
        self.calls = 0
        self.events = events

    def __call__(self) -> None:
        self.calls += 1
        if self.events is not None:
            self.events.append("pace")


def add_runner(name: str, stdin: str) -> str:
    a, b = stdin.split()
    return f"{int(a) + int(b)}\n"
