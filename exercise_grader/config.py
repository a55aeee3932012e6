"""
Configuration constants for the Exercise Grader.
"""

# Piston execution service (can be overridden via config file or CLI)
DEFAULT_API_URL: str = "https://emkc.org/api/v2/piston"
EXECUTE_PATH: str = "/execute"
RUNTIMES_PATH: str = "/runtimes"
REQUEST_TIMEOUT_SECONDS: float = 30.0

# The public Piston instance allows roughly 5 requests per second
PACING_INTERVAL_MS: int = 205

# File patterns
RULES_FILENAME: str = "rules.toml"
DEFAULT_CONFIG_FILENAME: str = "grader_config.yml"

# Console markers
PASS_MARK: str = "✅"
FAIL_MARK: str = "❌"
PREVIEW_CHARS: int = 200

# Exit codes
EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_FAILED_VERDICTS: int = 3
EXIT_INTERRUPTED: int = 130
