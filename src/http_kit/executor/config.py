# src/http_kit/executor/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutorConfig:
    """Configuration for request execution.

    Immutable. Explicit. No magic defaults from environment.
    """

    request_timeout: float = 30.0
    max_retries: int = 0  # Extra attempts on network errors only
    tls_verify: bool = True
    script_timeout_ms: int = 5000
