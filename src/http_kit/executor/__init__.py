# src/http_kit/executor/__init__.py

"""Request execution for http-kit.

Takes a parsed request file and a line number, resolves variables, sends
the request and runs the post-scripts attached to it.

Design principles:
- Stateless: Environments and variables are re-read on every call
- Failures as data: Callers always get an ExecutionResult back
- Pluggable: Transport, sandbox and filesystem are Protocols

Example:
    >>> from http_kit.executor import create_request_executor
    >>>
    >>> executor = create_request_executor()
    >>> result = await executor.execute_file(
    ...     "api/users.http", 1, collection_path="api", environment="dev"
    ... )
    >>> print(result.status_line, result.elapsed_ms)
"""

from .auth import normalize_basic_auth
from .config import ExecutorConfig
from .executor import (
    ERROR_STATUS_LINE,
    ExecutionResult,
    ExecutionState,
    RequestExecutor,
    StateListener,
)
from .factory import create_request_executor

__all__ = [
    # Factory
    "create_request_executor",
    # Executor
    "RequestExecutor",
    # Config
    "ExecutorConfig",
    # Types
    "ExecutionResult",
    "ExecutionState",
    "StateListener",
    "ERROR_STATUS_LINE",
    # Helpers
    "normalize_basic_auth",
]
