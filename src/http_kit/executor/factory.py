# src/http_kit/executor/factory.py

from http_kit.filesystem.local import LocalFileSystem
from http_kit.observability.base import MetricsHook, NoOpMetricsHook
from http_kit.scripts.subprocess_sandbox import SubprocessScriptSandbox
from http_kit.transport.httpx_transport import HttpxTransport

from .config import ExecutorConfig
from .executor import RequestExecutor


def create_request_executor(
    config: ExecutorConfig = ExecutorConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> RequestExecutor:
    """Create a request executor wired to the local machine.

    Args:
        config: Timeouts, retries and TLS settings.
        metrics_hook: Optional metrics hook, shared by every collaborator.

    Returns:
        RequestExecutor using httpx, a Python subprocess sandbox and the
        local filesystem.

    Example:
        >>> executor = create_request_executor(ExecutorConfig(max_retries=2))
        >>> result = await executor.execute_file(
        ...     "api/users.http", 3, collection_path="api", environment="dev"
        ... )
        >>> print(result.status_line)
    """
    return RequestExecutor(
        transport=HttpxTransport(
            timeout=config.request_timeout,
            max_retries=config.max_retries,
            metrics_hook=metrics_hook,
        ),
        sandbox=SubprocessScriptSandbox(metrics_hook=metrics_hook),
        filesystem=LocalFileSystem(),
        config=config,
        metrics_hook=metrics_hook,
    )
