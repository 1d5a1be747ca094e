import asyncio
import logging
import sys
from pathlib import Path
from time import monotonic

from pydantic import ValidationError

from http_kit.observability import names
from http_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import ScriptExecutionResult, ScriptRequest, ScriptSandbox

logger = logging.getLogger(__name__)

_RUNNER_SOURCE = (Path(__file__).parent / "_runner.py").read_text(encoding="utf-8")


class SubprocessScriptSandbox(ScriptSandbox):
    """Runs post-scripts in a fresh Python interpreter.

    The child sees only `console.log`, `client.global.set` and `response.body`
    plus a small set of builtins, and underscore attributes are refused. Those
    limits only keep scripts on that surface; isolation comes from running in
    a separate `-I` interpreter. A script that outlives its timeout has its
    process killed and is reported as failed.
    """

    def __init__(
        self,
        python_executable: str = sys.executable,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._python = python_executable
        self.metrics_hook = metrics_hook

    async def execute(self, request: ScriptRequest) -> ScriptExecutionResult:
        start = monotonic()
        payload = request.model_dump_json(include={
            "code",
            "collection_path",
            "response_body",
            "response_content_type",
        })

        process = await asyncio.create_subprocess_exec(
            self._python,
            "-I",
            "-c",
            _RUNNER_SOURCE,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(payload.encode("utf-8")),
                timeout=request.timeout_ms / 1000,
            )
        except asyncio.TimeoutError:
            process.kill()
            await process.wait()
            logger.warning("Post-script timed out after %dms", request.timeout_ms)
            self.metrics_hook.increment(names.SCRIPT_TIMEOUTS_TOTAL)
            return ScriptExecutionResult(
                success=False,
                error=f"Script execution timed out after {request.timeout_ms}ms",
            )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SCRIPT_DURATION, elapsed_ms)

        try:
            return ScriptExecutionResult.model_validate_json(stdout)
        except ValidationError:
            error = stderr.decode("utf-8", errors="replace").strip()
            logger.warning(
                "Post-script process exited with code %s: %s", process.returncode, error
            )
            return ScriptExecutionResult(
                success=False,
                error=error or f"Script process exited with code {process.returncode}",
            )
