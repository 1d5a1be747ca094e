# src/http_kit/executor/executor.py

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from time import monotonic

from http_kit.environments.resolver import EnvironmentResolver
from http_kit.filesystem.base import FileSystem
from http_kit.observability import names
from http_kit.observability.base import MetricsHook, NoOpMetricsHook
from http_kit.parsers.http_parser import parse_http_file
from http_kit.parsers.models import ParsedFile, Section
from http_kit.scripts.base import ScriptExecutionResult, ScriptRequest, ScriptSandbox
from http_kit.scripts.extract import extract_script_code
from http_kit.transport.base import HttpRequest, HttpResponse, Transport
from http_kit.variables.globals import GlobalVariables
from http_kit.variables.merger import merge_variables
from http_kit.variables.substitution import (
    SubstitutionCycleError,
    substitute_variables,
)

from .auth import normalize_basic_auth
from .config import ExecutorConfig

logger = logging.getLogger(__name__)

ERROR_STATUS_LINE = "Error"


class ExecutionState(str, Enum):
    """Lifecycle of a single request execution."""

    IDLE = "idle"
    RESOLVING = "resolving"
    DISPATCHING = "dispatching"
    POST_PROCESSING = "post_processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of `RequestExecutor.execute`.

    Failures are data, not exceptions: `state` is FAILED and `error` explains
    why. `request` is the request as dispatched, when one was built.
    """

    state: ExecutionState
    status_line: str
    headers: dict[str, str]
    body: str
    elapsed_ms: int
    script_results: list[ScriptExecutionResult] = field(default_factory=list)
    error: str | None = None
    request: HttpRequest | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is ExecutionState.COMPLETED


StateListener = Callable[[ExecutionState], None]


class RequestExecutor:
    """Turns one section of a request file into a response.

    Design principles:
    - Stateless: every call re-resolves environments and variables from source
    - Sequential: dispatch, then post-scripts one by one in document order
    - Contained: nothing raised by collaborators crosses this boundary
    """

    def __init__(
        self,
        *,
        transport: Transport,
        sandbox: ScriptSandbox,
        filesystem: FileSystem,
        config: ExecutorConfig = ExecutorConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._transport = transport
        self._sandbox = sandbox
        self._filesystem = filesystem
        self._environments = EnvironmentResolver(filesystem, metrics_hook)
        self._config = config
        self.metrics_hook = metrics_hook

    async def execute(
        self,
        *,
        parsed_file: ParsedFile,
        line_number: int,
        file_directory: str | Path,
        collection_path: str | Path,
        environment: str | None = None,
        global_variables: GlobalVariables | None = None,
        on_state_change: StateListener | None = None,
    ) -> ExecutionResult:
        """Run the request whose section contains `line_number`.

        Args:
            parsed_file: Output of `parse_http_file` for the request file.
            line_number: Any 1-indexed line inside the target section.
            file_directory: Folder of the request file; environment lookup starts here.
            collection_path: Collection root; environment lookup stops here.
            environment: Selected environment name, or None for no environment.
            global_variables: Runtime session; post-script changes are written back.
            on_state_change: Called on every state transition. The first event is
                RESOLVING; IDLE is only the state before the call.

        Returns:
            ExecutionResult in COMPLETED or FAILED state. Never raises for
            missing requests, substitution loops, network or script errors.
        """
        notify = on_state_change or _ignore_state
        notify(ExecutionState.RESOLVING)

        section = parsed_file.section_at(line_number)
        if section is None or not section.verb or not section.url:
            logger.error("No request found at line %d", line_number)
            self.metrics_hook.increment(names.REQUESTS_NOT_FOUND_TOTAL)
            return self._failed(notify, f"No request found at line {line_number}")

        environment_variables: dict[str, str] = {}
        if environment:
            try:
                environment_variables = (
                    await self._environments.get_environment_variables_map(
                        environment, file_directory, collection_path
                    )
                )
            except Exception as exc:
                logger.warning(
                    "Cannot load environment %s, continuing without it: %s",
                    environment,
                    exc,
                )

        variables = merge_variables(
            parsed_file,
            section,
            environment_variables,
            global_variables.as_dict() if global_variables is not None else None,
        )

        try:
            request = self._build_request(parsed_file, section, variables)
        except SubstitutionCycleError as exc:
            logger.error("Cannot build request at line %d: %s", line_number, exc)
            return self._failed(notify, str(exc))

        notify(ExecutionState.DISPATCHING)
        logger.info("Executing request: %s %s", request.method, request.url)
        start = monotonic()

        try:
            response = await self._transport.send(request)
        except Exception as exc:
            elapsed_ms = round(1000 * (monotonic() - start))
            message = str(exc) or exc.__class__.__name__
            logger.error(
                "Request %s %s failed: %s", request.method, request.url, message
            )
            self.metrics_hook.increment(
                names.REQUEST_ERRORS_TOTAL, labels={"verb": request.method}
            )
            return self._failed(
                notify, message, elapsed_ms=elapsed_ms, request=request
            )

        elapsed_ms = round(1000 * (monotonic() - start))
        self.metrics_hook.record_latency(names.REQUEST_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.REQUESTS_TOTAL, labels={"verb": request.method}
        )
        logger.info(
            "Response received: %d %s, latency=%dms",
            response.status,
            response.status_text,
            elapsed_ms,
        )

        notify(ExecutionState.POST_PROCESSING)
        script_results = await self._run_post_scripts(
            parsed_file.lines,
            section,
            response,
            str(collection_path),
            global_variables,
        )

        notify(ExecutionState.COMPLETED)
        return ExecutionResult(
            state=ExecutionState.COMPLETED,
            status_line=f"HTTP/1.1 {response.status} {response.status_text}",
            headers=response.headers,
            body=response.body,
            elapsed_ms=elapsed_ms,
            script_results=script_results,
            request=request,
        )

    async def execute_file(
        self,
        file_path: str | Path,
        line_number: int,
        *,
        collection_path: str | Path,
        environment: str | None = None,
        global_variables: GlobalVariables | None = None,
        on_state_change: StateListener | None = None,
    ) -> ExecutionResult:
        """Read and parse `file_path`, then `execute` the section at `line_number`."""
        notify = on_state_change or _ignore_state
        try:
            content = await self._filesystem.read_text(file_path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot read request file %s: %s", file_path, exc)
            notify(ExecutionState.RESOLVING)
            return self._failed(notify, f"Cannot read request file {file_path}: {exc}")

        if content is None:
            notify(ExecutionState.RESOLVING)
            return self._failed(notify, f"Request file not found: {file_path}")

        return await self.execute(
            parsed_file=parse_http_file(content, metrics_hook=self.metrics_hook),
            line_number=line_number,
            file_directory=Path(file_path).parent,
            collection_path=collection_path,
            environment=environment,
            global_variables=global_variables,
            on_state_change=on_state_change,
        )

    def _build_request(
        self, parsed_file: ParsedFile, section: Section, variables: dict[str, str]
    ) -> HttpRequest:
        headers: dict[str, str] = {}
        if section.headers is not None:
            for key, value in section.headers.headers.items():
                headers[substitute_variables(key, variables)] = substitute_variables(
                    value, variables
                )

        body: str | None = None
        if section.body is not None:
            body = substitute_variables(
                parsed_file.text(section.body.start_line, section.body.end_line),
                variables,
            )

        return HttpRequest(
            method=section.verb or "",
            url=substitute_variables(section.url or "", variables),
            headers=normalize_basic_auth(headers),
            body=body or None,
            tls_verify=self._config.tls_verify,
        )

    async def _run_post_scripts(
        self,
        lines: list[str],
        section: Section,
        response: HttpResponse,
        collection_path: str,
        global_variables: GlobalVariables | None,
    ) -> list[ScriptExecutionResult]:
        results: list[ScriptExecutionResult] = []

        for post_script in section.post_scripts:
            code = extract_script_code(lines, post_script)
            if not code:
                results.append(ScriptExecutionResult(success=True))
                continue

            self.metrics_hook.increment(
                names.SCRIPTS_TOTAL, labels={"kind": post_script.kind}
            )
            script_request = ScriptRequest(
                code=code,
                timeout_ms=self._config.script_timeout_ms,
                collection_path=collection_path,
                response_body=response.body,
                response_content_type=response.content_type,
            )

            try:
                result = await self._sandbox.execute(script_request)
            except Exception as exc:
                result = ScriptExecutionResult(
                    success=False, error=str(exc) or exc.__class__.__name__
                )

            if not result.success:
                logger.warning(
                    "Post-script at line %d failed: %s",
                    post_script.start_line,
                    result.error,
                )
                self.metrics_hook.increment(names.SCRIPT_ERRORS_TOTAL)

            if result.global_variable_changes and global_variables is not None:
                global_variables.update(result.global_variable_changes)

            results.append(result)

        return results

    def _failed(
        self,
        notify: StateListener,
        error: str,
        *,
        elapsed_ms: int = 0,
        request: HttpRequest | None = None,
    ) -> ExecutionResult:
        notify(ExecutionState.FAILED)
        return ExecutionResult(
            state=ExecutionState.FAILED,
            status_line=ERROR_STATUS_LINE,
            headers={},
            body=error,
            elapsed_ms=elapsed_ms,
            error=error,
            request=request,
        )


def _ignore_state(state: ExecutionState) -> None:
    pass
