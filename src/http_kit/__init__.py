# Environments
from .environments import AvailableEnvironment, EnvironmentResolver, EnvironmentVariable

# Executor
from .executor import (
    ExecutionResult,
    ExecutionState,
    ExecutorConfig,
    RequestExecutor,
    create_request_executor,
)

# Filesystem
from .filesystem import FileSystem, LocalFileSystem

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    ParsedFile,
    ParsedResponse,
    Section,
    parse_http_file,
    parse_http_response,
)

# Scripts
from .scripts import ScriptExecutionResult, ScriptSandbox, SubprocessScriptSandbox

# Transport
from .transport import (
    HttpRequest,
    HttpResponse,
    HttpxTransport,
    Transport,
    TransportError,
)

# Variables
from .variables import (
    GlobalVariables,
    SubstitutionCycleError,
    merge_variables,
    substitute_variables,
)

# Workspace
from .workspace import (
    CollectionItem,
    DisplayItem,
    flatten_collection,
    scan_collection,
)

__all__ = [
    # Environments
    "AvailableEnvironment",
    "EnvironmentResolver",
    "EnvironmentVariable",
    # Executor
    "ExecutionResult",
    "ExecutionState",
    "ExecutorConfig",
    "RequestExecutor",
    "create_request_executor",
    # Filesystem
    "FileSystem",
    "LocalFileSystem",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ParsedFile",
    "ParsedResponse",
    "Section",
    "parse_http_file",
    "parse_http_response",
    # Scripts
    "ScriptExecutionResult",
    "ScriptSandbox",
    "SubprocessScriptSandbox",
    # Transport
    "HttpRequest",
    "HttpResponse",
    "HttpxTransport",
    "Transport",
    "TransportError",
    # Variables
    "GlobalVariables",
    "SubstitutionCycleError",
    "merge_variables",
    "substitute_variables",
    # Workspace
    "CollectionItem",
    "DisplayItem",
    "flatten_collection",
    "scan_collection",
]
