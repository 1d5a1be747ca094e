from .base import ScriptExecutionResult, ScriptRequest, ScriptSandbox
from .extract import extract_script_code
from .subprocess_sandbox import SubprocessScriptSandbox

__all__ = [
    "ScriptExecutionResult",
    "ScriptRequest",
    "ScriptSandbox",
    "SubprocessScriptSandbox",
    "extract_script_code",
]
