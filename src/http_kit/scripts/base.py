from typing import Protocol

from pydantic import BaseModel, Field


class ScriptRequest(BaseModel):
    code: str
    timeout_ms: int = 5000
    collection_path: str | None = None
    response_body: str | None = None
    response_content_type: str = ""

    class Config:
        extra = "forbid"


class ScriptExecutionResult(BaseModel):
    success: bool
    error: str | None = None
    logs: list[str] = Field(default_factory=list)
    global_variable_changes: dict[str, str] | None = None

    class Config:
        extra = "forbid"


class ScriptSandbox(Protocol):
    """Runs one post-script against a response.

    Implementations own the wall-clock timeout and report it (and any other
    script error) as an unsuccessful result rather than raising.
    """

    async def execute(self, request: ScriptRequest) -> ScriptExecutionResult: ...
