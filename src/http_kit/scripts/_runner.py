"""Child-process entry point for post-scripts.

Executed as ``python -c <this source>`` by SubprocessScriptSandbox, so it
imports nothing outside the standard library. Reads one JSON request from
stdin, writes one JSON result to stdout.

The restricted builtins and the ban on underscore attributes keep honest
scripts on the documented surface. They are not a security boundary; the
separate, isolated interpreter process is.
"""

import ast
import builtins
import json
import sys
from types import SimpleNamespace

_SAFE_BUILTINS = (
    "abs", "all", "any", "bool", "dict", "enumerate", "filter", "float",
    "format", "int", "isinstance", "len", "list", "map", "max", "min", "range",
    "repr", "reversed", "round", "set", "sorted", "str", "sum", "tuple", "zip",
    "Exception", "KeyError", "IndexError", "TypeError", "ValueError",
)


def _check_private(name):
    if str(name).startswith("_"):
        raise AttributeError(f"access to '{name}' is not allowed")


def _public_getattr(obj, name, *default):
    _check_private(name)
    return getattr(obj, name, *default)


def _public_hasattr(obj, name):
    _check_private(name)
    return hasattr(obj, name)


def _compile(code):
    tree = ast.parse(code, "<post-script>", "exec")
    for node in ast.walk(tree):
        if isinstance(node, ast.Attribute) and node.attr.startswith("_"):
            raise AttributeError(f"access to '{node.attr}' is not allowed")
    return compile(tree, "<post-script>", "exec")


def _is_json(content_type):
    return "application/json" in content_type or "+json" in content_type


def _decode_body(body, content_type):
    if body and _is_json(content_type):
        try:
            return json.loads(body)
        except ValueError:
            return body
    return body


def run(request):
    logs = []
    changes = {}
    collection_path = request.get("collection_path")

    def log(*args):
        logs.append(" ".join(str(arg) for arg in args))

    def set_global(key, value):
        if not collection_path:
            logs.append("Warning: Cannot set global variable - no collection path provided")
            return
        changes[str(key)] = str(value)

    surface = SimpleNamespace(set=set_global)
    client = SimpleNamespace(global_=surface)
    # `client.global` is not valid syntax, getattr(client, "global") is
    setattr(client, "global", surface)

    safe_builtins = {name: getattr(builtins, name) for name in _SAFE_BUILTINS}
    safe_builtins["print"] = log
    safe_builtins["getattr"] = _public_getattr
    safe_builtins["hasattr"] = _public_hasattr

    sandbox = {
        "__builtins__": safe_builtins,
        "console": SimpleNamespace(log=log),
        "client": client,
        "response": SimpleNamespace(
            body=_decode_body(
                request.get("response_body"), request.get("response_content_type") or ""
            )
        ),
    }

    try:
        exec(_compile(request["code"]), sandbox)
    except Exception as exc:
        return {"success": False, "error": f"{exc.__class__.__name__}: {exc}", "logs": logs}

    return {
        "success": True,
        "logs": logs,
        "global_variable_changes": changes or None,
    }


if __name__ == "__main__":
    result = run(json.loads(sys.stdin.read()))
    sys.stdout.write(json.dumps(result))
