import base64
import re

_SCHEME_AND_CREDENTIALS = re.compile(r"^(\S+)\s+(.*)$")


def normalize_basic_auth(headers: dict[str, str]) -> dict[str, str]:
    """Base64-encode plain `user:password` Basic credentials.

    `Authorization: Basic alice:secret` becomes `Basic YWxpY2U6c2VjcmV0`, with
    the scheme's original case kept. A credential without a colon is assumed
    to be encoded already. The colon test is a heuristic, not a base64 check,
    so unusual credentials can be misjudged either way.
    """
    normalized = dict(headers)

    for key, value in headers.items():
        if key.lower() != "authorization":
            continue

        match = _SCHEME_AND_CREDENTIALS.match(value.strip())
        if match is None:
            continue

        scheme, credentials = match.group(1), match.group(2).strip()
        if scheme.lower() != "basic" or ":" not in credentials:
            continue

        encoded = base64.b64encode(credentials.encode("utf-8")).decode("ascii")
        normalized[key] = f"{scheme} {encoded}"

    return normalized
