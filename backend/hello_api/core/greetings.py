"""Greetings — message text and name extraction for the hello endpoints.

Invariants:
    - An absent or empty query name yields the server-wide default greeting
    - Path names come from the segment right after "hello"; deeper segments are ignored
    - An empty path name raises MissingNameError (never greets "")
"""

from hello_api.core.errors import MissingNameError

DEFAULT_GREETING = "Hello, stdlib API Server!"

# "/hello/john" -> ["", "hello", "john"]
_NAME_SEGMENT = 2


def greet(name: str | None) -> str:
    """Greeting for an optional name."""
    if not name:
        return DEFAULT_GREETING
    return f"Hello, {name}"


def name_from_path(path: str) -> str:
    """Extract the name segment from a /hello/<name> path by splitting on '/'.

    Expects the already percent-decoded path (ASGI scope["path"]).
    """
    segments = path.split("/")
    if len(segments) <= _NAME_SEGMENT:
        raise MissingNameError()
    name = segments[_NAME_SEGMENT]
    if not name:
        raise MissingNameError()
    return name
