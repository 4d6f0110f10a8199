"""Recover review comments from model tool-call arguments.

Arguments are treated as semi-trusted text rather than JSON: each field is
pulled out with its own pattern so one malformed field does not cost the
others. Anything that cannot be recovered comes back as ``None``.
"""
import json
import re
from typing import Any
from conventional_review.models.review import PartialComment, RawToolCall, ReviewComment, Side


LINE_RE = re.compile(r'"line"\s*:\s*"?(\d+)')
SIDE_RE = re.compile(r'"side"\s*:\s*"(left|right)"', re.IGNORECASE)
# A well-formed JSON string: backslashes always pair with the next character.
COMMENT_RE = re.compile(r'"comment"\s*:\s*"((?:[^"\\]|\\.)*)"\s*(?:,\s*"\w+"\s*:|\}\s*$)', re.DOTALL)
# Fallback for stray unescaped quotes: the value ends at the quote followed by another key
# or the closing brace.
LOOSE_COMMENT_RE = re.compile(r'"comment"\s*:\s*"(.*?)(?<!\\)"\s*(?:,\s*"\w+"\s*:|\}\s*$)', re.DOTALL)
ESCAPE_RE = re.compile(r'\\(["\\/nrt])')

ESCAPES = {'"': '"', "\\": "\\", "/": "/", "n": "\n", "r": "\r", "t": "\t"}


def _unescape(value: str) -> str:
    return ESCAPE_RE.sub(lambda m: ESCAPES[m.group(1)], value)


def _decode(raw: str) -> str:
    try:
        return json.loads(f'"{raw}"', strict=False)
    except json.JSONDecodeError:
        return _unescape(raw)


def extract_comment_fields(arguments: str) -> dict[str, Any]:
    """Extract line, comment and side independently; missing ones are None."""
    line = None
    match = LINE_RE.search(arguments)
    if match and int(match.group(1)) > 0:
        line = int(match.group(1))

    comment = None
    match = COMMENT_RE.search(arguments) or LOOSE_COMMENT_RE.search(arguments)
    if match:
        comment = _decode(match.group(1)) or None

    side = None
    match = SIDE_RE.search(arguments)
    if match:
        side = Side(match.group(1).upper())

    return {"line": line, "comment": comment, "side": side}


def reconcile_tool_call(call: RawToolCall, path: str) -> ReviewComment | PartialComment:
    """Turn one raw tool call into a complete comment, or a partial one if fields are missing."""
    fields = extract_comment_fields(call.arguments)
    if fields["line"] is None or fields["comment"] is None or fields["side"] is None:
        return PartialComment(path=path, line=fields["line"], body=fields["comment"], side=fields["side"])
    return ReviewComment(path=path, line=fields["line"], body=fields["comment"], side=fields["side"])
