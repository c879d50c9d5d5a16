"""Permissive editing of ``tsconfig.json`` style compiler configuration.

The file is JSON with comments and trailing commas. Only the
``compilerOptions.types`` array is rewritten, in place, so the rest of the
file keeps its comments and layout.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

_STRING = r'"(?:\\.|[^"\\\n])*"'
_STRING_RE = re.compile(_STRING)
_COMMENT_RE = re.compile(rf"{_STRING}|/\*[\s\S]*?\*/|//[^\n]*")
_TRAILING_COMMA_RE = re.compile(rf"{_STRING}|,(\s*[}}\]])")
_COLON_RE = re.compile(r"\s*:\s*")


class TsconfigParseError(ValueError):
    """The compiler configuration could not be parsed or edited."""


def _is_string(token: str) -> bool:
    return token.startswith('"')


def strip_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments outside string literals.

    Example:
        >>> strip_comments('{"url": "http://x"} // note')
        '{"url": "http://x"} '
    """
    return _COMMENT_RE.sub(
        lambda match: match.group(0) if _is_string(match.group(0)) else "", text
    )


def mask_comments(text: str) -> str:
    """Blank out comments while keeping every other character offset."""

    def _mask(match: re.Match[str]) -> str:
        token = match.group(0)
        if _is_string(token):
            return token
        return re.sub(r"[^\n]", " ", token)

    return _COMMENT_RE.sub(_mask, text)


def strip_trailing_commas(text: str) -> str:
    """Drop commas that directly precede a closing brace or bracket.

    Example:
        >>> strip_trailing_commas('{"a": [1, 2,], "b": ",]",}')
        '{"a": [1, 2], "b": ",]"}'
    """

    def _replace(match: re.Match[str]) -> str:
        if match.group(1) is None:
            return match.group(0)
        return match.group(1)

    return _TRAILING_COMMA_RE.sub(_replace, text)


def parse_jsonc(text: str) -> object:
    """Parse JSON that may contain comments and trailing commas."""
    try:
        return json.loads(strip_trailing_commas(strip_comments(text)))
    except json.JSONDecodeError as exc:
        raise TsconfigParseError(f"invalid configuration: {exc}") from exc


def _render_entries(entries: list[str], original: str) -> str:
    if not entries:
        return ""
    rendered = [json.dumps(entry) for entry in entries]
    if "\n" not in original:
        return ", ".join(rendered)
    lines = original.split("\n")
    item_indent = ""
    for line in lines[1:]:
        if line.strip():
            item_indent = line[: len(line) - len(line.lstrip())]
            break
    closing_indent = lines[-1] if not lines[-1].strip() else ""
    body = ",\n".join(f"{item_indent}{item}" for item in rendered)
    return f"\n{body}\n{closing_indent}"


def _skip_string(text: str, index: int) -> int:
    match = _STRING_RE.match(text, index)
    if match is None:
        raise TsconfigParseError(f"unterminated string at offset {index}")
    return match.end()


def _closing_bracket(text: str, start: int) -> int:
    """Return the offset of the bracket closing the one at ``start``."""
    depth = 0
    index = start
    while index < len(text):
        char = text[index]
        if char == '"':
            index = _skip_string(text, index)
            continue
        if char in "{[":
            depth += 1
        elif char in "}]":
            depth -= 1
            if depth == 0:
                return index
        index += 1
    raise TsconfigParseError(f"unbalanced bracket at offset {start}")


def _member_value(text: str, key: str, start: int, end: int) -> int | None:
    """Return the offset of ``key``'s value among the direct members of
    the object body ``text[start:end]``."""
    depth = 0
    index = start
    while index < end:
        char = text[index]
        if char == '"':
            token_end = _skip_string(text, index)
            if depth == 0 and text[index + 1 : token_end - 1] == key:
                colon = _COLON_RE.match(text, token_end)
                if colon is not None:
                    return colon.end()
            index = token_end
            continue
        if char in "{[":
            depth += 1
        elif char in "}]":
            depth -= 1
        index += 1
    return None


def _types_array_span(text: str) -> tuple[int, int]:
    """Locate the contents of ``compilerOptions.types`` in ``text``.

    ``text`` must have its comments masked so offsets match the original.
    """
    root = text.find("{")
    if root < 0:
        raise TsconfigParseError("configuration root must be an object")
    options = _member_value(
        text, "compilerOptions", root + 1, _closing_bracket(text, root)
    )
    if options is None or not text.startswith("{", options):
        raise TsconfigParseError("could not locate compilerOptions")
    types = _member_value(
        text, "types", options + 1, _closing_bracket(text, options)
    )
    if types is None or not text.startswith("[", types):
        raise TsconfigParseError("could not locate the types array")
    return types + 1, _closing_bracket(text, types)


def remove_type_entry(text: str, entry: str) -> str | None:
    """Return ``text`` with ``entry`` removed from ``compilerOptions.types``.

    Args:
        text: Original file contents.
        entry: Type declaration name to remove (for example ``jest``).

    Returns:
        The updated text, or ``None`` when the entry is not listed.

    Raises:
        TsconfigParseError: The text cannot be parsed, or the ``types`` array
            cannot be located for an in-place edit.

    Example:
        >>> remove_type_entry('{"compilerOptions": {"types": ["node", "jest"]}}', "jest")
        '{"compilerOptions": {"types": ["node"]}}'
    """
    config = parse_jsonc(text)
    if not isinstance(config, dict):
        raise TsconfigParseError("configuration root must be an object")
    compiler_options = config.get("compilerOptions")
    if not isinstance(compiler_options, dict):
        return None
    types = compiler_options.get("types")
    if not isinstance(types, list):
        return None
    filtered = [item for item in types if item != entry]
    if len(filtered) == len(types):
        return None
    if not all(isinstance(item, str) for item in filtered):
        raise TsconfigParseError("types entries must be strings")

    start, end = _types_array_span(mask_comments(text))
    return text[:start] + _render_entries(filtered, text[start:end]) + text[end:]


def remove_types_entry(path: Path, entry: str) -> bool:
    """Remove ``entry`` from the ``types`` array of the file at ``path``.

    Returns ``True`` when the file was rewritten. A missing file is a no-op.
    The file is left untouched when ``TsconfigParseError`` is raised.
    """
    if not path.exists():
        return False
    text = path.read_text(encoding="utf-8")
    updated = remove_type_entry(text, entry)
    if updated is None:
        return False
    path.write_text(updated, encoding="utf-8")
    return True
