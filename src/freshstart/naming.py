"""Package-name derivation for cleaned projects."""

from __future__ import annotations

import re

_INVALID_CHARS_RE = re.compile(r"[^a-z0-9\-~]")
_HYPHEN_RUN_RE = re.compile(r"-+")


def derive_package_name(directory_name: str) -> str:
    """Return a registry-safe slug for a project directory name.

    The name is lower-cased, every character outside ``[a-z0-9-~]`` becomes a
    hyphen, hyphen runs collapse to one and leading/trailing hyphens are
    trimmed. The result is not checked against any registry.

    Example:
        >>> derive_package_name("My Cool App!!")
        'my-cool-app'
        >>> derive_package_name("--Already-ok~1--")
        'already-ok~1'
        >>> derive_package_name("!!!")
        ''
    """
    slug = _INVALID_CHARS_RE.sub("-", directory_name.lower())
    slug = _HYPHEN_RUN_RE.sub("-", slug)
    return slug.strip("-")
