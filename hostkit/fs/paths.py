"""Helpers for home-directory shorthand (``~``) in path strings."""

from __future__ import annotations

import os
import re
from typing import Optional

from ..models import DirContext
from .dirs import get_os_user_home_dir

TILDE_NOTATION_RE = re.compile(r"^~[/\\]?")


def is_tilde_notation(path: str) -> bool:
    """True if ``path`` starts with ``~`` optionally followed by a separator."""

    return bool(TILDE_NOTATION_RE.match(path))


def expand_tilde(path: str, ctx: Optional[DirContext] = None) -> str:
    """Replaces a leading ``~`` with the user's home directory.

    ``~`` alone expands to exactly the home directory and ``~/a/b`` to the home
    directory joined with ``a/b``.
    """

    ctx = ctx if ctx is not None else DirContext.current()
    home = get_os_user_home_dir(ctx)
    remainder = TILDE_NOTATION_RE.sub("", path, count=1)
    if not remainder:
        return ctx.pathmod.normpath(home)
    return ctx.pathmod.normpath(ctx.pathmod.join(home, remainder))


def resolve(path: str, ctx: Optional[DirContext] = None) -> str:
    """Absolute form of ``path``, expanding tilde notation first."""

    if is_tilde_notation(path):
        return expand_tilde(path, ctx)
    return os.path.abspath(path)


def is_path_syntax(value: str) -> bool:
    """Heuristic: a string looks like a path if it has a ``/`` or starts with ``~``."""

    return "/" in value or is_tilde_notation(value)
