"""Shell-style glob expansion over multi-segment paths.

Patterns are walked one path segment at a time: literal segments are
joined as-is, wildcard segments are matched against a sorted directory
listing with ``fnmatch``. Results are therefore in the same order the
shell would list them, and nothing is cached between calls.
"""

import fnmatch
import logging
import os
import re
from collections.abc import Iterator

logger = logging.getLogger(__name__)

_MAGIC = re.compile(r"[*?[]")


def has_magic(segment: str) -> bool:
    """Check if a path segment contains glob wildcards."""
    return _MAGIC.search(segment) is not None


def _split_pattern(pattern: str) -> tuple[str, list[str]]:
    """Split a pattern into its root and non-empty segments.

    Args:
        pattern: Absolute or relative glob pattern.

    Returns:
        Tuple of (root, segments); root is "/" for absolute patterns,
        "." for patterns starting with "./" and "" for other relative ones.
    """
    if pattern.startswith(os.sep):
        root = os.sep
    elif pattern.split(os.sep, 1)[0] == os.curdir:
        root = os.curdir
    else:
        root = ""
    segments = [part for part in pattern.split(os.sep) if part and part != "."]
    return root, segments


def _list_dir(directory: str) -> list[str]:
    """List directory entry names in sorted order, or [] if unreadable."""
    try:
        return sorted(os.listdir(directory or os.curdir))
    except PermissionError:
        logger.warning("Permission denied scanning directory: %s", directory)
        return []
    except OSError:
        return []


def _match_segment(names: list[str], segment: str) -> Iterator[str]:
    """Yield names matching one wildcard segment.

    Leading dots are only matched by a segment that itself starts with
    a dot, as in the shell.
    """
    for name in names:
        if name.startswith(".") and not segment.startswith("."):
            continue
        if fnmatch.fnmatchcase(name, segment):
            yield name


def _expand(prefix: str, segments: list[str]) -> Iterator[str]:
    """Recursively resolve the remaining segments below prefix."""
    if not segments:
        yield prefix
        return

    segment, rest = segments[0], segments[1:]
    if not has_magic(segment):
        candidate = os.path.join(prefix, segment) if prefix else segment
        if rest and not os.path.isdir(candidate):
            return
        if not rest and not os.path.lexists(candidate):
            return
        yield from _expand(candidate, rest)
        return

    if prefix and not os.path.isdir(prefix):
        return
    for name in _match_segment(_list_dir(prefix), segment):
        candidate = os.path.join(prefix, name) if prefix else name
        if rest and not os.path.isdir(candidate):
            continue
        yield from _expand(candidate, rest)


def iter_matches(pattern: str) -> Iterator[str]:
    """Yield every existing path matching a glob pattern.

    Args:
        pattern: Shell-style glob, wildcards allowed in any segment.

    Yields:
        Matching paths of any type, in sorted discovery order.
    """
    root, segments = _split_pattern(pattern)
    if not segments:
        yield root or os.curdir
        return
    yield from _expand(root, segments)


def expand(pattern: str) -> list[str]:
    """Expand a pattern into the regular files it currently matches.

    Symlinks and directories are excluded. A pattern matching nothing
    yields an empty list.

    Args:
        pattern: Shell-style glob pattern.

    Returns:
        Paths of existing regular files, in discovery order.
    """
    return [
        path
        for path in iter_matches(pattern)
        if os.path.isfile(path) and not os.path.islink(path)
    ]


def expand_dirs(pattern: str) -> list[str]:
    """Expand the directory portion of a pattern into existing directories.

    Args:
        pattern: Shell-style glob pattern; only ``dirname(pattern)`` is used.

    Returns:
        Paths of existing directories, in discovery order.
    """
    dir_pattern = os.path.dirname(pattern) or os.curdir
    return [path for path in iter_matches(dir_pattern) if os.path.isdir(path)]
