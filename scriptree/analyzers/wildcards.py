"""Wildcard expansion of script name patterns.

Script names are colon-delimited ("test:unit:fast") while glob semantics
are path-shaped. Swapping ':' and '/' lets PurePosixPath.full_match do
segment-aware matching: '*' matches one segment, '**' any number.
"""

from collections.abc import Iterable, Mapping
from pathlib import PurePosixPath

from scriptree.logging import logger

WILDCARD = "*"

_SWAP = str.maketrans({":": "/", "/": ":"})


def _swap_separators(name: str) -> str:
    """Turn ':' into '/' and '/' into ':' (the operation is its own inverse)."""
    return name.translate(_SWAP)


def is_wildcard(name: str) -> bool:
    """Whether a referenced name is a glob pattern."""
    return WILDCARD in name


def _has_empty_segment(name: str) -> bool:
    return "" in name.split(":")


def match_scripts(pattern: str, scripts: Iterable[str]) -> list[str]:
    """Return script names matching a colon-delimited glob pattern.

    Names with an empty segment ("a::b", ":a", "a:") never match.

    Args:
        pattern: Pattern such as "test:*" or "lint:**".
        scripts: Candidate script names, in the order results should keep.

    Returns:
        Matching names in candidate order.
    """
    path_pattern = _swap_separators(pattern)
    matches = []
    for name in scripts:
        if _has_empty_segment(name):
            continue
        if PurePosixPath(_swap_separators(name)).full_match(path_pattern):
            matches.append(name)
    return matches


def expand_wildcards(names: Iterable[str], scripts: Mapping[str, str]) -> list[str]:
    """Replace each wildcard pattern by the script names it matches.

    Non-wildcard names pass through unchanged. Expansions are inserted in
    place of the pattern.
    """
    expanded: list[str] = []
    for name in names:
        if not is_wildcard(name):
            expanded.append(name)
            continue
        matches = match_scripts(name, scripts)
        logger.debug("Expanded %r to %d script(s)", name, len(matches))
        expanded.extend(matches)
    return expanded


def get_existing_node_names(names: Iterable[str], scripts: Mapping[str, str]) -> list[str]:
    """Expand wildcards and drop names with no matching script.

    Args:
        names: Referenced names, possibly containing patterns.
        scripts: Full script name -> command mapping.

    Returns:
        Existing script names, deduplicated, in first-seen order.
    """
    existing: list[str] = []
    for name in expand_wildcards(names, scripts):
        if name not in scripts:
            logger.debug("Dropping dangling reference %r", name)
            continue
        if name not in existing:
            existing.append(name)
    return existing
