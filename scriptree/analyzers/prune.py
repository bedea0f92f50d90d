"""Top-level pruning of the script listing."""

from collections.abc import Mapping

from scriptree.logging import logger
from scriptree.models.scripts import ScriptEntry


def is_prunable(entry: ScriptEntry) -> bool:
    """Whether a script is hidden from the top level.

    Every pre/post hook is hidden. Referenced scripts are hidden only when
    namespaced (e.g. "build:css"); a plain referenced name stays at the
    top level.
    """
    return entry.is_hook or entry.is_explicit_sub


def prune_entries(entries: Mapping[str, ScriptEntry]) -> dict[str, ScriptEntry]:
    """Filter out hooks and namespaced sub-scripts.

    The input is not modified and pruning a pruned result changes nothing.

    Args:
        entries: Resolved entries from the graph assembler.

    Returns:
        New dict with the remaining entries in their original order.
    """
    kept = {}
    for name, entry in entries.items():
        if is_prunable(entry):
            logger.debug("Pruning %r from top level", name)
            continue
        kept[name] = entry
    return kept
