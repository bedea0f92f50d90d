"""Tree building from resolved script entries.

Children are looked up by name in the arena and copied into fresh
TreeNode objects, so the output is always a finite tree. A script already
on the current path becomes a "cycle" leaf instead of being expanded.
"""

from collections.abc import Mapping

from scriptree.logging import logger
from scriptree.models.scripts import ScriptEntry, TreeNode


def cycle_label(name: str) -> str:
    return f"{name} (cycle)"


def root_label(count: int) -> str:
    return f"{count} scripts"


def _materialize(
    name: str,
    arena: Mapping[str, ScriptEntry],
    path: tuple[str, ...],
    depth: int,
    max_depth: int | None,
) -> TreeNode:
    entry = arena[name]

    if name in path:
        logger.debug("Cycle through %r: %s", name, " -> ".join((*path, name)))
        return TreeNode(label=cycle_label(name), name=name, marker="cycle")

    if max_depth is not None and depth >= max_depth:
        return TreeNode(
            label=entry.label,
            name=name,
            marker="depth" if entry.nodes else None,
        )

    children = [
        _materialize(child, arena, (*path, name), depth + 1, max_depth)
        for child in entry.nodes
        if child in arena
    ]
    return TreeNode(label=entry.label, name=name, nodes=children)


def build_tree(
    entries: Mapping[str, ScriptEntry],
    arena: Mapping[str, ScriptEntry] | None = None,
    alpha: bool = False,
    max_depth: int | None = None,
) -> TreeNode:
    """Build the renderer-facing tree.

    Args:
        entries: Top-level entries (possibly pruned), in manifest order.
        arena: Full name -> entry map used to resolve children. Defaults to
            entries; pass the unpruned map when entries were pruned.
        alpha: Order top-level scripts alphabetically.
        max_depth: Top-level scripts are depth 1; children deeper than this
            are omitted and the cut node is marked "depth".

    Returns:
        Root TreeNode labelled with the number of top-level scripts.
    """
    if arena is None:
        arena = entries

    names = list(entries)
    if alpha:
        names.sort()

    return TreeNode(
        label=root_label(len(names)),
        nodes=[_materialize(name, arena, (), 1, max_depth) for name in names],
    )
