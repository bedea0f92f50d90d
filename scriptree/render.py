"""Text rendering for script trees.

render_tree draws the same box-drawing layout as the archy npm package:

    4 scripts
    ├─┬ build — npm run clean && npm run compile
    │ ├── clean — rimraf dist
    │ └── compile — tsc
    └── test — jest
"""

from collections.abc import Callable, Mapping

import click

from scriptree.models.scripts import ScriptEntry, TreeNode

LabelStyler = Callable[[TreeNode], str]


def _plain(node: TreeNode) -> str:
    return node.label


def make_styler(entries: Mapping[str, ScriptEntry]) -> LabelStyler:
    """Build a styler that colours labels by script kind.

    Hooks are cyan, other script names bold, commands dimmed and cycle or
    depth markers yellow. The root label is left as-is.
    """

    def _style(node: TreeNode) -> str:
        entry = entries.get(node.name) if node.name else None
        if entry is None:
            return node.label
        if node.marker == "cycle":
            return click.style(node.label, fg="yellow")

        name = (
            click.style(entry.name, fg="cyan")
            if entry.is_hook
            else click.style(entry.name, bold=True)
        )
        label = name + click.style(f" — {entry.cmd}", dim=True)
        if node.marker == "depth":
            label += click.style(" …", fg="yellow")
        return label

    return _style


def render_tree(
    node: TreeNode,
    style: LabelStyler | None = None,
    prefix: str = "",
) -> str:
    """Render a tree as text.

    Args:
        node: Root of the tree.
        style: Optional label styler (see make_styler).
        prefix: Indentation carried down from the parent.

    Returns:
        Rendered text ending with a newline.
    """
    style = style or _plain
    lines = style(node).split("\n")
    splitter = "\n" + prefix + ("│" if node.nodes else " ") + " "
    out = prefix + splitter.join(lines) + "\n"

    for i, child in enumerate(node.nodes):
        last = i == len(node.nodes) - 1
        child_prefix = prefix + (" " if last else "│") + " "
        branch = ("└" if last else "├") + "─" + ("┬" if child.nodes else "─") + " "
        out += prefix + branch + render_tree(child, style, child_prefix)[len(prefix) + 2:]

    return out
