"""Script graph data models.

ScriptEntry is the per-script record the resolver builds in two passes.
TreeNode is the renderer-facing {label, nodes} shape.
"""

from typing import Literal

from pydantic import BaseModel, Field


class ScriptEntry(BaseModel):
    """One named script from the manifest with its resolved relationships."""

    name: str = Field(description="Script name (e.g., 'test:unit')")
    cmd: str = Field(description="Raw command string")
    is_pre: bool = Field(default=False, description="Whether this is a pre<owner> hook")
    is_post: bool = Field(default=False, description="Whether this is a post<owner> hook")
    pre: str | None = Field(default=None, description="Name of this script's pre hook, if any")
    post: str | None = Field(default=None, description="Name of this script's post hook, if any")
    nodes_names: list[str] = Field(
        default_factory=list,
        description="Referenced script names in extraction order (existing only)",
    )

    # Filled in by the second pass
    is_sub: bool = Field(default=False, description="Referenced by at least one other script")
    is_explicit_sub: bool = Field(
        default=False, description="Referenced and namespaced with ':'"
    )
    label: str = Field(default="", description="Display label (name and command)")
    nodes: list[str] = Field(
        default_factory=list,
        description="Child script names: pre hook, references, post hook",
    )

    @property
    def is_hook(self) -> bool:
        """Whether this script is a pre or post lifecycle hook."""
        return self.is_pre or self.is_post


class TreeNode(BaseModel):
    """A node in the rendered script tree."""

    label: str = Field(description="Display label")
    nodes: list["TreeNode"] = Field(default_factory=list, description="Child nodes")
    name: str | None = Field(default=None, description="Script name (None for the root)")
    marker: Literal["cycle", "depth"] | None = Field(
        default=None,
        description="Set when expansion stopped because of a cycle or the depth limit",
    )


class ScriptTree(BaseModel):
    """Resolved tree plus the facts needed to describe it."""

    root: TreeNode = Field(description="Root node labelled with the script count")
    script_count: int = Field(description="Number of top-level scripts")
    alpha: bool = Field(default=False, description="Whether top-level order is alphabetical")
    pruned: bool = Field(default=False, description="Whether the Pruner was applied")
    cycles: list[list[str]] = Field(
        default_factory=list, description="Reference cycles found between scripts"
    )
    entries: dict[str, ScriptEntry] = Field(
        default_factory=dict,
        exclude=True,
        description="Full resolved entry map, used for styling",
    )
