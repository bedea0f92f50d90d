"""scriptree - show how package.json scripts call each other."""

from collections.abc import Mapping
from typing import Any

from scriptree.analyzers import build_tree, find_script_cycles, prune_entries, resolve_entries
from scriptree.config import ResolverOptions
from scriptree.logging import log_operation, logger
from scriptree.models.scripts import ScriptTree, TreeNode

__version__ = "0.1.0"


def _coerce_options(options: ResolverOptions | Mapping[str, Any] | None) -> ResolverOptions:
    if options is None:
        return ResolverOptions()
    if isinstance(options, ResolverOptions):
        return options
    return ResolverOptions.model_validate(dict(options))


def resolve_script_tree(
    scripts: Mapping[str, str] | None,
    options: ResolverOptions | Mapping[str, Any] | None = None,
) -> ScriptTree:
    """Resolve a script map into a tree plus its cycle report.

    Args:
        scripts: Script name -> command mapping.
        options: ResolverOptions or a plain dict (unknown keys are ignored).

    Returns:
        ScriptTree with the root node and the cycles found.

    Raises:
        ConfigurationError: If scripts is None or empty.
    """
    opts = _coerce_options(options)

    details = {"scripts": len(scripts or {}), "prune": opts.prune}
    with log_operation("resolve_scripts", details) as timer:
        entries = resolve_entries(scripts)
        top_level = prune_entries(entries) if opts.prune else entries
        root = build_tree(top_level, arena=entries, alpha=opts.alpha, max_depth=opts.max_depth)

    logger.debug(
        "Resolved %d of %d scripts in %.1fms", len(top_level), len(entries), timer.elapsed_ms
    )

    return ScriptTree(
        root=root,
        script_count=len(top_level),
        alpha=opts.alpha,
        pruned=opts.prune,
        cycles=find_script_cycles(entries),
        entries=entries,
    )


def resolve_scripts(
    scripts: Mapping[str, str] | None,
    options: ResolverOptions | Mapping[str, Any] | None = None,
) -> TreeNode:
    """Resolve a script map into a {label, nodes} tree ready for rendering."""
    return resolve_script_tree(scripts, options).root
