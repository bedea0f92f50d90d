"""Analyzers that turn a script map into a script tree."""

from scriptree.analyzers.graph import (
    attach_nodes,
    build_script_graph,
    find_script_cycles,
    get_detailed_scripts,
    get_nodes_names,
    resolve_entries,
)
from scriptree.analyzers.lifecycle import BUILTINS, POST, PRE, is_lifecycle_script
from scriptree.analyzers.manifest import find_manifest, load_scripts
from scriptree.analyzers.prune import prune_entries
from scriptree.analyzers.references import (
    DEFAULT_RULES,
    InvocationRule,
    extract_references,
    get_run_all_scripts,
    get_run_scripts,
)
from scriptree.analyzers.tree import build_tree
from scriptree.analyzers.wildcards import (
    expand_wildcards,
    get_existing_node_names,
    is_wildcard,
    match_scripts,
)

__all__ = [
    # Lifecycle
    "BUILTINS",
    "POST",
    "PRE",
    "is_lifecycle_script",
    # References
    "DEFAULT_RULES",
    "InvocationRule",
    "extract_references",
    "get_run_all_scripts",
    "get_run_scripts",
    # Wildcards
    "expand_wildcards",
    "get_existing_node_names",
    "is_wildcard",
    "match_scripts",
    # Graph
    "attach_nodes",
    "build_script_graph",
    "find_script_cycles",
    "get_detailed_scripts",
    "get_nodes_names",
    "resolve_entries",
    # Prune / tree
    "build_tree",
    "prune_entries",
    # Manifest
    "find_manifest",
    "load_scripts",
]
