"""Script graph assembly.

Builds one ScriptEntry per script in two passes:

1. Per-entry facts that need only the script map: command, hook flags,
   hook links and referenced names.
2. Cross-entry facts that need every entry: sub-script flags, labels and
   the final ordered child list (pre hook, references, post hook).

Children are stored as names; the arena dict is the only place entries live.
"""

from collections.abc import Mapping

import networkx as nx

from scriptree.analyzers.lifecycle import POST, PRE, hook_name, is_lifecycle_script
from scriptree.analyzers.references import extract_references
from scriptree.analyzers.wildcards import get_existing_node_names
from scriptree.errors import ConfigurationError
from scriptree.logging import logger
from scriptree.models.scripts import ScriptEntry

SEGMENT_SEPARATOR = ":"
NO_SCRIPTS_MESSAGE = "No scripts available"


def get_nodes_names(name: str, scripts: Mapping[str, str]) -> list[str]:
    """Existing script names referenced by one script's command."""
    return get_existing_node_names(extract_references(scripts[name]), scripts)


def get_label(entry: ScriptEntry) -> str:
    """Plain display label for a script."""
    return f"{entry.name} — {entry.cmd}"


def get_detailed_scripts(scripts: Mapping[str, str]) -> dict[str, ScriptEntry]:
    """First pass: build an entry for every script.

    Args:
        scripts: Script name -> command mapping.

    Returns:
        Dict of name -> ScriptEntry in manifest order.
    """
    entries: dict[str, ScriptEntry] = {}
    for name, cmd in scripts.items():
        entries[name] = ScriptEntry(
            name=name,
            cmd=cmd or "",
            is_pre=is_lifecycle_script(PRE, name, scripts),
            is_post=is_lifecycle_script(POST, name, scripts),
            pre=hook_name(PRE, name, scripts),
            post=hook_name(POST, name, scripts),
            nodes_names=get_nodes_names(name, scripts),
        )
    return entries


def attach_nodes(entries: dict[str, ScriptEntry]) -> dict[str, ScriptEntry]:
    """Second pass: resolve cross-entry fields in place.

    Must run after get_detailed_scripts has covered every script.

    Args:
        entries: Arena produced by the first pass.

    Returns:
        The same dict, with is_sub, is_explicit_sub, label and nodes set.
    """
    referenced: set[str] = set()
    for entry in entries.values():
        referenced.update(entry.nodes_names)

    for name, entry in entries.items():
        entry.is_sub = name in referenced
        entry.is_explicit_sub = entry.is_sub and SEGMENT_SEPARATOR in name
        entry.label = get_label(entry)

        nodes = [n for n in entry.nodes_names if n != entry.pre and n != entry.post]
        if entry.pre:
            logger.debug("Attaching pre hook %r to %r", entry.pre, name)
            nodes.insert(0, entry.pre)
        if entry.post:
            logger.debug("Attaching post hook %r to %r", entry.post, name)
            nodes.append(entry.post)
        entry.nodes = nodes

    return entries


def resolve_entries(scripts: Mapping[str, str] | None) -> dict[str, ScriptEntry]:
    """Run both passes over a script map.

    Raises:
        ConfigurationError: If scripts is None or empty.
    """
    if not scripts:
        raise ConfigurationError(NO_SCRIPTS_MESSAGE)
    return attach_nodes(get_detailed_scripts(scripts))


def build_script_graph(entries: Mapping[str, ScriptEntry]) -> nx.DiGraph:
    """Convert resolved entries to a directed graph.

    Nodes carry cmd, is_pre, is_post and is_sub attributes. Edges point from
    a script to each child, typed "pre", "post" or "runs".
    """
    G = nx.DiGraph()

    for name, entry in entries.items():
        G.add_node(
            name,
            cmd=entry.cmd,
            is_pre=entry.is_pre,
            is_post=entry.is_post,
            is_sub=entry.is_sub,
        )

    for name, entry in entries.items():
        for child in entry.nodes:
            if child == entry.pre:
                edge_type = "pre"
            elif child == entry.post:
                edge_type = "post"
            else:
                edge_type = "runs"
            G.add_edge(name, child, type=edge_type)

    return G


def find_script_cycles(entries: Mapping[str, ScriptEntry]) -> list[list[str]]:
    """Find scripts that invoke themselves directly or transitively.

    Returns:
        List of cycles (each a list of script names), shortest first.
    """
    G = build_script_graph(entries)
    cycles = [list(cycle) for cycle in nx.simple_cycles(G)]
    cycles.sort(key=lambda c: (len(c), c))
    return cycles
