"""Lifecycle hook detection.

A script named pre<name> or post<name> runs automatically around <name>
when <name> is another script in the manifest or a built-in npm command.
"""

from collections.abc import Mapping

PRE = "pre"
POST = "post"

# npm commands that fire pre/post hooks without a matching script
BUILTINS: frozenset[str] = frozenset({
    "publish",
    "install",
    "uninstall",
    "test",
    "stop",
    "start",
    "restart",
    "version",
})


def is_lifecycle_script(prefix: str, name: str, scripts: Mapping[str, str]) -> bool:
    """Check whether a script is a lifecycle hook for the given prefix.

    Args:
        prefix: Hook prefix, PRE or POST.
        name: Candidate script name.
        scripts: Full script name -> command mapping.

    Returns:
        True if name starts with prefix and the remainder is an existing
        script or a built-in command.
    """
    if not name.startswith(prefix):
        return False
    root = name[len(prefix):]
    if not root:
        return False
    return root in scripts or root in BUILTINS


def hook_name(prefix: str, name: str, scripts: Mapping[str, str]) -> str | None:
    """Return the name of the prefix hook attached to a script, if it exists."""
    candidate = prefix + name
    return candidate if candidate in scripts else None
