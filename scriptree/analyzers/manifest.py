"""Package manifest loading.

Locates the nearest package.json (searching parent directories) and
returns its "scripts" object as a plain name -> command dict.
"""

import json
from pathlib import Path

from scriptree.errors import ManifestError
from scriptree.logging import logger

MANIFEST_FILENAME = "package.json"
MISSING_MESSAGE = "No package.json or no scripts key in this dir"


def find_manifest(start: str | Path = ".") -> Path:
    """Find the manifest for a file or directory.

    A file path is returned as-is. For a directory, the directory and then
    each parent is checked for package.json.

    Args:
        start: Manifest file or directory to search from.

    Returns:
        Path to the manifest.

    Raises:
        ManifestError: If no manifest is found.
    """
    start = Path(start).resolve()

    if start.is_file():
        return start

    for directory in (start, *start.parents):
        candidate = directory / MANIFEST_FILENAME
        if candidate.is_file():
            logger.debug("Found manifest at %s", candidate)
            return candidate

    raise ManifestError(MISSING_MESSAGE, path=str(start))


def load_scripts(start: str | Path = ".") -> dict[str, str]:
    """Load the scripts mapping from the nearest manifest.

    Non-string commands are skipped with a warning.

    Args:
        start: Manifest file or directory to search from.

    Returns:
        Dict of script name -> command in manifest order (may be empty).

    Raises:
        ManifestError: If the manifest is missing, unreadable, not valid
            JSON, or has no "scripts" object.
    """
    manifest = find_manifest(start)

    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestError(f"Cannot read {manifest}: {e}", path=str(manifest)) from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {manifest}: {e}", path=str(manifest)) from e

    scripts = data.get("scripts") if isinstance(data, dict) else None
    if not isinstance(scripts, dict):
        raise ManifestError(MISSING_MESSAGE, path=str(manifest))

    result: dict[str, str] = {}
    for name, cmd in scripts.items():
        if not isinstance(cmd, str):
            logger.warning("Skipping script %r: command is not a string", name)
            continue
        result[name] = cmd
    return result
