"""Pytest configuration and shared fixtures."""

import json
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_scripts() -> dict[str, str]:
    """A realistic scripts block with hooks, batch runs and wildcards."""
    return {
        "build": "npm run clean && npm-run-all -p build:*",
        "prebuild": "eslint .",
        "postbuild": "echo done",
        "build:css": "sass src:dist",
        "build:js": "tsc",
        "clean": "rimraf dist",
        "test": "npm-run-all -s test:*",
        "test:unit": "jest",
        "test:lint": "npm run lint",
        "lint": "eslint src",
        "postpublish": "git push --tags",
    }


@pytest.fixture
def sample_package_dir(temp_dir: Path, sample_scripts: dict[str, str]) -> Path:
    """A package directory with a package.json holding sample_scripts."""
    (temp_dir / "package.json").write_text(
        json.dumps({"name": "sample", "version": "1.0.0", "scripts": sample_scripts})
    )
    return temp_dir


@pytest.fixture(autouse=True)
def clean_scriptree_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SCRIPTREE_* variables from the developer's shell out of tests."""
    for name in ("SCRIPTREE_ALPHA", "SCRIPTREE_PRUNE", "SCRIPTREE_MAX_DEPTH"):
        monkeypatch.delenv(name, raising=False)
