"""Pydantic models for scriptree."""

from scriptree.models.scripts import ScriptEntry, ScriptTree, TreeNode

__all__ = ["ScriptEntry", "ScriptTree", "TreeNode"]
