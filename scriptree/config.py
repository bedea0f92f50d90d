"""Resolver options.

Configuration via environment variables (read at call time, not import time):
    SCRIPTREE_ALPHA: Sort top-level scripts alphabetically ("1", "true", "yes")
    SCRIPTREE_PRUNE: Hide hooks and namespaced sub-scripts from the top level
    SCRIPTREE_MAX_DEPTH: Stop expanding children below this depth
"""

import os
from typing import Any

from pydantic import AliasChoices, BaseModel, Field

_TRUTHY = ("1", "true", "yes", "on")


def _env_flag(name: str) -> bool | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value.strip().lower() in _TRUTHY


class ResolverOptions(BaseModel):
    """Options recognised by the script resolver.

    Unknown keys are ignored so callers can pass a whole CLI options dict.
    """

    alpha: bool = Field(
        default=False,
        validation_alias=AliasChoices("alpha", "a"),
        description="Order top-level scripts alphabetically instead of manifest order",
    )
    prune: bool = Field(
        default=False,
        validation_alias=AliasChoices("prune", "p"),
        description="Hide hooks and namespaced sub-scripts from the top level",
    )
    max_depth: int | None = Field(
        default=None,
        ge=1,
        description="Maximum depth of expanded children (None = unlimited)",
    )

    model_config = {"extra": "ignore"}

    @classmethod
    def from_env(cls, **overrides: Any) -> "ResolverOptions":
        """Build options from SCRIPTREE_* variables, then apply overrides.

        Overrides set to None are treated as "not given" so CLI flags that
        were left at their default do not mask the environment.

        Args:
            **overrides: Explicit option values (alpha, prune, max_depth).

        Returns:
            Validated ResolverOptions.
        """
        values: dict[str, Any] = {}

        alpha = _env_flag("SCRIPTREE_ALPHA")
        if alpha is not None:
            values["alpha"] = alpha
        prune = _env_flag("SCRIPTREE_PRUNE")
        if prune is not None:
            values["prune"] = prune
        max_depth = os.getenv("SCRIPTREE_MAX_DEPTH")
        if max_depth:
            values["max_depth"] = int(max_depth)

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
