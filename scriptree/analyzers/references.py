"""Sub-script reference extraction from command strings.

Recognises two invocation idioms, each described by an InvocationRule:

- direct:  npm run <name>            (also pnpm run / yarn run)
- batch:   npm-run-all [flags] <name> <name:*> ...   (also run-s / run-p)

This is pattern matching over known idioms, not a shell parser. A third
idiom is added by appending a rule to DEFAULT_RULES.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

# build, watch, build_client, build-client, test:unit
NAME_TOKEN = r"[a-z0-9_:\-]+"
# -s, --serial, --max-parallel=2
FLAG_TOKENS = r"(?:\s+-+[\w\-]+(?:=\S+)?)*"
# build, build:*, test:**
PATTERN_TOKEN = r"[a-z0-9_:*][a-z0-9_:\-*]*"


@dataclass(frozen=True)
class InvocationRule:
    """Describes one way a command can invoke other scripts.

    Attributes:
        name: Rule identifier ("direct", "batch", ...).
        runner: Regex for the runner keyword(s).
        flags: Regex for the flag tokens allowed between runner and names.
        names: Regex for the captured name run (without leading whitespace).
        multi: Whether the captured run may hold several whitespace-separated names.
    """

    name: str
    runner: str
    names: str
    flags: str = ""
    multi: bool = False

    @property
    def pattern(self) -> re.Pattern[str]:
        if self.multi:
            names = rf"(?P<names>(?:\s+{self.names})+)"
        else:
            names = rf"\s+(?P<names>{self.names})"
        return re.compile(
            rf"(?<![\w\-])(?:{self.runner}){self.flags}{names}",
            re.IGNORECASE,
        )

    def findall(self, cmd: str) -> list[str]:
        """Return every referenced name in first-seen order, deduplicated."""
        found: list[str] = []
        for match in self.pattern.finditer(cmd):
            run = match.group("names")
            if self.multi:
                found.extend(token for token in run.split() if token)
            else:
                found.append(run.strip())
        return unique(found)


DIRECT_RULE = InvocationRule(
    name="direct",
    runner=r"(?:npm|pnpm|yarn)\s+run",
    names=NAME_TOKEN,
)

BATCH_RULE = InvocationRule(
    name="batch",
    runner=r"npm-run-all|run-s|run-p",
    names=PATTERN_TOKEN,
    flags=FLAG_TOKENS,
    multi=True,
)

DEFAULT_RULES: tuple[InvocationRule, ...] = (DIRECT_RULE, BATCH_RULE)


def unique(items: Iterable[str]) -> list[str]:
    """Deduplicate while keeping first-seen order."""
    return list(dict.fromkeys(items))


def get_run_scripts(cmd: str | None) -> list[str]:
    """Names invoked with `npm run <name>`."""
    if not cmd:
        return []
    return DIRECT_RULE.findall(cmd)


def get_run_all_scripts(cmd: str | None) -> list[str]:
    """Names (and wildcard patterns) passed to npm-run-all, run-s or run-p."""
    if not cmd:
        return []
    return BATCH_RULE.findall(cmd)


def extract_references(
    cmd: str | None,
    rules: Sequence[InvocationRule] = DEFAULT_RULES,
) -> list[str]:
    """Extract every referenced script name from a command string.

    Results of each rule are concatenated in rule order and deduplicated.
    Names are not checked against the manifest here.

    Args:
        cmd: Raw command text.
        rules: Invocation rules to apply.

    Returns:
        Referenced names in first-seen order.
    """
    if not cmd:
        return []
    names: list[str] = []
    for rule in rules:
        names.extend(rule.findall(cmd))
    return unique(names)
