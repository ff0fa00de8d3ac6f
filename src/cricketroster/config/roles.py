"""Role configuration for roster entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class RoleRules:
    role: str
    stat_label: str


RUNS_LABEL = "Runs"
WICKETS_LABEL = "Wickets"

# Display order; the first entry is the form default.
_ROLE_RULES: Tuple[RoleRules, ...] = (
    RoleRules(role="Batsman", stat_label=RUNS_LABEL),
    RoleRules(role="Bowler", stat_label=WICKETS_LABEL),
    RoleRules(role="All-Rounder", stat_label=RUNS_LABEL),
    RoleRules(role="Wicket-Keeper", stat_label=RUNS_LABEL),
    RoleRules(role="Coach", stat_label=RUNS_LABEL),
)

_ROLE_LOOKUP: Dict[str, RoleRules] = {rules.role.lower(): rules for rules in _ROLE_RULES}

ROLE_NAMES: Tuple[str, ...] = tuple(rules.role for rules in _ROLE_RULES)
DEFAULT_ROLE = ROLE_NAMES[0]


def iter_roles() -> Iterable[RoleRules]:
    """Return an iterator of all configured roles in display order."""

    return iter(_ROLE_RULES)


def get_role(name: str) -> RoleRules:
    """Fetch rules for a role name, raising KeyError if missing."""

    key = name.strip().lower()
    if key not in _ROLE_LOOKUP:
        raise KeyError(f"No role configured for name={name!r}")
    return _ROLE_LOOKUP[key]


def stat_label_for(role: str) -> str:
    """Label for the stat column: wickets for bowlers, runs for everyone else.

    Roles are advisory, so unknown names fall back to runs instead of raising.
    """

    try:
        return get_role(role).stat_label
    except KeyError:
        return RUNS_LABEL
