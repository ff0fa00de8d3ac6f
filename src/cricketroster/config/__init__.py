"""Configuration helpers for player roles and runtime settings."""

from .roles import (
    DEFAULT_ROLE,
    ROLE_NAMES,
    RoleRules,
    get_role,
    iter_roles,
    stat_label_for,
)
from .settings import Settings, load_settings

__all__ = [
    "DEFAULT_ROLE",
    "ROLE_NAMES",
    "RoleRules",
    "Settings",
    "get_role",
    "iter_roles",
    "load_settings",
    "stat_label_for",
]
