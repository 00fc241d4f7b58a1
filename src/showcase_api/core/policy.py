"""Authorization policies for the admin content endpoints.

A policy answers whether an ability (``create``, ``update``, ...) may be
exercised on a content resource (``principles``, ``team``, ``awards``).
Rules are pluggable: the active policy is chosen by ``Settings.admin_policy``.
"""

from enum import StrEnum
from typing import Protocol


class Ability(StrEnum):
    """Actions an operator can take on a content resource."""

    VIEW_ANY = "view_any"
    VIEW = "view"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    RESTORE = "restore"
    FORCE_DELETE = "force_delete"
    REORDER = "reorder"


_READ_ABILITIES = frozenset({Ability.VIEW_ANY, Ability.VIEW})


class ContentPolicy(Protocol):
    """Protocol for admin authorization rules."""

    def allows(self, ability: Ability, resource: str) -> bool:
        """Return True if ``ability`` is permitted on ``resource``."""
        ...


class AllowAllPolicy:
    """Permit every ability on every resource."""

    def allows(self, ability: Ability, resource: str) -> bool:  # noqa: ARG002
        return True


class ReadOnlyPolicy:
    """Permit listing and viewing only."""

    def allows(self, ability: Ability, resource: str) -> bool:  # noqa: ARG002
        return ability in _READ_ABILITIES


_POLICIES: dict[str, type[AllowAllPolicy] | type[ReadOnlyPolicy]] = {
    "allow_all": AllowAllPolicy,
    "read_only": ReadOnlyPolicy,
}


def build_policy(name: str) -> ContentPolicy:
    """Instantiate the policy registered under ``name``.

    Raises:
        ValueError: If no policy is registered under that name.
    """
    try:
        return _POLICIES[name]()
    except KeyError:
        msg = f"Unknown admin policy '{name}'"
        raise ValueError(msg) from None
