"""Role sets and resource-level capability checks"""
from typing import FrozenSet, Iterable, Optional

from jambo_admin.models.admin import AdminRole

SUPER_ADMIN_ONLY: FrozenSet[AdminRole] = frozenset({AdminRole.SUPER_ADMIN})
ADMIN_ROLES: FrozenSet[AdminRole] = frozenset({AdminRole.SUPER_ADMIN, AdminRole.ADMIN})
ALL_ROLES: FrozenSet[AdminRole] = frozenset(AdminRole)


def has_role(role: str, allowed: Iterable[AdminRole]) -> bool:
    """True if ``role`` (enum member or raw claim string) is in ``allowed``"""
    try:
        return AdminRole(role) in set(allowed)
    except ValueError:
        return False


def can_access(role: str, permissions: Optional[Iterable[str]], resource: str) -> bool:
    """SUPER_ADMIN bypasses the permission list; everyone else needs membership"""
    if has_role(role, SUPER_ADMIN_ONLY):
        return True
    if not permissions:
        return False
    return resource in permissions
