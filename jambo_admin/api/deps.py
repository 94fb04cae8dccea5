"""API dependencies for authentication and authorization.

Every protected route depends on :func:`get_current_admin`, which expects
``Authorization: Bearer <JWT>`` carrying an access token. Role-gated routes
use :func:`require_role` with one of the role sets from
``jambo_admin.services.permissions``:

    ADMIN_ROLES       SUPER_ADMIN, ADMIN           full back-office access
    SUPER_ADMIN_ONLY  SUPER_ADMIN                  admin management
    ALL_ROLES         SUPER_ADMIN, ADMIN, SUPPORT  read-only / support paths
"""
from typing import Callable, Iterable, NamedTuple, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from jambo_admin.database import get_db
from jambo_admin.exceptions import AuthenticationError, AuthorizationError
from jambo_admin.models.admin import AdminRole
from jambo_admin.services.admin_store import AdminStore
from jambo_admin.services.auth_service import AuthService
from jambo_admin.services.permissions import has_role
from jambo_admin.utils.jwt_utils import TokenIssuer, get_token_issuer

_bearer_scheme = HTTPBearer(auto_error=False)


class AdminContext(NamedTuple):
    """Identity decoded from the bearer token, attached to ``request.state.admin``."""
    id: str
    email: str
    role: str


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------

def get_auth_service(
    db: Session = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(AdminStore(db), issuer)


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

def get_current_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AdminContext:
    """Resolve the caller from its bearer token.

    Raises:
        AuthenticationError: no bearer token, or the token fails verification.
    """
    if not credentials or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("No token provided")

    payload = issuer.verify_access(credentials.credentials)
    ctx = AdminContext(id=payload.id, email=payload.email, role=payload.role)
    request.state.admin = ctx
    return ctx


# ---------------------------------------------------------------------------
# Authorization
# ---------------------------------------------------------------------------

def require_role(allowed: Iterable[AdminRole]) -> Callable:
    """Return a FastAPI dependency that only admits the given roles.

    Usage::

        @router.get("/stats")
        def stats(ctx: AdminContext = Depends(require_role(ADMIN_ROLES))):
            ...
    """
    allowed = frozenset(allowed)

    def _role_dep(ctx: AdminContext = Depends(get_current_admin)) -> AdminContext:
        if not has_role(ctx.role, allowed):
            raise AuthorizationError("Insufficient permissions")
        return ctx

    _role_dep.__name__ = "require_role_" + "_".join(sorted(r.value.lower() for r in allowed))
    return _role_dep
