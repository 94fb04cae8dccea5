"""Admin model: back-office operators with roles, status and lockout state"""
import enum
import uuid
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Enum, Integer, String, Text
from sqlalchemy.orm import deferred

from jambo_admin.database import Base


class AdminRole(str, enum.Enum):
    SUPER_ADMIN = "SUPER_ADMIN"
    ADMIN = "ADMIN"
    SUPPORT = "SUPPORT"


class AdminStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    INACTIVE = "INACTIVE"


def _new_admin_id() -> str:
    return str(uuid.uuid4())


class Admin(Base):
    """A back-office admin account.

    ``password`` is a deferred column: it is not loaded by ordinary queries
    and must be requested explicitly (see ``AdminStore``) when a comparison
    is needed. Hashing happens in ``jambo_admin.utils.passwords`` before the
    row is persisted, never in a mapper event.
    """

    __tablename__ = "admins"

    id = Column(String(36), primary_key=True, default=_new_admin_id)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = deferred(Column(String(255), nullable=False))
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=True)
    role = Column(Enum(AdminRole, name="admin_role"), nullable=False, default=AdminRole.ADMIN)
    status = Column(Enum(AdminStatus, name="admin_status"), nullable=False, default=AdminStatus.ACTIVE)
    permissions = Column(JSON, nullable=True)                    # only consulted for non-SUPER_ADMIN
    login_attempts = Column(Integer, nullable=False, default=0)
    locked_until = Column(DateTime, nullable=True)
    last_login_at = Column(DateTime, nullable=True)
    last_login_ip = Column(String(45), nullable=True)
    refresh_token = Column(Text, nullable=True)                  # single active value
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Admin {self.email} role={self.role.value if self.role else None}>"
