"""Persistence for admin identities"""
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, undefer

from jambo_admin.exceptions import ConflictError
from jambo_admin.models.admin import Admin
from jambo_admin.utils.passwords import ensure_hashed

_DUPLICATE_EMAIL = "Admin with this email already exists"


class AdminStore:
    """Thin repository over the ``admins`` table.

    The password hash is only loaded when ``include_password=True`` is passed.
    Anything handed to :meth:`create` or :meth:`save` with a plaintext
    password is hashed first.
    """

    def __init__(self, db: Session):
        self.db = db

    def _query(self, include_password: bool):
        query = self.db.query(Admin)
        if include_password:
            query = query.options(undefer(Admin.password))
        return query

    def find_by_email(self, email: str, include_password: bool = False) -> Optional[Admin]:
        return self._query(include_password).filter(Admin.email == email).first()

    def find_by_id(self, admin_id: str, include_password: bool = False) -> Optional[Admin]:
        return self._query(include_password).filter(Admin.id == admin_id).first()

    def list_admins(self) -> List[Admin]:
        return self.db.query(Admin).order_by(Admin.created_at.desc()).all()

    def create(self, fields: Dict[str, Any]) -> Admin:
        """Insert a new admin.

        Raises:
            ConflictError: an admin with the same email already exists.
        """
        if self.find_by_email(fields["email"]) is not None:
            raise ConflictError(_DUPLICATE_EMAIL)

        admin = Admin(**fields)
        admin.password = ensure_hashed(admin.password)
        self.db.add(admin)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(_DUPLICATE_EMAIL)
        self.db.refresh(admin)
        return admin

    def save(self, admin: Admin) -> Admin:
        # Only touch the password if it was loaded, otherwise we'd trigger a
        # deferred load just to re-check an existing hash.
        if "password" in admin.__dict__ and admin.password is not None:
            admin.password = ensure_hashed(admin.password)
        self.db.add(admin)
        self.db.commit()
        self.db.refresh(admin)
        return admin

    def update_refresh_token(self, admin_id: str, token: Optional[str]) -> None:
        try:
            self.db.query(Admin).filter(Admin.id == admin_id).update(
                {Admin.refresh_token: token}, synchronize_session="fetch"
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
