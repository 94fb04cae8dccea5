"""Database models"""
from jambo_admin.models.admin import Admin, AdminRole, AdminStatus

__all__ = ["Admin", "AdminRole", "AdminStatus"]
