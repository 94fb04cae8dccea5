"""
Seed the admins table with the bootstrap accounts.

Creates (if missing):
- a SUPER_ADMIN, the only role allowed to register further admins
- an ADMIN for day-to-day back-office work
- a SUPPORT user with read-only access

Run once after migrating:
    python -m jambo_admin.seed

Change the seeded passwords after first login.
"""
from typing import Dict, List

from sqlalchemy.orm import Session

from jambo_admin.database import SessionLocal
from jambo_admin.models.admin import AdminRole, AdminStatus
from jambo_admin.services.admin_store import AdminStore

SEED_ADMINS: List[Dict] = [
    {
        "email": "admin@creditjambo.com",
        "password": "Admin@123",
        "first_name": "Super",
        "last_name": "Admin",
        "phone": "+250788000000",
        "role": AdminRole.SUPER_ADMIN,
        "status": AdminStatus.ACTIVE,
    },
    {
        "email": "testadmin@creditjambo.com",
        "password": "Test@123",
        "first_name": "Test",
        "last_name": "Admin",
        "phone": "+250788111111",
        "role": AdminRole.ADMIN,
        "status": AdminStatus.ACTIVE,
    },
    {
        "email": "support@creditjambo.com",
        "password": "Support@123",
        "first_name": "Support",
        "last_name": "User",
        "phone": "+250788222222",
        "role": AdminRole.SUPPORT,
        "status": AdminStatus.ACTIVE,
    },
]


def seed_admins(db: Session) -> List[str]:
    """Create any seed admins that don't exist yet; return the emails created"""
    store = AdminStore(db)
    created = []
    for fields in SEED_ADMINS:
        if store.find_by_email(fields["email"]) is not None:
            print(f"  [=] {fields['email']} already exists")
            continue
        store.create(dict(fields))
        created.append(fields["email"])
        print(f"  [+] {fields['email']} ({fields['role'].value}) / {fields['password']}")
    return created


def main():
    print("\nSeeding admin accounts...\n")
    db = SessionLocal()
    try:
        created = seed_admins(db)
    finally:
        db.close()
    print(f"\nDone: {len(created)} admin(s) created. Change the seeded passwords after first login!")


if __name__ == "__main__":
    main()
