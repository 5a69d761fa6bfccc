import os

from dotenv import load_dotenv
from sqlalchemy import select

from app.core.passwords import hash_password
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.enums import UserRole
from app.models.user import AppUser

# ADMIN_* may live in .env next to DATABASE_URL
load_dotenv()

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@gourmetto.com")
ADMIN_NAME = os.getenv("ADMIN_NAME", "Admin")


def main():
    password = os.getenv("ADMIN_PASSWORD")
    if not password:
        raise SystemExit("Set ADMIN_PASSWORD to seed the manager account")

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        existing = db.execute(
            select(AppUser).where(AppUser.email == ADMIN_EMAIL)
        ).scalar_one_or_none()
        if existing:
            print("Manager already exists:", ADMIN_EMAIL)
            return

        db.add(AppUser(
            name=ADMIN_NAME,
            email=ADMIN_EMAIL,
            password_hash=hash_password(password),
            role=UserRole.MANAGER.value,
        ))
        db.commit()
        print("Manager seeded:", ADMIN_EMAIL)
    finally:
        db.close()

if __name__ == "__main__":
    main()
