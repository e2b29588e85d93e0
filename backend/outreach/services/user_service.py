import logging

from sqlalchemy.orm import Session

from outreach.config import settings
from outreach.models.user import User
from outreach.utils.ids import now_ms, time_token
from outreach.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)

ADMIN_SEED_ID = "admin-seed"


class DuplicateUsernameError(Exception):
    pass


def get_user(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, username: str, password: str, role: str, user_id: str | None = None) -> User:
    if get_user_by_username(db, username) is not None:
        raise DuplicateUsernameError(username)
    user = User(
        id=user_id or time_token(),
        username=username,
        password_hash=hash_password(password),
        role=role,
        created_at=now_ms(),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def authenticate(db: Session, username: str, password: str) -> User | None:
    user = get_user_by_username(db, username)
    if user is None or not verify_password(user.password_hash, password):
        return None
    return user


def delete_user(db: Session, user_id: str) -> None:
    db.query(User).filter(User.id == user_id).delete()
    db.commit()


def seed_admin(db: Session) -> User | None:
    """Create the default admin account when no user holds the admin username."""
    if get_user_by_username(db, settings.admin_username) is not None:
        return None
    logger.info("Seeding default admin user %r", settings.admin_username)
    return create_user(
        db,
        settings.admin_username,
        settings.admin_password,
        role="ADMIN",
        user_id=ADMIN_SEED_ID,
    )
