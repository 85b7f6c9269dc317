import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.application.errors import NotFoundError
from app.infrastructure.db.models import User
from app.interfaces.api.schemas.user import UserCreate


def list_users(db: Session) -> list[User]:
    return list(db.execute(select(User).order_by(User.created_at, User.email)).scalars().all())


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    return db.get(User, user_id)


def get_user_or_404(db: Session, user_id: uuid.UUID) -> User:
    user = get_user_by_id(db=db, user_id=user_id)
    if user is None:
        raise NotFoundError("User Not Found")
    return user


def get_user_by_email_or_fail(db: Session, email: str) -> User:
    """Load exactly one user by email; raises NoResultFound when there is none."""
    return db.execute(select(User).where(User.email == email)).scalar_one()


def create_user(db: Session, payload: UserCreate) -> User:
    # uniqueness is left to the database constraint
    user = User(name=payload.name, email=payload.email, age=payload.age)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise
    db.refresh(user)
    return user
