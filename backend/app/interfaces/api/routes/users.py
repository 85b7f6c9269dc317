import uuid

from fastapi import Depends, status
from sqlalchemy.orm import Session

from app.application.services.user_service import (
    create_user,
    get_user_by_email_or_fail,
    get_user_or_404,
    list_users,
)
from app.infrastructure.db.session import get_db
from app.interfaces.api.routing import ForwardingRouter
from app.interfaces.api.schemas.user import UserCreate, UserResponse

router = ForwardingRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
def get_users(db: Session = Depends(get_db)):
    return list_users(db=db)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(payload: UserCreate, db: Session = Depends(get_db)):
    return create_user(db=db, payload=payload)


@router.get("/by-email/{email}", response_model=UserResponse)
def get_user_by_email_endpoint(email: str, db: Session = Depends(get_db)):
    return get_user_by_email_or_fail(db=db, email=email)


@router.get("/{user_id}", response_model=UserResponse)
def get_user_endpoint(user_id: uuid.UUID, db: Session = Depends(get_db)):
    return get_user_or_404(db=db, user_id=user_id)
