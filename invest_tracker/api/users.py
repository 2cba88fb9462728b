# invest_tracker/api/users.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import delete, update
from sqlmodel import Session, select

from invest_tracker.api.params import RowId
from invest_tracker.core.errors import NotFoundError
from invest_tracker.database import get_session
from invest_tracker.models.user import UserProfile
from invest_tracker.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])

@router.get("", response_model=List[UserRead])
@router.get("/", response_model=List[UserRead])
def list_users(session: Session = Depends(get_session)):
    return session.exec(select(UserProfile)).all()


@router.get("/{user_id}", response_model=UserRead)
def get_user(user_id: RowId, session: Session = Depends(get_session)):
    user = session.get(UserProfile, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


@router.post("")
@router.post("/")
def create_user(user_data: UserCreate, session: Session = Depends(get_session)):
    user = UserProfile(**user_data.model_dump())
    session.add(user)
    session.commit()
    session.refresh(user)
    return {"message": "User created successfully", "id": user.user_id}


@router.put("/{user_id}")
def update_user(user_id: RowId, user_data: UserUpdate, session: Session = Depends(get_session)):
    """
    Replaces every mutable column of the user. Unknown ids are not an
    error: the statement simply matches no row.
    """
    session.exec(
        update(UserProfile)
        .where(UserProfile.user_id == user_id)
        .values(**user_data.model_dump())
    )
    session.commit()
    return {"message": "User updated successfully"}


@router.delete("/{user_id}")
def delete_user(user_id: RowId, session: Session = Depends(get_session)):
    # no cascade here: dependent rows are the database's concern
    session.exec(delete(UserProfile).where(UserProfile.user_id == user_id))
    session.commit()
    return {"message": "User deleted successfully"}
