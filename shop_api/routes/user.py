from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import List
from shop_api.database import get_db
from shop_api.db.crud import user as user_crud
from shop_api.db.schemas.user import UserCreate, UserUpdate, UserRead
from shop_api.db.schemas import MAX_ID
from shop_api.db.schemas.relations import UserWithStore
from shop_api.errors import NotFoundError

router = APIRouter(
    prefix="/users",
    tags=["users"]
)

@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Create a new user"""
    return user_crud.create_user(db, user)

@router.get("", response_model=List[UserWithStore])
def list_users(db: Session = Depends(get_db)):
    """List users with their store"""
    return user_crud.get_users(db)

@router.get("/{user_id}", response_model=UserWithStore)
def get_user(user_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    db_user = user_crud.get_user(db, user_id)
    if not db_user:
        raise NotFoundError("User not found")
    return db_user

@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user: UserUpdate,
    user_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db)
):
    """Update only the fields present in the body"""
    return user_crud.update_user(db, user_id, user)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    user_crud.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
