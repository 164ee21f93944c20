from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from shop_api.db.models.user import User
from shop_api.db.schemas.user import UserCreate, UserUpdate
from .base import create_record, delete_record, persistence_errors, update_record

def get_user(db: Session, user_id: int) -> Optional[User]:
    with persistence_errors(db):
        return db.query(User).options(joinedload(User.store)).filter(User.id == user_id).first()

def get_users(db: Session) -> List[User]:
    with persistence_errors(db):
        return db.query(User).options(joinedload(User.store)).order_by(User.id).all()

def create_user(db: Session, user: UserCreate) -> User:
    return create_record(db, User, user.model_dump())

def update_user(db: Session, user_id: int, user_update: UserUpdate) -> User:
    return update_record(db, User, user_id, user_update.changes())

def delete_user(db: Session, user_id: int) -> None:
    delete_record(db, User, user_id)
