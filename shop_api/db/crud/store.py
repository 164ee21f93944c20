from sqlalchemy.orm import Session, joinedload, selectinload
from typing import List, Optional
from shop_api.db.models.store import Store
from shop_api.db.schemas.store import StoreCreate, StoreUpdate
from .base import create_record, delete_record, persistence_errors, update_record

def _with_relations(db: Session):
    return db.query(Store).options(joinedload(Store.user), selectinload(Store.products))

def get_store(db: Session, store_id: int) -> Optional[Store]:
    with persistence_errors(db):
        return _with_relations(db).filter(Store.id == store_id).first()

def get_stores(db: Session) -> List[Store]:
    with persistence_errors(db):
        return _with_relations(db).order_by(Store.id).all()

def create_store(db: Session, store: StoreCreate) -> Store:
    return create_record(db, Store, store.model_dump())

def update_store(db: Session, store_id: int, store_update: StoreUpdate) -> Store:
    return update_record(db, Store, store_id, store_update.changes())

def delete_store(db: Session, store_id: int) -> None:
    delete_record(db, Store, store_id)
