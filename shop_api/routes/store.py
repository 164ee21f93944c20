from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import List
from shop_api.database import get_db
from shop_api.db.crud import store as store_crud
from shop_api.db.schemas.store import StoreCreate, StoreUpdate, StoreRead
from shop_api.db.schemas import MAX_ID
from shop_api.db.schemas.relations import StoreDetail
from shop_api.errors import NotFoundError

router = APIRouter(
    prefix="/stores",
    tags=["stores"]
)

@router.post("", response_model=StoreRead, status_code=status.HTTP_201_CREATED)
def create_store(store: StoreCreate, db: Session = Depends(get_db)):
    """Create a store for an existing user (one store per user)"""
    return store_crud.create_store(db, store)

@router.get("", response_model=List[StoreDetail])
def list_stores(db: Session = Depends(get_db)):
    """List stores with owner and products"""
    return store_crud.get_stores(db)

@router.get("/{store_id}", response_model=StoreDetail)
def get_store(store_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    db_store = store_crud.get_store(db, store_id)
    if not db_store:
        raise NotFoundError("Store not found")
    return db_store

@router.put("/{store_id}", response_model=StoreRead)
def update_store(
    store: StoreUpdate,
    store_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db)
):
    """Rename a store or move it to another user"""
    return store_crud.update_store(db, store_id, store)

@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_store(store_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    store_crud.delete_store(db, store_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
