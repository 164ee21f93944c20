from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from shop_api.db.models.product import Product
from shop_api.db.models.store import Store
from shop_api.db.schemas.product import ProductCreate, ProductUpdate
from .base import create_record, delete_record, persistence_errors, update_record

def _with_relations(db: Session):
    # product -> store -> owning user
    return db.query(Product).options(joinedload(Product.store).joinedload(Store.user))

def get_product(db: Session, product_id: int) -> Optional[Product]:
    with persistence_errors(db):
        return _with_relations(db).filter(Product.id == product_id).first()

def get_products(db: Session) -> List[Product]:
    with persistence_errors(db):
        return _with_relations(db).order_by(Product.id).all()

def create_product(db: Session, product: ProductCreate) -> Product:
    return create_record(db, Product, product.model_dump())

def update_product(db: Session, product_id: int, product_update: ProductUpdate) -> Product:
    return update_record(db, Product, product_id, product_update.changes())

def delete_product(db: Session, product_id: int) -> None:
    delete_record(db, Product, product_id)
