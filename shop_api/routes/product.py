from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import Session
from typing import List
from shop_api.database import get_db
from shop_api.db.crud import product as product_crud
from shop_api.db.schemas.product import ProductCreate, ProductUpdate, ProductRead
from shop_api.db.schemas import MAX_ID
from shop_api.db.schemas.relations import ProductDetail
from shop_api.errors import NotFoundError

router = APIRouter(
    prefix="/products",
    tags=["products"]
)

@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(product: ProductCreate, db: Session = Depends(get_db)):
    """Create a product in an existing store"""
    return product_crud.create_product(db, product)

@router.get("", response_model=List[ProductDetail])
def list_products(db: Session = Depends(get_db)):
    """List products with their store and the store's owner"""
    return product_crud.get_products(db)

@router.get("/{product_id}", response_model=ProductDetail)
def get_product(product_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    db_product = product_crud.get_product(db, product_id)
    if not db_product:
        raise NotFoundError("Product not found")
    return db_product

@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product: ProductUpdate,
    product_id: int = Path(..., le=MAX_ID),
    db: Session = Depends(get_db)
):
    return product_crud.update_product(db, product_id, product)

@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int = Path(..., le=MAX_ID), db: Session = Depends(get_db)):
    product_crud.delete_product(db, product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
