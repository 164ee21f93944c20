from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional
from . import MAX_ID
from .patch import PatchModel

STORE_ID = dict(
    validation_alias=AliasChoices("storeId", "store_id"),
    serialization_alias="storeId",
    ge=1,
    le=MAX_ID,
)

class ProductBase(BaseModel):
    name: str
    price: float
    store_id: int = Field(..., **STORE_ID)

class ProductCreate(ProductBase):
    pass

class ProductUpdate(PatchModel):
    name: Optional[str] = None
    price: Optional[float] = None
    store_id: Optional[int] = Field(None, **STORE_ID)

class ProductRead(ProductBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
