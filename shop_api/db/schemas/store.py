from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional
from . import MAX_ID
from .patch import PatchModel

# Wire name is camelCase, the ORM attribute is snake_case; accept both
USER_ID = dict(
    validation_alias=AliasChoices("userId", "user_id"),
    serialization_alias="userId",
    ge=1,
    le=MAX_ID,
)

class StoreBase(BaseModel):
    name: str
    user_id: int = Field(..., **USER_ID)

class StoreCreate(StoreBase):
    pass

class StoreUpdate(PatchModel):
    name: Optional[str] = None
    user_id: Optional[int] = Field(None, **USER_ID)

class StoreRead(StoreBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
