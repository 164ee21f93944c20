from pydantic import BaseModel, ConfigDict
from typing import Optional
from .patch import PatchModel

class UserBase(BaseModel):
    name: str
    email: str

class UserCreate(UserBase):
    pass

class UserUpdate(PatchModel):
    name: Optional[str] = None
    email: Optional[str] = None

class UserRead(UserBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
