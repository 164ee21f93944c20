"""Read models with eagerly loaded relations nested in."""
from typing import List, Optional
from .user import UserRead
from .store import StoreRead
from .product import ProductRead

class UserWithStore(UserRead):
    store: Optional[StoreRead] = None

class StoreWithUser(StoreRead):
    user: UserRead

class StoreDetail(StoreWithUser):
    products: List[ProductRead] = []

class ProductDetail(ProductRead):
    store: StoreWithUser
