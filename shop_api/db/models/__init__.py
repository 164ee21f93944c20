from .user import User
from .store import Store
from .product import Product

__all__ = ['User', 'Store', 'Product']
