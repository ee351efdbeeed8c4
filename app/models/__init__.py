from .user import User  # Import User model first
from .product import Product
from .order import Order  # Order has foreign keys to both User and Product

__all__ = ["User", "Product", "Order"]
