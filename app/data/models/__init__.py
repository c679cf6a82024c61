#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from app.data.models.enums import Role, OrderStatus
from app.data.models.user import UserModel
from app.data.models.book import BookModel
from app.data.models.cart_item import CartItemModel
from app.data.models.order import OrderModel

__all__ = ["Role", "OrderStatus", "UserModel", "BookModel", "CartItemModel", "OrderModel"]
