import enum


class Role(str, enum.Enum):
    BUYER = "buyer"
    SELLER = "seller"


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
