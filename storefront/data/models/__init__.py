# every model imported here so Base.metadata knows all tables before create_all

from storefront.data.models.product import ProductModel
from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel

__all__ = ["ProductModel", "CartModel", "CartItemModel", "OrderModel"]
