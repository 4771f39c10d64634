from sqlalchemy import Column, Integer, String, Numeric, Text

from storefront.data.database import Base

# products.product_id is a 32-bit integer column
MAX_PRODUCT_ID = 2**31 - 1


class ProductModel(Base):
    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    image = Column(String, nullable=False)
    short_description = Column(String, nullable=False)
    long_description = Column(Text, nullable=False, default="")
