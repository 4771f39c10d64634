# storefront/repos/product_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self) -> list[ProductModel]:
        return list(
            self.db.execute(select(ProductModel).order_by(ProductModel.product_id)).scalars()
        )

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)
