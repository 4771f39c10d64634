# storefront/services/catalog_service.py
from sqlalchemy.orm import Session

from storefront.core.exceptions import NotFound
from storefront.data.models.product import MAX_PRODUCT_ID, ProductModel
from storefront.repos.product_repo import ProductRepo


class CatalogService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self) -> list[ProductModel]:
        return self.repo.list_products()

    def get_product(self, product_id: int) -> ProductModel:
        # ids outside the column range cannot exist, keep them away from the driver
        product = self.repo.get_product(product_id) if 0 < product_id <= MAX_PRODUCT_ID else None
        if product is None:
            raise NotFound(f"product {product_id} does not exist")
        return product
