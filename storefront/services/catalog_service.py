# storefront/services/catalog_service.py
from sqlalchemy.orm import Session

from storefront.data.models.category import CategoryModel
from storefront.data.models.product import ProductModel
from storefront.repos.catalog_repo import CatalogRepo
from storefront.domain.schemas import CategoryIn, CategoryOut, ProductIn, ProductOut, ProductSummary
from storefront.domain.errors import InvalidCategory, ProductNotFound
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """Kategorie i produkty, glownie odczyt."""

    def __init__(self, db: Session):
        self.repo = CatalogRepo(db)

    def list_categories(self) -> list[CategoryOut]:
        return [CategoryOut.model_validate(c) for c in self.repo.list_categories()]

    def create_category(self, payload: CategoryIn) -> CategoryOut:
        created = self.repo.create_category(
            CategoryModel(name=payload.name, description=payload.description)
        )
        logger.info(f"Created category {created.id} ({created.name})")
        return CategoryOut.model_validate(created)

    def list_products_by_category(self, category_id: int) -> list[ProductSummary]:
        #tylko podstawowe pola produktu
        return [
            ProductSummary.model_validate(p)
            for p in self.repo.list_products_by_category(category_id)
        ]

    def get_product(self, product_id: int) -> ProductOut:
        product = self.repo.get_product(product_id)
        if not product:
            raise ProductNotFound()
        return ProductOut.model_validate(product)

    def create_product(self, payload: ProductIn) -> ProductOut:
        #kategoria po nazwie, nie po id
        category = self.repo.get_category_by_name(payload.category_type)
        if not category:
            raise InvalidCategory()

        created = self.repo.create_product(
            ProductModel(
                title=payload.title,
                price=payload.price,
                description=payload.description,
                availability=payload.availability,
                category_id=category.id,
            )
        )
        logger.info(f"Created product {created.id} in category {category.id}")
        return ProductOut.model_validate(created)
