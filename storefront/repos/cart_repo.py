# storefront/repos/cart_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from storefront.data.models.user import UserModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user_with_cart(self, user_id: int) -> UserModel | None:
        return self.db.execute(
            select(UserModel)
            .where(UserModel.id == user_id)
            .options(selectinload(UserModel.cart).selectinload(CartItemModel.product))
        ).scalar_one_or_none()

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def save(self, user: UserModel) -> UserModel:
        #upsert usera razem z pozycjami koszyka (cascade)
        self.db.add(user)
        self.db.commit()
        return user
