import pytest

from storefront.domain.errors import ItemNotInCart, InvalidQuantity, ProductNotFound, UserNotFound
from storefront.services.cart_service import CartService


@pytest.fixture
def cart(db_session, lock_service):
    return CartService(db_session, lock_service)


def test_adding_same_product_twice_keeps_two_line_items(cart, user, products):
    keyboard = products[0]

    cart.add_item(user.id, keyboard.id)
    items = cart.add_item(user.id, keyboard.id)

    assert len(items) == 2
    assert [(i.product_id, i.quantity) for i in items] == [(keyboard.id, 1), (keyboard.id, 1)]


def test_add_item_for_unknown_user_or_product(cart, user, products):
    with pytest.raises(UserNotFound):
        cart.add_item(999, products[0].id)

    with pytest.raises(ProductNotFound):
        cart.add_item(user.id, 999)

    assert cart.view_cart(user.id) == []


def test_update_overwrites_first_matching_line(cart, user, products):
    keyboard, mouse = products
    cart.add_item(user.id, keyboard.id)
    cart.add_item(user.id, mouse.id)
    cart.add_item(user.id, keyboard.id)

    items = cart.update_item(user.id, keyboard.id, 5)

    assert [(i.product_id, i.quantity) for i in items] == [
        (keyboard.id, 5),
        (mouse.id, 1),
        (keyboard.id, 1),
    ]


def test_update_missing_item(cart, user, products):
    with pytest.raises(ItemNotInCart):
        cart.update_item(user.id, products[0].id, 3)


@pytest.mark.parametrize("quantity", [0, -2])
def test_update_rejects_non_positive_quantity(cart, user, products, quantity):
    cart.add_item(user.id, products[0].id)

    with pytest.raises(InvalidQuantity):
        cart.update_item(user.id, products[0].id, quantity)

    assert cart.view_cart(user.id)[0].quantity == 1


def test_remove_first_matching_line(cart, user, products):
    keyboard, mouse = products
    cart.add_item(user.id, keyboard.id)
    cart.add_item(user.id, mouse.id)
    cart.add_item(user.id, keyboard.id)
    cart.update_item(user.id, keyboard.id, 4)

    items = cart.remove_item(user.id, keyboard.id)

    assert [(i.product_id, i.quantity) for i in items] == [(mouse.id, 1), (keyboard.id, 1)]


def test_remove_absent_product_leaves_cart_unchanged(cart, user, products):
    keyboard, mouse = products
    cart.add_item(user.id, keyboard.id)

    with pytest.raises(ItemNotInCart):
        cart.remove_item(user.id, mouse.id)

    assert [(i.product_id, i.quantity) for i in cart.view_cart(user.id)] == [(keyboard.id, 1)]


def test_view_cart_resolves_products(cart, user, products):
    cart.add_item(user.id, products[1].id)

    (item,) = cart.view_cart(user.id)

    assert item.product.title == "Mouse"
    assert item.product.price == 49.5


def test_writes_take_the_user_lock(cart, user, products, lock_service):
    cart.add_item(user.id, products[0].id)
    cart.update_item(user.id, products[0].id, 2)
    cart.remove_item(user.id, products[0].id)

    assert lock_service.acquired == [user.id, user.id, user.id]
