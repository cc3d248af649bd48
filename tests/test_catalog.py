from storefront.data.models import ProductModel


class TestCategories:

    def test_add_and_list_categories(self, client, api_user):
        headers = api_user.headers()

        created = client.post(
            "/api/category/add-category",
            json={"name": "Books", "description": "Paper"},
            headers=headers,
        )
        assert created.status_code == 201
        body = created.json()
        assert body["message"] == "Category inserted successfully"
        assert body["data"]["name"] == "Books"

        listed = client.get("/api/category/get-all-category", headers=headers)
        assert listed.status_code == 200
        assert [c["name"] for c in listed.json()["data"]] == ["Books"]

    def test_category_routes_require_auth(self, client):
        response = client.post("/api/category/add-category", json={"name": "Books"})
        assert response.status_code == 401


class TestProducts:

    def test_add_product_resolves_category_by_name(self, client, api_user, category, db_session):
        headers = api_user.headers()

        response = client.post(
            "/api/product/add-product",
            json={
                "title": "Monitor",
                "price": 899.0,
                "description": "27 inch",
                "availability": True,
                "categoryType": "Electronics",
            },
            headers=headers,
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["title"] == "Monitor"
        assert data["price"] == 899.0
        assert data["categoryId"] == category.id

        stored = db_session.query(ProductModel).filter_by(title="Monitor").one()
        assert stored.category_id == category.id

    def test_add_product_with_unknown_category_is_400(self, client, api_user, db_session):
        headers = api_user.headers()

        response = client.post(
            "/api/product/add-product",
            json={"title": "Ghost", "price": 1, "description": "-", "categoryType": "Nope"},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid category type", "success": False}
        assert db_session.query(ProductModel).count() == 0

    def test_products_by_category_returns_essential_fields_only(self, client, category, products):
        response = client.get(f"/api/product/get-products-by-category/{category.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [p["title"] for p in data] == ["Keyboard", "Mouse"]
        assert set(data[0]) == {"title", "price", "description", "availability"}

    def test_products_by_unknown_category_is_empty(self, client, products):
        response = client.get("/api/product/get-products-by-category/12345")

        assert response.status_code == 200
        assert response.json()["data"] == []

    def test_product_details(self, client, products):
        keyboard = products[0]

        response = client.get(f"/api/product/get-product-details/{keyboard.id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == keyboard.id
        assert data["price"] == 199.99
        assert data["availability"] is True

    def test_missing_product_is_404(self, client):
        response = client.get("/api/product/get-product-details/999")

        assert response.status_code == 404
        assert response.json() == {"message": "Product not found", "success": False}
