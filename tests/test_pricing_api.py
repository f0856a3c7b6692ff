import time

from app.schemas.pricing_schema import PricingItemCreate, PricingItemUpdate
from app.services.pricing_crud import DEFAULT_PRICING_ITEMS, pricing_crud


class TestPricingCatalog:
    def test_defaults_seeded_and_sorted(self, client):
        response = client.get("/api/pricing")

        assert response.status_code == 200
        names = [item["name"] for item in response.json()["items"]]
        assert len(names) == len(DEFAULT_PRICING_ITEMS)
        assert names == sorted(names)

    def test_create_item(self, client, admin_headers):
        response = client.post(
            "/api/pricing",
            json={"name": "Textiles", "description": "Old clothes and fabric", "price": 1.5},
            headers=admin_headers,
        )

        assert response.status_code == 201
        item_id = response.json()["itemId"]
        items = {item["id"]: item for item in client.get("/api/pricing").json()["items"]}
        assert items[item_id]["name"] == "Textiles"
        assert items[item_id]["price"] == 1.5

    def test_create_item_negative_price(self, client, admin_headers):
        response = client.post(
            "/api/pricing",
            json={"name": "Textiles", "description": "Old clothes and fabric", "price": -1},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "price"

    def test_create_item_requires_admin(self, client):
        response = client.post(
            "/api/pricing",
            json={"name": "Textiles", "description": "Old clothes and fabric", "price": 1},
        )
        assert response.status_code == 401

    def test_update_item(self, client, admin_headers):
        item_id = client.get("/api/pricing").json()["items"][0]["id"]

        response = client.put(
            f"/api/pricing/{item_id}",
            json={"name": "Aluminium", "description": "Cans and foil", "price": 9},
            headers=admin_headers,
        )
        assert response.status_code == 200

        items = {item["id"]: item for item in client.get("/api/pricing").json()["items"]}
        assert items[item_id]["name"] == "Aluminium"
        assert items[item_id]["price"] == 9

    def test_update_negative_price(self, client, admin_headers):
        item_id = client.get("/api/pricing").json()["items"][0]["id"]

        response = client.put(f"/api/pricing/{item_id}", json={"price": -3}, headers=admin_headers)
        assert response.status_code == 400

    def test_update_unknown_item(self, client, admin_headers):
        response = client.put("/api/pricing/999", json={"price": 3}, headers=admin_headers)
        assert response.status_code == 404

    def test_delete_item(self, client, admin_headers):
        item_id = client.get("/api/pricing").json()["items"][0]["id"]

        response = client.delete(f"/api/pricing/{item_id}", headers=admin_headers)
        assert response.status_code == 200

        ids = [item["id"] for item in client.get("/api/pricing").json()["items"]]
        assert item_id not in ids
        assert client.delete(f"/api/pricing/{item_id}", headers=admin_headers).status_code == 404


class TestPricingTimestamps:
    def test_update_refreshes_updated_at_only(self, db_session):
        item = pricing_crud.create_item(
            db_session, PricingItemCreate(name="Textiles", description="Old clothes and fabric", price=2)
        )
        created_at, updated_at = item.created_at, item.updated_at
        time.sleep(0.01)

        updated = pricing_crud.update_item(db_session, item.id, PricingItemUpdate(price=3))

        assert float(updated.price) == 3
        assert updated.created_at == created_at
        assert updated.updated_at > updated_at

    def test_seed_defaults_only_when_empty(self, db_session):
        assert pricing_crud.seed_defaults(db_session) == len(DEFAULT_PRICING_ITEMS)
        assert pricing_crud.seed_defaults(db_session) == 0
