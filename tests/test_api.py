import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from stockwatch.config import Settings, get_settings
from stockwatch.database.session import get_db
from stockwatch.main import app
from stockwatch.services.store import InventoryStore

from support import add_company, add_sale, make_sessionmaker


class ApiTest(unittest.TestCase):
    def setUp(self):
        self.engine, self.Session = make_sessionmaker()
        seed = self.Session()
        self.company, (self.warehouse,) = add_company(seed)
        seed.commit()
        seed.close()

        def override_get_db():
            db = self.Session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_settings] = lambda: Settings(_env_file=None)
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.engine.dispose()

    def _create(self, **overrides):
        body = {
            "name": "Widget",
            "sku": "WID-001",
            "price": "12.50",
            "warehouse_id": self.warehouse.id,
            "initial_quantity": 3,
        }
        body.update(overrides)
        return self.client.post("/companies/{}/products".format(self.company.id), json=body)

    def test_create_product_returns_201(self):
        response = self._create()

        self.assertEqual(response.status_code, 201)
        payload = response.json()
        self.assertTrue(payload["success"])

        detail = self.client.get(
            "/companies/{}/products/{}".format(self.company.id, payload["product_id"])
        )
        self.assertEqual(detail.status_code, 200)
        self.assertEqual(detail.json()["price"], "12.50")
        self.assertEqual(detail.json()["inventory"][0]["quantity"], 3)

    def test_missing_fields_return_400(self):
        response = self.client.post(
            "/companies/{}/products".format(self.company.id), json={"sku": "X"}
        )

        self.assertEqual(response.status_code, 400)
        self.assertIn("name", response.json()["detail"])

    def test_malformed_price_returns_400(self):
        self.assertEqual(self._create(price="twelve").status_code, 400)

    def test_duplicate_sku_returns_409(self):
        self.assertEqual(self._create().status_code, 201)
        self.assertEqual(self._create().status_code, 409)

    def test_storage_failure_returns_opaque_500(self):
        with patch.object(
            InventoryStore,
            "_add_inventory",
            side_effect=SQLAlchemyError("constraint detail from driver"),
        ):
            response = self._create()

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "Product creation failed"})

    def test_unknown_product_returns_404(self):
        response = self.client.get("/companies/{}/products/999".format(self.company.id))
        self.assertEqual(response.status_code, 404)

    def test_low_stock_alerts(self):
        product_id = self._create(initial_quantity=3).json()["product_id"]
        db = self.Session()
        try:
            product = InventoryStore(db).get_product(self.company.id, product_id)[0]
            add_sale(db, product, self.warehouse)
            db.commit()
        finally:
            db.close()

        response = self.client.get("/companies/{}/alerts/low-stock".format(self.company.id))

        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["total_alerts"], 1)
        self.assertEqual(len(payload["alerts"]), 1)
        self.assertEqual(payload["alerts"][0]["sku"], "WID-001")
        self.assertIsNone(payload["alerts"][0]["supplier"])

    def test_low_stock_alerts_empty_company(self):
        response = self.client.get("/companies/4242/alerts/low-stock")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"alerts": [], "total_alerts": 0})

    def test_low_stock_window_is_validated(self):
        response = self.client.get(
            "/companies/{}/alerts/low-stock?window_days=0".format(self.company.id)
        )
        self.assertEqual(response.status_code, 400)

    def test_low_stock_read_failure_returns_500(self):
        with patch.object(
            InventoryStore,
            "find_inventory_by_company",
            side_effect=OperationalError("SELECT", {}, Exception("gone")),
        ):
            response = self.client.get(
                "/companies/{}/alerts/low-stock".format(self.company.id)
            )

        self.assertEqual(response.status_code, 500)

    def test_health(self):
        response = self.client.get("/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["database"], "ok")


if __name__ == "__main__":
    unittest.main()
