import argparse
import logging
import sys
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Ensure repo root is on sys.path when running this script directly.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sqlalchemy import delete, select

from stockwatch.core.logging import setup_logging
from stockwatch.database import Base, engine, session_scope
from stockwatch.models import (
    Company,
    Inventory,
    Product,
    Sales,
    Supplier,
    Warehouse,
    import_all_models,
)

logger = logging.getLogger("stockwatch.seed")


def parse_args():
    parser = argparse.ArgumentParser(description="Seed a demo tenant with stock and sales.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear existing data before seeding.",
    )
    return parser.parse_args()


def main():
    setup_logging()
    args = parse_args()

    import_all_models()
    Base.metadata.create_all(bind=engine)

    with session_scope() as db:
        if args.reset:
            for model in (Sales, Inventory, Product, Supplier, Warehouse, Company):
                db.execute(delete(model))
            db.commit()

        has_company = db.execute(select(Company.id).limit(1)).first()
        if has_company:
            logger.info("Seed skipped: companies already exist.")
            return

        company = Company(name="Acme Retail")
        supplier = Supplier(name="Northwind Supply", contact_email="orders@northwind.example")
        db.add_all([company, supplier])
        db.flush()

        main_wh = Warehouse(company_id=company.id, name="Main Warehouse", location="Pune")
        east_wh = Warehouse(company_id=company.id, name="East Depot", location="Kolkata")
        db.add_all([main_wh, east_wh])
        db.flush()

        widget = Product(
            company_id=company.id,
            name="Widget A",
            sku="WID-001",
            price=Decimal("12.50"),
            low_stock_threshold=20,
            primary_supplier_id=supplier.id,
        )
        gadget = Product(
            company_id=company.id,
            name="Gadget B",
            sku="GAD-002",
            price=Decimal("49.99"),
            low_stock_threshold=10,
        )
        db.add_all([widget, gadget])
        db.flush()

        db.add_all(
            [
                Inventory(product_id=widget.id, warehouse_id=main_wh.id, quantity=5),
                Inventory(product_id=widget.id, warehouse_id=east_wh.id, quantity=40),
                Inventory(product_id=gadget.id, warehouse_id=main_wh.id, quantity=3),
            ]
        )

        today = date.today()
        db.add_all(
            [
                Sales(
                    product_id=widget.id,
                    warehouse_id=main_wh.id,
                    quantity_sold=2,
                    sale_date=today - timedelta(days=offset),
                )
                for offset in range(1, 15)
            ]
        )
        db.add(
            Sales(
                product_id=gadget.id,
                warehouse_id=main_wh.id,
                quantity_sold=1,
                sale_date=today - timedelta(days=3),
            )
        )
        db.commit()
        logger.info("Seed data inserted for company %s.", company.id)


if __name__ == "__main__":
    main()
