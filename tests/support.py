from datetime import date, timedelta
from decimal import Decimal

from sqlalchemy.orm import sessionmaker

from stockwatch.database import Base, build_engine
from stockwatch.models import (
    Company,
    Inventory,
    Product,
    Sales,
    Supplier,
    Warehouse,
    import_all_models,
)


def make_sessionmaker():
    engine = build_engine("sqlite:///:memory:")
    import_all_models()
    Base.metadata.create_all(bind=engine)
    return engine, sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def add_company(db, name="Acme", warehouses=("Main",)):
    company = Company(name=name)
    db.add(company)
    db.flush()
    created = []
    for warehouse_name in warehouses:
        warehouse = Warehouse(company_id=company.id, name=warehouse_name, location="")
        db.add(warehouse)
        created.append(warehouse)
    db.flush()
    return company, created


def add_supplier(db, name="Northwind", contact_email="orders@northwind.example"):
    supplier = Supplier(name=name, contact_email=contact_email)
    db.add(supplier)
    db.flush()
    return supplier


def add_product(db, company, sku, *, threshold=10, supplier=None, name=None):
    product = Product(
        company_id=company.id,
        name=name or "Product {}".format(sku),
        sku=sku,
        price=Decimal("9.99"),
        low_stock_threshold=threshold,
        primary_supplier_id=supplier.id if supplier is not None else None,
    )
    db.add(product)
    db.flush()
    return product


def add_stock(db, product, warehouse, quantity):
    row = Inventory(product_id=product.id, warehouse_id=warehouse.id, quantity=quantity)
    db.add(row)
    db.flush()
    return row


def add_sale(db, product, warehouse, *, days_ago=1, quantity=1):
    sale = Sales(
        product_id=product.id,
        warehouse_id=warehouse.id,
        quantity_sold=quantity,
        sale_date=date.today() - timedelta(days=days_ago),
    )
    db.add(sale)
    db.flush()
    return sale
