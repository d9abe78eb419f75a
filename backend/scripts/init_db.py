#!/usr/bin/env python3
"""
Initialize the catalog database

Drops and recreates the products table, then inserts sample products
through the regular create-product use case.

WARNING: destroys existing data.

Usage:
    export DATABASE_URL="postgresql://..."
    python3 backend/scripts/init_db.py
"""
import logging
import sys
import time

from catalog.core.config import get_settings
from catalog.core.container import build_container

logger = logging.getLogger("init_db")

SAMPLE_PRODUCTS = [
    {"name": "Laptop Gaming ROG Strix", "price": 1299.99, "stock": 15},
    {"name": "Mouse Inalámbrico Logitech", "price": 79.99, "stock": 50},
    {"name": "Teclado Mecánico RGB", "price": 149.99, "stock": 25},
    {"name": "Monitor 4K 27 pulgadas", "price": 399.99, "stock": 8},
    {"name": "Auriculares Gaming", "price": 199.99, "stock": 30},
]


def init_database() -> int:
    start_time = time.time()
    settings = get_settings()
    container = build_container(settings)
    database = container.database

    print("🚀 Initializing catalog database...")
    print(f"🌍 Environment: {settings.APP_ENV}")

    try:
        latency = database.ping()
        print(f"✅ PostgreSQL connection OK ({latency} ms)")
    except Exception as e:
        print(f"❌ Could not connect to PostgreSQL: {e}")
        print("💡 Check that PostgreSQL is running and the DB_* / DATABASE_URL settings")
        return 1

    print("\n🔄 Recreating schema (existing tables are dropped)...")
    database.reset_schema()
    print("✅ Schema created")

    print("\n📦 Inserting sample products...")
    created = 0
    for data in SAMPLE_PRODUCTS:
        result = container.product_service.create(data)
        if result.is_success:
            created += 1
            product = result.value
            print(f"   {created}. {product.name} - ${product.price} (Stock: {product.stock})")
        else:
            print(f"   ⚠️  {data['name']}: {result.error.message}")

    database.dispose()

    duration_ms = round((time.time() - start_time) * 1000)
    print(f"\n🎉 Done: {created}/{len(SAMPLE_PRODUCTS)} products in {duration_ms} ms")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(init_database())
