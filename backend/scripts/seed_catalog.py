#!/usr/bin/env python3
"""
Seed the catalogue from a JSON document.

Expected shape (every key optional):

    {
      "brands": ["Acme"],
      "categories": [{"name": "Storage", "subcategories": ["SSD"]}],
      "countries": ["India"],
      "products": [
        {"brand": "Acme", "category": "Storage", "subcategory": "SSD",
         "item_code": "AC-1", "part_code": "P-1", "description": "1TB SSD",
         "warranty": "3Y", "moq": 5, "prices": {"India": 99.5}}
      ]
    }

Rows are matched by name (brands, categories, countries) or item code
(products), so re-running the script does not duplicate them.

Usage:
    python scripts/seed_catalog.py --file catalog.json
"""
import argparse
import json
import logging
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from catalog_api.db import SessionLocal, init_db
from catalog_api.repositories.catalogue_repo import (
    BrandRepository,
    CategoryRepository,
    CountryProductRepository,
    CountryRepository,
    ProductRepository,
    SubCategoryRepository,
)

log = logging.getLogger("seed_catalog")


def seed(db, data: dict) -> dict:
    brands = BrandRepository(db)
    categories = CategoryRepository(db)
    subcategories = SubCategoryRepository(db)
    countries = CountryRepository(db)
    products = ProductRepository(db)
    prices = CountryProductRepository(db)
    counts = {"brands": 0, "categories": 0, "subcategories": 0, "countries": 0, "products": 0, "prices": 0}

    for name in data.get("brands", []):
        _, created = brands.get_or_create(name=name)
        counts["brands"] += created

    for entry in data.get("categories", []):
        category, created = categories.get_or_create(name=entry["name"])
        counts["categories"] += created
        for sub in entry.get("subcategories", []):
            _, created = subcategories.get_or_create(name=sub, category_id=category.id)
            counts["subcategories"] += created

    for name in data.get("countries", []):
        _, created = countries.get_or_create(name=name)
        counts["countries"] += created

    for entry in data.get("products", []):
        brand, _ = brands.get_or_create(name=entry["brand"])
        category, _ = categories.get_or_create(name=entry["category"])
        subcategory, _ = subcategories.get_or_create(name=entry["subcategory"], category_id=category.id)
        product = products.get_by_item_code(entry["item_code"])
        if product is None:
            product = products.create(
                brand_id=brand.id,
                category_id=category.id,
                subcategory_id=subcategory.id,
                item_code=entry["item_code"],
                part_code=entry.get("part_code"),
                description=entry.get("description") or entry["item_code"],
                warranty=entry.get("warranty"),
                moq=int(entry.get("moq") or 1),
            )
            counts["products"] += 1
        for country_name, price in (entry.get("prices") or {}).items():
            country, _ = countries.get_or_create(name=country_name)
            _, created = prices.get_or_create(
                country_id=country.id, product_id=product.id, defaults={"price": price}
            )
            counts["prices"] += created
    return counts


def seed_from_file(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    init_db()
    db = SessionLocal()
    try:
        return seed(db, data)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser()
    parser.add_argument("--file", "-f", required=True, help="Path to catalogue JSON")
    args = parser.parse_args()
    if not os.path.exists(args.file):
        print("File not found:", args.file)
        sys.exit(1)
    log.info("Seeded: %s", seed_from_file(args.file))
