from typing import Dict, List

from catalog_api.models.brand import Brand
from catalog_api.models.category import Category, SubCategory
from catalog_api.models.country import Country
from catalog_api.models.country_product import CountryProduct
from catalog_api.models.product import Product
from catalog_api.repositories.base_repo import TableRepository


class ProductRepository(TableRepository):
    model = Product
    fetch_error = "Database error fetching products"
    add_error = "Database error adding product"

    def update(self, product_id: int, values: Dict) -> int:
        """Overwrite every editable column. Returns the number of matched rows."""
        with self.guarded("Database error updating product"):
            count = (
                self.db.query(Product)
                .filter(Product.id == product_id)
                .update(
                    {getattr(Product, k): v for k, v in values.items()},
                    synchronize_session=False,
                )
            )
            self.db.commit()
            return count

    def delete(self, product_id: int) -> int:
        with self.guarded("Database error deleting product"):
            count = (
                self.db.query(Product)
                .filter(Product.id == product_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
            return count

    def get_by_item_code(self, item_code: str):
        with self.guarded(self.fetch_error):
            return self.db.query(Product).filter(Product.item_code == item_code).first()


class BrandRepository(TableRepository):
    model = Brand
    fetch_error = "Database error fetching brands"
    add_error = "Database error adding brand"


class CategoryRepository(TableRepository):
    model = Category
    fetch_error = "Database error fetching categories"
    add_error = "Database error adding category"


class SubCategoryRepository(TableRepository):
    model = SubCategory
    fetch_error = "Database error fetching subcategories"
    add_error = "Database error adding subcategory"


class CountryRepository(TableRepository):
    model = Country
    fetch_error = "Database error fetching countries"
    add_error = "Database error adding country"


class CountryProductRepository(TableRepository):
    model = CountryProduct

    def products_for_country(self, country_name: str) -> List[Dict]:
        """Products priced in `country_name`, with that country's price."""
        with self.guarded("Failed to fetch products"):
            rows = (
                self.db.query(
                    Product.id.label("ProductID"),
                    Product.item_code.label("ProductCode"),
                    Product.description.label("Description"),
                    Product.moq.label("MinOrderQty"),
                    CountryProduct.price.label("Price"),
                )
                .join(CountryProduct, Product.id == CountryProduct.product_id)
                .join(Country, CountryProduct.country_id == Country.id)
                .filter(Country.name == country_name)
                .order_by(Product.id)
                .all()
            )
            return [dict(r._mapping) for r in rows]
