from decimal import Decimal

from logging_config import get_logger
from models import Product

logger = get_logger(__name__)

COLUMNS = "Id AS id, Name AS name, Price AS price"
CENTS = Decimal("0.01")


def row_to_product(row):
    return Product(
        id=int(row['id']),
        name=row['name'],
        price=Decimal(str(row['price'])).quantize(CENTS),
    )


def like_pattern(term):
    """Wrap a search term for LIKE ... ESCAPE '!' so it matches as a plain substring."""
    escaped = term.replace('!', '!!').replace('%', '!%').replace('_', '!_')
    return f"%{escaped.lower()}%"


class ProductRepository:
    def __init__(self, db):
        self.db = db

    def create(self, name, price):
        result = self.db.execute(
            "INSERT INTO Products (Name, Price) VALUES (%s, %s)",
            (name, price),
            insert=True,
        )
        if result:
            logger.info(f"Created product {result.value}")
        return result

    def list_all(self):
        return self.db.fetch_all(
            f"SELECT {COLUMNS} FROM Products ORDER BY Id",
            mapper=row_to_product,
        )

    def get_by_id(self, product_id):
        return self.db.fetch_one(
            f"SELECT {COLUMNS} FROM Products WHERE Id = %s",
            (product_id,),
            mapper=row_to_product,
            missing=f"Product {product_id} not found",
        )

    def update(self, product_id, name, price):
        result = self.db.execute(
            "UPDATE Products SET Name = %s, Price = %s WHERE Id = %s",
            (name, price, product_id),
            missing=f"Product {product_id} not found",
        )
        if result:
            logger.info(f"Updated product {product_id}")
        return result

    def delete(self, product_id):
        result = self.db.execute(
            "DELETE FROM Products WHERE Id = %s",
            (product_id,),
            missing=f"Product {product_id} not found",
        )
        if result:
            logger.info(f"Deleted product {product_id}")
        return result

    def search_by_name(self, term):
        """Case-insensitive substring match on the name; '' matches every product."""
        return self.db.fetch_all(
            f"SELECT {COLUMNS} FROM Products WHERE LOWER(Name) LIKE %s ESCAPE '!' ORDER BY Id",
            (like_pattern(term),),
            mapper=row_to_product,
        )

    def search(self, term):
        """
        Search box lookup: a numeric term also matches the product id,
        anything else is a plain name search.
        """
        term = term.strip()
        if not term.isdecimal():
            return self.search_by_name(term)
        return self.db.fetch_all(
            f"SELECT {COLUMNS} FROM Products WHERE Id = %s OR LOWER(Name) LIKE %s ESCAPE '!' ORDER BY Id",
            (int(term), like_pattern(term)),
            mapper=row_to_product,
        )
