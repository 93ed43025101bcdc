"""Tests for ProductRepository."""

from decimal import Decimal

import pytest

from models import ErrorKind, Product
from product_repo import ProductRepository, like_pattern


@pytest.fixture
def catalog(products):
    for name, price in [("Gaming Laptop", "1299.99"), ("Keyboard", "49.90"), ("Mouse_Pad 100%", "9.50")]:
        assert products.create(name, Decimal(price))
    return products


class TestCreateAndRead:
    def test_create_assigns_id(self, products):
        result = products.create("Laptop", Decimal("999.99"))

        assert result.ok
        assert isinstance(result.value, int)

    def test_create_then_list_contains_exactly_one(self, products):
        products.create("Laptop", Decimal("999.99"))

        listed = products.list_all().value
        assert len([p for p in listed if p.name == "Laptop" and p.price == Decimal("999.99")]) == 1

    def test_get_by_id_returns_created_record(self, products):
        new_id = products.create("Laptop", Decimal("999.99")).value

        result = products.get_by_id(new_id)
        assert result.ok
        assert result.value == Product(new_id, "Laptop", Decimal("999.99"))

    def test_get_by_id_missing(self, products):
        result = products.get_by_id(999)

        assert not result
        assert result.error is ErrorKind.NOT_FOUND
        assert result.value is None

    def test_list_all_empty(self, products):
        result = products.list_all()

        assert result.ok
        assert result.value == []

    def test_list_all_in_insertion_order(self, catalog):
        names = [p.name for p in catalog.list_all().value]

        assert names == ["Gaming Laptop", "Keyboard", "Mouse_Pad 100%"]

    def test_list_all_is_repeatable(self, catalog):
        assert catalog.list_all().value == catalog.list_all().value

    def test_price_read_back_as_decimal(self, products):
        new_id = products.create("Cable", Decimal("5")).value

        price = products.get_by_id(new_id).value.price
        assert isinstance(price, Decimal)
        assert price == Decimal("5.00")


class TestUpdate:
    def test_update_changes_only_target(self, catalog):
        before = catalog.list_all().value
        target = before[1]

        result = catalog.update(target.id, "Mechanical Keyboard", Decimal("89.00"))

        assert result.ok
        after = catalog.list_all().value
        assert after[1] == Product(target.id, "Mechanical Keyboard", Decimal("89.00"))
        assert after[0] == before[0]
        assert after[2] == before[2]

    def test_update_with_same_values_succeeds(self, catalog):
        p = catalog.list_all().value[0]

        assert catalog.update(p.id, p.name, p.price).ok

    def test_update_missing_id(self, catalog):
        before = catalog.list_all().value

        result = catalog.update(999, "Ghost", Decimal("1.00"))

        assert result.error is ErrorKind.NOT_FOUND
        assert catalog.list_all().value == before


class TestDelete:
    def test_delete_removes_record(self, catalog):
        target = catalog.list_all().value[0]

        assert catalog.delete(target.id)

        remaining = catalog.list_all().value
        assert target not in remaining
        assert len(remaining) == 2

    def test_delete_missing_id(self, catalog):
        result = catalog.delete(999)

        assert result.error is ErrorKind.NOT_FOUND
        assert len(catalog.list_all().value) == 3

    def test_delete_twice(self, catalog):
        target = catalog.list_all().value[0]

        assert catalog.delete(target.id)
        assert not catalog.delete(target.id)


class TestSearch:
    def test_case_insensitive_substring(self, catalog):
        names = [p.name for p in catalog.search_by_name("laptop").value]

        assert names == ["Gaming Laptop"]

    def test_upper_case_term(self, catalog):
        names = [p.name for p in catalog.search_by_name("KEY").value]

        assert names == ["Keyboard"]

    def test_empty_term_returns_all(self, catalog):
        assert catalog.search_by_name("").value == catalog.list_all().value

    def test_no_match(self, catalog):
        result = catalog.search_by_name("monitor")

        assert result.ok
        assert result.value == []

    def test_wildcards_match_literally(self, catalog):
        assert [p.name for p in catalog.search_by_name("%").value] == ["Mouse_Pad 100%"]
        assert [p.name for p in catalog.search_by_name("_").value] == ["Mouse_Pad 100%"]

    def test_like_pattern_escapes(self):
        assert like_pattern("50%_off!") == "%50!%!_off!!%"
        assert like_pattern("Laptop") == "%laptop%"

    def test_numeric_term_matches_id(self, catalog):
        keyboard = catalog.list_all().value[1]

        names = [p.name for p in catalog.search(str(keyboard.id)).value]
        assert "Keyboard" in names

    def test_numeric_term_matches_name_too(self, catalog):
        names = [p.name for p in catalog.search("100").value]

        assert names == ["Mouse_Pad 100%"]

    def test_non_ascii_digit_term_searches_names(self, catalog):
        result = catalog.search("\u00b2")

        assert result.ok
        assert result.value == []

    def test_non_ascii_term(self, products):
        products.create("Caf\u00e9 Mug", Decimal("7.00"))

        assert [p.name for p in products.search("caf\u00e9").value] == ["Caf\u00e9 Mug"]

    def test_search_text_term(self, catalog):
        assert [p.name for p in catalog.search("  mouse ").value] == ["Mouse_Pad 100%"]


class TestStoreUnavailable:
    @pytest.fixture
    def repo(self, unreachable_db):
        return ProductRepository(unreachable_db)

    def test_reads_return_empty(self, repo):
        for result in (repo.list_all(), repo.search_by_name("x")):
            assert not result
            assert result.error is ErrorKind.CONNECTION
            assert result.value == []

    def test_get_by_id_fails(self, repo):
        result = repo.get_by_id(1)

        assert result.error is ErrorKind.CONNECTION
        assert result.value is None

    def test_writes_fail(self, repo):
        assert repo.create("x", Decimal("1")).error is ErrorKind.CONNECTION
        assert repo.update(1, "x", Decimal("1")).error is ErrorKind.CONNECTION
        assert repo.delete(1).error is ErrorKind.CONNECTION
