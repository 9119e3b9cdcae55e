"""
Bookshelf Backend: Book Service Unit Tests
=============================================

What:  Tests for BookService business logic (list, create, get, checkout).
How:   Each test runs against a private BookStore (no HTTP involved).

What we test:
    ✅ Listing returns the seed catalogue in order
    ✅ Creating appends and echoes the record back
    ✅ Id parsing accepts signed integers and rejects everything else
    ✅ Unknown ids raise NotFoundError
    ✅ Checkout decrements by one and refuses at zero
    ✅ Parallel checkouts never oversell
"""

import asyncio
import threading

import pytest

from bookshelf.exceptions import NotFoundError, OutOfStockError, ValidationError
from bookshelf.models.book import Book
from bookshelf.schemas.book import BookCreate
from bookshelf.services.book_service import BookService, parse_book_id


class TestParseBookId:
    """Tests for the raw id → int conversion."""

    @pytest.mark.parametrize("raw, expected", [
        ("1", 1),
        ("42", 42),
        ("+7", 7),
        ("-3", -3),
        ("007", 7),
    ])
    def test_valid_ids(self, raw, expected):
        assert parse_book_id(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", " 1", "1 ", "1e3", "0x10", "1_000"])
    def test_invalid_ids(self, raw):
        with pytest.raises(ValidationError, match="Invalid ID") as exc_info:
            parse_book_id(raw)
        assert exc_info.value.field == "id"
        assert exc_info.value.context["value"] == raw

    def test_none_is_invalid(self):
        with pytest.raises(ValidationError, match="Invalid ID"):
            parse_book_id(None)

    @pytest.mark.parametrize("raw, expected", [
        ("9223372036854775807", 2 ** 63 - 1),
        ("-9223372036854775808", -(2 ** 63)),
    ])
    def test_64_bit_limits_accepted(self, raw, expected):
        assert parse_book_id(raw) == expected

    @pytest.mark.parametrize("raw", ["9223372036854775808", "-9223372036854775809", "99999999999999999999999"])
    def test_out_of_range_ids_invalid(self, raw):
        with pytest.raises(ValidationError, match="Invalid ID"):
            parse_book_id(raw)


class TestBookServiceList:

    def setup_method(self):
        self.service = BookService()

    @pytest.mark.asyncio
    async def test_list_returns_seed_catalogue(self, book_store):
        result = await self.service.list_books(book_store)

        assert [b.id for b in result] == [1, 2, 3]
        assert result[0].title == "The Go Programming Language"
        assert result[0].author == "Brian Kernighan"
        assert [b.quantity for b in result] == [2, 5, 6]

    @pytest.mark.asyncio
    async def test_list_empty_store(self, empty_store):
        assert await self.service.list_books(empty_store) == []


class TestBookServiceCreate:

    def setup_method(self):
        self.service = BookService()

    @pytest.mark.asyncio
    async def test_create_appends_and_echoes(self, book_store, new_book_payload):
        result = await self.service.create_book(book_store, BookCreate(**new_book_payload))

        assert result.model_dump() == new_book_payload
        books = book_store.all()
        assert len(books) == 4
        assert books[-1].id == 4

    @pytest.mark.asyncio
    async def test_create_duplicate_id_is_accepted(self, book_store):
        """Ids are not checked for uniqueness; lookups keep returning the first."""
        await self.service.create_book(
            book_store, BookCreate(id=1, title="Another", author="Someone", quantity=9)
        )

        assert len(book_store) == 4
        fetched = await self.service.get_book(book_store, "1")
        assert fetched.title == "The Go Programming Language"

    @pytest.mark.asyncio
    async def test_create_quantity_defaults_to_zero(self, empty_store):
        result = await self.service.create_book(
            empty_store, BookCreate(id=10, title="T", author="A")
        )
        assert result.quantity == 0


class TestBookServiceGet:

    def setup_method(self):
        self.service = BookService()

    @pytest.mark.asyncio
    async def test_get_book_found(self, book_store):
        result = await self.service.get_book(book_store, "2")

        assert result.id == 2
        assert result.title == "Concurrency in Go"
        assert result.author == "Katherine Cox-Buday"
        assert result.quantity == 5

    @pytest.mark.asyncio
    async def test_get_book_not_found(self, book_store):
        with pytest.raises(NotFoundError, match="Book not found.") as exc_info:
            await self.service.get_book(book_store, "99")
        assert exc_info.value.resource_id == 99

    @pytest.mark.asyncio
    async def test_get_book_invalid_id(self, book_store):
        with pytest.raises(ValidationError, match="Invalid ID"):
            await self.service.get_book(book_store, "one")


class TestBookServiceCheckout:

    def setup_method(self):
        self.service = BookService()

    @pytest.mark.asyncio
    async def test_checkout_decrements_quantity(self, book_store):
        result = await self.service.checkout_book(book_store, "1")

        assert result.id == 1
        assert result.quantity == 1
        # The stored record was mutated in place
        assert book_store.find(1).quantity == 1

    @pytest.mark.asyncio
    async def test_checkout_until_empty_then_refuse(self, book_store):
        await self.service.checkout_book(book_store, "1")
        await self.service.checkout_book(book_store, "1")

        with pytest.raises(OutOfStockError, match="Book not available.") as exc_info:
            await self.service.checkout_book(book_store, "1")

        assert exc_info.value.book_id == 1
        assert book_store.find(1).quantity == 0

    @pytest.mark.asyncio
    async def test_checkout_zero_quantity_book(self, empty_store):
        empty_store.add(Book(id=5, title="Gone", author="Nobody", quantity=0))

        with pytest.raises(OutOfStockError):
            await self.service.checkout_book(empty_store, "5")
        assert empty_store.find(5).quantity == 0

    @pytest.mark.asyncio
    async def test_checkout_missing_id(self, book_store):
        with pytest.raises(ValidationError, match="Missing query parameter"):
            await self.service.checkout_book(book_store, None)

    @pytest.mark.asyncio
    async def test_checkout_empty_id_is_invalid(self, book_store):
        with pytest.raises(ValidationError, match="Invalid ID"):
            await self.service.checkout_book(book_store, "")

    @pytest.mark.asyncio
    async def test_checkout_unknown_book(self, book_store):
        with pytest.raises(NotFoundError):
            await self.service.checkout_book(book_store, "404")

    @pytest.mark.asyncio
    async def test_checkout_leaves_other_books_alone(self, book_store):
        await self.service.checkout_book(book_store, "3")

        assert [b.quantity for b in book_store.all()] == [2, 5, 5]


class TestConcurrentCheckout:
    """Parallel checkouts never hand out more copies than the shelf holds."""

    def test_parallel_checkouts_stop_at_zero(self, book_store):
        service = BookService()
        workers = 8
        barrier = threading.Barrier(workers)
        outcomes = []
        outcomes_lock = threading.Lock()

        def checkout():
            barrier.wait()
            try:
                asyncio.run(service.checkout_book(book_store, "1"))
                outcome = "ok"
            except OutOfStockError:
                outcome = "out_of_stock"
            with outcomes_lock:
                outcomes.append(outcome)

        threads = [threading.Thread(target=checkout) for _ in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        # Book 1 starts with two copies
        assert outcomes.count("ok") == 2
        assert outcomes.count("out_of_stock") == workers - 2
        assert book_store.find(1).quantity == 0
