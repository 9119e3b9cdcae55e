"""
Bookshelf Backend: In-Memory Book Store
==========================================

What:  The shared, ordered collection of Book records plus its FastAPI dependency.
Why:   Centralizes all access to the collection in one place, the way a
       database module owns its engine and sessions.
How:   A package-level BookStore is created at import time and seeded with
       the starter catalogue; routes receive it through `get_store()`.
Who:   Used by BookService (all reads and writes) and the health route (count).
When:  Created once per process; lives until shutdown. Nothing is persisted.

Concurrency:
    Async handlers run on one event loop, but sync code paths (tests, thread
    pool handlers) may touch the store concurrently. Every read-modify-write
    goes through `lock`, which makes "check quantity, then decrement" atomic.
"""

import logging
import threading
from typing import Iterator, List, Optional

from bookshelf.config import settings
from bookshelf.models.book import Book

logger = logging.getLogger(__name__)


# ── Seed Catalogue ────────────────────────────────────────────────────────
SEED_BOOKS = (
    (1, "The Go Programming Language", "Brian Kernighan", 2),
    (2, "Concurrency in Go", "Katherine Cox-Buday", 5),
    (3, "Head First Go", "Jay McGavren", 6),
)


def seed_books() -> List[Book]:
    """Fresh Book instances for the starter catalogue."""
    return [
        Book(id=book_id, title=title, author=author, quantity=quantity)
        for book_id, title, author, quantity in SEED_BOOKS
    ]


class BookStore:
    """
    Ordered in-memory collection of books.

    Operations:
        all():   Snapshot list in insertion order
        add():   Append (duplicate ids are accepted)
        find():  First book with a matching id, by reference
        reset(): Replace the contents with the seed catalogue (or empty)

    No delete operation exists.
    """

    def __init__(self, seed: bool = True):
        self.lock = threading.RLock()
        self._books: List[Book] = seed_books() if seed else []

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.all())

    def all(self) -> List[Book]:
        with self.lock:
            return list(self._books)

    def add(self, book: Book) -> Book:
        with self.lock:
            self._books.append(book)
        logger.debug("Stored book %d (%d on shelf)", book.id, len(self._books))
        return book

    def find(self, book_id: int) -> Optional[Book]:
        # Linear scan; first match wins when ids collide
        with self.lock:
            for book in self._books:
                if book.id == book_id:
                    return book
        return None

    def reset(self, seed: bool = True) -> None:
        with self.lock:
            self._books = seed_books() if seed else []
        logger.debug("Store reset (seeded=%s)", seed)


# ── Shared Instance ───────────────────────────────────────────────────────
store = BookStore(seed=settings.seed_catalog)


def get_store() -> BookStore:
    """
    FastAPI dependency that provides the shared BookStore.

    Example usage in a route:
        @router.get("/books")
        async def list_books(store: BookStore = Depends(get_store)):
            ...

    Tests swap it with `app.dependency_overrides[get_store]`.
    """
    return store
