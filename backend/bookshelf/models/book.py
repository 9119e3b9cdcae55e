"""
Bookshelf Backend: Book Record
=================================

What:  In-memory representation of a single book on the shelf.
Who:   Held by BookStore; mutated in place by BookService during checkout.

Field Notes:
    - id: Caller-supplied integer. Assumed unique but not enforced; lookups
      return the first match.
    - quantity: Copies currently available. Checkout decrements it by one
      and refuses at zero, so it never goes negative through the API.
"""

from dataclasses import dataclass


@dataclass
class Book:
    """
    A book record. Instances are shared by reference: the object returned
    by BookStore.find() is the one stored in the collection.
    """

    id: int
    title: str
    author: str
    quantity: int = 0

    @property
    def available(self) -> bool:
        return self.quantity > 0
