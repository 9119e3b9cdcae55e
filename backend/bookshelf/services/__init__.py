# Services package init
"""
Bookshelf Backend: Services Layer
====================================

What:  Business logic layer sitting between routes (HTTP) and the store.
How:   Services accept the store plus parsed input, apply the book rules, and
       return response schemas. They raise application exceptions on failure.

Service Inventory:
    - BookService: list, create, fetch and checkout operations
"""
