# Routes package init
"""
Bookshelf Backend: API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - books.py:     GET  /books              (list every book)
                    POST /books              (create a book)
                    GET  /books/{id}         (get a single book)
    - checkout.py:  GET  /checkout?id=N      (check out one copy)
    - health.py:    GET  /health             (service health check)

Routes stay thin: extract the raw input, call BookService, return the
result. Errors propagate to the global handlers in main.py.
"""
