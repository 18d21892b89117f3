# Routes package init
"""
Notes API — API Routes Package
===============================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - root.py:   GET    /                  (HTML greeting)
    - notes.py:  GET    /api/notes         (list notes)
                 GET    /api/notes/{id}    (single note)
                 POST   /api/notes         (create note)
                 DELETE /api/notes/{id}    (delete note)

Anything else is answered with 404 {"error": "unknown endpoint"} by the
exception handlers in main.py.

Design Principle:
    Routes stay THIN: extract data from the request, call the note store,
    pick the status code. The id scheme and validation rules live in the
    store and the schemas.
"""
