# Routes package init
"""
QA Pet API — API Routes Package
================================

What:  HTTP route handlers that accept requests and return responses.
How:   Each route module handles a specific resource.

Route Inventory:
    - pets.py:    POST/GET /pets, GET/PUT/DELETE /pets/{id}
    - health.py:  GET /  (service metadata)
                  GET /favicon.ico (204, keeps browsers off the 404 path)
                  GET /health

Design Principle:
    Routes are THIN. They extract data from the request, call PetService and
    pick the status code. Business rules belong in services.
"""
