# Routes package init
"""
Taskboard Backend — API Routes Package
========================================

Route Inventory:
    - auth.py:     POST /auth/register, POST /auth/login
    - clients.py:  GET  /clients, GET /clients/{client_id}
    - tasks.py:    GET  /tasks/{user_id}, POST /tasks
    - health.py:   GET  /health

Routes are THIN: parse the request into a schema, call one service method,
return its response model. They never build error responses.
"""
