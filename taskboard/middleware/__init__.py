# Middleware package init
"""
Taskboard Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (outermost first):
    Request → [Request ID] → [Logging] → [Error Handler] → Route Handler

    1. Request ID first: every later log line and error body can read it
    2. Logging: sees the final status, including 500s produced below it
    3. Error Handler last: closest to the routes, turns anything unhandled
       into a 500 JSON response before it can escape the app
"""
