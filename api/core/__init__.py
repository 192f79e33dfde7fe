"""
Shared building blocks for the API: DB wiring, settings, logging and the
error types that `main.py` turns into HTTP responses.

Feature-specific SQL and business logic live in their feature package
(e.g. `tasks/`).
"""
