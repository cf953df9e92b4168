"""Book catalog service.

Stores book records and exposes create, read, update, delete and
case-insensitive substring search over them, through a FastAPI HTTP API and
a Typer command-line interface.
"""

__version__ = "0.1.0"
