from loguru import logger
from sqlalchemy import event
from sqlalchemy.engine import Engine


def _casefold(value: str | None) -> str | None:
    return value.casefold() if isinstance(value, str) else value


# SQLite's built-in lower() only folds ASCII letters
def register_sqlite_functions(engine: Engine) -> None:
    """Replace SQLite's ``lower`` with Unicode case folding on every connection.

    Case-insensitive searches compile to ``lower(col) LIKE lower(:fragment)``,
    so this makes them fold "Émile" and "Лев" the same way the in-memory
    storage does.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.create_function("lower", 1, _casefold, deterministic=True)

    logger.debug("Registered Unicode lower() for SQLite engine")
