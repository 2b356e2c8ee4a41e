from typing import Iterable, Mapping

from sqlalchemy.orm import Session


def _dialect_insert(db: Session, model):
    """Return the dialect-specific `insert()` construct for the session's backend."""
    dialect = db.get_bind().dialect.name

    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    elif dialect in ("mysql", "mariadb"):
        from sqlalchemy.dialects.mysql import insert
    else:
        raise NotImplementedError(f"No native upsert for dialect '{dialect}'")

    return dialect, insert(model)


def upsert(db: Session, model, values: Mapping, conflict_columns: Iterable[str], update_columns: Iterable[str]):
    """
    Insert a row or, if it collides on `conflict_columns`, overwrite `update_columns`.

    Runs as a single statement so the store serialises concurrent writers
    for the same key into one insert-or-update.
    """
    dialect, stmt = _dialect_insert(db, model)
    stmt = stmt.values(**values)

    if dialect in ("mysql", "mariadb"):
        stmt = stmt.on_duplicate_key_update({col: stmt.inserted[col] for col in update_columns})
    else:
        stmt = stmt.on_conflict_do_update(
            index_elements=list(conflict_columns),
            set_={col: stmt.excluded[col] for col in update_columns},
        )

    db.execute(stmt)
    db.commit()


def insert_ignore(db: Session, model, values: Mapping, conflict_columns: Iterable[str]):
    """Insert a row unless one already exists for `conflict_columns`."""
    dialect, stmt = _dialect_insert(db, model)
    stmt = stmt.values(**values)

    if dialect in ("mysql", "mariadb"):
        stmt = stmt.prefix_with("IGNORE")
    else:
        stmt = stmt.on_conflict_do_nothing(index_elements=list(conflict_columns))

    db.execute(stmt)
    db.commit()
