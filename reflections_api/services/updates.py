from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import Table, Update, func, update

MANAGED_COLUMNS = frozenset({"id", "created_at", "updated_at"})

Change = tuple[str, Any]


def is_present(value: Any) -> bool:
    """Tell whether an optional request value was actually supplied.

    ``None`` always means "omitted". Text is also treated as omitted when it is
    empty, so an update cannot clear a text column to ``""``.
    """
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def present_changes(table: Table, changes: Iterable[Change]) -> list[Change]:
    selected: list[Change] = []
    for column_name, value in changes:
        if column_name in MANAGED_COLUMNS or column_name not in table.c:
            raise ValueError(f"Column {column_name!r} is not updatable on {table.name}")
        if is_present(value):
            selected.append((column_name, value))
    return selected


def build_partial_update(table: Table, record_id: int, changes: Sequence[Change]) -> Update:
    """Build ``UPDATE <table> SET updated_at = now(), ... WHERE id = :id``.

    Only supplied changes get a SET clause, each bound as a parameter in the
    order given. With nothing supplied the statement still refreshes
    ``updated_at``. Existence of ``record_id`` is not checked here.
    """
    assignments = [(table.c.updated_at, func.current_timestamp())]
    assignments.extend((table.c[column_name], value) for column_name, value in present_changes(table, changes))
    return update(table).where(table.c.id == record_id).ordered_values(*assignments)
