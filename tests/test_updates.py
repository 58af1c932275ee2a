import pytest
from sqlalchemy.dialects import sqlite

from reflections_api.models.book import Book
from reflections_api.models.comment import Comment
from reflections_api.models.form import Form
from reflections_api.services.updates import build_partial_update, is_present


def _compile(statement) -> tuple[str, list]:
    compiled = statement.compile(dialect=sqlite.dialect())
    return str(compiled), [compiled.params[name] for name in compiled.positiontup]


def test_only_supplied_columns_are_set():
    statement = build_partial_update(Form.__table__, 5, [("title", "Prayer request"), ("data", None)])
    sql, args = _compile(statement)

    assert sql.startswith("UPDATE forms SET updated_at=CURRENT_TIMESTAMP, title=?")
    assert "data=" not in sql
    assert sql.endswith("WHERE forms.id = ?")
    assert args == ["Prayer request", 5]


def test_empty_change_set_still_refreshes_updated_at():
    statement = build_partial_update(Form.__table__, 9, [("title", None), ("data", None)])
    sql, args = _compile(statement)

    assert sql == "UPDATE forms SET updated_at=CURRENT_TIMESTAMP WHERE forms.id = ?"
    assert args == [9]


def test_placeholders_follow_input_order():
    statement = build_partial_update(Comment.__table__, 3, [("status", "approved"), ("content", "Amen")])
    sql, args = _compile(statement)

    assert sql.index("status=?") < sql.index("content=?")
    assert args == ["approved", "Amen", 3]


def test_empty_text_counts_as_omitted():
    statement = build_partial_update(Book.__table__, 1, [("title", ""), ("subtitle", "Second edition")])
    sql, args = _compile(statement)

    assert sql == "UPDATE books SET updated_at=CURRENT_TIMESTAMP, subtitle=? WHERE books.id = ?"
    assert args == ["Second edition", 1]


def test_false_and_zero_are_kept():
    changes = [("is_published", False), ("stock_quantity", 0), ("sale_price", 0.0)]
    sql, args = _compile(build_partial_update(Book.__table__, 2, changes))

    assert "is_published=?" in sql
    assert "stock_quantity=?" in sql
    assert args == [False, 0, 0.0, 2]


def test_client_values_are_bound_not_inlined():
    hostile = "x'; DROP TABLE forms; --"
    sql, args = _compile(build_partial_update(Form.__table__, 1, [("title", hostile)]))

    assert hostile not in sql
    assert args[0] == hostile


@pytest.mark.parametrize("column_name", ["id", "created_at", "updated_at", "password", "title; --"])
def test_columns_outside_allow_list_are_rejected(column_name):
    with pytest.raises(ValueError):
        build_partial_update(Form.__table__, 1, [(column_name, "value")])


def test_is_present():
    assert not is_present(None)
    assert not is_present("")
    assert is_present(" ")
    assert is_present(False)
    assert is_present(0)
    assert is_present([])
