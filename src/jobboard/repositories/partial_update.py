"""Build the SET clause of a partial UPDATE statement."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..errors import BadRequestError


def sql_for_partial_update(
    data: Mapping[str, Any], field_columns: Mapping[str, str]
) -> tuple[str, tuple[Any, ...]]:
    """Translate a sparse field/value mapping into a parameterized SET fragment.

    Only keys of ``field_columns`` can become column references, so caller
    payload keys never reach the SQL text. A value of None sets the column to
    NULL; fields missing from ``data`` are left out of the clause.

    Args:
        data: Logical field name -> new value, in the order to emit.
        field_columns: Logical field name -> storage column name.

    Returns:
        ``("col1 = ?, col2 = ?", (value1, value2))``. The caller binds any
        WHERE placeholders after these values.

    Raises:
        BadRequestError: If ``data`` is empty or names an unmapped field.

    Example:
        >>> sql_for_partial_update({"title": "cook", "salary": None}, {"title": "title", "salary": "salary"})
        ('title = ?, salary = ?', ('cook', None))
    """
    if not data:
        raise BadRequestError("No data")

    unknown = [field for field in data if field not in field_columns]
    if unknown:
        raise BadRequestError(f"Cannot update fields: {', '.join(map(str, unknown))}")

    set_cols = ", ".join(f"{field_columns[field]} = ?" for field in data)
    values = tuple(data.values())
    return set_cols, values
