"""
A1 notation helpers: column letters <-> 1-based column numbers, and row numbers.
"""

from openpyxl.utils.cell import column_index_from_string, get_column_letter

from errors import InvalidColumnReferenceError


def col_a1_to_index(col_a1: str) -> int:
    """Column letters ("A", "AB") -> 1-based column number."""
    if not isinstance(col_a1, str) or not col_a1.strip().isalpha():
        raise InvalidColumnReferenceError(f"Expected column label, got {col_a1!r}")
    try:
        return column_index_from_string(col_a1.strip())
    except ValueError as e:
        raise InvalidColumnReferenceError(f"Expected column label, got {col_a1!r}") from e


def row_a1_to_index(row_a1) -> int:
    """Row number as typed by the user -> int (rows start at 1)."""
    try:
        index = int(str(row_a1).strip())
    except ValueError as e:
        raise InvalidColumnReferenceError(f"Expected row number, got {row_a1!r}") from e
    if index < 1:
        raise InvalidColumnReferenceError(f"Expected row number, got {row_a1!r}")
    return index


def column_to_letter(column: int) -> str:
    try:
        return get_column_letter(column)
    except ValueError as e:
        raise InvalidColumnReferenceError(f"Invalid column number {column!r}") from e
