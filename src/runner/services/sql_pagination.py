from src.runner.services.sql_ident import validate_sql_ident, validate_table_name


def build_range_query(table: str, *, key_column: str = "id") -> str:
    """
    Keyset window over `key_column`.

    The window is half-open on the low end and bound through the
    :start / :end parameters:  key > :start AND key <= :end.
    No LIMIT/OFFSET: the range itself bounds the page.
    """
    t = validate_table_name(table)
    k = validate_sql_ident(key_column, what="key column")
    return f"SELECT * FROM {t} WHERE {k} > :start AND {k} <= :end ORDER BY {k}"


def build_count_query(table: str) -> str:
    t = validate_table_name(table)
    return f"SELECT COUNT(*) FROM {t}"
