import re

_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def validate_sql_ident(name: str, *, what: str) -> str:
    n = (name or "").strip()
    if not _IDENT_RE.fullmatch(n):
        raise ValueError(
            f"Invalid {what}: {n!r}. " "Expected SQL identifier, e.g. 'id'"
        )
    return n


def validate_table_name(name: str) -> str:
    """Table name, optionally schema-qualified: 'word' or 'public.word'."""
    n = (name or "").strip()
    parts = n.split(".")
    if len(parts) > 2:
        raise ValueError(f"Invalid table name: {n!r}. Expected 'table' or 'schema.table'")
    return ".".join(validate_sql_ident(p, what="table name") for p in parts)
