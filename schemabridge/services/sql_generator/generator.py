"""
Template CRUD statements for a table's column model.

Statements are starting points for the query editor, not executable
queries: values are ``?`` placeholders or type-appropriate default literals.
"""
from typing import Dict, Iterable, List, Optional, Union

from schemabridge import config
from schemabridge.services.ddl_translation.models import Column, columns_from_dicts

ColumnsArg = Iterable[Union[Column, dict]]

_NUMERIC_MARKERS = ('int', 'decimal', 'double', 'float')

STATEMENT_KINDS = ('select', 'insert', 'update', 'delete')


def _select_limit() -> int:
    return int(config.get('sql_generation', {}).get('select_limit', 100))


def default_literal(column_type: Optional[str]) -> str:
    """Placeholder literal for a value of *column_type*."""
    t = (column_type or '').lower()
    if any(marker in t for marker in _NUMERIC_MARKERS):
        return '0'
    if 'bool' in t:
        return 'false'
    return "''"


def _quoted(columns: List[Column]) -> str:
    return ', '.join(f"`{c.name}`" for c in columns)


def _where_clause(columns: List[Column]) -> str:
    key = next((c for c in columns if c.is_primary_key), columns[0] if columns else None)
    if key is None:
        return '1=1'
    return f"`{key.name}` = {default_literal(key.type)}"


def select_sql(table_name: str, columns: ColumnsArg) -> str:
    cols = columns_from_dicts(columns)
    return f"SELECT {_quoted(cols)} FROM `{table_name}` LIMIT {_select_limit()};"


def insert_sql(table_name: str, columns: ColumnsArg) -> str:
    # Primary keys named like "*auto*" are taken to be auto-increment
    cols = [c for c in columns_from_dicts(columns) if not (c.is_primary_key and 'auto' in c.name)]
    placeholders = ', '.join('?' for _ in cols)
    return f"INSERT INTO `{table_name}` ({_quoted(cols)}) VALUES ({placeholders});"


def update_sql(table_name: str, columns: ColumnsArg) -> str:
    cols = columns_from_dicts(columns)
    set_clause = ', '.join(f"`{c.name}` = {default_literal(c.type)}" for c in cols if not c.is_primary_key)
    return f"UPDATE `{table_name}` SET {set_clause} WHERE {_where_clause(cols)};"


def delete_sql(table_name: str, columns: ColumnsArg) -> str:
    cols = columns_from_dicts(columns)
    return f"DELETE FROM `{table_name}` WHERE {_where_clause(cols)};"


_GENERATORS = {
    'select': select_sql,
    'insert': insert_sql,
    'update': update_sql,
    'delete': delete_sql,
}


def generate(kind: str, table_name: str, columns: ColumnsArg) -> str:
    """Generate one statement; *kind* is one of STATEMENT_KINDS."""
    try:
        generator = _GENERATORS[kind.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown statement kind: {kind!r}") from None
    return generator(table_name, columns)


def generate_all(table_name: str, columns: ColumnsArg) -> Dict[str, str]:
    cols = columns_from_dicts(columns)
    return {kind: _GENERATORS[kind](table_name, cols) for kind in STATEMENT_KINDS}
