from .generator import (
    STATEMENT_KINDS,
    default_literal,
    delete_sql,
    generate,
    generate_all,
    insert_sql,
    select_sql,
    update_sql,
)

__all__ = [
    'STATEMENT_KINDS',
    'default_literal',
    'delete_sql',
    'generate',
    'generate_all',
    'insert_sql',
    'select_sql',
    'update_sql',
]
