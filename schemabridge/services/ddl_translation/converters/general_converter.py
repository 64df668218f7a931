"""
OLAP (Doris-like) to GENERAL (MySQL-like) CREATE TABLE conversion.
"""
from typing import Any, Dict, Optional, Sequence

from schemabridge import config
from schemabridge.utils.logger import setup_logger
from .base_converter import BaseConverter
from ..metadata import olap_table_comment, primary_keys
from ..models import Column, Dialect
from ..type_mapper import to_general_type

DEFAULT_GENERAL_OPTIONS = {
    'engine': 'InnoDB',
    'charset': 'utf8mb4',
}


class GeneralDdlConverter(BaseConverter):
    """
    Emits an InnoDB table with explicit nullability. Unlike the OLAP
    direction there is no fallback key: tables without primary-key columns
    get no PRIMARY KEY clause.
    """
    def __init__(self, options: Optional[Dict[str, Any]] = None):
        super().__init__(Dialect.OLAP, Dialect.GENERAL)
        self.logger = setup_logger('GeneralDdlConverter')
        configured = config.get('ddl_translation', {}).get('general', {}) or {}
        self.options = {**DEFAULT_GENERAL_OPTIONS, **configured, **(options or {})}

    def convert(self, table_name: str, columns: Sequence[Column], raw_ddl: str) -> str:
        table_comment = olap_table_comment(raw_ddl)
        field_lines = [self._column_line(col) for col in columns]

        key_columns = primary_keys(columns)
        key_clause = ''
        if key_columns:
            key_clause = ',\n    PRIMARY KEY (' + ', '.join(f"`{k}`" for k in key_columns) + ')'

        comment_clause = f" COMMENT='{table_comment}'" if table_comment else ''

        self.logger.debug(f"Converted {len(field_lines)} column(s) of '{table_name}' to GENERAL.")
        return (
            f"CREATE TABLE `{table_name}` (\n"
            + ',\n'.join(field_lines)
            + key_clause
            + f"\n) ENGINE={self.options['engine']} DEFAULT CHARSET={self.options['charset']}{comment_clause};"
        )

    @staticmethod
    def _column_line(column: Column) -> str:
        null_clause = 'NULL' if column.nullable else 'NOT NULL'
        comment = f" COMMENT '{column.comment}'" if column.comment else ''
        return f"    `{column.name}` {to_general_type(column)} {null_clause}{comment}"
