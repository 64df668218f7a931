"""
GENERAL (MySQL-like) to OLAP (Doris-like) CREATE TABLE conversion.
"""
from typing import Any, Dict, Optional, Sequence

from schemabridge import config
from schemabridge.utils.logger import setup_logger
from .base_converter import BaseConverter
from ..metadata import general_table_comment, primary_keys
from ..models import Column, Dialect
from ..type_mapper import to_olap_type

DEFAULT_OLAP_OPTIONS = {
    'buckets': 10,
    'replication_num': '1',
    'enable_unique_key_merge_on_write': 'true',
    'fallback_key': 'id',
}


class OlapDdlConverter(BaseConverter):
    """
    Emits a UNIQUE KEY model OLAP table: the primary-key columns become both
    the unique key and the hash distribution key.
    """
    def __init__(self, options: Optional[Dict[str, Any]] = None):
        super().__init__(Dialect.GENERAL, Dialect.OLAP)
        self.logger = setup_logger('OlapDdlConverter')
        configured = config.get('ddl_translation', {}).get('olap', {}) or {}
        self.options = {**DEFAULT_OLAP_OPTIONS, **configured, **(options or {})}

    def convert(self, table_name: str, columns: Sequence[Column], raw_ddl: str) -> str:
        key_columns = primary_keys(columns)
        if not key_columns:
            self.logger.debug(
                f"Table '{table_name}' has no primary key; using '{self.options['fallback_key']}' as unique key."
            )
            key_columns = [self.options['fallback_key']]
        key_list = ', '.join(key_columns)

        table_comment = general_table_comment(raw_ddl, table_name)
        field_lines = [self._column_line(col) for col in columns]

        self.logger.debug(f"Converted {len(field_lines)} column(s) of '{table_name}' to OLAP.")
        return (
            f"CREATE TABLE `{table_name}` (\n"
            + ',\n'.join(field_lines)
            + "\n) ENGINE = OLAP\n"
            f"UNIQUE KEY({key_list}) COMMENT '{table_comment}'\n"
            f"DISTRIBUTED BY HASH({key_list}) BUCKETS {self.options['buckets']}\n"
            "PROPERTIES (\n"
            f"    \"replication_num\" = \"{self.options['replication_num']}\",\n"
            f"    \"enable_unique_key_merge_on_write\" = \"{self.options['enable_unique_key_merge_on_write']}\"\n"
            ");"
        )

    @staticmethod
    def _column_line(column: Column) -> str:
        comment = f" COMMENT '{column.comment}'" if column.comment else ''
        return f"    `{column.name}` {to_olap_type(column)}{comment}"
