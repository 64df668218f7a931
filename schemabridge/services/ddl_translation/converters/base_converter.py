from typing import Sequence

from ..models import Column, Dialect


class BaseConverter:
    """
    A base class for the DDL converters to ensure a consistent interface.
    """
    def __init__(self, source_dialect: Dialect, target_dialect: Dialect):
        self.source_dialect = source_dialect
        self.target_dialect = target_dialect

    def convert(self, table_name: str, columns: Sequence[Column], raw_ddl: str) -> str:
        """
        Build a CREATE TABLE statement for the target dialect.

        Args:
            table_name: Name of the table to emit.
            columns: Column model of the source table, in output order.
            raw_ddl: Original DDL text, used for table-level metadata only.

        Returns:
            The target-dialect DDL text.
        """
        raise NotImplementedError("Each converter must implement its own convert method.")
