"""ConversionOrchestrator – batch driver for CREATE TABLE translation.

Responsibilities
----------------
1. Normalise each table payload (dict or TableSchema) into a TableSchema.
2. Fill in missing column models by parsing the raw DDL with sqlglot.
3. Pick the direction per table: the requested target, or the dialect
   opposite to the one its DDL is written in.
4. Delegate to the translator and collect per-table results.

A failing table is recorded and the remaining tables are still converted.
All rewrite logic lives in the converter layer; the orchestrator only
handles normalisation, logging and aggregation.
"""
from typing import Any, Dict, Iterable, List, Optional, Union

from schemabridge.utils.logger import setup_logger
from .dialect_detector import detect
from .models import Dialect, TableSchema
from .translator import resolve_target, translate
from .utils.parser_utils import parse_table_schema
from .utils.result_formatter import create_result_dictionary


class ConversionOrchestrator:

    def __init__(self, target: Optional[Union[Dialect, str]] = None):
        self.logger = setup_logger("ConversionOrchestrator")
        self.target = Dialect.parse(target) if target else None
        self.logger.info(f"Batch conversion target: {self.target.value if self.target else 'auto'}")

    def convert_tables(self, tables: Iterable[Union[TableSchema, Dict[str, Any]]]) -> Dict[str, Any]:
        """Convert every table and return the aggregated result dictionary."""
        results: List[Dict[str, Any]] = []
        for index, table in enumerate(tables or []):
            results.append(self._convert_one(index, table))
            self._log_table_result(results[-1])

        return create_result_dictionary(results, target=self.target.value if self.target else 'auto')

    def _convert_one(self, index: int, table: Union[TableSchema, Dict[str, Any]]) -> Dict[str, Any]:
        try:
            schema = table if isinstance(table, TableSchema) else TableSchema.from_dict(table)
        except (TypeError, ValueError) as e:
            return self._create_table_error_result(f"#{index + 1}", f"Invalid table payload: {e}")

        schema, error = self._ensure_columns(schema)
        if error:
            return self._create_table_error_result(schema.name or f"#{index + 1}", error)

        source = detect(schema.raw_ddl)
        target = resolve_target(schema.raw_ddl, self.target)
        ddl = translate(schema.name, schema.columns, schema.raw_ddl, target)
        return {
            "table": schema.name,
            "status": "success",
            "source_dialect": source.value,
            "target_dialect": target.value,
            "ddl": ddl,
        }

    def _ensure_columns(self, schema: TableSchema):
        """Return a schema with columns, parsing the raw DDL when they are missing."""
        if schema.columns:
            if not schema.name:
                return schema, "Table name is required"
            return schema, None
        if not schema.raw_ddl:
            return schema, "Table has neither columns nor DDL"

        parsed, error = parse_table_schema(schema.raw_ddl)
        if error:
            return schema, error
        self.logger.debug(f"Loaded {len(parsed.columns)} column(s) for '{parsed.name}' from DDL.")
        return TableSchema(
            name=schema.name or parsed.name,
            columns=parsed.columns,
            raw_ddl=schema.raw_ddl,
            engine=schema.engine or parsed.engine,
            collation=schema.collation or parsed.collation,
        ), None

    @staticmethod
    def _create_table_error_result(table: str, message: str) -> Dict[str, Any]:
        return {"table": table, "status": "error", "error_message": message}

    def _log_table_result(self, result: Dict[str, Any]):
        if result["status"] == "success":
            self.logger.info(
                f"Converted '{result['table']}': {result['source_dialect']} -> {result['target_dialect']}"
            )
        else:
            self.logger.warning(f"Skipped '{result['table']}': {result['error_message']}")
