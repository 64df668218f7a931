"""
DDL translation package - dialect detection and CREATE TABLE translation
between the GENERAL (MySQL-like) and OLAP (Doris-like) dialects.

Usage:
    from schemabridge.services.ddl_translation import detect, to_olap_ddl

    if detect(raw_ddl) is Dialect.GENERAL:
        olap_ddl = to_olap_ddl("users", columns, raw_ddl)
"""

from .dialect_detector import detect, opposite
from .models import Column, CompatibilityResult, Dialect, TableSchema
from .orchestrator import ConversionOrchestrator
from .translator import to_general_ddl, to_olap_ddl, translate
from .type_mapper import format_column_type
from .utils.parser_utils import parse_table_schema

__all__ = [
    'Column',
    'CompatibilityResult',
    'ConversionOrchestrator',
    'Dialect',
    'TableSchema',
    'detect',
    'format_column_type',
    'opposite',
    'parse_table_schema',
    'to_general_ddl',
    'to_olap_ddl',
    'translate',
]
