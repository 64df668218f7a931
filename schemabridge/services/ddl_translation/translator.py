"""
Public entry points of the DDL translator.

Every function here is pure: the same table name, columns and DDL text
always produce the same statement, and no input shape raises.
"""
from functools import lru_cache
from typing import Iterable, Optional, Union

from .converters import BaseConverter, GeneralDdlConverter, OlapDdlConverter
from .dialect_detector import detect, opposite
from .models import Column, Dialect, columns_from_dicts


@lru_cache(maxsize=None)
def get_converter(target: Dialect) -> BaseConverter:
    """Shared converter instance producing *target* DDL."""
    if target is Dialect.OLAP:
        return OlapDdlConverter()
    return GeneralDdlConverter()


def to_olap_ddl(table_name: str, columns: Iterable[Union[Column, dict]], raw_ddl: Optional[str] = '') -> str:
    """Translate a GENERAL table into an OLAP ``CREATE TABLE`` statement."""
    return get_converter(Dialect.OLAP).convert(table_name, columns_from_dicts(columns), raw_ddl or '')


def to_general_ddl(table_name: str, columns: Iterable[Union[Column, dict]], raw_ddl: Optional[str] = '') -> str:
    """Translate an OLAP table into a GENERAL ``CREATE TABLE`` statement."""
    return get_converter(Dialect.GENERAL).convert(table_name, columns_from_dicts(columns), raw_ddl or '')


def resolve_target(raw_ddl: Optional[str], target: Optional[Union[Dialect, str]] = None) -> Dialect:
    """Explicit *target*, or the dialect opposite to the one *raw_ddl* is in."""
    if target:
        return Dialect.parse(target)
    return opposite(detect(raw_ddl))


def translate(
    table_name: str,
    columns: Iterable[Union[Column, dict]],
    raw_ddl: Optional[str] = '',
    target: Optional[Union[Dialect, str]] = None,
) -> str:
    """Translate towards *target*; without one the direction follows ``detect``."""
    if resolve_target(raw_ddl, target) is Dialect.OLAP:
        return to_olap_ddl(table_name, columns, raw_ddl)
    return to_general_ddl(table_name, columns, raw_ddl)
