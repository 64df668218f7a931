"""
Type-name translation between the GENERAL and OLAP dialects.

Types are treated as opaque tokens: rules match on the upper-cased token and
its parenthesised suffix, never on a parsed type. The two directions are
deliberately not mirror images of each other.
"""
import re
from typing import Callable, Optional, Tuple

from .models import Column

_INTEGER_WITH_WIDTH = re.compile(r'^(BIGINT|INT|TINYINT|SMALLINT|MEDIUMINT)\s*\(\d+\)$', re.IGNORECASE)
_FLOAT_WITH_PRECISION = re.compile(r'^(DOUBLE|FLOAT)\s*\(\d+,\s*\d+\)$', re.IGNORECASE)
_BOOLEAN_TINYINT = re.compile(r'^TINYINT\s*\(1\)$', re.IGNORECASE)
_DATETIME_LIKE = re.compile(r'^(DATETIME|TIMESTAMP)(\s*\(\d+\))?$', re.IGNORECASE)
_HAS_SUFFIX = re.compile(r'\(.*\)')

_SIZED_TYPES = ('VARCHAR', 'CHAR', 'VARBINARY', 'BINARY')
_DECIMAL_TYPES = ('DECIMAL', 'NUMERIC')
_TEMPORAL_TYPES = ('DATETIME', 'TIMESTAMP', 'TIME')

# OLAP -> GENERAL is a straight token lookup
OLAP_TO_GENERAL_TYPES = {
    'STRING': 'TEXT',
    'BOOLEAN': 'TINYINT(1)',
}


def _varchar_to_olap(token: str, column: Column) -> str:
    if column.length and column.length > 0:
        return f"VARCHAR({column.length})"
    return 'STRING'


# (matcher, converter) pairs for GENERAL -> OLAP, first match wins
GENERAL_TO_OLAP_RULES: Tuple[Tuple[Callable[[str], bool], Callable[[str, Column], str]], ...] = (
    (lambda t: bool(_BOOLEAN_TINYINT.match(t)), lambda t, c: 'BOOLEAN'),
    (lambda t: bool(_INTEGER_WITH_WIDTH.match(t)), lambda t, c: _INTEGER_WITH_WIDTH.match(t).group(1)),
    (lambda t: bool(_FLOAT_WITH_PRECISION.match(t)), lambda t, c: _FLOAT_WITH_PRECISION.match(t).group(1)),
    (lambda t: 'TEXT' in t, lambda t, c: 'STRING'),
    (lambda t: t == 'VARCHAR', _varchar_to_olap),
    (lambda t: bool(_DATETIME_LIKE.match(t)), lambda t, c: 'DATETIME'),
)


def _token(column: Column) -> str:
    return (column.type or '').strip().upper()


def to_olap_type(column: Column) -> str:
    """Map a GENERAL column type to its OLAP spelling."""
    token = _token(column)
    for matches, convert in GENERAL_TO_OLAP_RULES:
        if matches(token):
            return convert(token, column)
    return token


def to_general_type(column: Column) -> str:
    """Map an OLAP column type to its GENERAL spelling."""
    token = _token(column)
    return OLAP_TO_GENERAL_TYPES.get(token, token)


def format_column_type(column: Column) -> str:
    """Render the column type with the size details carried on the column.

    ``VARCHAR`` with length 50 gives ``VARCHAR(50)``, ``DECIMAL`` with
    length 10 and scale 2 gives ``DECIMAL(10,2)``. Types that already carry
    a parenthesised suffix are only upper-cased.
    """
    token = _token(column)
    if _HAS_SUFFIX.search(token):
        return token

    length: Optional[int] = column.length if column.length and column.length > 0 else None
    scale: Optional[int] = column.scale if column.scale and column.scale > 0 else None

    if token in _SIZED_TYPES:
        return f"{token}({length})" if length else token
    if token in _DECIMAL_TYPES:
        if not length:
            return token
        return f"{token}({length},{scale})" if scale else f"{token}({length})"
    if token in _TEMPORAL_TYPES and scale:
        return f"{token}({scale})"
    return token
