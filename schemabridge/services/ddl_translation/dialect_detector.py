"""
Dialect detection for raw CREATE TABLE text.

Classification is a plain substring search for OLAP-only clauses. Any marker
is enough; there is no precedence between them, and the InnoDB exclusion
only applies to ``UNIQUE KEY``.
"""
from typing import Optional

from .models import Dialect

OLAP_MARKERS = (
    'ENGINE=OLAP',
    'ENGINE = OLAP',
    'DISTRIBUTED BY HASH',
    'DUPLICATE KEY',
    'AGGREGATE KEY',
    'BUCKETS',
)

# UNIQUE KEY is also valid MySQL index syntax, so it only counts without InnoDB
UNIQUE_KEY_MARKER = 'UNIQUE KEY'
INNODB_MARKER = 'ENGINE=INNODB'


def detect(raw_ddl: Optional[str]) -> Dialect:
    """Return the dialect *raw_ddl* was written in; empty text is GENERAL."""
    if not raw_ddl:
        return Dialect.GENERAL

    upper_ddl = raw_ddl.upper()
    if any(marker in upper_ddl for marker in OLAP_MARKERS):
        return Dialect.OLAP
    if UNIQUE_KEY_MARKER in upper_ddl and INNODB_MARKER not in upper_ddl:
        return Dialect.OLAP
    return Dialect.GENERAL


def opposite(dialect: Dialect) -> Dialect:
    return Dialect.GENERAL if dialect is Dialect.OLAP else Dialect.OLAP


def get_sqlglot_dialect(dialect) -> str:
    """
    Get the sqlglot reader name for a dialect.

    Args:
        dialect: Engine dialect, or any name ``Dialect.parse`` accepts

    Returns:
        sqlglot dialect string; the enum value itself ('mysql' or 'doris')
    """
    return Dialect.parse(dialect).value
