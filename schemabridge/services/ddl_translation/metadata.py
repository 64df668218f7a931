"""
Regex extraction of table-level facts from raw DDL text.

All text-pattern matching used by the translator lives here so a stricter
parser can replace it without touching the converters.
"""
import re
from typing import List, Optional, Sequence

from .models import Column

# GENERAL source: MySQL table option ``COMMENT='...'``
GENERAL_TABLE_COMMENT = re.compile(r"COMMENT\s*=\s*'([^']*)'", re.IGNORECASE)

# OLAP source, tried in order; the first capture wins.
OLAP_TABLE_COMMENT_PATTERNS = (
    # Doris key clause: ``UNIQUE KEY(`id`) COMMENT '...'``
    re.compile(
        r"(?:UNIQUE|DUPLICATE|AGGREGATE)\s+KEY\s*\([^)]*\)\s*COMMENT\s*['\"]([^'\"]*)['\"]",
        re.IGNORECASE,
    ),
    # COMMENT right after a closing parenthesis, optionally behind ``ENGINE = <word>``
    re.compile(
        r"\)\s*?(?:ENGINE\s*=\s*\w+\s*?)?COMMENT\s*=?\s*['\"]([^'\"]*)['\"]",
        re.IGNORECASE,
    ),
    # MySQL-style tail: ``) ENGINE=... DEFAULT CHARSET=... COMMENT='...'``
    re.compile(r"\)\s*[^;]*?COMMENT\s*=\s*['\"]([^'\"]*)['\"]", re.IGNORECASE),
)

# Last resort: the last COMMENT anywhere, which may be a column comment
ANY_COMMENT = re.compile(r"COMMENT\s*=?\s*['\"]([^'\"]*)['\"]", re.IGNORECASE)


def general_table_comment(raw_ddl: Optional[str], table_name: str) -> str:
    """Table comment of GENERAL DDL, falling back to the table name."""
    match = GENERAL_TABLE_COMMENT.search(raw_ddl or '')
    if match and match.group(1):
        return match.group(1)
    return table_name


def olap_table_comment(raw_ddl: Optional[str]) -> str:
    """Table comment of OLAP DDL, or an empty string when none is found.

    When no table-level clause matches, the last ``COMMENT`` in the text is
    used, so a trailing column comment can stand in for a missing table comment.
    """
    if not raw_ddl:
        return ''
    for pattern in OLAP_TABLE_COMMENT_PATTERNS:
        match = pattern.search(raw_ddl)
        if match:
            return match.group(1)
    comments = ANY_COMMENT.findall(raw_ddl)
    return comments[-1] if comments else ''


def primary_keys(columns: Sequence[Column]) -> List[str]:
    """Names of primary-key columns in input order."""
    return [c.name for c in columns if c.is_primary_key]
