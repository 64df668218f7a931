"""
Column type compatibility rules for field mappings.

Rules are substring checks on the lower-cased raw type names and are
evaluated in order; the first one that fires decides the verdict.
"""
from typing import Optional

from schemabridge.services.ddl_translation.models import CompatibilityResult

STRING_TO_NUMBER = 'String -> Number risk'
BIGINT_OVERFLOW = 'BigInt -> Int overflow risk'
DATE_TO_NON_DATE = 'Date -> Non-Date/String'

_STRING_MARKERS = ('char', 'text')
_NUMBER_MARKERS = ('int', 'decimal', 'double')
_TEMPORAL_MARKERS = ('date', 'time')


def _contains_any(value: str, markers) -> bool:
    return any(marker in value for marker in markers)


def check(source_type: Optional[str] = '', target_type: Optional[str] = '') -> CompatibilityResult:
    """Judge whether a *source_type* value can be written to a *target_type* column."""
    s = (source_type or '').lower()
    t = (target_type or '').lower()

    # Nothing to judge without both sides
    if not s or not t:
        return CompatibilityResult(compatible=True)

    if _contains_any(s, _STRING_MARKERS) and _contains_any(t, _NUMBER_MARKERS):
        return CompatibilityResult(compatible=False, warning=STRING_TO_NUMBER)

    if 'bigint' in s and 'int' in t and 'big' not in t:
        return CompatibilityResult(compatible=False, warning=BIGINT_OVERFLOW)

    if _contains_any(s, _TEMPORAL_MARKERS) and not _contains_any(t, _TEMPORAL_MARKERS + _STRING_MARKERS):
        return CompatibilityResult(compatible=False, warning=DATE_TO_NON_DATE)

    return CompatibilityResult(compatible=True)
