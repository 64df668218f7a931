"""
Batch text format of the field mapping tool.

One mapping per line, ``<source column> <target column>``, separated by tabs,
commas or spaces. Lines naming a column that is not in the given column lists
are dropped.

Auto-mapping pairs columns whose names match ignoring case.
"""
import re
from typing import Any, Dict, Iterable, List, Union

from schemabridge.services.ddl_translation.models import Column, columns_from_dicts
from schemabridge.utils.logger import setup_logger
from .checker import check

logger = setup_logger('type_compat.mapping')

_SEPARATORS = re.compile(r'[\t, ]+')


def parse_mapping_text(
    text: str,
    source_columns: Iterable[Union[Column, dict]],
    target_columns: Iterable[Union[Column, dict]],
) -> List[Dict[str, str]]:
    """Turn batch text into mappings between known source and target columns."""
    sources = {c.name: c for c in columns_from_dicts(source_columns)}
    targets = {c.name: c for c in columns_from_dicts(target_columns)}

    mappings: List[Dict[str, str]] = []
    for line_no, line in enumerate((text or '').strip().splitlines(), start=1):
        if not line.strip():
            continue
        parts = _SEPARATORS.split(line.strip())
        if len(parts) < 2:
            logger.debug(f"Mapping line {line_no} has no target column: {line!r}")
            continue
        source, target = sources.get(parts[0]), targets.get(parts[1])
        if source is None or target is None:
            logger.debug(f"Mapping line {line_no} references an unknown column: {line!r}")
            continue
        mappings.append({
            'source_field': source.name,
            'source_type': source.type,
            'target_field': target.name,
            'target_type': target.type,
        })
    return mappings


def format_mapping_text(mappings: Iterable[Dict[str, Any]]) -> str:
    return '\n'.join(f"{m['source_field']}\t{m['target_field']}" for m in mappings)


def check_mappings(mappings: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Copy each mapping with its compatibility verdict merged in."""
    checked = []
    for mapping in mappings:
        verdict = check(mapping.get('source_type'), mapping.get('target_type'))
        checked.append({**mapping, **verdict.to_dict()})
    return checked


def auto_map(
    source_columns: Iterable[Union[Column, dict]],
    target_columns: Iterable[Union[Column, dict]],
    existing: Iterable[Dict[str, Any]] = (),
) -> List[Dict[str, Any]]:
    """Pair source and target columns whose names match ignoring case.

    Pairs already present in *existing* are not added twice; the result is
    *existing* followed by the new pairs in source column order.
    """
    targets: Dict[str, Column] = {}
    for column in columns_from_dicts(target_columns):
        targets.setdefault(column.name.lower(), column)

    mappings = list(existing)
    kept = len(mappings)
    seen = {(m.get('source_field'), m.get('target_field')) for m in mappings}
    for source in columns_from_dicts(source_columns):
        target = targets.get(source.name.lower())
        if target is None or (source.name, target.name) in seen:
            continue
        seen.add((source.name, target.name))
        mappings.append({
            'source_field': source.name,
            'source_type': source.type,
            'target_field': target.name,
            'target_type': target.type,
        })

    logger.debug(f"Auto-mapped {len(mappings) - kept} new pair(s)")
    return mappings
