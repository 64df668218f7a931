from fastapi import APIRouter, HTTPException, Body
from typing import Dict, Any, List, Optional

from schemabridge.services.ddl_translation import (
    ConversionOrchestrator,
    detect,
    format_column_type,
    parse_table_schema,
    translate,
)
from schemabridge.services.ddl_translation.models import columns_from_dicts
from schemabridge.services.ddl_translation.translator import resolve_target
from schemabridge.services.sql_generator import STATEMENT_KINDS, generate, generate_all
from schemabridge.services.type_compat import auto_map, check, check_mappings, parse_mapping_text
from schemabridge.utils.logger import setup_logger
from schemabridge.utils.timing import timed

api_router = APIRouter(prefix='/api/v1')

logger = setup_logger('api_routes')


def _require(data: Dict[str, Any], *keys: str):
    missing = [k for k in keys if not data.get(k)]
    if missing:
        raise HTTPException(status_code=400, detail=f"Missing required fields: {', '.join(missing)}")


def _text(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"'{key}' must be a string")
    return value


def _columns(data: Dict[str, Any], key: str = 'columns') -> List:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise HTTPException(status_code=400, detail=f"'{key}' must be a list of column objects")
    try:
        return columns_from_dicts(value)
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=400, detail=f"Invalid '{key}' payload: {e}")


@api_router.post('/ddl/detect')
def detect_dialect(data: Dict[str, Any] = Body(...)):
    """Classify the dialect of a CREATE TABLE statement."""
    return {'dialect': detect(_text(data, 'ddl')).value}


@api_router.post('/ddl/parse')
def parse_ddl(data: Dict[str, Any] = Body(...)):
    """Load the column model of a CREATE TABLE statement."""
    _require(data, 'ddl')
    schema, error = parse_table_schema(_text(data, 'ddl'), _text(data, 'dialect'))
    if error:
        raise HTTPException(status_code=400, detail=error)

    result = schema.to_dict()
    for column, payload in zip(schema.columns, result['columns']):
        payload['display_type'] = format_column_type(column)
    result['dialect'] = detect(schema.raw_ddl).value
    return result


@api_router.post('/ddl/convert')
def convert_ddl(data: Dict[str, Any] = Body(...)):
    """Translate one table to the other dialect.

    Columns are taken from the payload, or parsed from ``ddl`` when absent.
    """
    ddl = _text(data, 'ddl') or ''
    columns = _columns(data)
    table_name = _text(data, 'table_name')

    if not columns:
        if not ddl:
            raise HTTPException(status_code=400, detail='Either columns or ddl is required')
        schema, error = parse_table_schema(ddl)
        if error:
            raise HTTPException(status_code=400, detail=error)
        columns = list(schema.columns)
        table_name = table_name or schema.name

    if not table_name:
        raise HTTPException(status_code=400, detail='table_name is required')

    try:
        target = resolve_target(ddl, _text(data, 'target'))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(f"Converting '{table_name}' to {target.value}")
    return {
        'table_name': table_name,
        'source_dialect': detect(ddl).value,
        'target_dialect': target.value,
        'ddl': translate(table_name, columns, ddl, target),
    }


@api_router.post('/ddl/batch-convert')
def batch_convert_ddl(data: Dict[str, Any] = Body(...)):
    """Translate several tables; per-table failures do not stop the batch."""
    tables = data.get('tables')
    if not isinstance(tables, list) or not tables:
        raise HTTPException(status_code=400, detail="'tables' must be a non-empty list")

    try:
        orchestrator = ConversionOrchestrator(target=_text(data, 'target'))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return timed(orchestrator.convert_tables, tables, logger=logger)


@api_router.post('/sql/generate')
def generate_sql(data: Dict[str, Any] = Body(...)):
    """Generate template CRUD statements; ``kind`` defaults to all of them."""
    _require(data, 'table_name')
    table_name = _text(data, 'table_name')
    columns = _columns(data)
    kind = (_text(data, 'kind') or 'all').lower()

    if kind == 'all':
        return generate_all(table_name, columns)
    if kind not in STATEMENT_KINDS:
        raise HTTPException(
            status_code=400,
            detail=f"Invalid kind '{kind}', expected one of: all, {', '.join(STATEMENT_KINDS)}",
        )
    return {kind: generate(kind, table_name, columns)}


@api_router.post('/mapping/check')
def check_mapping(data: Dict[str, Any] = Body(...)):
    """Judge whether a source column type fits a target column type."""
    return check(_text(data, 'source_type'), _text(data, 'target_type')).to_dict()


@api_router.post('/mapping/batch')
def batch_mapping(data: Dict[str, Any] = Body(...)):
    """Parse mapping batch text and annotate every pair with its verdict."""
    source_columns = _columns(data, 'source_columns')
    target_columns = _columns(data, 'target_columns')
    mappings = parse_mapping_text(_text(data, 'text') or '', source_columns, target_columns)
    checked = check_mappings(mappings)
    return {
        'mappings': checked,
        'incompatible': sum(1 for m in checked if not m['compatible']),
    }


@api_router.post('/mapping/auto')
def auto_mapping(data: Dict[str, Any] = Body(...)):
    """Pair same-named columns (ignoring case), keeping the mappings already made."""
    existing = data.get('mappings') or []
    if not isinstance(existing, list) or not all(isinstance(m, dict) for m in existing):
        raise HTTPException(status_code=400, detail="'mappings' must be a list of mapping objects")

    mappings = auto_map(_columns(data, 'source_columns'), _columns(data, 'target_columns'), existing)
    checked = check_mappings(mappings)
    return {
        'mappings': checked,
        'added': len(checked) - len(existing),
        'incompatible': sum(1 for m in checked if not m['compatible']),
    }
