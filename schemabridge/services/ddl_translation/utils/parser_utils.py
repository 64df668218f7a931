"""
Loading a column model from CREATE TABLE text with sqlglot.

The translator itself works on regexes over the raw text; this module only
fills in the column model when a caller has DDL but no describe-table result.
"""
import logging
from typing import List, Optional, Tuple, Union

import sqlglot
from sqlglot import exp

from ..dialect_detector import detect, get_sqlglot_dialect
from ..models import Column, Dialect, TableSchema

logger = logging.getLogger(__name__)


def safe_parse_one(sql: str, dialect: str) -> Tuple[Optional[exp.Expression], Optional[str]]:
    """
    Safely parses a single SQL statement into an AST.

    Returns:
        A tuple containing (ast, error_message). Exactly one of them is None.
    """
    try:
        ast = sqlglot.parse_one(sql, read=dialect)
        return ast, None
    except Exception as e:
        logger.warning(f"Failed to parse statement as {dialect}: {e}")
        return None, f"Failed to parse statement: {e}"


def _literal_int(node: exp.Expression) -> Optional[int]:
    value = node.this if isinstance(node, exp.DataTypeParam) else node
    try:
        return int(value.name)
    except (AttributeError, TypeError, ValueError):
        return None


def _type_params(kind: Optional[exp.DataType]) -> Tuple[Optional[int], Optional[int]]:
    if kind is None:
        return None, None
    params = [_literal_int(p) for p in kind.expressions or []]
    length = params[0] if params else None
    scale = params[1] if len(params) > 1 else None
    return length, scale


def _identifier_names(node: exp.Expression) -> List[str]:
    return [ident.name for ident in node.find_all(exp.Identifier)]


def _column_from_def(column_def: exp.ColumnDef, read: str, table_keys: List[str]) -> Column:
    kind = column_def.args.get('kind')
    length, scale = _type_params(kind)

    nullable = True
    is_primary_key = column_def.name in table_keys
    default_value = None
    comment = None

    for constraint in column_def.constraints:
        ckind = constraint.kind
        if isinstance(ckind, exp.NotNullColumnConstraint):
            # ``NULL`` is parsed as NotNull with allow_null set
            nullable = bool(ckind.args.get('allow_null'))
        elif isinstance(ckind, exp.PrimaryKeyColumnConstraint):
            is_primary_key = True
            nullable = False
        elif isinstance(ckind, exp.DefaultColumnConstraint):
            default_value = ckind.this.name if isinstance(ckind.this, exp.Literal) else ckind.this.sql(dialect=read)
        elif isinstance(ckind, exp.CommentColumnConstraint):
            comment = ckind.this.name if ckind.this is not None else None

    return Column(
        name=column_def.name,
        type=kind.sql(dialect=read) if kind is not None else '',
        length=length,
        scale=scale,
        nullable=nullable,
        is_primary_key=is_primary_key,
        default_value=default_value,
        comment=comment or None,
    )


def _property_value(properties: Optional[exp.Properties], prop_type) -> Optional[str]:
    if properties is None:
        return None
    prop = properties.find(prop_type)
    if prop is None or prop.this is None:
        return None
    value = prop.this
    return value.name if isinstance(value, (exp.Literal, exp.Identifier, exp.Var)) else value.sql()


def parse_table_schema(
    ddl: str,
    dialect: Optional[Union[Dialect, str]] = None,
) -> Tuple[Optional[TableSchema], Optional[str]]:
    """
    Parse a CREATE TABLE statement into a TableSchema.

    Args:
        ddl: The CREATE TABLE text.
        dialect: Dialect to read with; detected from the text when omitted.

    Returns:
        (schema, None) on success, (None, error_message) otherwise.
    """
    if not ddl or not ddl.strip():
        return None, "DDL text is empty"

    try:
        source = Dialect.parse(dialect) if dialect else detect(ddl)
    except ValueError as ve:
        return None, str(ve)
    read = get_sqlglot_dialect(source)

    ast, error = safe_parse_one(ddl.strip(), read)
    if error:
        return None, error

    if not isinstance(ast, exp.Create) or str(ast.args.get('kind', '')).upper() != 'TABLE':
        return None, "Statement is not a CREATE TABLE statement"

    schema = ast.this
    if not isinstance(schema, exp.Schema):
        return None, "CREATE TABLE statement has no column list"

    table_keys: List[str] = []
    for node in schema.expressions:
        if isinstance(node, exp.PrimaryKey):
            table_keys.extend(_identifier_names(node))

    columns = [
        _column_from_def(node, read, table_keys)
        for node in schema.expressions
        if isinstance(node, exp.ColumnDef)
    ]

    properties = ast.args.get('properties')
    table_schema = TableSchema(
        name=schema.this.name,
        columns=columns,
        raw_ddl=ddl,
        engine=_property_value(properties, exp.EngineProperty),
        collation=_property_value(properties, exp.CollateProperty),
    )
    logger.debug(f"Parsed {len(columns)} column(s) for table '{table_schema.name}' as {read}.")
    return table_schema, None
