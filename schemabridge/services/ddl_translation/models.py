"""
Column and table models shared by the translator, the compatibility checker
and the statement generator.

Values arrive from the schema-fetch side as plain dictionaries, so both
classes accept snake_case keys as well as the camelCase keys used by the
desktop client (``isPrimaryKey``, ``defaultValue``, ``rawDdl``).
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple


class Dialect(str, Enum):
    """The two SQL dialects the engine translates between.

    Values double as sqlglot reader names.
    """
    GENERAL = "mysql"
    OLAP = "doris"

    @classmethod
    def parse(cls, value: Any) -> "Dialect":
        """Resolve ``'general'``/``'olap'`` as well as ``'mysql'``/``'doris'``."""
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        aliases = {
            "general": cls.GENERAL, "mysql": cls.GENERAL,
            "olap": cls.OLAP, "doris": cls.OLAP,
        }
        if key not in aliases:
            raise ValueError(f"Unknown dialect: {value!r}")
        return aliases[key]


_TRUE_STRINGS = ("true", "1", "yes", "y")
_FALSE_STRINGS = ("false", "0", "no", "n")


def _mapping(data: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise TypeError(f"{kind} must be an object, got {type(data).__name__}")
    return data


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _flag(value: Any, default: bool) -> bool:
    """Read a boolean that may arrive as a bool, a 0/1 number or a string."""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise ValueError(f"Not a boolean value: {value!r}")


@dataclass(frozen=True)
class Column:
    name: str
    type: str
    length: Optional[int] = None
    scale: Optional[int] = None
    nullable: bool = True
    is_primary_key: bool = False
    default_value: Optional[str] = None
    comment: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Column":
        data = _mapping(data, "Column")
        default_value = _pick(data, "default_value", "defaultValue")
        return cls(
            name=str(_pick(data, "name", default="")),
            type=str(_pick(data, "type", "data_type", default="")),
            length=_optional_int(_pick(data, "length")),
            scale=_optional_int(_pick(data, "scale")),
            nullable=_flag(_pick(data, "nullable"), default=True),
            is_primary_key=_flag(_pick(data, "is_primary_key", "isPrimaryKey"), default=False),
            default_value=None if default_value is None else str(default_value),
            comment=_pick(data, "comment"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "length": self.length,
            "scale": self.scale,
            "nullable": self.nullable,
            "is_primary_key": self.is_primary_key,
            "default_value": self.default_value,
            "comment": self.comment,
        }


@dataclass(frozen=True)
class TableSchema:
    name: str
    columns: Tuple[Column, ...] = field(default_factory=tuple)
    raw_ddl: str = ""
    engine: Optional[str] = None
    collation: Optional[str] = None

    def __post_init__(self):
        # Accept any iterable of columns but store an immutable tuple
        object.__setattr__(self, "columns", tuple(self.columns))

    @property
    def primary_keys(self) -> List[str]:
        return [c.name for c in self.columns if c.is_primary_key]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TableSchema":
        data = _mapping(data, "Table")
        return cls(
            name=str(_pick(data, "name", "table_name", "tableName", default="")),
            columns=columns_from_dicts(_pick(data, "columns", default=[])),
            raw_ddl=str(_pick(data, "raw_ddl", "rawDdl", "ddl", default="")),
            engine=_pick(data, "engine"),
            collation=_pick(data, "collation"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "columns": [c.to_dict() for c in self.columns],
            "raw_ddl": self.raw_ddl,
            "engine": self.engine,
            "collation": self.collation,
        }


def columns_from_dicts(items: Iterable[Any]) -> List[Column]:
    """Build columns from dicts, passing through values that already are Columns."""
    return [item if isinstance(item, Column) else Column.from_dict(item) for item in items or []]


@dataclass(frozen=True)
class CompatibilityResult:
    compatible: bool
    warning: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"compatible": self.compatible}
        if self.warning:
            result["warning"] = self.warning
        return result
