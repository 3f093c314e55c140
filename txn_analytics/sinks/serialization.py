"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from typing import Any


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a flat dataclass to a dict keyed by its wire names.

    Fields declaring a ``json_key`` in their metadata are emitted under that
    key, other fields under their attribute name. Declaration order is kept.

    Parameters
    ----------
    obj : Any
        A dataclass instance.

    Returns
    -------
    dict
        Serialized dictionary.
    """
    return {
        f.metadata.get("json_key", f.name): serialize_value(getattr(obj, f.name))
        for f in fields(obj)
    }


def serialize_value(value: Any) -> Any:
    """Serialize a query result for JSON output."""
    if is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, (set, frozenset)):
        return sorted(serialize_value(v) for v in value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
