from decimal import Decimal
from typing import Any, Dict

from sqlalchemy import inspect


def row_to_dict(obj) -> Dict[str, Any]:
    """
    Serialize an ORM instance keyed by its stored column names
    (ProductID, BrandName, ...), i.e. what `SELECT *` would return.
    """
    out = {}
    for attr in inspect(obj).mapper.column_attrs:
        out[attr.columns[0].name] = getattr(obj, attr.key)
    return out


def to_number(value):
    """Decimals from SUM()/Numeric columns become int when integral, float otherwise."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return value
