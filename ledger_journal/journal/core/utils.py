"""
Journal Utility Module
"""

import base64
from collections.abc import Mapping
from typing import Any

from amazon.ion.core import IonType
from amazon.ion.simple_types import IonPyNull


def ion_to_native(value: Any) -> Any:
    """
    Convert a value read from the ledger (Ion simple types) into plain Python.

    Structs become dict, lists/sexps become list, symbols become str, Ion nulls
    of any type become None. Blobs and clobs become base64 text. Scalars are
    unwrapped to their base Python type; Decimal and datetime values are kept
    as such.
    """
    if value is None or isinstance(value, IonPyNull):
        return None
    ion_type = getattr(value, "ion_type", None)
    if ion_type == IonType.BOOL:
        # IonPyBool is an int subclass.
        return bool(value)
    if ion_type == IonType.SYMBOL:
        # IonPySymbol is a SymbolToken namedtuple.
        return value.text
    if ion_type in (IonType.BLOB, IonType.CLOB):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, Mapping):
        return {str(k): ion_to_native(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [ion_to_native(v) for v in value]
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, str):
        return str(value)
    return value
