"""JSON-ready conversion of engine results.

Workflow hosts serialize results with the stdlib json module, which knows
nothing about Decimal, Enum, datetime or dataclasses. Decimals are rendered
as strings to preserve precision.
"""

import dataclasses
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping


def to_jsonable(obj: Any) -> Any:
    """Recursively convert a result into JSON-compatible primitives.

    - dataclass instances -> dict of their fields
    - Decimal -> str
    - Enum -> its value
    - datetime -> ISO-8601 string
    - Mapping keys are converted the same way (Enum keys -> their value)
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: to_jsonable(getattr(obj, f.name)) for f in dataclasses.fields(obj)
        }
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Mapping):
        return {to_jsonable(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(item) for item in obj]
    return obj
