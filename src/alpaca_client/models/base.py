"""
Base classes for API data structures.

Every request, response and model is a frozen dataclass deriving from
``Model`` (or ``Request``). Conversion to and from the JSON wire format is
driven by the field type hints; a field whose wire key differs from its
Python name declares it with ``api_field``.
"""

import dataclasses
import logging
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, Optional, Type, TypeVar, Union, get_args, get_origin, get_type_hints

from ..utils import format_datetime, parse_date, parse_datetime, sanitize_dict

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="Model")


def api_field(key: str, default: Any = None) -> Any:
    """Declare a field serialized under a different wire key."""
    return dataclasses.field(default=default, metadata={"key": key})


def path_field(default: Any = dataclasses.MISSING) -> Any:
    """Declare a request field that is sent in the URL path, not the query or body."""
    return dataclasses.field(default=default, metadata={"path": True})


class ApiEnum(str, Enum):
    """
    String enumeration of API values.

    Subclasses define an ``UNSPECIFIED`` member with an empty value; it is
    never sent and it absorbs values the server adds after this release.
    """

    @classmethod
    def _missing_(cls, value):
        unspecified = cls.__members__.get("UNSPECIFIED")
        if unspecified is not None:
            logger.debug(f"Unknown {cls.__name__} value {value!r}, using UNSPECIFIED")
        return unspecified


@lru_cache(maxsize=None)
def _field_types(cls: type) -> Dict[str, Any]:
    return get_type_hints(cls)


def _decode(tp: Any, value: Any) -> Any:
    if value is None:
        return None

    origin = get_origin(tp)
    if origin is Union:
        args = [arg for arg in get_args(tp) if arg is not type(None)]
        return _decode(args[0], value) if len(args) == 1 else value
    if origin is list:
        (item_type,) = get_args(tp)
        return [_decode(item_type, item) for item in value]
    if origin is dict:
        _, value_type = get_args(tp)
        return {key: _decode(value_type, item) for key, item in value.items()}

    if not isinstance(tp, type):
        return value
    if issubclass(tp, Model):
        return tp.from_dict(value)
    if issubclass(tp, Enum):
        return tp(value)
    if tp is Decimal:
        return None if value == "" else Decimal(str(value))
    if tp is datetime:
        return parse_datetime(value)
    if tp is date:
        return parse_date(value)
    if tp is bool:
        return value if isinstance(value, bool) else str(value).lower() == "true"
    if tp is int:
        return _decode_int(value)
    if tp in (float, str):
        return tp(value)
    return value


def _decode_int(value: Any) -> Any:
    """Decode an integer field, keeping a fractional number as a Decimal."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value == "":
        return None
    number = Decimal(str(value))
    if number != number.to_integral_value():
        logger.debug(f"Non-integral value {value!r} kept as Decimal")
        return number
    return int(number)


def _encode(value: Any, query: bool) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, bool):
        # aiohttp rejects booleans in query strings
        return ("true" if value else "false") if query else value
    if isinstance(value, (list, tuple)):
        items = [_encode(item, query) for item in value]
        return ",".join(str(item) for item in items) if query else items
    return value


class Model:
    """Base for frozen dataclasses exchanged with the API."""

    @classmethod
    def from_dict(cls: Type[M], data: Optional[Dict[str, Any]]) -> M:
        """Build an instance from a decoded JSON object, ignoring unknown keys."""
        data = data or {}
        types = _field_types(cls)
        kwargs = {}
        for f in dataclasses.fields(cls):
            key = f.metadata.get("key", f.name)
            if key in data:
                kwargs[f.name] = _decode(types[f.name], data[key])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Encode as a JSON object; path fields, None and empty values are left out."""
        return sanitize_dict({
            f.metadata.get("key", f.name): _encode(getattr(self, f.name), query=False)
            for f in dataclasses.fields(self)
            if not f.metadata.get("path")
        })


class Request(Model):
    """Base for request dataclasses."""

    def to_params(self) -> Dict[str, Any]:
        """Encode the non-path fields as query string parameters."""
        return sanitize_dict({
            f.metadata.get("key", f.name): _encode(getattr(self, f.name), query=True)
            for f in dataclasses.fields(self)
            if not f.metadata.get("path")
        })
