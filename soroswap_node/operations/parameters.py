"""
Parameter declarations and coercion rules for operations.

Each operation declares an ordered tuple of ``ParameterSpec``. The dispatcher
reads the raw value for a parameter from the item (falling back to the
declared default) and runs it through the declared coercion. Every coercion
failure is raised as ``ParameterError`` naming the parameter.
"""

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple, Type

from ..exceptions import ParameterError
from ..models.enums import Protocol

_MISSING = object()
_DECIMAL_RE = re.compile(r"^[+-]?[0-9]+$")
_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


@dataclass(frozen=True)
class ParameterSpec:
    """Declaration of one named operation parameter."""
    name: str
    semantic_type: str
    coerce: Callable[[str, Any], Any]
    required: bool = True
    default: Any = _MISSING

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING

    def resolve(self, raw: Any = _MISSING) -> Any:
        """Apply the default (if any) and coerce the raw value."""
        if raw is _MISSING or raw is None:
            if self.has_default:
                raw = self.default
            elif self.required:
                raise ParameterError(self.name, "value is required")
            else:
                return None
        return self.coerce(self.name, raw)


def coerce_string(name: str, raw: Any) -> str:
    if not isinstance(raw, (str, int)) or isinstance(raw, bool):
        raise ParameterError(name, f"expected a string, got {type(raw).__name__}")
    value = str(raw).strip()
    if not value:
        raise ParameterError(name, "value is required")
    return value


def coerce_optional_string(name: str, raw: Any) -> Optional[str]:
    """Empty strings mean 'not provided'."""
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ParameterError(name, f"expected a string, got {type(raw).__name__}")
    value = raw.strip()
    return value or None


def coerce_boolean(name: str, raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ParameterError(name, f"expected a boolean, got {raw!r}")


def coerce_decimal_integer(name: str, raw: Any) -> int:
    """Parse a base-10 string into an arbitrary-precision integer."""
    if isinstance(raw, bool):
        raise ParameterError(name, f"expected a base-10 integer string, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        raise ParameterError(name, f"expected a base-10 integer string, got {type(raw).__name__}")
    value = raw.strip()
    if not _DECIMAL_RE.match(value):
        raise ParameterError(name, f"'{raw}' is not a base-10 integer")
    try:
        return int(value)
    except ValueError as e:
        # Interpreter digit limit for str -> int conversion
        raise ParameterError(name, str(e)) from e


def coerce_json(name: str, raw: Any) -> Any:
    if isinstance(raw, (dict, list)):
        return raw
    if isinstance(raw, str):
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ParameterError(name, f"malformed JSON ({e.msg} at position {e.pos})") from e
    raise ParameterError(name, f"expected JSON, got {type(raw).__name__}")


def coerce_comma_list(name: str, raw: Any) -> List[str]:
    """Split on commas and trim every segment. Empty segments are dropped."""
    if not isinstance(raw, str):
        raise ParameterError(name, f"expected a comma-separated string, got {type(raw).__name__}")
    values = [segment.strip() for segment in raw.split(",")]
    values = [v for v in values if v]
    if not values:
        raise ParameterError(name, "at least one value is required")
    return values


def enum_coercion(enum_cls: Type[Enum], *, allow_empty: bool = False) -> Callable[[str, Any], Any]:
    """Build a coercion accepting an enum member, its name or its value."""
    allowed = [m.name for m in enum_cls]

    def coerce(name: str, raw: Any) -> Optional[Enum]:
        if isinstance(raw, enum_cls):
            return raw
        if allow_empty and (raw is None or raw == ""):
            return None
        if isinstance(raw, str):
            if raw in enum_cls.__members__:
                return enum_cls[raw]
            for member in enum_cls:
                if member.value == raw:
                    return member
        raise ParameterError(name, f"unrecognized value {raw!r}, expected one of {allowed}")

    return coerce


def coerce_protocols(name: str, raw: Any) -> Tuple[Protocol, ...]:
    """Protocol selection: a list (or comma string) of protocol names, at least one."""
    if isinstance(raw, str):
        raw = [segment.strip() for segment in raw.split(",") if segment.strip()]
    if not isinstance(raw, (list, tuple, set, frozenset)):
        raise ParameterError(name, f"expected a list of protocols, got {type(raw).__name__}")

    to_protocol = enum_coercion(Protocol)
    selected = tuple(dict.fromkeys(to_protocol(name, p) for p in raw))
    if not selected:
        raise ParameterError(name, "select at least one protocol")
    return selected


def string(name: str, **kwargs) -> ParameterSpec:
    return ParameterSpec(name, "string", coerce_string, **kwargs)


def optional_string(name: str) -> ParameterSpec:
    return ParameterSpec(name, "string", coerce_optional_string, required=False, default="")


def boolean(name: str, default: bool = False) -> ParameterSpec:
    return ParameterSpec(name, "boolean", coerce_boolean, default=default)


def decimal_integer(name: str, **kwargs) -> ParameterSpec:
    return ParameterSpec(name, "integer", coerce_decimal_integer, **kwargs)


def json_value(name: str, **kwargs) -> ParameterSpec:
    return ParameterSpec(name, "json", coerce_json, **kwargs)


def comma_list(name: str) -> ParameterSpec:
    return ParameterSpec(name, "list", coerce_comma_list)


def option(name: str, enum_cls: Type[Enum], **kwargs) -> ParameterSpec:
    allow_empty = kwargs.pop("allow_empty", False)
    return ParameterSpec(name, "enum", enum_coercion(enum_cls, allow_empty=allow_empty), **kwargs)


def protocols(name: str = "protocols") -> ParameterSpec:
    return ParameterSpec(name, "protocols", coerce_protocols, default=[Protocol.SOROSWAP.name])
