"""Helpers for building attrs entities from backend JSON payloads."""

from typing import Any, Dict, Mapping, Type, TypeVar

import attrs

from src.platform.exception.exceptions import ApiError


_T = TypeVar('_T')


def known_fields(cls: Type[_T], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep only keys declared on the attrs class; the backend may add fields at any time."""
    names = {field.name for field in attrs.fields(cls)}  # type: ignore[misc]
    return {key: value for key, value in data.items() if key in names}


def build_entity(cls: Type[_T], data: Mapping[str, Any]) -> _T:
    """
    Build ``cls`` from a backend item.

    A payload the entity cannot accept (missing key, unknown enum value,
    non-numeric number, not an object at all) is a backend contract breach
    and surfaces as ``ApiError`` like any other unusable response.
    """
    try:
        return cls(**known_fields(cls, data))
    except (AttributeError, TypeError, ValueError) as e:
        raise ApiError(f'Malformed {cls.__name__} payload: {e}') from e


def optional_str(value: Any) -> str | None:
    return None if value is None else str(value)
