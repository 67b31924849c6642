"""Structured serialization for :class:`~recency.recent.RecencyList`.

The wire shape is ``{"items": [...], "capacity": N}`` with items in storage
order (least recent first). Loading restores both fields verbatim, so a list
whose capacity was lowered lazily round-trips without losing items.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, NonNegativeInt

from recency.errors import RecencyFormatError
from recency.recent import RecencyList

logger = logging.getLogger("recency.serde")

T = TypeVar("T")


class RecencyListState(BaseModel, Generic[T]):
    """Validated snapshot of a recency list's two fields."""

    model_config = ConfigDict(extra="forbid")

    items: list[T]
    capacity: NonNegativeInt


def _state_of(lst: RecencyList[Any]) -> RecencyListState[Any]:
    return RecencyListState[Any](
        items=list(lst._items),  # noqa: SLF001
        capacity=lst.capacity,
    )


def _restore(state: RecencyListState[Any]) -> RecencyList[Any]:
    lst: RecencyList[Any] = RecencyList(state.capacity)
    lst._items = list(state.items)  # noqa: SLF001
    return lst


def to_dict(lst: RecencyList[Any]) -> dict[str, Any]:
    return _state_of(lst).model_dump()


def to_json(lst: RecencyList[Any]) -> str:
    return _state_of(lst).model_dump_json()


def from_dict(data: object, item_type: Any = Any) -> RecencyList[Any]:
    """Rebuild a list from ``to_dict`` output.

    *item_type* is handed to pydantic to validate (and coerce) each element.
    """

    try:
        state = RecencyListState[item_type].model_validate(data)
    except pydantic.ValidationError as e:
        logger.debug("Rejected recency list payload: %s", e)
        raise RecencyFormatError(f"Invalid recency list data: {e}") from e
    return _restore(state)


def from_json(raw: str | bytes, item_type: Any = Any) -> RecencyList[Any]:
    try:
        state = RecencyListState[item_type].model_validate_json(raw)
    except pydantic.ValidationError as e:
        logger.debug("Rejected recency list JSON: %s", e)
        raise RecencyFormatError(f"Invalid recency list JSON: {e}") from e
    return _restore(state)
