from __future__ import annotations

import json
import math
import time
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import T_STATE


class DecodeError(ValueError):
    """Inbound frame is not a UTF-8 JSON object."""


class PresentationState(BaseModel):
    """
    The shared record every peer sees.

    Open schema: extra fields sent by clients are kept and merged like the
    known ones. Field names follow the wire format (camelCase).
    """

    model_config = ConfigDict(extra="allow")

    currentSlide: int = 1
    totalSlides: int = 10
    isAutoMode: bool = False


class StateMsg(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["state"] = "state"
    currentSlide: Optional[int] = None
    totalSlides: Optional[int] = None
    isAutoMode: Optional[bool] = None


class CommandMsg(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["command"] = "command"
    command: str
    params: Any = None
    timestamp: int = Field(default_factory=lambda: int(time.time() * 1000), description="ms timestamp")


def encode(msg: Mapping[str, Any]) -> str:
    return json.dumps(msg, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def _reject_constant(name: str) -> float:
    raise DecodeError(f"{name} is not valid json")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise DecodeError(f"number out of range: {text}")
    return value


def decode(raw: str | bytes) -> dict[str, Any]:
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"frame is not utf-8: {e}") from e
    try:
        msg = json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except DecodeError:
        raise
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"frame is not json: {e}") from e
    if not isinstance(msg, dict):
        raise DecodeError(f"expected a json object, got {type(msg).__name__}")
    # Escapes like "\ud800" decode to strings that can never go back out as utf-8.
    try:
        encode(msg).encode("utf-8")
    except UnicodeEncodeError as e:
        raise DecodeError(f"frame holds text that is not valid unicode: {e}") from e
    return msg


def state_frame(state: Mapping[str, Any]) -> dict[str, Any]:
    """Tag a state record for the wire."""
    return {"type": T_STATE, **state}
