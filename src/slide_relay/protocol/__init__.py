from .constants import KNOWN_COMMANDS, T_COMMAND, T_STATE, WS_PATH
from .messages import (
    CommandMsg,
    DecodeError,
    PresentationState,
    StateMsg,
    decode,
    encode,
    state_frame,
)

__all__ = [
    "KNOWN_COMMANDS",
    "T_COMMAND",
    "T_STATE",
    "WS_PATH",
    "CommandMsg",
    "DecodeError",
    "PresentationState",
    "StateMsg",
    "decode",
    "encode",
    "state_frame",
]
