from __future__ import annotations

from typing import Any, Mapping

from slide_relay.protocol.messages import PresentationState


class StateStore:
    """Owner of the single PresentationState record.

    Callers only ever get copies back; the stored dict is mutated by `merge` alone.
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        if initial is None:
            initial = PresentationState().model_dump()
        self._state: dict[str, Any] = dict(initial)

    def snapshot(self) -> dict[str, Any]:
        return dict(self._state)

    def merge(self, partial: Mapping[str, Any]) -> dict[str, Any]:
        # Shallow, field-by-field overwrite. Values are stored verbatim
        # (an out-of-range currentSlide is kept as sent).
        for key, value in partial.items():
            if key == "type":
                continue
            self._state[key] = value
        return self.snapshot()
