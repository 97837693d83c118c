"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..document import ParsedDocument
from .state import NavigationState

StateTransition = Callable[[NavigationState, ParsedDocument], NavigationState]


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key names to a single state transition."""

    combos: tuple[str, ...]
    handler: StateTransition


class KeyComboRegistry:
    """Small key-dispatch table; ``dispatch`` returns ``None`` for unbound keys."""

    def __init__(self) -> None:
        self._handlers: dict[str, StateTransition] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(
        self,
        key: str,
        state: NavigationState,
        document: ParsedDocument,
    ) -> NavigationState | None:
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler(state, document)
