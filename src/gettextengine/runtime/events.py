"""Warning sink: listener registry for non-fatal diagnostics.

Handlers are registered per event key:
    - a DiagnosticCode (or its name, e.g. "NO_TRANSLATION"): that code only
    - ANY_DIAGNOSTIC ("*") or the legacy name "error": every diagnostic
    - any other string: a custom event, delivered only by emit(name, data)

Fan-out is synchronous and follows registration order across all keys.
A handler that raises is logged with its traceback and the remaining
handlers still run; the emitter never sees the exception.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from gettextengine.constants import ANY_DIAGNOSTIC, LEGACY_ERROR_EVENT
from gettextengine.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    TranslationIntegrityError,
)

__all__ = [
    "DiagnosticCollector",
    "EventHandler",
    "EventKey",
    "WarningSink",
    "normalize_event_key",
]

logger = logging.getLogger(__name__)

type EventKey = DiagnosticCode | str

type EventHandler = Callable[[Any], object]


def normalize_event_key(event: EventKey) -> EventKey:
    """Map an event name to its canonical registry key.

    Args:
        event: DiagnosticCode, code name, "*", "error" or a custom name

    Returns:
        DiagnosticCode for code names, ANY_DIAGNOSTIC for "*" and "error",
        the string unchanged for custom events

    Raises:
        TypeError: If event is neither a DiagnosticCode nor a string

    Example:
        >>> normalize_event_key("NO_TRANSLATION")
        <DiagnosticCode.NO_TRANSLATION: 1001>
        >>> normalize_event_key("error")
        '*'
    """
    if isinstance(event, DiagnosticCode):
        return event
    if not isinstance(event, str):
        msg = f"Event must be a DiagnosticCode or str, got {type(event).__name__}"
        raise TypeError(msg)
    if event == LEGACY_ERROR_EVENT:
        return ANY_DIAGNOSTIC
    if event in DiagnosticCode.__members__:
        return DiagnosticCode[event]
    return event


class WarningSink:
    """Ordered, synchronous fan-out of diagnostics to registered handlers.

    Every emitted diagnostic is logged at DEBUG. With ``debug=True`` it is
    also rendered through ``formatter`` and logged at WARNING, which is the
    secondary channel for developers who have not attached a listener.

    Thread Safety:
        Registration is not synchronized. Register handlers during startup;
        emit() is safe to call concurrently once registration is done.

    Example:
        >>> sink = WarningSink()
        >>> seen = []
        >>> sink.on(DiagnosticCode.NO_TRANSLATION, seen.append)
        >>> sink.emit(DiagnosticTemplate.no_translation("et", "messages", "", "Hi"))
        1
        >>> seen[0].msgid
        'Hi'
    """

    __slots__ = ("_registrations", "debug", "formatter")

    def __init__(
        self, *, debug: bool = False, formatter: DiagnosticFormatter | None = None
    ) -> None:
        """Initialize an empty sink.

        Args:
            debug: Mirror diagnostics to the logger at WARNING level
            formatter: Formatter for mirrored diagnostics (default: rust style)
        """
        self.debug = debug
        self.formatter = formatter if formatter is not None else DiagnosticFormatter()
        self._registrations: list[tuple[EventKey, EventHandler]] = []

    def on(self, event: EventKey, handler: EventHandler) -> None:
        """Register a handler. The same handler may be registered more than once."""
        self._registrations.append((normalize_event_key(event), handler))

    def off(self, event: EventKey, handler: EventHandler) -> int:
        """Remove every registration of handler for event.

        Returns:
            Number of registrations removed (0 if none matched)
        """
        key = normalize_event_key(event)
        kept = [
            (registered_key, registered)
            for registered_key, registered in self._registrations
            if not (registered_key == key and registered == handler)
        ]
        removed = len(self._registrations) - len(kept)
        self._registrations = kept
        return removed

    def handlers(self, event: EventKey) -> tuple[EventHandler, ...]:
        """Handlers registered under exactly this key, in registration order."""
        key = normalize_event_key(event)
        return tuple(handler for registered, handler in self._registrations if registered == key)

    def emit(self, event: Diagnostic | EventKey, data: object = None) -> int:
        """Deliver a diagnostic or a custom event.

        Args:
            event: A Diagnostic (delivered to handlers of its code and to
                wildcard handlers) or an event key (delivered with ``data``
                to handlers of exactly that key)
            data: Payload for custom events; ignored for diagnostics

        Returns:
            Number of handlers invoked
        """
        if isinstance(event, Diagnostic):
            self._log(event)
            return self._dispatch((event.code, ANY_DIAGNOSTIC), event)

        key = normalize_event_key(event)
        logger.debug("Event %s emitted", key)
        return self._dispatch((key,), data)

    def emit_all(self, diagnostics: Iterable[Diagnostic]) -> int:
        """Emit diagnostics in order. Returns total handlers invoked."""
        return sum(self.emit(diagnostic) for diagnostic in diagnostics)

    def _dispatch(self, keys: tuple[EventKey, ...], payload: object) -> int:
        # Snapshot so handlers may register or remove handlers while running.
        matching = [handler for key, handler in tuple(self._registrations) if key in keys]
        for handler in matching:
            try:
                handler(payload)
            except Exception:
                logger.exception("Warning listener %r raised; continuing with the rest", handler)
        return len(matching)

    def _log(self, diagnostic: Diagnostic) -> None:
        logger.debug("%s: %s", diagnostic.code.name, diagnostic.message)
        if self.debug:
            logger.warning("%s", self.formatter.format(diagnostic))

    def __len__(self) -> int:
        """Number of registrations."""
        return len(self._registrations)


class DiagnosticCollector:
    """Listener that records diagnostics for later inspection.

    Register it on a sink (usually under ANY_DIAGNOSTIC) to turn the
    observe-only warning channel into a strict one: collect during a run,
    then call raise_for_diagnostics().

    Example:
        >>> collector = DiagnosticCollector()
        >>> gt.on("*", collector)
        >>> gt.gettext("missing")
        'missing'
        >>> collector.raise_for_diagnostics()
        Traceback (most recent call last):
        ...
        TranslationIntegrityError: ...
    """

    __slots__ = ("_codes", "_diagnostics")

    def __init__(self, codes: Iterable[DiagnosticCode] | None = None) -> None:
        """Initialize collector.

        Args:
            codes: Only keep diagnostics with these codes (default: keep all)
        """
        self._codes = frozenset(codes) if codes is not None else None
        self._diagnostics: list[Diagnostic] = []

    def __call__(self, diagnostic: object) -> None:
        """Record a diagnostic; other payloads are ignored."""
        if not isinstance(diagnostic, Diagnostic):
            return
        if self._codes is None or diagnostic.code in self._codes:
            self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Collected diagnostics in emission order."""
        return tuple(self._diagnostics)

    @property
    def codes(self) -> tuple[DiagnosticCode, ...]:
        """Codes of the collected diagnostics in emission order."""
        return tuple(diagnostic.code for diagnostic in self._diagnostics)

    def clear(self) -> None:
        """Forget everything collected so far."""
        self._diagnostics.clear()

    def raise_for_diagnostics(self) -> None:
        """Raise if anything was collected.

        Raises:
            TranslationIntegrityError: Carrying every collected diagnostic
        """
        if self._diagnostics:
            raise TranslationIntegrityError(self._diagnostics)

    def __len__(self) -> int:
        """Number of collected diagnostics."""
        return len(self._diagnostics)

    def __bool__(self) -> bool:
        """Collectors are always truthy, even when empty."""
        return True
