from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK = "Something went wrong. Reload the view to try again."


class ErrorBoundary:
    """Supervises a render function and swaps in a fallback after a fault.

    Once a fault has been caught the wrapped function is not called again
    until :meth:`reset`.
    """

    def __init__(self, fallback: str = DEFAULT_FALLBACK) -> None:
        self._fallback = fallback
        self.fault: Exception | None = None

    @property
    def has_fault(self) -> bool:
        return self.fault is not None

    def render(self, render_fn: Callable[[], str]) -> str:
        if self.fault is not None:
            return self._fallback
        try:
            return render_fn()
        except Exception as exc:
            logger.exception("Rendering failed, showing fallback")
            self.fault = exc
            return self._fallback

    def reset(self) -> None:
        self.fault = None
