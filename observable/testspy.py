"""A test handle that records failures instead of reporting them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NoReturn


class SpyUnsupportedError(RuntimeError):
    """Raised by the hard-failure methods, which a spy does not support."""


@dataclass
class SpyTB:
    """Wraps an optional test handle and records soft failures.

    ``error``, ``errorf`` and ``fail`` set ``spied_on_failure`` instead of
    failing the surrounding test. ``fail_now``, ``fatal`` and ``fatalf``
    raise :class:`SpyUnsupportedError`.
    """

    tb: Any = None
    spied_on_failure: bool = False

    def helper(self) -> None:
        """Mark the caller as a helper on the wrapped handle, if any."""
        if self.tb is not None:
            self.tb.helper()

    def error(self, *args: Any) -> None:
        """Record a failure."""
        self.spied_on_failure = True

    def errorf(self, format: str, *args: Any) -> None:
        """Record a failure."""
        self.spied_on_failure = True

    def fail(self) -> None:
        """Record a failure."""
        self.spied_on_failure = True

    def fail_now(self) -> NoReturn:
        """Always raise: stopping the test is not supported by a spy."""
        self._refuse("fail_now", "")

    def fatal(self, *args: Any) -> NoReturn:
        """Always raise: stopping the test is not supported by a spy."""
        detail = " ".join(str(arg) for arg in args)
        self._refuse("fatal", detail)

    def fatalf(self, format: str, *args: Any) -> NoReturn:
        """Always raise: stopping the test is not supported by a spy."""
        try:
            detail = format % args if args else format
        except (TypeError, ValueError):
            detail = " ".join([format, *map(str, args)])
        self._refuse("fatalf", detail)

    @staticmethod
    def _refuse(method: str, detail: str) -> NoReturn:
        message = f"{method} is not supported by SpyTB"
        if detail:
            message = f"{message}: {detail}"
        raise SpyUnsupportedError(message)