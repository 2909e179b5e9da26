"""Logging configuration.

Every module keeps its own ``logging.getLogger(__name__)``. This module
installs the package handler once and hands out ``ContextualLogger``
adapters for code that wants fixed dimensions on every record.
"""

import logging
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

from beacon.core.config import settings

_PACKAGE_LOGGER = "beacon"
_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that attaches a fixed set of dimensions.

    Dimensions are rendered as a ``[key=value ...]`` prefix and also passed
    through ``extra`` so structured handlers can pick them up.
    """

    def __init__(self, logger: logging.Logger, dimensions: Optional[Dict[str, Any]] = None):
        """Wrap ``logger`` with the given dimensions."""
        self.dimensions: Dict[str, Any] = dict(dimensions or {})
        super().__init__(logger, self.dimensions)

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        """Prefix the message and merge dimensions into ``extra``."""
        kwargs["extra"] = {**self.dimensions, **(kwargs.get("extra") or {})}
        if self.dimensions:
            prefix = " ".join(f"{k}={v}" for k, v in self.dimensions.items())
            msg = f"[{prefix}] {msg}"
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with additional dimensions."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions})


class LoggerConfigurator:
    """Builds loggers that share the package handler."""

    _configured = False

    @classmethod
    def setup(cls, level: Optional[str] = None, *, force: bool = False) -> None:
        """Attach a stream handler to the package logger.

        Safe to call repeatedly; only the first call (or a forced one)
        touches handlers.
        """
        if cls._configured and not force:
            return

        package_logger = logging.getLogger(_PACKAGE_LOGGER)
        for handler in list(package_logger.handlers):
            if getattr(handler, "_beacon_handler", False):
                package_logger.removeHandler(handler)

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._beacon_handler = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)
        package_logger.setLevel(level or settings.LOG_LEVEL)
        cls._configured = True

    @classmethod
    def configure_logger(
        cls, name: str, dimensions: Optional[Dict[str, Any]] = None
    ) -> ContextualLogger:
        """Return a ``ContextualLogger`` for ``name`` carrying ``dimensions``.

        Args:
            name: Logger name, normally under the ``beacon`` namespace.
            dimensions: Key/value pairs attached to every record.

        Returns:
            ContextualLogger bound to the named logger.
        """
        cls.setup()
        return ContextualLogger(logging.getLogger(name), dimensions)


logger = ContextualLogger(logging.getLogger(_PACKAGE_LOGGER))
