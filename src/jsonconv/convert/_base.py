"""Converter registry with nearest-match lookup on target tags."""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping
from logging import getLogger
from typing import Any

from jsonconv._errors import ConversionError, UnconvertibleSourceError, UnsupportedTargetTypeError
from jsonconv._types import is_null, lineage

logger = getLogger(__name__)

Converter = Callable[[str, Any], Any]
"""Callable receiving the requested target tag and a non-null raw value."""

# Failures escaping a converter that are re-raised as UnconvertibleSourceError
_WRAPPED_FAILURES = (ValueError, TypeError, OverflowError, ArithmeticError)


class ConverterRegistry:
    """Mapping from target tag to converter.

    The mapping is treated as read-only once built. ``register`` swaps in a
    fresh copy under a lock, so concurrent readers never observe a partial
    update and need no lock themselves.
    """

    def __init__(self, converters: Mapping[str, Converter] | None = None) -> None:
        self._converters: dict[str, Converter] = {
            str(tag): conv for tag, conv in (converters or {}).items()
        }
        self._lock = threading.Lock()

    @property
    def targets(self) -> list[str]:
        return sorted(self._converters)

    def __contains__(self, target: object) -> bool:
        return isinstance(target, str) and self.find(target) is not None

    def register(self, target: str, converter: Converter) -> None:
        """Register ``converter`` for ``target``, replacing any previous entry."""
        self.register_all([target], converter)

    def register_all(self, targets: Iterable[str], converter: Converter) -> None:
        """Register one converter under several target tags at once."""
        tags = [str(t) for t in targets]
        with self._lock:
            updated = dict(self._converters)
            for tag in tags:
                updated[tag] = converter
            self._converters = updated
        logger.debug("registered converter %r for %s", converter, ", ".join(tags))

    def find(self, target: str) -> Converter | None:
        """Return the converter for ``target`` or its nearest registered parent."""
        converters = self._converters
        for tag in lineage(target):
            conv = converters.get(tag)
            if conv is not None:
                if tag != target:
                    logger.debug("target %r resolved through family %r", target, tag)
                return conv
        return None

    def lookup(self, target: str) -> Converter:
        """Like ``find`` but raises when nothing matches.

        Raises:
            UnsupportedTargetTypeError: If neither ``target`` nor any parent is registered.
        """
        conv = self.find(target)
        if conv is None:
            raise UnsupportedTargetTypeError(str(target))
        return conv

    def convert(self, target: str, value: Any) -> Any:
        """Convert ``value`` to the representation named by ``target``.

        Null and absent values propagate as ``None`` without consulting any
        converter.

        Args:
            target: Target tag, usually a ``TargetType`` member.
            value: Raw value of any shape.

        Returns:
            The converted value, or None when ``value`` is null/absent.

        Raises:
            UnsupportedTargetTypeError: If no converter matches ``target``.
            UnconvertibleSourceError: If the matched converter cannot interpret ``value``.
        """
        if is_null(value):
            return None

        conv = self.lookup(target)
        try:
            return conv(str(target), value)
        except ConversionError:
            raise
        except _WRAPPED_FAILURES as e:
            logger.debug("converter for %r failed on %r: %s", target, value, e)
            raise UnconvertibleSourceError(str(target), value, str(e), wrapped=e) from e
