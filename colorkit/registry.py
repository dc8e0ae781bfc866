"""
Parser registry and dispatch.

A registry holds two ordered lists of (parser, format name) pairs, one for
object input and one for string input. Plugins append to them while the
registry is being set up; the first lookup freezes it, so registration
always happens before any parsing. Lookups try parsers in registration order
and the first one returning a value wins.
"""

import logging
import threading
from typing import Any, Callable, List, Mapping, NamedTuple, Optional, Tuple

from pydantic import BaseModel

from .errors import RegistryFrozenError
from .models.hex import parse_hex
from .models.hsl import parse_hsla, parse_hsla_string
from .models.hsv import parse_hsva
from .models.rgb import parse_rgba, parse_rgba_string
from .types import RgbaColor

logger = logging.getLogger(__name__)

ObjectParser = Callable[[Mapping[str, Any]], Optional[RgbaColor]]
StringParser = Callable[[str], Optional[RgbaColor]]


class ParseResult(NamedTuple):
    rgba: RgbaColor
    format: str


class ParserRegistry:
    def __init__(self):
        self._lock = threading.Lock()
        self._frozen = False
        self._object_parsers: List[Tuple[ObjectParser, str]] = []
        self._string_parsers: List[Tuple[StringParser, str]] = []

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def object_parsers(self) -> Tuple[Tuple[ObjectParser, str], ...]:
        return tuple(self._object_parsers)

    @property
    def string_parsers(self) -> Tuple[Tuple[StringParser, str], ...]:
        return tuple(self._string_parsers)

    @property
    def formats(self) -> Tuple[str, ...]:
        """Format names in lookup order, without duplicates."""
        names = [name for _, name in self._string_parsers + self._object_parsers]
        return tuple(dict.fromkeys(names))

    def register_object_parser(self, parser: ObjectParser, name: str) -> None:
        self._append(self._object_parsers, parser, name)

    def register_string_parser(self, parser: StringParser, name: str) -> None:
        self._append(self._string_parsers, parser, name)

    def _append(self, parsers: list, parser: Callable, name: str) -> None:
        with self._lock:
            if self._frozen:
                raise RegistryFrozenError(f"cannot register {name!r} parser: registry is frozen")
            parsers.append((parser, name))
        logger.debug("Registered %s parser %s", name, getattr(parser, "__name__", parser))

    def freeze(self) -> None:
        """End the registration phase."""
        with self._lock:
            if self._frozen:
                return
            self._frozen = True
        logger.debug(
            "Parser registry frozen with %d string and %d object parsers",
            len(self._string_parsers),
            len(self._object_parsers),
        )

    def parse(self, value: Any) -> Optional[ParseResult]:
        """Try every registered parser against the input, first match wins."""
        if not self._frozen:
            self.freeze()
        if isinstance(value, str):
            return self._find(value.strip(), self._string_parsers)
        if isinstance(value, BaseModel):
            value = value.model_dump()
        if isinstance(value, Mapping):
            return self._find(value, self._object_parsers)
        return None

    @staticmethod
    def _find(value: Any, parsers: List[Tuple[Callable, str]]) -> Optional[ParseResult]:
        for parser, name in parsers:
            rgba = parser(value)
            if rgba is not None:
                return ParseResult(rgba, name)
        return None


def create_registry() -> ParserRegistry:
    """A registry holding the parsers every color handle understands."""
    registry = ParserRegistry()
    registry.register_string_parser(parse_hex, "hex")
    registry.register_string_parser(parse_rgba_string, "rgb")
    registry.register_string_parser(parse_hsla_string, "hsl")
    registry.register_object_parser(parse_rgba, "rgb")
    registry.register_object_parser(parse_hsla, "hsl")
    registry.register_object_parser(parse_hsva, "hsv")
    return registry
