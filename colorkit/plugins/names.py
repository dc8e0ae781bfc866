from typing import Optional

from ..extend import Plugin
from ..models.names import parse_name, rgba_to_name
from ..registry import ParserRegistry


class NamesMixin:
    def to_name(self) -> Optional[str]:
        """CSS name of the color, None when no name matches exactly."""
        return rgba_to_name(self.rgba)


def install(registry: ParserRegistry) -> None:
    registry.register_string_parser(parse_name, "name")


plugin = Plugin("names", install, NamesMixin)
