"""
Plugin composition.

A plugin contributes a mixin class with its methods and an install function
appending its parsers to a registry. extend() builds a fresh registry, lets
each plugin install in order, freezes the registry and composes a handle
class from the mixins. Plugin order is lookup order: when two plugins accept
the same input, the one listed first wins.
"""

import logging
from typing import Callable, NamedTuple, Optional, Type

from .color import BaseColor
from .registry import ParserRegistry, create_registry

logger = logging.getLogger(__name__)


class Plugin(NamedTuple):
    name: str
    install: Callable[[ParserRegistry], None]
    mixin: Optional[type] = None


def extend(*plugins: Plugin, base: Type[BaseColor] = BaseColor, name: str = "Color") -> Type[BaseColor]:
    """Compose a color handle class supporting the given plugins."""
    registry = create_registry()
    mixins = []
    installed = []
    for plugin in plugins:
        if plugin.name in installed:
            logger.debug("Skipping duplicate plugin %s", plugin.name)
            continue
        installed.append(plugin.name)
        plugin.install(registry)
        if plugin.mixin is not None:
            mixins.append(plugin.mixin)
    registry.freeze()
    logger.debug("Composed %s with plugins %s", name, ", ".join(installed) or "none")
    return type(name, (*mixins, base), {"registry": registry, "plugins": tuple(installed)})
