"""Registry of the pattern demos the runner knows about."""

import re
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List

from .behavioral.observer.demo import demonstrate_observer
from .creational.abstract_factory.demo import demonstrate_abstract_factory
from .creational.builder.demo import demonstrate_builder
from .creational.factory_method.demo import demonstrate_factory_method
from .creational.singleton.demo import demonstrate_singleton
from .errors import PatternNotFoundError
from .structural.adapter.demo import demonstrate_adapter


@dataclass(frozen=True)
class PatternEntry:
    """A runnable pattern demo.

    Attributes:
        name: Display name, e.g. "Factory Method"
        category: Creational, Structural or Behavioral
        demo: Coroutine function printing the demonstration
    """

    name: str
    category: str
    demo: Callable[[], Awaitable[None]]

    @property
    def command(self) -> str:
        """Name as typed on the command line, e.g. ``factory-method``."""
        return self.name.lower().replace(" ", "-")


PATTERNS: List[PatternEntry] = [
    PatternEntry("Singleton", "Creational", demonstrate_singleton),
    PatternEntry("Factory Method", "Creational", demonstrate_factory_method),
    PatternEntry("Abstract Factory", "Creational", demonstrate_abstract_factory),
    PatternEntry("Builder", "Creational", demonstrate_builder),
    PatternEntry("Adapter", "Structural", demonstrate_adapter),
    PatternEntry("Observer", "Behavioral", demonstrate_observer),
]


def _normalize(name: str) -> str:
    return re.sub(r"[-_\s]", "", name.lower())


def find_pattern(name: str) -> PatternEntry:
    """Look up a pattern ignoring case, dashes, underscores and spaces.

    Raises:
        PatternNotFoundError: If no pattern matches
    """
    wanted = _normalize(name)
    for entry in PATTERNS:
        if _normalize(entry.name) == wanted:
            return entry
    raise PatternNotFoundError(f"Pattern '{name}' not found.")


def by_category() -> Dict[str, List[PatternEntry]]:
    grouped: Dict[str, List[PatternEntry]] = {}
    for entry in PATTERNS:
        grouped.setdefault(entry.category, []).append(entry)
    return grouped
