from __future__ import annotations

from abc import ABC, abstractmethod


class TimeProvider(ABC):
    """Port for reading the clock.

    Contract:
    - now() MUST return whole seconds since the Unix epoch (UTC)
    - now() MUST NOT apply any timezone; local readings come from a
      CivilTimeConverter
    """

    @abstractmethod
    def now(self) -> int:
        """Return the current instant as epoch seconds."""
        ...
