"""Record types used as the root object of the test scenario."""

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass
class PlaceOfBirth:
    city: str
    country: Optional[str] = None


@dataclass
class Inventor:
    """An inventor with a place of birth and a list of inventions."""
    name: str
    birthdate: date
    nationality: str
    place_of_birth: Optional[PlaceOfBirth] = None
    inventions: List[str] = field(default_factory=list)

    def set_inventions(self, *inventions: str) -> None:
        self.inventions = list(inventions)

    def has_invention(self, invention: str) -> bool:
        return invention in self.inventions
