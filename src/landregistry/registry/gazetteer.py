"""Fixed gazetteer of Rwandan locations used as a sampling domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

CAPITAL_DISTRICT = "Kigali"


@dataclass(frozen=True)
class Location:
    """A district/sector/cell/village tuple with its reference coordinate."""

    district: str
    sector: str
    cell: str
    village: str
    lat: float
    lng: float

    @property
    def address(self) -> str:
        return f"{self.cell}, {self.sector}"

    @property
    def is_capital(self) -> bool:
        return self.district == CAPITAL_DISTRICT


class Gazetteer(Enum):
    """Closed set of known locations (approximate district centres)."""

    NYABUGOGO = Location("Kigali", "Gasabo", "Kimisagara", "Nyabugogo", -1.9441, 30.0619)
    RWAMPARA = Location("Kigali", "Nyarugenge", "Rwampara", "Rwampara", -1.9536, 30.0605)
    KABUGA = Location("Kigali", "Kicukiro", "Kabuga", "Kabuga", -1.9659, 30.1044)
    KIGABIRO = Location("Rwamagana", "Kigabiro", "Kigabiro", "Kigabiro", -1.9333, 30.4333)
    TUMBA = Location("Huye", "Tumba", "Tumba", "Tumba", -2.5167, 29.7333)
    MUHOZA = Location("Musanze", "Muhoza", "Muhoza", "Muhoza", -1.4833, 29.6333)
    GISENYI = Location("Rubavu", "Gisenyi", "Gisenyi", "Gisenyi", -1.7000, 29.2667)
    NYAGATARE = Location("Nyagatare", "Nyagatare", "Nyagatare", "Nyagatare", -1.3000, 30.3333)

    @property
    def location(self) -> Location:
        return self.value
