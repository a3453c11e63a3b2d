"""A single car in the rental fleet."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Car:
    """A car with its identifying details and rental state."""

    year: int
    model: str
    company: str
    color: str
    license_plate: str = ""
    is_rented: bool = False
    rented_on: str = ""

    def is_available(self) -> bool:
        """Return True when the car is not currently rented out."""
        return not self.is_rented