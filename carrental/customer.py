"""A customer of the rental service."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Customer:
    """A customer's details and the car they are renting, if any."""

    name: str
    phone_number: str
    email: str
    dl_number: str
    address: str = ""
    age: int = 18
    rented_car: str = field(default="", init=False)
    car_license_plate: str = field(default="", init=False)
    rented_on: str = field(default="", init=False)
    return_date: str = field(default="", init=False)
    currently_renting: bool = field(default=False, init=False)

    def rent_car(self, car_model: str, license_plate: str, date: str) -> None:
        """Record that this customer rented the given car on the given date."""
        self.rented_car = car_model
        self.car_license_plate = license_plate
        self.rented_on = date
        self.currently_renting = True

    def return_car(self, date: str) -> None:
        """Record that this customer returned their car on the given date."""
        self.return_date = date
        self.currently_renting = False

    def is_renting(self) -> bool:
        """Return True while the customer holds a rented car."""
        return self.currently_renting