"""The rental service: fleet inventory, rentals and returns."""

from __future__ import annotations

from collections.abc import Iterator

from carrental.car import Car
from carrental.customer import Customer


class RentalError(Exception):
    """Base class for rental service errors."""


class CarNotFoundError(RentalError):
    """No matching car is available."""


class CarAlreadyRentedError(RentalError):
    """The car is already out on rental."""


class CustomerNotFoundError(RentalError):
    """No customer is registered under the given licence number."""


class RentalService:
    """Keeps track of available cars, rented cars and customers."""

    def __init__(self) -> None:
        self.rented_cars: dict[str, Car] = {}
        self.available_cars: dict[str, list[Car]] = {}
        self.customers: dict[str, list[Car]] = {}
        self.customer_details: dict[str, Customer] = {}
        self._rental_count = 0

    @property
    def rental_count(self) -> int:
        """Number of rentals made so far."""
        return self._rental_count

    def list_all_cars(self) -> Iterator[str]:
        """Yield a line per model, followed by the plates of its available cars."""
        for model, cars in self.available_cars.items():
            yield f"Car Model: {model}"
            if not cars:
                yield "No cars available"
                continue
            for car in cars:
                yield f"License Plate: {car.license_plate}"

    def add_car(
        self,
        car_model: str,
        license_plate: str,
        date: str,
        year: int,
        color: str,
        company: str,
    ) -> Car:
        """Add a new car to the available fleet and return it."""
        car = Car(year=year, model=car_model, company=company, color=color,
                  license_plate=license_plate)
        self.available_cars.setdefault(car_model, []).append(car)
        return car

    def rent_a_car(
        self, car_model: str, dl_number: str, date: str, customer_name: str
    ) -> Car:
        """Rent the most recently added available car of a model to a customer."""
        car = self.search_car(car_model)
        self.available_cars[car_model].pop()
        if car.license_plate in self.rented_cars:
            raise CarAlreadyRentedError(f"car already rented: {car.license_plate}")
        self.rented_cars[car.license_plate] = car
        car.is_rented = True
        car.rented_on = date

        customer = Customer(
            name=customer_name, phone_number="", email="", dl_number=dl_number
        )
        self.customer_details[dl_number] = customer
        customer.rent_car(car_model, car.license_plate, date)
        self.customers.setdefault(dl_number, []).append(car)
        self._rental_count += 1
        return car

    def return_a_car(self, car_model: str, license_plate: str, date: str) -> Car:
        """Move a rented car back into the available fleet and return it."""
        car = self.rented_cars.pop(license_plate, None)
        if car is None:
            raise CarNotFoundError(f"car not found in rented cars: {license_plate}")
        car.is_rented = False
        self.available_cars.setdefault(car_model, []).append(car)
        return car

    def search_car(self, car_model: str, license_plate: str = "") -> Car:
        """Find an available car of a model.

        With no plate the most recently added car is returned.
        """
        cars = self.available_cars.get(car_model)
        if cars is None:
            raise CarNotFoundError(f"car not found: {car_model}")
        if not license_plate:
            if not cars:
                raise CarNotFoundError(f"no cars available: {car_model}")
            return cars[-1]
        for car in cars:
            if car.license_plate == license_plate:
                return car
        raise CarNotFoundError(f"car not found: {car_model} {license_plate}")

    def search_customer(self, dl_number: str) -> Customer:
        """Return the customer registered under a driving licence number."""
        try:
            return self.customer_details[dl_number]
        except KeyError:
            raise CustomerNotFoundError(f"customer not found: {dl_number}") from None