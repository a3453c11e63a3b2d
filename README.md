# carrental

Book-keeping for a small car rental. Cars are kept grouped by model. They can
be rented to customers, who are identified by their driving-licence number,
and taken back. New cars are added through a guided form.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
carrental
```

This reads commands from standard input, one per line, until input ends or
`quit` (or `exit`) is given:

```
add            start adding a car
brand N        choose brand number N
model N        choose model number N
color TEXT     set the colour
year TEXT      set the year of manufacture
plate TEXT     set the licence plate
submit         add the car to the fleet
list           list available cars
help           show these commands
```

`add` prints the brand choices (`0: Select a Brand`, then Hyundai, Tata and
Mahindra). `brand N` prints the models of that brand. `model N` reveals the
colour, year and plate fields, and each field starts out holding its
placeholder text. `submit` stores the car and resets the form. The year is
read as the leading integer of its text, or 0 when there is none. A bad
command or choice prints a line starting with `error:` and the loop carries
on.

## Library use

```python
from carrental.service import RentalService, CarNotFoundError

service = RentalService()
service.add_car("Creta", "TEST-0001", "01-01-2024", 2022, "red", "Hyundai")

car = service.rent_a_car("Creta", "DL-EXAMPLE-1", "02-01-2024", "Sam")
print(car.license_plate, car.is_available())   # TEST-0001 False

customer = service.search_customer("DL-EXAMPLE-1")
print(customer.is_renting())                   # True

service.return_a_car("Creta", car.license_plate, "05-01-2024")
for line in service.list_all_cars():
    print(line)

try:
    service.search_car("Kona", "")
except CarNotFoundError as exc:
    print(exc)
```

The pieces:

- `carrental.car.Car` is a dataclass of year, model, company, colour, licence
  plate, `is_rented` and `rented_on`. `is_available()` is true while the car
  is not rented.
- `carrental.customer.Customer` holds a customer's details and current rental.
  `rent_car`, `return_car` and `is_renting` track that rental.
- `carrental.service.RentalService` is the fleet:
  - `add_car` files a new car under its model.
  - `rent_a_car` takes the most recently added available car of a model and
    registers the customer under their licence number.
  - `return_a_car` moves a rented car back into the available cars.
  - `search_car` returns the last car of a model, or the one with a given
    plate.
  - `search_customer` looks a customer up by licence number.
  - `list_all_cars` yields one text line per model and per plate.
  - `rental_count` counts the rentals made.

  Failures raise `CarNotFoundError`, `CarAlreadyRentedError` or
  `CustomerNotFoundError`. All three are subclasses of `RentalError`.
- `carrental.form.AddCarForm` is the state of the add-car form. It is driven
  by `open`, `select_brand`, `select_model`, `set_text`, `focus`, `blur` and
  `submit(service, today)`. The `Field` enum names its controls. `submit`
  raises `ValueError` unless both a brand and a model have been chosen.
- `carrental.app.run(stdin, stdout, service)` is the command loop above, for
  use with any pair of text streams. `carrental.app.main` starts it on the
  terminal.

## What it does not do

- Everything is kept in memory. Nothing is saved between runs.
- The command line only adds and lists cars. Renting, returning and looking
  up customers are available from the library alone.
- The brands and models offered by the form are fixed. There is no way to
  add others.