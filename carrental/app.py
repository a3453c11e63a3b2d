"""Line-driven front end for adding cars and listing the fleet."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from datetime import date
from typing import TextIO

from carrental.form import AddCarForm, Field
from carrental.service import RentalService

_TEXT_COMMANDS = {
    "color": Field.COLOR,
    "year": Field.YEAR,
    "plate": Field.LICENSE_PLATE,
}

HELP = [
    "add            start adding a car",
    "brand N        choose brand number N",
    "model N        choose model number N",
    "color TEXT     set the colour",
    "year TEXT      set the year of manufacture",
    "plate TEXT     set the licence plate",
    "submit         add the car to the fleet",
    "list           list available cars",
    "quit           leave",
]


def _choices(items: Iterable[str]) -> list[str]:
    return [f"{number}: {item}" for number, item in enumerate(items)]


def _dispatch(
    form: AddCarForm, service: RentalService, command: str, arg: str
) -> list[str]:
    if command == "help":
        return list(HELP)
    if command == "add":
        form.open()
        return _choices(form.brand.items)
    if command == "brand":
        form.select_brand(int(arg))
        return _choices(form.model.items)
    if command == "model":
        form.select_model(int(arg))
        return ["enter color, year and plate, then submit"]
    if command in _TEXT_COMMANDS:
        field = _TEXT_COMMANDS[command]
        form.focus(field)
        form.set_text(field, arg)
        form.blur(field)
        return []
    if command == "submit":
        car = form.submit(service, date.today())
        return [f"added {car.company} {car.model} {car.license_plate}"]
    if command == "list":
        return list(service.list_all_cars())
    raise ValueError(f"unknown command: {command}")


def run(stdin: TextIO, stdout: TextIO, service: RentalService | None = None) -> int:
    """Read commands from stdin until it ends or "quit" is given."""
    if service is None:
        service = RentalService()
    form = AddCarForm()
    for raw in stdin:
        line = raw.strip()
        if not line:
            continue
        command, _, arg = line.partition(" ")
        command = command.lower()
        if command in ("quit", "exit"):
            break
        try:
            output = _dispatch(form, service, command, arg.strip())
        except (ValueError, IndexError) as exc:
            output = [f"error: {exc}"]
        for out in output:
            print(out, file=stdout)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive car rental front end."""
    parser = argparse.ArgumentParser(
        prog="carrental", description="Add cars to a rental fleet and list them."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout, RentalService())


if __name__ == "__main__":
    sys.exit(main())