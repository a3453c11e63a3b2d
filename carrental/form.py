"""The add-car form: brand and model pickers, text fields and submission."""

from __future__ import annotations

import dataclasses
import re
from datetime import date
from enum import IntEnum

from carrental.car import Car
from carrental.service import RentalService

BRAND_PROMPT = "Select a Brand"
MODEL_PROMPT = "Select a Model"

BRANDS: dict[str, tuple[str, ...]] = {
    "Hyundai": ("Creta", "i20", "Kona"),
    "Tata": ("Nexon", "Harrier", "Safari"),
    "Mahindra": ("Thar", "XUV700", "Scorpio"),
}

DATE_FORMAT = "%d-%m-%Y"


class Field(IntEnum):
    """The controls of the add-car form, keyed by their control ids."""

    BRAND = 1002
    MODEL = 1006
    COLOR = 1007
    LICENSE_PLATE = 1008
    YEAR = 1009
    SUBMIT = 1010


EDIT_FIELDS: tuple[Field, ...] = (Field.COLOR, Field.YEAR, Field.LICENSE_PLATE)

PLACEHOLDERS: dict[Field, str] = {
    Field.COLOR: "Enter The color",
    Field.YEAR: "Enter Year Of manufacturing",
    Field.LICENSE_PLATE: "Enter License Plate",
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read a leading integer from text, giving 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclasses.dataclass
class _Combo:
    items: list[str] = dataclasses.field(default_factory=list)
    selection: int = -1

    def reset(self, items: list[str]) -> None:
        self.items = list(items)
        self.selection = 0

    def clear(self) -> None:
        self.items = []
        self.selection = -1

    def select(self, index: int) -> None:
        if not 0 <= index < len(self.items):
            raise IndexError(f"no item at position {index}")
        self.selection = index

    @property
    def choice(self) -> str:
        """The selected item, excluding the leading prompt row."""
        if self.selection <= 0:
            raise ValueError("nothing selected")
        return self.items[self.selection]


class AddCarForm:
    """State of the form used to add a car to the fleet."""

    def __init__(self) -> None:
        self.brand = _Combo()
        self.model = _Combo()
        self.text: dict[Field, str] = {f: "" for f in EDIT_FIELDS}
        self.visible: set[Field] = set()

    def open(self) -> None:
        """Show the brand picker with its choices and the prompt selected."""
        self.visible.add(Field.BRAND)
        self.brand.reset([BRAND_PROMPT, *BRANDS])

    def select_brand(self, index: int) -> None:
        """Pick a brand; a real brand fills the model picker with its models."""
        self.brand.select(index)
        brand = self.brand.items[index] if index != 0 else ""
        self.visible.add(Field.MODEL)
        models = BRANDS.get(brand)
        if models is not None:
            self.model.reset([MODEL_PROMPT, *models])

    def select_model(self, index: int) -> None:
        """Pick a model and reveal the text fields and the submit button."""
        self.model.select(index)
        for edit in EDIT_FIELDS:
            self.visible.add(edit)
            self.text[edit] = PLACEHOLDERS[edit]
        self.visible.add(Field.SUBMIT)

    @staticmethod
    def _check_edit(field: Field) -> Field:
        field = Field(field)
        if field not in EDIT_FIELDS:
            raise ValueError(f"{field.name} is not a text field")
        return field

    def set_text(self, field: Field, text: str) -> None:
        """Replace the text of a text field."""
        self.text[self._check_edit(field)] = text

    def focus(self, field: Field) -> None:
        """Clear a text field that still shows its placeholder."""
        field = self._check_edit(field)
        if self.text[field] == PLACEHOLDERS[field]:
            self.text[field] = ""

    def blur(self, field: Field) -> None:
        """Put the placeholder back into a text field left empty."""
        field = self._check_edit(field)
        if self.text[field] == "":
            self.text[field] = PLACEHOLDERS[field]

    def submit(self, service: RentalService, today: date) -> Car:
        """Add the described car to the service, reset the form and return the car."""
        model = self.model.choice
        brand = self.brand.choice
        car = service.add_car(
            model,
            self.text[Field.LICENSE_PLATE],
            today.strftime(DATE_FORMAT),
            _parse_int(self.text[Field.YEAR]),
            self.text[Field.COLOR],
            brand,
        )
        for edit in EDIT_FIELDS:
            self.text[edit] = ""
        self.brand.selection = -1
        self.model.clear()
        self.visible.clear()
        return car