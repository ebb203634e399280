"""The musical instrument record and its text form."""

from __future__ import annotations

from dataclasses import dataclass

NOT_FOUND_TYPE = "instrument not found..."
NONE = "none"
NO_DATE = "no date"


@dataclass
class MusicalInstrument:
    """A musical instrument in stock.

    A default-constructed instance stands for "no instrument found".
    """

    type_of_musical_instrument: str = NOT_FOUND_TYPE
    brand: str = NONE
    model: str = NONE
    model_of_pickups: str = NONE
    material_of_body: str = NONE
    material_of_neck: str = NONE
    material_of_fretboard: str = NONE
    model_of_bridge: str = NONE
    amount_of_strings: int = 0
    amount_of_pickups: int = 0
    price: float = 0.0
    is_in_offer: bool = False
    amount_in_offer: int = 0
    date_of_release: str = NO_DATE

    @classmethod
    def not_found(cls) -> MusicalInstrument:
        """Return the placeholder used when no instrument matches."""
        return cls()

    def __str__(self) -> str:
        lines = [
            f"{self.type_of_musical_instrument}, ",
            f"brand: {self.brand}, ",
            f"model: {self.model}, ",
            f"pickups: {self.model_of_pickups}, ",
            f"materialOfBody: {self.material_of_body}, ",
            f"materialOfNeck: {self.material_of_neck}, ",
            f"materialOfFretboard: {self.material_of_fretboard}, ",
            f"amount of strings: {self.amount_of_strings}, ",
            f"amount of pickups: {self.amount_of_pickups}, ",
            f"price: {float(self.price):f}, ",
            "is in offer? " + ("Yes! " if self.is_in_offer else "No "),
            f"amount in offer: {self.amount_in_offer}, ",
            f"date of release: {self.date_of_release}, ",
        ]
        return "\n".join(lines) + "\n"