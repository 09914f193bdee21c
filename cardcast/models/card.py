from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CardEntry:
    """
    One line item in a parsed deck list.

    Attributes:
        quantity: Number of copies (always >= 1 for parsed entries)
        name: Display name with parser cleanup applied (e.g., "Darkness Energy")
        set_code: Short set identifier (e.g., "SVE", "JMP"), empty if absent
        set_name: Long-form set name from TCGPlayer bracket exports, empty if absent
        number: Collector number, possibly with a variant suffix (e.g., "72p")
        full_name: Display composite of name and set info, fixed at parse time
    """

    quantity: int
    name: str
    set_code: str = ""
    set_name: str = ""
    number: str = ""
    full_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the overlay's camelCase wire keys."""
        return {
            "quantity": self.quantity,
            "name": self.name,
            "setCode": self.set_code,
            "setName": self.set_name,
            "number": self.number,
            "fullName": self.full_name,
        }
