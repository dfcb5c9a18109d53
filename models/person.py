"""
models/person.py
----------------
A transient record used to show plain objects next to mapped entities.
Never persisted.
"""

from dataclasses import dataclass
from datetime import date


@dataclass
class Person:
    """
    Represents a person.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        years_of_experience: Whole years of professional experience.
        birthday: Date of birth.
    """
    first_name: str
    last_name: str
    years_of_experience: int = 0
    birthday: date = date.min

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
