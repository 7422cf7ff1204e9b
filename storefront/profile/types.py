from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class UserProfile:
    """
    Answers collected by the profile questionnaire.
    """

    name: str
    surname: str
    age: int
    pets: tuple[str, ...] = field(default_factory=tuple)
    colors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_pets(self) -> bool:
        return len(self.pets) > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "surname": self.surname,
            "age": self.age,
            "pets": list(self.pets),
            "colors": list(self.colors),
        }
