from typing import Any
from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import InvalidAttribute, InvalidName

MIN_AGE = 1
MAX_AGE = 50


class Pet(BaseModel):
    """
    A single named pet with a bounded age.

    Assigning to ``name`` or ``age`` re-runs validation, so a Pet never holds
    an age outside ``MIN_AGE..MAX_AGE``.
    """

    model_config = ConfigDict(validate_assignment=True)

    name: str
    age: int

    def __str__(self) -> str:
        return f"{self.name} ({self.age})"

    @field_validator("name", mode="before")
    @classmethod
    def _check_name(cls, name: Any) -> str:
        # names are written unescaped, whitespace would split the line
        if (
            not isinstance(name, str)
            or not name
            or any(c.isspace() for c in name)
        ):
            raise InvalidName(f"Invalid name: {name!r}")
        return name

    @field_validator("age", mode="before")
    @classmethod
    def _check_age(cls, age: Any) -> int:
        # no coercion: "7", 7.0 and True are all rejected
        if not isinstance(age, int) or isinstance(age, bool):
            raise InvalidAttribute(f"Invalid age: {age!r}")
        if age < MIN_AGE or age > MAX_AGE:
            raise InvalidAttribute(f"Invalid age: {age}")
        return age
