"""
Line format for the pet database file.

Each line holds a name and an age separated by whitespace::

    Rex 4
    Fido    2

Names are written as-is, so a name containing whitespace cannot round-trip.
"""
import re

from .exceptions import MalformedLine, NonNumericAttribute
from .record import Pet

INTEGER = re.compile(r"[+-]?[0-9]+")


def decode_line(line: str) -> tuple[str, int]:
    """
    Split a line into (name, age).

    The age is only checked for being an integer; range checks happen when
    a Pet is built from the result.
    """
    parts = line.split()
    if len(parts) != 2:
        raise MalformedLine(f"Invalid input: {line.rstrip()!r}")
    name, age = parts
    # ascii digits only; int() alone would take "1_0" and non-ascii digits
    if not INTEGER.fullmatch(age):
        raise NonNumericAttribute(f"Age is not a number: {age!r}")
    return name, int(age)


def encode_line(name: str, age: int) -> str:
    return f"{name} {age}"


def decode_pet(line: str) -> Pet:
    name, age = decode_line(line)
    return Pet(name=name, age=age)


def encode_pet(pet: Pet) -> str:
    return encode_line(pet.name, pet.age)
