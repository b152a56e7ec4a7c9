from typing import Iterable, Iterator
from structlog import get_logger

from .exceptions import DatabaseFull, InvalidPosition
from .record import Pet

log = get_logger()

CAPACITY = 100


class PetStore:
    """
    Ordered, fixed-capacity collection of pets.

    Positions are zero-based and dense: removing a pet moves every later pet
    one position earlier, keeping insertion order.
    """

    def __init__(self, capacity: int = CAPACITY):
        self.capacity = capacity
        self._pets: list[Pet] = []

    def __repr__(self) -> str:
        return f"PetStore({len(self)}/{self.capacity})"

    def __len__(self) -> int:
        return len(self._pets)

    def __iter__(self) -> Iterator[Pet]:
        for pet in self._pets:
            yield pet.model_copy()

    def size(self) -> int:
        return len(self._pets)

    def is_full(self) -> bool:
        return len(self._pets) >= self.capacity

    def add(self, name: str, age: int) -> int:
        """
        Create a pet and append it, returning its position.

        Raises DatabaseFull if the store is at capacity and InvalidAttribute
        (or InvalidName) if the pet fails validation.
        """
        if self.is_full():
            raise DatabaseFull(f"Database is full ({self.capacity} pets).")
        return self._append(Pet(name=name, age=age))

    def add_pet(self, pet: Pet) -> int:
        if self.is_full():
            raise DatabaseFull(f"Database is full ({self.capacity} pets).")
        return self._append(pet.model_copy())

    def add_pets(self, pets: Iterable[Pet]) -> None:
        for pet in pets:
            self.add_pet(pet)

    def _append(self, pet: Pet) -> int:
        position = len(self._pets)
        self._pets.append(pet)
        log.debug("pet added", position=position, name=pet.name, age=pet.age)
        return position

    def _check_position(self, position: int) -> None:
        if position < 0 or position >= len(self._pets):
            raise InvalidPosition(f"ID {position} does not exist.")

    def get(self, position: int) -> Pet:
        self._check_position(position)
        return self._pets[position].model_copy()

    def remove_at(self, position: int) -> Pet:
        """
        Remove the pet at position and return it.

        Raises InvalidPosition unless 0 <= position < size().
        """
        self._check_position(position)
        pet = self._pets.pop(position)
        log.debug("pet removed", position=position, name=pet.name)
        return pet

    def list(self) -> list[tuple[int, str, int]]:
        return [(pos, pet.name, pet.age) for pos, pet in enumerate(self._pets)]

    def reset(self) -> None:
        self._pets = []
