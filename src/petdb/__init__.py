from .codec import decode_line, encode_line
from .record import Pet
from .store import PetStore

__all__ = ["Pet", "PetStore", "decode_line", "encode_line"]
