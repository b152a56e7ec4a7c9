from pathlib import Path
from typing import Iterable, Iterator
from pydantic import BaseModel
from structlog import get_logger

from .codec import decode_pet, encode_pet
from .exceptions import ErrorKind, MalformedLine, PetDatabaseError
from .store import PetStore

log = get_logger()


class LineError(BaseModel):
    line_number: int
    line: str
    exception: str
    exc_type: str
    kind: ErrorKind

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.exception}"


class LoadReport(BaseModel):
    loaded: int = 0
    errors: list[LineError] = []

    @property
    def ok(self) -> bool:
        return not self.errors


def _line_error(line_number: int, line: str, e: PetDatabaseError) -> LineError:
    log.info("skipping line", line_number=line_number, line=line, exception=str(e))
    return LineError(
        line_number=line_number,
        line=line,
        exception=str(e),
        exc_type=type(e).__name__,
        kind=e.kind,
    )


def load_lines(store: PetStore, lines: Iterable[str | bytes]) -> LoadReport:
    """
    Add a pet to the store for every line that decodes and validates.

    Lines may be text or UTF-8 bytes. A failing line is recorded in the
    report and loading moves on to the next line; lines are numbered from 1.
    """
    report = LoadReport()
    for line_number, raw in enumerate(lines, 1):
        if isinstance(raw, bytes):
            try:
                line = raw.decode("utf-8").rstrip("\r\n")
            except UnicodeDecodeError:
                line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
                report.errors.append(
                    _line_error(
                        line_number, line, MalformedLine(f"Not UTF-8: {line!r}")
                    )
                )
                continue
        else:
            line = raw.rstrip("\r\n")
        try:
            store.add_pet(decode_pet(line))
            report.loaded += 1
        except PetDatabaseError as e:
            report.errors.append(_line_error(line_number, line, e))
    return report


def load_database(store: PetStore, path: str | Path) -> LoadReport:
    path = Path(path)
    if not path.exists():
        log.info("no database file", path=str(path))
        return LoadReport()
    with path.open("rb") as f:
        report = load_lines(store, f)
    log.info(
        "database loaded",
        path=str(path),
        loaded=report.loaded,
        errors=len(report.errors),
    )
    return report


def dump_lines(store: PetStore) -> Iterator[str]:
    for pet in store:
        yield encode_pet(pet)


def save_database(store: PetStore, path: str | Path) -> int:
    """
    Overwrite path with one line per pet, in store order.

    Returns the number of pets written.
    """
    count = 0
    with Path(path).open("w", encoding="utf-8") as f:
        for line in dump_lines(store):
            f.write(line + "\n")
            count += 1
    log.info("database saved", path=str(path), pets=count)
    return count
