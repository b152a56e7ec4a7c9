import typer
import pydantic
from types import SimpleNamespace
from typing import List, Optional
from typing_extensions import Annotated
from rich.console import Console
from rich.table import Table

from .codec import decode_line
from .config import load_config
from .exceptions import PetDatabaseError
from .persist import load_database, save_database
from .store import PetStore

app = typer.Typer()

MENU = """Pet Database Program.
What would you like to do?
1) View all pets
2) Add new pets
3) Remove a pet
4) Exit program"""


def _error(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED)


@app.callback()
def main(
    ctx: typer.Context,
    db: Optional[str] = typer.Option(None, help="Path to the pet database file."),
    log_level: Optional[str] = typer.Option(None),
) -> None:
    overrides = {}
    if db:
        overrides["db_path"] = db
    if log_level:
        overrides["log_level"] = log_level
    try:
        config = load_config(**overrides)
    except pydantic.ValidationError as e:
        for err in e.errors():
            _error(f"Invalid {err['loc'][0]}: {err['msg']}")
        raise typer.Exit(1)
    store = PetStore()
    report = load_database(store, config.db_path)
    for error in report.errors:
        _error(f"Skipped {error}")
    ctx.obj = SimpleNamespace(config=config, store=store)


def _show(store: PetStore) -> None:
    table = Table("ID", "NAME", "AGE")
    for position, name, age in store.list():
        table.add_row(str(position), name, str(age))
    Console().print(table)
    typer.echo(f"{store.size()} rows in set.")


def _add_line(store: PetStore, line: str) -> bool:
    try:
        store.add(*decode_line(line))
    except PetDatabaseError as e:
        _error(str(e))
        return False
    return True


def _add_interactive(store: PetStore) -> int:
    added = 0
    while True:
        line = typer.prompt("add pet (name, age)")
        if line.strip() == "done":
            break
        added += _add_line(store, line)
    return added


def _remove(store: PetStore, position: int) -> bool:
    try:
        pet = store.remove_at(position)
    except PetDatabaseError as e:
        _error(str(e))
        return False
    typer.echo(f"Pet at ID {position} ({pet.name}) is removed.")
    return True


def _save(ctx: typer.Context) -> None:
    save_database(ctx.obj.store, ctx.obj.config.db_path)


@app.command()
def show(ctx: typer.Context) -> None:
    _show(ctx.obj.store)


@app.command()
def add(
    ctx: typer.Context,
    lines: Annotated[
        Optional[List[str]], typer.Argument(help='Pets to add, as "name age".')
    ] = None,
) -> None:
    store = ctx.obj.store
    if lines:
        added = sum(_add_line(store, line) for line in lines)
    else:
        added = _add_interactive(store)
    _save(ctx)
    typer.echo(f"{added} pets added.")


@app.command()
def remove(ctx: typer.Context, id: int) -> None:
    store = ctx.obj.store
    if not store.size():
        _error("No pets to remove.")
        raise typer.Exit(1)
    if not _remove(store, id):
        raise typer.Exit(1)
    _save(ctx)


@app.command()
def menu(ctx: typer.Context) -> None:
    """
    Run the interactive menu; changes are saved on exit.
    """
    store = ctx.obj.store
    while True:
        typer.echo(MENU)
        choice = typer.prompt("Your choice").strip()
        if choice == "1":
            _show(store)
        elif choice == "2":
            added = _add_interactive(store)
            typer.echo(f"{added} pets added.")
        elif choice == "3":
            if not store.size():
                typer.echo("No pets to remove.")
                continue
            _show(store)
            position = typer.prompt("Enter the pet ID to remove")
            try:
                _remove(store, int(position))
            except ValueError:
                _error(f"Invalid ID: {position}")
        elif choice == "4":
            break
        else:
            _error("Invalid choice. Please try again.")
    _save(ctx)
    typer.echo("Goodbye!")


if __name__ == "__main__":
    app()
