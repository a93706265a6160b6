from __future__ import annotations

from typing import List, Optional

import typer

from .client import NameProb
from .core.contracts import Resolution, ResolveStatus

app = typer.Typer(help="nameprob: most/least likely nationality for a name")


def _report(res: Resolution) -> None:
    typer.echo(f"\nResults for {res.name}:")
    typer.echo(f"Most likely country: {res.max_country}")
    typer.echo(f"Least likely country: {res.min_country}")
    if res.status == ResolveStatus.FETCH_ERROR:
        typer.echo(f"[error] {res.name}: {res.error}", err=True)


def _client(debug: bool, timeout: Optional[float]) -> NameProb:
    return NameProb(debug=debug, timeout=timeout)


@app.command("check")
def check(
    names: List[str] = typer.Argument(..., help="One or more names"),
    refresh: bool = typer.Option(
        False, help="Re-fetch each name even if already cached"
    ),
    timeout: Optional[float] = typer.Option(
        None, help="HTTP timeout in seconds (default from NAMEPROB_TIMEOUT_S)"
    ),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Report the most and least likely country for each name."""
    client = _client(debug, timeout)
    for name in names:
        name = name.strip()
        if refresh:
            client.refresh(name)
        _report(client.check(name))


@app.command("batch")
def batch(
    names: List[str] = typer.Argument(..., help="Names to look up"),
    timeout: Optional[float] = typer.Option(
        None, help="HTTP timeout in seconds (default from NAMEPROB_TIMEOUT_S)"
    ),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Prefetch all names first, then report each one."""
    client = _client(debug, timeout)
    for res in client.batch([n.strip() for n in names]):
        _report(res)


@app.command("interactive")
def interactive(
    timeout: Optional[float] = typer.Option(
        None, help="HTTP timeout in seconds (default from NAMEPROB_TIMEOUT_S)"
    ),
    debug: bool = typer.Option(False, help="Verbose request diagnostics"),
):
    """Menu-driven lookups; the cache lives for the whole session."""
    client = _client(debug, timeout)
    while True:
        typer.echo("\n=== Name Nationality Probability Checker ===")
        typer.echo("1. Check a single name")
        typer.echo("2. Check multiple names")
        typer.echo("3. Exit")
        choice = typer.prompt(
            "Choose an option (1-3)", default="", show_default=False
        ).strip()

        if choice == "1":
            name = typer.prompt(
                "Enter a name", default="", show_default=False
            ).strip()
            _report(client.check(name))
        elif choice == "2":
            line = typer.prompt(
                "Enter names (separated by spaces)",
                default="",
                show_default=False,
            )
            for res in client.check_many(line.split()):
                _report(res)
        elif choice == "3":
            typer.echo("Goodbye!")
            return None
        else:
            typer.echo("Invalid option. Please try again.")


def main() -> None:
    app()


if __name__ == "__main__":
    app()
