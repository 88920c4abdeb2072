"""CLI entrypoint for Sheetmark."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

import requests
import typer

from sheetmark.core.config import get_settings

app = typer.Typer(name="sheetmark", help="Sheetmark command-line interface")


def _resolve_host(override: Optional[str]) -> str:
    if override:
        return override.rstrip('/')
    env_host = os.environ.get("SHMK_HOST")
    if env_host:
        return env_host.rstrip('/')
    return get_settings().host.rstrip('/')


def _request(method: str, path: str, host: Optional[str] = None, **kwargs) -> requests.Response:
    base = _resolve_host(host)
    url = f"{base}{path}"
    resp = requests.request(method, url, timeout=60, **kwargs)
    if not resp.ok:
        try:
            detail = resp.json()
        except ValueError:
            detail = resp.text
        typer.echo(f"Request failed ({resp.status_code}): {detail}", err=True)
        raise typer.Exit(code=1)
    return resp


def _echo(resp: requests.Response) -> None:
    typer.echo(json.dumps(resp.json(), indent=2, ensure_ascii=False))


@app.command("import")
def import_file(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Spreadsheet to import"),
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Import a spreadsheet and show the page it resumes on."""
    content = path.expanduser().read_bytes()
    resp = _request(
        "POST",
        "/import",
        host=host,
        params={"name": path.name},
        data=content,
        headers={"Content-Type": "application/octet-stream"},
    )
    _echo(resp)


@app.command()
def page(
    number: Optional[int] = typer.Argument(None, min=1, help="Page to open; defaults to the current one"),
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Show one page of rows with their annotations."""
    params = {"page": number} if number is not None else {}
    _echo(_request("GET", "/rows", host=host, params=params))


@app.command()
def mark(
    row: int = typer.Argument(..., min=1, help="1-based row number as displayed"),
    messaged: Optional[bool] = typer.Option(None, "--messaged/--not-messaged", help="Set or clear the checkmark"),
    bookmark: Optional[str] = typer.Option(None, "--bookmark", help="start, end or none"),
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Update the checkmark and/or bookmark of a row."""
    body: dict[str, object] = {}
    if messaged is not None:
        body["messaged"] = messaged
    if bookmark is not None:
        body["bookmark"] = bookmark.lower()
    if not body:
        typer.echo("Nothing to update: pass --messaged/--not-messaged or --bookmark", err=True)
        raise typer.Exit(code=2)
    _echo(_request("PATCH", f"/rows/{row - 1}", host=host, json=body))


@app.command()
def summary(
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Show the counting range and number of checked rows."""
    resp = _request("GET", "/summary", host=host)
    typer.echo(resp.json()["details"])


@app.command("clear-annotations")
def clear_annotations(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Clear all checkmarks and bookmarks for the current file."""
    confirmed = yes or typer.confirm("Clear all checkmarks & bookmarks for this file?")
    _echo(_request("DELETE", "/annotations", host=host, params={"confirm": str(confirmed).lower()}))


@app.command()
def remove(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    host: Optional[str] = typer.Option(None, "--host", help="Override backend host"),
) -> None:
    """Remove the current file; its bookmarks and checkmarks are kept."""
    confirmed = yes or typer.confirm("Remove current file? (bookmarks/states will be kept)")
    _echo(_request("DELETE", "/dataset", host=host, params={"confirm": str(confirmed).lower()}))


if __name__ == "__main__":
    app()
