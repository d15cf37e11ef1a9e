"""
Custom Example CLI - manage a remote todo list from the command line.
"""

import logging
from dataclasses import dataclass

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .client import RemoteStoreClient
from .diagnostics import Diagnostics
from .models import DeclaredConfig, OperationResult, ProviderConfig
from .projector import TodoDataSource
from .provider import CustomExampleProvider
from .reconciler import TodoResource
from .resolver import resolve
from .settings import get_settings

# Setup
app = typer.Typer(
    name="customexample",
    help="Reconcile a declared todo list against a remote HTTP store",
    add_completion=False,
)
console = Console()


def configure_logging(debug: bool = False):
    """Configure logging based on settings."""
    settings = get_settings()
    level = logging.DEBUG if debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@dataclass
class CliState:
    declared: DeclaredConfig


def _print_diagnostics(diagnostics: Diagnostics, title: str) -> None:
    """Print every diagnostic and exit.

    Raises:
        SystemExit: Always exits with code 1
    """
    console.print(f"[bold red]✗ {title}[/bold red]")
    for diagnostic in diagnostics:
        where = f" [dim]({diagnostic.attribute})[/dim]" if diagnostic.attribute else ""
        console.print(f"  • [bold]{escape(diagnostic.summary)}[/bold]{where}")
        if diagnostic.detail:
            console.print(f"    [dim]{escape(diagnostic.detail)}[/dim]")
    raise typer.Exit(code=1)


def _resolve_config(ctx: typer.Context) -> ProviderConfig:
    result = resolve(ctx.obj.declared)
    if not result.ok:
        _print_diagnostics(result.diagnostics, "Configuration failed")
    return result.config


def _print_todo_list(todo_list: list[str]) -> None:
    if not todo_list:
        console.print("[dim]Todo list is empty[/dim]")
        return
    for index, item in enumerate(todo_list, start=1):
        console.print(f"  {index}. {escape(item)}")


def _provider_data(ctx: typer.Context) -> str:
    """Configure the provider and return the value handed to resources."""
    response = CustomExampleProvider().configure(ctx.obj.declared)
    if response.diagnostics.has_error():
        _print_diagnostics(response.diagnostics, "Configuration failed")
    return response.resource_data


def _finish(result: OperationResult, command_name: str) -> None:
    if not result.ok:
        _print_diagnostics(result.diagnostics, f"{command_name.capitalize()} failed")
    console.print(f"[bold green]✓ {command_name.capitalize()} successful[/bold green]")
    _print_todo_list(result.todo_list)


@app.callback()
def main(
    ctx: typer.Context,
    username: str = typer.Option(
        None, "--username", help="Store username (overrides CUSTOM_EXAMPLE_USERNAME)"
    ),
    password: str = typer.Option(
        None, "--password", help="Store password (overrides CUSTOM_EXAMPLE_PASSWORD)"
    ),
    baseurl: str = typer.Option(
        None, "--baseurl", help="Store base URL (overrides CUSTOM_EXAMPLE_BASEURL)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Collect the declared provider block for the subcommand."""
    configure_logging(debug)
    ctx.obj = CliState(
        declared=DeclaredConfig(username=username, password=password, baseurl=baseurl)
    )


@app.command()
def config(ctx: typer.Context):
    """Show the resolved provider configuration."""
    resolved = _resolve_config(ctx)
    console.print(
        Panel.fit(
            f"[bold blue]Provider Configuration[/bold blue]\n"
            f"Username: {escape(resolved.username)}\n"
            f"Password: {'*' * 8}\n"
            f"Base URL: {escape(resolved.baseurl)}",
            border_style="blue",
        )
    )


@app.command()
def get(ctx: typer.Context):
    """Read the current remote todo list."""
    provider_data = _provider_data(ctx)
    with RemoteStoreClient() as client:
        data_source = TodoDataSource(client)
        data_source.configure(provider_data)
        _finish(data_source.read(), "read")


@app.command()
def apply(
    ctx: typer.Context,
    items: list[str] = typer.Argument(..., help="Todo items, in order"),
    update: bool = typer.Option(
        False, "--update", help="Replace an existing list instead of creating it"
    ),
):
    """Send the declared todo list and show what the store committed."""
    provider_data = _provider_data(ctx)
    with RemoteStoreClient() as client:
        resource = TodoResource(client)
        resource.configure(provider_data)
        if update:
            _finish(resource.update(list(items)), "update")
        else:
            _finish(resource.create(list(items)), "create")


@app.command()
def destroy(ctx: typer.Context):
    """Delete the remote todo list."""
    provider_data = _provider_data(ctx)
    with RemoteStoreClient() as client:
        resource = TodoResource(client)
        resource.configure(provider_data)
        _finish(resource.delete(), "delete")


@app.command()
def version():
    """Show provider version."""
    from . import __version__

    provider = CustomExampleProvider(__version__)
    console.print(f"{provider.metadata()['type_name']} version: [bold]{__version__}[/bold]")


if __name__ == "__main__":
    app()
