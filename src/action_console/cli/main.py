"""Action console CLI - run registered callables from a terminal prompt."""

import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from action_console.actions.action import Action
from action_console.actions.loader import ActionLoadError
from action_console.actions.manager import ActionManager
from action_console.actions.types import with_status
from action_console.cli.completion import name_completion
from action_console.config import settings

app = typer.Typer(
    name="action-console",
    help="Run registered Python callables from a prompt or a web console",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

ACTIONS_HELP = "Action definitions as package.module:attribute (attribute defaults to 'actions')"


def _load_manager(actions: str | None) -> ActionManager:
    """Load the manager from a target, or use the process-wide one."""
    target = actions or settings.actions

    if not target:
        manager = ActionManager.instance()
        if len(manager.registry) == 0:
            err_console.print(
                "No actions to run. Pass --actions package.module:attribute "
                "or set ACTION_CONSOLE_ACTIONS.",
                style="red",
                markup=False,
            )
            raise typer.Exit(1)
        return manager

    try:
        return ActionManager.from_target(target)
    except ActionLoadError as e:
        err_console.print(str(e), style="red", markup=False)
        raise typer.Exit(1)


def _prompt_parameter(name: str) -> str:
    return typer.prompt(name, default="", show_default=False)


def _describe_signature(action: Action) -> str:
    parts = []
    for param in action.parameters:
        part = param.name
        if param.annotation:
            part += f": {param.annotation}"
        if param.has_default:
            part += f" = {param.default!r}"
        parts.append(part)
    return f"({', '.join(parts)})"


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        settings.log_level,
        "--log-level",
        envvar="ACTION_CONSOLE_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """Run registered Python callables from a prompt or a web console."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


@app.command("run")
def run_action(
    name: str = typer.Argument(None, help="Action name (prompted when omitted)"),
    actions: str = typer.Option(
        None, "--actions", "-a", envvar="ACTION_CONSOLE_ACTIONS", help=ACTIONS_HELP
    ),
) -> None:
    """
    Run one action, prompting for each of its parameters.

    Empty answers use the parameter's default; parameters without a
    default are asked again.
    """
    manager = _load_manager(actions)

    if name is None:
        with name_completion(manager.registry):
            name = typer.prompt("Action", default="", show_default=False)

    action = manager.registry.resolve(name.strip())
    if action is None:
        err_console.print("Action not found", markup=False)
        raise typer.Exit(1)

    arguments = manager.binder.bind_interactive(action, _prompt_parameter)

    for entry in with_status(manager.handle(action, arguments)):
        typer.echo("---")
        typer.echo(entry.title)
        typer.echo(entry.body.rstrip("\n"))
        typer.echo("---")


@app.command("list")
def list_actions(
    actions: str = typer.Option(
        None, "--actions", "-a", envvar="ACTION_CONSOLE_ACTIONS", help=ACTIONS_HELP
    ),
) -> None:
    """List registered actions with their flags and validation status."""
    manager = _load_manager(actions)

    table = Table(title="Actions")
    table.add_column("Name", style="cyan")
    table.add_column("Signature", style="green")
    table.add_column("Flags", style="yellow")
    table.add_column("Status")
    table.add_column("Location", style="dim")

    for action in manager.registry.resolve_all():
        status = manager.validator.validate(action)
        flags = ", ".join(flag.label for flag in manager.flags.resolve_all(action))

        table.add_row(
            escape(action.name),
            escape(_describe_signature(action)),
            flags or "-",
            Text(status.message, style="green" if status.is_valid else "red"),
            escape(action.location),
        )

    console.print(table)


@app.command("serve")
def serve(
    actions: str = typer.Option(
        None, "--actions", "-a", envvar="ACTION_CONSOLE_ACTIONS", help=ACTIONS_HELP
    ),
    host: str = typer.Option(settings.host, "--host", help="Bind address"),
    port: int = typer.Option(settings.port, "--port", "-p", help="Bind port"),
) -> None:
    """Serve the web console."""
    # Lazy import to keep the prompt commands light
    import uvicorn

    from action_console.web import create_app

    manager = _load_manager(actions)

    console.print(
        f"Serving {len(manager.registry)} action(s) on [bold]http://{host}:{port}[/bold]"
    )
    uvicorn.run(create_app(manager, settings), host=host, port=port)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
