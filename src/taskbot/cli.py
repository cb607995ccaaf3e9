"""Taskbot CLI - personal task tracker."""

import json
import logging
import sys

import click

from .adapters.json_store import task_to_record
from .config import load_config
from .core.parser import APP_NAME
from .workflows import build_session, end_session, get_store, run_command


def _setup_logging(level: str, debug: bool) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else getattr(logging, level, logging.WARNING),
    )


@click.group(invoke_without_command=True)
@click.version_option()
@click.pass_context
def main(ctx):
    """Taskbot - track todos, deadlines and events from the terminal."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@main.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def chat(debug: bool = False):
    """Interactive session. Type 'help' for commands, 'bye' to save and quit."""
    config = load_config()
    _setup_logging(config.log_level, debug)
    session = build_session(config)

    click.echo(f"Hello! I'm {APP_NAME}. What can I do for you?")
    click.echo(config.divider)
    try:
        while not session.is_exit:
            line = click.prompt(
                "", prompt_suffix=config.prompt, default="", show_default=False
            )
            click.echo(config.divider)
            result = run_command(session, line)
            if result.ok:
                click.echo(result.message)
            else:
                click.echo(result.message, err=True)
            click.echo(config.divider)
    except (click.Abort, EOFError, KeyboardInterrupt):
        click.echo()
        message = end_session(session)
        if message:
            click.echo(message)


@main.command()
@click.argument("lines", nargs=-1, required=True)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def run(lines: tuple[str, ...], debug: bool):
    """Run each LINE as a command, then save the list."""
    config = load_config()
    _setup_logging(config.log_level, debug)
    session = build_session(config)

    failed = False
    for line in lines:
        result = run_command(session, line)
        if result.ok:
            click.echo(result.message)
        else:
            failed = True
            click.echo(f"Error: {result.message}", err=True)

    message = end_session(session)
    if message:
        click.echo(message)
    if failed:
        sys.exit(1)


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def list_tasks(as_json: bool):
    """Show the saved task list."""
    config = load_config()
    task_list = get_store(config).load()

    if as_json:
        click.echo(json.dumps([task_to_record(t) for t in task_list], indent=2))
    else:
        click.echo(task_list.render())


if __name__ == "__main__":
    main()
