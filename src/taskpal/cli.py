"""taskpal CLI - command-line task tracking assistant."""

import logging
import sys

import click

from .adapters.console import ConsoleDisplay
from .adapters.file_store import FileTaskStore
from .config import load_config
from .session import Session


@click.group(invoke_without_command=True)
@click.version_option(package_name="taskpal")
@click.option("--file", "-f", "data_file", default=None, type=click.Path(dir_okay=False),
              help="Task file to use instead of the configured one")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_file: str | None, debug: bool):
    """taskpal - keep track of todos, deadlines and events."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    config = load_config()
    if data_file:
        config.data_file = data_file
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


def _session(config) -> Session:
    return Session(FileTaskStore(config.data_path), ConsoleDisplay(), eager_save=config.eager_save)


@main.command()
@click.pass_obj
def chat(config):
    """Start an interactive session (type 'bye' to save and quit)."""
    session = _session(config)
    session.start()

    while True:
        try:
            line = click.prompt(">", default="", show_default=False, prompt_suffix=" ")
        except click.Abort:
            # Ctrl-D / Ctrl-C: keep unsaved work, skip the farewell
            click.echo()
            if not session.close():
                sys.exit(1)
            return
        if not line.strip():
            continue
        if session.handle(line):
            if session.last_failure is not None:
                sys.exit(1)
            return


@main.command("do")
@click.argument("words", nargs=-1, required=True)
@click.pass_obj
def do(config, words: tuple[str, ...]):
    """Run a single command, e.g. taskpal do todo buy milk. Saves if the list changed."""
    session = _session(config)
    session.start(greet=False)

    if not session.handle(" ".join(words)) and not session.close():
        sys.exit(1)
    if session.last_failure is not None:
        sys.exit(1)


if __name__ == "__main__":
    main()
