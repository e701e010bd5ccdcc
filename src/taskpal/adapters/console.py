"""Console display adapter."""

import click


class ConsoleDisplay:
    """
    Prints responses to stdout and errors to stderr.

    Implements Display protocol.
    """

    def show(self, text: str) -> None:
        click.echo(text)

    def show_error(self, text: str) -> None:
        click.echo(f"Error: {text}", err=True)
