"""Display sink interface."""

from typing import Protocol


class Display(Protocol):
    """Where responses and error messages go."""

    def show(self, text: str) -> None:
        ...

    def show_error(self, text: str) -> None:
        ...
