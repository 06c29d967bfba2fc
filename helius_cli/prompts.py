"""Interactive prompt primitives for Helius CLI.

Every prompt blocks until it gets an acceptable answer; invalid input is
reported and asked again.
"""

from typing import Optional, Sequence

import click


class UserCancelled(Exception):
    """Raised when the user declines a confirmation.

    A normal negative outcome that ends only the current step.
    """

    def __init__(self, message: str = "Cancelled"):
        self.message = message
        super().__init__(self.message)


def _required(label: str):
    def convert(value: str) -> str:
        value = value.strip()
        if not value:
            raise click.BadParameter(f"{label} is required")
        return value
    return convert


def prompt_text(
    message: str,
    required: bool = False,
    label: str = "A value"
) -> str:
    """Ask for free text. Optional prompts accept an empty answer."""
    if required:
        return click.prompt(message, value_proc=_required(label))
    return click.prompt(message, default="", show_default=False).strip()


def prompt_choice(
    message: str,
    choices: Sequence[str],
    default: Optional[str] = None
) -> str:
    """Ask for exactly one of ``choices``."""
    return click.prompt(
        message,
        type=click.Choice(list(choices)),
        default=default,
        show_choices=True,
    )


def _parse_selection(choices: Sequence[str]):
    lookup = {choice.upper(): choice for choice in choices}

    def convert(value: str) -> list[str]:
        selected: list[str] = []
        for token in (t.strip() for t in value.split(",")):
            if not token:
                continue
            if token.isdigit() and 1 <= int(token) <= len(choices):
                choice = choices[int(token) - 1]
            elif token.upper() in lookup:
                choice = lookup[token.upper()]
            else:
                raise click.BadParameter(f"Unknown choice: {token}")
            if choice not in selected:
                selected.append(choice)
        if not selected:
            raise click.BadParameter("At least one choice is required")
        return selected

    return convert


def prompt_multi_choice(message: str, choices: Sequence[str]) -> list[str]:
    """
    Ask for one or more of ``choices``.

    The options are listed with numbers; the answer is a comma-separated
    list of numbers or names (case-insensitive).

    Returns:
        The selected choices in the order given, without repeats.
    """
    for i, choice in enumerate(choices, 1):
        click.echo(f"  {i:>2}. {choice}", err=True)
    return click.prompt(
        f"{message} (comma-separated numbers or names)",
        value_proc=_parse_selection(list(choices)),
    )


def confirm(message: str, default: bool = False) -> bool:
    """Ask a yes/no question."""
    return click.confirm(message, default=default)


def confirm_or_cancel(message: str, default: bool = False) -> None:
    """Ask a yes/no question and raise UserCancelled on "no"."""
    if not click.confirm(message, default=default):
        raise UserCancelled()
