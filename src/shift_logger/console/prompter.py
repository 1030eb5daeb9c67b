from __future__ import annotations

from typing import Optional, Sequence, TextIO

import click

from ..core.enums import MenuOption


class ConsolePrompter:
    """All user input goes through here so the UI can be driven by a script in tests.

    click turns Ctrl+C and closed stdin into ``click.Abort``; the UI decides
    what that means.
    """

    def __init__(self, output: Optional[TextIO] = None):
        self._output = output

    def ask_text(self, message: str) -> str:
        return click.prompt(click.style(message, fg="cyan"), default="", show_default=False, prompt_suffix="")

    def ask_int(self, message: str) -> int:
        return click.prompt(click.style(message, fg="cyan"), type=int, prompt_suffix="")

    def confirm(self, message: str) -> bool:
        return click.confirm(click.style(message, fg="cyan"), prompt_suffix="")

    def choose(self, title: str, choices: Sequence[str]) -> str:
        return click.prompt(click.style(title, fg="cyan"), type=click.Choice(list(choices), case_sensitive=False))

    def select_menu(self, options: Sequence[MenuOption]) -> MenuOption:
        click.echo(click.style("\nPlease choose one of the following options:", bold=True), file=self._output)
        for number, option in enumerate(options, start=1):
            click.echo(f"  {click.style(f'{number:>2}', fg='cyan')}. {option.display_name}", file=self._output)
        picked = click.prompt("Option", type=click.IntRange(1, len(options)))
        return options[picked - 1]

    def pause(self) -> None:
        click.pause(click.style("Press Enter to continue...", dim=True))
