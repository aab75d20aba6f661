from typing import Protocol

import click


class Confirmer(Protocol):
    def confirm(self, prompt: str) -> bool: ...


class ClickConfirmer:
    def confirm(self, prompt: str) -> bool:
        return click.confirm(prompt, default=False)


class AssumeYesConfirmer:
    def confirm(self, prompt: str) -> bool:
        return True


def confirmer_for(assume_yes: bool) -> Confirmer:
    if assume_yes:
        return AssumeYesConfirmer()
    return ClickConfirmer()
