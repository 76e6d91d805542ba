"""Consent disclosure and approval.

Whether the user is asked at all is decided by the prompt provider the
caller passes in: TerminalPrompt asks on the terminal, StaticPrompt answers
with a fixed reply, and no provider means nobody can be asked.
"""
from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

logger = logging.getLogger(__name__)

APPROVAL_QUESTION = "Is that ok for you (yes/no)"
AFFIRMATIVE = "yes"

DEFAULT_APPROVAL_MESSAGE = (
    "Hello,\n"
    "This is just a message to inform you that we are collecting information "
    "how you use this application\n"
    "We will send the following information to Google Analytics:\n"
    "  - Which parts of our application you are using\n"
    "  - When errors are occurring\n"
    "  - Your information will be tracked anonymously as user\n"
    "  - This information is collected in order to provide us better insights "
    "on how people use this application\n"
)


class TerminalPrompt:
    """Ask the question on the controlling terminal."""

    def __call__(self, question: str) -> str:
        return click.prompt(question, default="", show_default=False,
                            prompt_suffix="")


class StaticPrompt:
    """Answer every question with a pre-supplied reply."""

    def __init__(self, answer: str):
        self.answer = answer
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        return self.answer


def default_prompt():
    """TerminalPrompt when stdin is a terminal, otherwise None."""
    if sys.stdin is not None and sys.stdin.isatty():
        return TerminalPrompt()
    return None


def set_approval_message(message: str | None = None) -> str:
    """Return message, or the default disclosure when it is None."""
    if message is None:
        return DEFAULT_APPROVAL_MESSAGE
    return message


def request_approval(
    message: str | None = None,
    consent: bool = False,
    prompt=None,
    console: Console | None = None,
) -> bool:
    """Show the approval message and resolve consent.

    Args:
        message: Text shown before asking. Defaults to the standard disclosure.
        consent: True when the developer grants consent on the user's behalf
            and takes responsibility for complying with privacy law (GDPR).
        prompt: Callable taking the question and returning the user's reply.
            None means there is nobody to ask, so consent is refused.
        console: Output console. Default stdout.

    Returns:
        True only when consent is pre-granted or the reply is exactly "yes".
    """
    out = console or Console()
    out.print(set_approval_message(message), markup=False, highlight=False)

    if consent:
        reply = AFFIRMATIVE
    elif prompt is not None:
        reply = prompt(f"{APPROVAL_QUESTION}: ")
    else:
        reply = "no"

    granted = reply == AFFIRMATIVE
    if granted:
        out.print("Thank you for your consent to send usage data to Google Analytics")
    else:
        out.print("No consent given")
    logger.debug("Consent resolved: %s", granted)
    return granted
