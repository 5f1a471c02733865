"""Interactive questions asked before anything on the host is touched."""

import getpass
import os
import re
from dataclasses import dataclass
from typing import Callable, Optional

_AFFIRMATIVE = re.compile(r"^[Yy]$")

InputFunc = Callable[[str], str]


@dataclass(frozen=True)
class InstallAnswers:
    proceed: bool
    username: str
    enable_ssh_on_boot: bool


def is_affirmative(answer: Optional[str]) -> bool:
    if answer is None:
        return False
    return bool(_AFFIRMATIVE.match(answer.rstrip("\r\n")))


def _ask(question: str, input_func: InputFunc) -> Optional[str]:
    try:
        return input_func(question)
    except EOFError:
        return None


def confirm(question: str, input_func: InputFunc = input) -> bool:
    """Yes only on a bare 'y' or 'Y'; EOF and anything else count as no."""
    return is_affirmative(_ask(question, input_func))


def invoking_user() -> str:
    return os.getenv("USER") or getpass.getuser()


def ask_username(default: str, input_func: InputFunc = input) -> str:
    answer = _ask(
        f"If the username is '{default}', press Enter. Otherwise, type your username: ",
        input_func,
    )
    answer = (answer or "").strip()
    return answer or default


def collect_answers(input_func: InputFunc = input, default_user: Optional[str] = None) -> InstallAnswers:
    default_user = default_user or invoking_user()
    if not confirm("Are you ready to install Hadoop? [y/N]: ", input_func):
        return InstallAnswers(proceed=False, username=default_user, enable_ssh_on_boot=False)
    username = ask_username(default_user, input_func)
    enable = confirm("Do you want to start SSH automatically when your system starts? [y/N] ", input_func)
    return InstallAnswers(proceed=True, username=username, enable_ssh_on_boot=enable)
