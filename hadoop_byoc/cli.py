"""Interactive single node Hadoop installer.

Asks its questions up front, runs the pyinfra deploy in ``deploy.py`` against
the local host, then reports the web consoles and drops into a fresh shell so
the new profile takes effect.
"""

import os
import re
import subprocess
import sys
from typing import Iterable, List, Optional

import typer

from hadoop_byoc.core.config import load_dotenvs, settings
from hadoop_byoc.core.errors import InstallerError, ProvisionError, UserAbort
from hadoop_byoc.core.find_root import find_project_root
from hadoop_byoc.core.logging import configure_logging, get_logger
from hadoop_byoc.core.profile import detect_shell, shell_name
from hadoop_byoc.core.prompts import InstallAnswers, collect_answers, invoking_user
from hadoop_byoc.deploys.ssh import restart_reminder

app = typer.Typer(help="Single node Hadoop installer", add_completion=False)

logger = get_logger(__name__)

DEPLOY_TARGET = "deploy.all_in_one"

_OPERATION_LINE = re.compile(r"Starting operation:\s*(?P<name>.+?)\s*$")
_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def pyinfra_command(inventory: str, target: str = DEPLOY_TARGET) -> List[str]:
    return [sys.executable, "-m", "pyinfra", "-y", inventory, target]


def deploy_env(answers: InstallAnswers) -> dict:
    env = os.environ.copy()
    env["HADOOP_USER"] = answers.username
    env["SSH_ENABLE_ON_BOOT"] = "true" if answers.enable_ssh_on_boot else "false"
    return env


def failed_operation(lines: Iterable[str]) -> Optional[str]:
    """Name of the last operation pyinfra started, i.e. the one a failed run stopped at."""
    name = None
    for line in lines:
        match = _OPERATION_LINE.search(_ANSI_ESCAPE.sub("", line))
        if match:
            name = match.group("name")
    return name


def run_deploy(answers: InstallAnswers, inventory: str = "@local") -> None:
    cmd = pyinfra_command(inventory)
    logger.info("Running deploy", command=" ".join(cmd), user=answers.username)
    process = subprocess.Popen(
        cmd,
        cwd=str(find_project_root()),
        env=deploy_env(answers),
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
    )
    output = []
    for line in process.stdout:
        typer.echo(line, nl=False)
        output.append(line)
    returncode = process.wait()

    if returncode != 0:
        step = failed_operation(output)
        if step:
            cause = f"Failed at '{step}'"
        else:
            cause = "Provisioning failed, see the pyinfra output above"
        raise ProvisionError(f"{cause} (pyinfra exit code {returncode}).")


def print_endpoints() -> None:
    typer.echo("")
    typer.echo("Hadoop installation completed. You can verify the installation by browsing:")
    typer.echo(f"HDFS: {settings.HDFS_WEB_URL}")
    typer.echo(f"YARN: {settings.YARN_WEB_URL}")
    typer.echo("")
    typer.echo("Script execution completed!")
    typer.echo("")


def hand_off_to_shell(shell: Optional[str]) -> None:
    """Replace this process with the user's interactive shell."""
    kind = detect_shell(shell)
    if kind is None:
        typer.echo(f"Unsupported shell: {shell_name(shell)}. Please configure manually.")
        return
    os.execvp(kind.value, [kind.value])


def gather_answers(yes: bool, user: Optional[str], enable_ssh_on_boot: Optional[bool]) -> InstallAnswers:
    default_user = user or settings.HADOOP_USER or invoking_user()
    if yes:
        enable = settings.SSH_ENABLE_ON_BOOT if enable_ssh_on_boot is None else enable_ssh_on_boot
        return InstallAnswers(proceed=True, username=default_user, enable_ssh_on_boot=enable)

    answers = collect_answers(default_user=default_user)
    if enable_ssh_on_boot is not None and answers.proceed:
        answers = InstallAnswers(True, answers.username, enable_ssh_on_boot)
    return answers


@app.command()
def install(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask, use defaults and configuration."),
    user: Optional[str] = typer.Option(None, "--user", "-u", help="Owner of the HDFS and log directories."),
    enable_ssh_on_boot: Optional[bool] = typer.Option(
        None, "--enable-ssh-on-boot/--no-enable-ssh-on-boot", help="Enable the SSH daemon at boot."
    ),
    inventory: str = typer.Option("@local", "--inventory", "-i", help="pyinfra inventory to deploy to."),
    handoff: bool = typer.Option(True, "--handoff/--no-handoff", help="Start a new shell when done."),
):
    """Install and start a single node Hadoop."""
    load_dotenvs()
    configure_logging()

    typer.echo("This script is to setup single node Hadoop.")
    try:
        answers = gather_answers(yes, user, enable_ssh_on_boot)
        if not answers.proceed:
            raise UserAbort()

        typer.echo("")
        typer.echo(restart_reminder(answers.enable_ssh_on_boot))
        typer.echo("")

        run_deploy(answers, inventory)
    except UserAbort as e:
        typer.echo(str(e))
        raise typer.Exit(code=1)
    except InstallerError as e:
        typer.echo(f"An unexpected error occurred: {e}")
        raise typer.Exit(code=1)

    print_endpoints()

    if handoff:
        hand_off_to_shell(os.getenv("SHELL"))


def main():
    app()


if __name__ == "__main__":
    main()
