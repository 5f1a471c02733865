"""Passwordless SSH to localhost, needed by Hadoop's start-*.sh control scripts."""

from pyinfra import host
from pyinfra.facts.files import File
from pyinfra.facts.server import Command
from pyinfra.operations import apt, files, server, systemd

from hadoop_byoc.core.config import settings
from hadoop_byoc.core.host_facts import home_dir
from hadoop_byoc.core.logging import get_logger

logger = get_logger(__name__)

BOOT_REMINDER = "Run 'start-all.sh' next time when you want to start Hadoop."
MANUAL_REMINDER = "Run 'sudo service ssh start && start-all.sh' next time when you want to start Hadoop."


def key_already_authorized(public_key: str, authorized_keys: str) -> bool:
    result = host.get_fact(
        Command,
        command=(
            f"test -f {public_key} && test -f {authorized_keys} "
            f"&& grep -qxFf {public_key} {authorized_keys} && echo present || echo absent"
        ),
    )
    return (result or "").strip() == "present"


def setup_ssh():
    """Install sshd, create a key pair once and authorize it for localhost."""
    logger.info("Installing and setting up SSH for Hadoop")

    apt.update(name="Update packages for SSH", _sudo=True)
    apt.packages(
        name="Install OpenSSH server",
        packages=["openssh-server"],
        present=True,
        _sudo=True,
    )

    ssh_dir = f"{home_dir()}/.ssh"
    private_key = f"{ssh_dir}/id_rsa"
    public_key = f"{private_key}.pub"
    authorized_keys = f"{ssh_dir}/authorized_keys"

    files.directory(name="Set permissions for .ssh directory", path=ssh_dir, present=True, mode="700")

    if host.get_fact(File, path=private_key):
        logger.info("SSH keys already exist. Skipping key generation.")
    else:
        server.shell(
            name="Generate SSH keys",
            commands=[f'ssh-keygen -t rsa -N "" -f {private_key}'],
        )

    # Plain append on every run; a repeated run lists the key again.
    if key_already_authorized(public_key, authorized_keys):
        logger.warning(
            "Public key is already in authorized_keys, appending it again",
            authorized_keys=authorized_keys,
        )
    server.shell(
        name="Add public key to authorized_keys",
        commands=[
            f"cat {public_key} >> {authorized_keys}",
            f"chmod 600 {authorized_keys}",
        ],
    )

    if settings.SSH_ENABLE_ON_BOOT:
        logger.info("SSH will start automatically on boot.")
        systemd.service(
            name="Enable SSH to start on boot",
            service="ssh",
            enabled=True,
            _sudo=True,
        )
    else:
        logger.info("SSH will not start automatically.")

    server.shell(name="Start SSH service", commands=["service ssh start"], _sudo=True)


def restart_reminder(enabled_on_boot: bool) -> str:
    return BOOT_REMINDER if enabled_on_boot else MANUAL_REMINDER
