"""Hadoop environment variables in the user's shell profile."""

from io import StringIO

from pyinfra import host
from pyinfra.facts.files import FindInFile
from pyinfra.operations import files, server

from hadoop_byoc.core.config import settings
from hadoop_byoc.core.host_facts import home_dir, java_home, login_shell
from hadoop_byoc.core.logging import get_logger
from hadoop_byoc.core.profile import PROFILE_MARKER, detect_shell, has_marker, render_env_block

logger = get_logger(__name__)

_BLOCK_STAGING_PATH = "/tmp/hadoop-byoc-profile-block"


def configure_env():
    """Append the Hadoop block to ~/.bashrc or config.fish once, then source it."""
    shell = login_shell()
    logger.info("Detected shell type", shell=shell)

    kind = detect_shell(shell)
    if kind is None:
        logger.warning(f"Unsupported shell: {shell}. Please configure manually.")
        return

    profile = kind.profile_path(home_dir())
    existing = host.get_fact(FindInFile, path=profile, pattern=PROFILE_MARKER)

    if has_marker(existing):
        logger.info("Hadoop environment variables already exist", profile=profile)
    else:
        logger.info("Adding Hadoop environment variables", profile=profile)
        block = render_env_block(kind, settings.HADOOP_DIR, java_home())

        files.directory(
            name="Ensure profile directory exists",
            path=profile.rsplit("/", 1)[0],
            present=True,
        )
        files.put(
            name="Stage Hadoop environment block",
            src=StringIO(block),
            dest=_BLOCK_STAGING_PATH,
        )
        server.shell(
            name=f"Add Hadoop environment variables to {profile}",
            commands=[
                f"cat {_BLOCK_STAGING_PATH} >> {profile}",
                f"rm -f {_BLOCK_STAGING_PATH}",
            ],
        )

    server.shell(
        name=f"Source {profile}",
        commands=[kind.reload_command(profile)],
    )
