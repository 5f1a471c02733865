"""Install Java deployment for hadoop-byoc."""

from pyinfra.operations import apt, server

from hadoop_byoc.core.config import settings
from hadoop_byoc.core.logging import get_logger

logger = get_logger(__name__)


def install_java():
    """Install the OpenJDK runtime Hadoop runs on."""
    logger.info("Updating package list and installing Java", package=settings.JAVA_PACKAGE)

    server.shell(
        name="Configure pending packages",
        commands=["dpkg --configure -a"],
        _sudo=True,
    )

    apt.update(name="Update package list", _sudo=True)

    apt.packages(
        name=f"Install Java {settings.JAVA_VERSION}",
        packages=[settings.JAVA_PACKAGE],
        present=True,
        _sudo=True,
    )
