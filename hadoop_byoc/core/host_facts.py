"""Host facts shared by several deploy steps."""

from pyinfra import host
from pyinfra.facts.server import Command, Home, User

from hadoop_byoc.core.config import settings


def home_dir() -> str:
    return host.get_fact(Home)


def connected_user() -> str:
    return host.get_fact(User)


def hadoop_user() -> str:
    """Owner of the HDFS and log directories: HADOOP_USER, else whoever runs the deploy."""
    return settings.HADOOP_USER or connected_user()


def login_shell() -> str:
    return host.get_fact(Command, command='basename "${SHELL:-}"') or ""


def dpkg_arch() -> str:
    return host.get_fact(Command, command="dpkg --print-architecture") or "amd64"


def java_home() -> str:
    if settings.JAVA_HOME:
        return settings.JAVA_HOME
    return settings.java_home_for(dpkg_arch())
