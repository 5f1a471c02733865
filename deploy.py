"""
PyInfra deployment entry point for hadoop-byoc.

This module provides packaged deploys that can be run individually:
    pyinfra @local deploy.install_00_java
    pyinfra @local deploy.install_01_hadoop
    etc.

or all at once with ``pyinfra @local deploy.all_in_one``. Run this way the
deploy is non-interactive and reads its answers (HADOOP_USER,
SSH_ENABLE_ON_BOOT, ...) from the environment and .env files; the
``hadoop-byoc`` command asks for them and then runs ``all_in_one``.

Each deployment operation is implemented as a separate module under
the hadoop_byoc.deploys package.
"""

from hadoop_byoc.core.logging import configure_logging
from hadoop_byoc.deploys.install_core import (
    install_00_java,
    install_01_hadoop,
    install_02_env,
    install_03_confs,
    install_04_hdfs_dirs,
    install_05_ssh,
)
from hadoop_byoc.deploys.start_service import start_service

configure_logging()

# Export all deploy functions for direct access
__all__ = [
    "install_00_java",
    "install_01_hadoop",
    "install_02_env",
    "install_03_confs",
    "install_04_hdfs_dirs",
    "install_05_ssh",
    "start_service",
    "install_all",
    "all_in_one",
]


def install_all():
    """Run every install step."""
    install_00_java()
    install_01_hadoop()
    install_02_env()
    install_03_confs()
    install_04_hdfs_dirs()
    install_05_ssh()


def start():
    """Start service."""
    start_service()


def all_in_one():
    """Deploy all components and start service."""
    install_all()
    start()
