"""Numbered install steps for hadoop-byoc, in the order they must run."""

from hadoop_byoc.deploys.conf_overlay import install_confs
from hadoop_byoc.deploys.env_profile import configure_env
from hadoop_byoc.deploys.hadoop import install_hadoop
from hadoop_byoc.deploys.hdfs_dirs import provision_hdfs_dirs
from hadoop_byoc.deploys.java import install_java
from hadoop_byoc.deploys.ssh import setup_ssh


def install_00_java():
    """Install the Java runtime."""
    install_java()


def install_01_hadoop():
    """Download (or reuse) and extract the Hadoop tarball."""
    install_hadoop()


def install_02_env():
    """Write Hadoop variables into the shell profile."""
    configure_env()


def install_03_confs():
    """Copy the configuration overlay."""
    install_confs()


def install_04_hdfs_dirs():
    """Create HDFS/log directories for the Hadoop user."""
    provision_hdfs_dirs()


def install_05_ssh():
    """Passwordless SSH to localhost."""
    setup_ssh()
