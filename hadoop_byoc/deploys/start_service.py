"""Start service for hadoop-byoc."""

from pyinfra import host
from pyinfra.facts.files import File

from hadoop_byoc.core.config import settings
from hadoop_byoc.core.deploy_utils import run_script
from hadoop_byoc.core.host_facts import java_home
from hadoop_byoc.core.logging import get_logger

logger = get_logger(__name__)


def namenode_formatted() -> bool:
    return bool(host.get_fact(File, path=f"{settings.HDFS_NAME_DIR}/current/VERSION"))


def start_service():
    """Format the NameNode when needed, then start HDFS and YARN."""
    format_namenode = settings.NAMENODE_REFORMAT or not namenode_formatted()
    if not format_namenode:
        logger.info("NameNode already formatted, skipping format", name_dir=settings.HDFS_NAME_DIR)

    logger.info("Starting Hadoop services")
    run_script(
        "resources/scripts/start_hadoop.sh",
        name="Start Hadoop services",
        envs={
            "HADOOP_HOME": settings.HADOOP_DIR,
            "JAVA_HOME": java_home(),
            "FORMAT_NAMENODE": "yes" if format_namenode else "no",
        },
    )
