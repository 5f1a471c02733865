"""Copy pre-edited Hadoop configuration files over the distribution defaults."""

from pathlib import Path
from typing import List

from pyinfra.operations import files

from hadoop_byoc.core.config import settings
from hadoop_byoc.core.host_facts import hadoop_user, java_home
from hadoop_byoc.core.logging import get_logger

logger = get_logger(__name__)

TEMPLATE_SUFFIX = ".j2"


def overlay_files(overlay_dir: Path) -> List[Path]:
    return sorted(p for p in overlay_dir.iterdir() if p.is_file() and not p.name.startswith("."))


def install_confs():
    """Upload every file of the overlay directory into HADOOP_CONF_DIR."""
    overlay_dir = settings.overlay_path()
    if not overlay_dir.is_dir():
        logger.info(f"Directory {settings.CONF_OVERLAY_DIR} not found. Skipping file copy.")
        return

    logger.info("Moving pre-edited Hadoop configuration files", source=str(overlay_dir))
    for subdir in sorted(p for p in overlay_dir.iterdir() if p.is_dir()):
        logger.warning("Skipping subdirectory of the overlay, only files are copied", path=str(subdir))
    conf_dir = settings.HADOOP_CONF_DIR

    for path in overlay_files(overlay_dir):
        if path.name.endswith(TEMPLATE_SUFFIX):
            dest = f"{conf_dir}/{path.name[: -len(TEMPLATE_SUFFIX)]}"
            files.template(
                name=f"Render {path.name} into {conf_dir}",
                src=str(path),
                dest=dest,
                _sudo=True,
                hadoop_dir=settings.HADOOP_DIR,
                hdfs_name_dir=settings.HDFS_NAME_DIR,
                hdfs_data_dir=settings.HDFS_DATA_DIR,
                hadoop_log_dir=settings.HADOOP_LOG_DIR,
                java_home=java_home(),
                hadoop_user=hadoop_user(),
            )
        else:
            files.put(
                name=f"Copy {path.name} into {conf_dir}",
                src=str(path),
                dest=f"{conf_dir}/{path.name}",
                _sudo=True,
            )
