"""Install Hadoop deployment for hadoop-byoc."""

from pyinfra import host
from pyinfra.facts.files import File
from pyinfra.operations import files, server

from hadoop_byoc.core.archive import ArchiveSpec, find_cached_archive
from hadoop_byoc.core.cmd_utils import idempotent_by
from hadoop_byoc.core.config import settings
from hadoop_byoc.core.host_facts import home_dir
from hadoop_byoc.core.logging import get_logger

logger = get_logger(__name__)


def _archive_exists(path: str) -> bool:
    return bool(host.get_fact(File, path=path))


@idempotent_by(
    file_path=lambda: f"{settings.HADOOP_DIR}/bin/hdfs",
    reason="Hadoop already installed, skipping download and extraction",
)
def install_hadoop():
    """Fetch the Hadoop tarball (local copy first) and unpack it to HADOOP_DIR."""
    spec = ArchiveSpec.from_settings(settings)
    home = home_dir()

    archive = find_cached_archive(spec, home, _archive_exists)
    if archive:
        logger.info("Hadoop tarball found locally, extracting", archive=archive)
    else:
        archive = spec.download_path(home)
        logger.info("Hadoop tarball not found locally, downloading from Apache", url=spec.url)
        files.download(
            name="Download Hadoop tarball",
            src=spec.url,
            dest=archive,
        )

    server.shell(
        name="Extract Hadoop tarball",
        commands=[f"tar -xzf {archive} -C {spec.extract_parent}"],
        _sudo=True,
    )

    server.shell(
        name=f"Move and rename Hadoop to {spec.install_dir}",
        commands=[f"mv {spec.extracted_dir} {spec.install_dir}"],
        _sudo=True,
    )
