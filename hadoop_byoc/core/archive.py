"""Locating and naming the Hadoop distribution tarball."""

from dataclasses import dataclass
from typing import Callable, List, Optional

from hadoop_byoc.core.config import Settings


@dataclass(frozen=True)
class ArchiveSpec:
    version: str
    tarball: str
    url: str
    install_dir: str
    extract_parent: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "ArchiveSpec":
        install_dir = settings.HADOOP_DIR.rstrip("/")
        extract_parent = install_dir.rsplit("/", 1)[0] or "/"
        return cls(
            version=settings.HADOOP_VERSION,
            tarball=settings.HADOOP_TAR,
            url=settings.HADOOP_URL,
            install_dir=install_dir,
            extract_parent=extract_parent,
        )

    @property
    def extracted_dir(self) -> str:
        """Directory the tarball unpacks to, before it is renamed."""
        return f"{self.extract_parent.rstrip('/')}/hadoop-{self.version}"

    def cache_candidates(self, home: str) -> List[str]:
        home = home.rstrip("/")
        return [f"{home}/{self.tarball}", f"{home}/Downloads/{self.tarball}"]

    def download_path(self, home: str) -> str:
        return self.cache_candidates(home)[0]


def find_cached_archive(spec: ArchiveSpec, home: str, exists: Callable[[str], bool]) -> Optional[str]:
    """First previously downloaded tarball, or None if a download is needed."""
    for candidate in spec.cache_candidates(home):
        if exists(candidate):
            return candidate
    return None
