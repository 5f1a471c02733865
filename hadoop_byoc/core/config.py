"""Configuration management for hadoop-byoc."""

import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hadoop_byoc.core.find_root import find_project_root

# Import warnings filter to suppress non-critical container warnings
from . import warnings_filter  # noqa: F401

_CURRENT_ENV = os.getenv("ENV", "dev")

# Global flag to track if dotenvs have been loaded
_dotenvs_loaded = False


def load_dotenvs() -> None:
    """
    Load environment variables from .env files.

    Loads variables from:
    - .env.common
    - .env.{ENV} (where ENV defaults to 'dev')

    Values already present in the environment win, so answers handed down
    by the installer CLI are never overridden by a dotenv file.
    """
    global _dotenvs_loaded

    if _dotenvs_loaded:
        return

    load_dotenv(find_dotenv(".env.common", usecwd=True))
    load_dotenv(find_dotenv(f".env.{_CURRENT_ENV}", usecwd=True))

    _dotenvs_loaded = True


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env.common", f".env.{_CURRENT_ENV}"),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    ##### Logging #####
    LOG_LEVEL: str = "INFO"
    LOG_JSON_FORMAT: bool = False

    ##### Java #####
    JAVA_PACKAGE: str = "openjdk-11-jdk"
    JAVA_VERSION: int = 11
    JAVA_HOME: Optional[str] = None

    ##### Hadoop #####
    HADOOP_VERSION: str = "3.4.0"
    HADOOP_MIRROR: str = "https://downloads.apache.org/hadoop/common"
    HADOOP_DIR: str = "/usr/local/hadoop"
    HADOOP_USER: Optional[str] = None
    CONF_OVERLAY_DIR: str = "hadoop_confs"
    NAMENODE_REFORMAT: bool = False

    ##### SSH #####
    SSH_ENABLE_ON_BOOT: bool = False

    ##### Web consoles #####
    HDFS_WEB_PORT: int = 9870
    YARN_WEB_PORT: int = 8088

    @computed_field
    @property
    def HADOOP_TAR(self) -> str:
        return f"hadoop-{self.HADOOP_VERSION}.tar.gz"

    @computed_field
    @property
    def HADOOP_URL(self) -> str:
        return f"{self.HADOOP_MIRROR.rstrip('/')}/hadoop-{self.HADOOP_VERSION}/{self.HADOOP_TAR}"

    @computed_field
    @property
    def HADOOP_CONF_DIR(self) -> str:
        return f"{self.HADOOP_DIR}/etc/hadoop"

    @computed_field
    @property
    def HDFS_DIR(self) -> str:
        return f"{self.HADOOP_DIR}/hdfs"

    @computed_field
    @property
    def HDFS_NAME_DIR(self) -> str:
        return f"{self.HDFS_DIR}/name"

    @computed_field
    @property
    def HDFS_DATA_DIR(self) -> str:
        return f"{self.HDFS_DIR}/data"

    @computed_field
    @property
    def HADOOP_LOG_DIR(self) -> str:
        return f"{self.HADOOP_DIR}/logs"

    @computed_field
    @property
    def HDFS_WEB_URL(self) -> str:
        return f"http://localhost:{self.HDFS_WEB_PORT}/"

    @computed_field
    @property
    def YARN_WEB_URL(self) -> str:
        return f"http://localhost:{self.YARN_WEB_PORT}/"

    def java_home_for(self, dpkg_arch: str) -> str:
        """JAVA_HOME of the apt-installed OpenJDK, unless configured explicitly."""
        if self.JAVA_HOME:
            return self.JAVA_HOME
        return f"/usr/lib/jvm/java-{self.JAVA_VERSION}-openjdk-{dpkg_arch}"

    def overlay_path(self) -> Path:
        path = Path(self.CONF_OVERLAY_DIR).expanduser()
        if path.is_absolute():
            return path
        return find_project_root() / path


settings = Settings()
