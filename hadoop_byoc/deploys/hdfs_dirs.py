"""HDFS storage and log directories owned by the Hadoop user."""

from pyinfra import host
from pyinfra.facts.server import Groups, Users
from pyinfra.operations import files, server

from hadoop_byoc.core.config import settings
from hadoop_byoc.core.errors import UnknownUserError
from hadoop_byoc.core.host_facts import hadoop_user
from hadoop_byoc.core.logging import get_logger

logger = get_logger(__name__)


def user_in_group(user_info: dict, group: str) -> bool:
    """Primary or supplementary membership, like ``id -nG`` reports it."""
    return user_info.get("group") == group or group in (user_info.get("groups") or [])


def ensure_group_membership(user: str, group: str) -> None:
    groups = host.get_fact(Groups) or []
    if group in groups:
        logger.info(f"Group {group} already exists.")
    else:
        logger.info(f"Group {group} does not exist. Creating group...")
        server.group(name=f"Create group {group}", group=group, present=True, _sudo=True)

    users = host.get_fact(Users) or {}
    if user not in users:
        raise UnknownUserError(user)

    if group in groups and user_in_group(users[user], group):
        logger.info(f"User {user} is already in group {group}.")
        return

    logger.info(f"Adding user {user} to group {group}...")
    server.shell(
        name=f"Add user {user} to group {group}",
        commands=[f"usermod -aG {group} {user}"],
        _sudo=True,
    )


def _own_tree(path: str, user: str, group: str, label: str) -> None:
    server.shell(
        name=f"Change ownership of {label} to {user}:{group}",
        commands=[f"chown -R {user}:{group} {path}"],
        _sudo=True,
    )
    server.shell(
        name=f"Set permissions for {label}",
        commands=[f"chmod -R 755 {path}"],
        _sudo=True,
    )


def provision_hdfs_dirs():
    """Create the name/data/log directories and hand them to the Hadoop user."""
    user = hadoop_user()
    group = user

    logger.info("Creating HDFS directories and changing ownership", user=user, group=group)
    for label, path in (("name", settings.HDFS_NAME_DIR), ("data", settings.HDFS_DATA_DIR)):
        files.directory(name=f"Create HDFS {label} directory", path=path, present=True, _sudo=True)

    ensure_group_membership(user, group)

    _own_tree(f"{settings.HDFS_DIR}/", user, group, "HDFS directories")

    files.directory(name="Create logs directory", path=settings.HADOOP_LOG_DIR, present=True, _sudo=True)
    _own_tree(f"{settings.HADOOP_LOG_DIR}/", user, group, "logs directory")
