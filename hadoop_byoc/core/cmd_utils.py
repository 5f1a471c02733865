"""Command utilities for hadoop_byoc."""

import functools
from typing import Callable, Optional, Union

from pyinfra import host
from pyinfra.facts.files import Directory, File

from hadoop_byoc.core.logging import get_logger

logger = get_logger(__name__)

PathSpec = Union[str, Callable[[], str]]


def host_path_exists(path: str) -> bool:
    """True if ``path`` exists on the target host as a file or a directory."""
    return bool(host.get_fact(File, path=path) or host.get_fact(Directory, path=path))


def idempotent_by(
    file_path: Optional[PathSpec] = None,
    func: Optional[Callable[[], bool]] = None,
    reason: Optional[str] = None,
) -> Callable:
    """
    Decorator that skips a deploy step based on the state of the target host.

    The condition can be either:
    - A path on the host (or a callable returning one): if it exists, the step is skipped
    - A function: if the function returns True, the step is skipped

    The check runs while pyinfra prepares the deploy, so it sees the host as
    it was before any operation of this run executed.

    Args:
        file_path: Path on the target host. If it exists, prevents step execution.
        func: Function that returns bool. If True, prevents step execution.
        reason: Message logged when the step is skipped.

    Usage:
        @idempotent_by(file_path=lambda: f"{settings.HADOOP_DIR}/bin/hdfs")
        def install_hadoop():
            pass

    Raises:
        ValueError: If neither file_path nor func is provided, or if both are provided.
    """
    if file_path is None and func is None:
        raise ValueError("Either file_path or func must be provided")

    if file_path is not None and func is not None:
        raise ValueError("Only one of file_path or func should be provided")

    def decorator(wrapped_func: Callable) -> Callable:
        @functools.wraps(wrapped_func)
        def wrapper(*args, **kwargs):
            if file_path is not None:
                path = file_path() if callable(file_path) else file_path
                if host_path_exists(path):
                    logger.info(reason or "Skipping step, path exists", step=wrapped_func.__name__, path=path)
                    return None

            if func is not None and func():
                logger.info(reason or "Skipping step, condition met", step=wrapped_func.__name__)
                return None

            return wrapped_func(*args, **kwargs)

        return wrapper

    return decorator
