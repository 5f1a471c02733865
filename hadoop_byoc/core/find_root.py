import os
import subprocess
from pathlib import Path

from dotenv import find_dotenv

# Cache for project root path
_project_root_cache = None

# Checkout layout: <root>/hadoop_byoc/core/find_root.py
_PACKAGE_ROOT = Path(__file__).resolve().parents[2]


def find_git_root() -> Path | None:
    try:
        git_root = subprocess.check_output(
            ["git", "rev-parse", "--show-toplevel"],
            stderr=subprocess.DEVNULL,
            text=True,
        ).strip()
    except (OSError, subprocess.CalledProcessError):
        return None
    return Path(git_root) if git_root else None


def find_dotenv_path() -> Path | None:
    dotenv_path = find_dotenv(filename=".env.common", usecwd=True, raise_error_if_not_found=False)
    if not dotenv_path:
        return None
    return Path(dotenv_path)


def find_project_root() -> Path:
    """
    Returns the directory holding the deploy resources.

    Lookup order: HADOOP_BYOC_PATH, parent of .env.common, the checkout the
    package was imported from, git root. The result is cached after the
    first call.
    """
    global _project_root_cache

    if _project_root_cache is not None:
        return _project_root_cache

    # 1. Use HADOOP_BYOC_PATH if set
    project_root = os.getenv("HADOOP_BYOC_PATH")
    if project_root:
        _project_root_cache = Path(project_root)
        return _project_root_cache

    # 2. Use .env.common path
    dotenv_path = find_dotenv_path()
    if dotenv_path:
        _project_root_cache = dotenv_path.parent
        return _project_root_cache

    # 3. Use the checkout this package lives in
    if (_PACKAGE_ROOT / "resources").is_dir():
        _project_root_cache = _PACKAGE_ROOT
        return _project_root_cache

    # 4. Use git root, then the working directory
    _project_root_cache = find_git_root() or Path.cwd()
    return _project_root_cache


def reset_project_root_cache() -> None:
    global _project_root_cache
    _project_root_cache = None


if __name__ == "__main__":
    print("Project root:", find_project_root())
