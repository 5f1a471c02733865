"""Deploy utilities for hadoop-byoc."""

import shlex
from pathlib import Path
from typing import Any, Dict, Optional

from pyinfra.operations import server

from .config import load_dotenvs
from .find_root import find_project_root


def render_script(script_path: str, envs: Optional[Dict[str, Any]] = None) -> str:
    """
    Read a bash script from the project and prefix it with ``export`` lines.

    Args:
        script_path: Relative path to the script from project root (e.g., 'resources/scripts/start_hadoop.sh')
        envs: Variables to export before the script body. ``None`` values are left
            out and noted in a comment.
    """
    full_script_path = find_project_root() / script_path

    if not full_script_path.exists():
        raise FileNotFoundError(f"Script not found: {full_script_path}")

    script_content = full_script_path.read_text()

    env_prefix_lines = []
    for env_var, env_value in (envs or {}).items():
        if env_value is None:
            env_prefix_lines.append(f"# Warning: {env_var} not set")
        else:
            env_prefix_lines.append(f"export {env_var}={shlex.quote(str(env_value))}")

    if not env_prefix_lines:
        return script_content
    return "\n".join(env_prefix_lines) + "\n\n" + script_content


def run_script(
    script_path: str,
    envs: Optional[Dict[str, Any]] = None,
    name: Optional[str] = None,
    **op_kwargs,
) -> None:
    """
    Create a pyinfra operation that runs a bash script from the project with
    the given environment variables exported.

    Example:
        run_script(
            'resources/scripts/start_hadoop.sh',
            envs={'HADOOP_HOME': '/usr/local/hadoop', 'JAVA_HOME': java_home},
        )
    """
    load_dotenvs()
    script = render_script(script_path, envs)

    if name is None:
        name = f"Run script: {Path(script_path).name}"

    server.shell(name=name, commands=[script], **op_kwargs)
