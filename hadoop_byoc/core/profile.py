"""Shell profile handling: which file to edit and what to put in it."""

import enum
import os
import shlex
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from hadoop_byoc.core.find_root import find_project_root

# Written as the first line of the block; its presence means the profile is done.
PROFILE_MARKER = "# Hadoop"


class ShellKind(str, enum.Enum):
    BASH = "bash"
    FISH = "fish"

    @property
    def profile_relpath(self) -> str:
        if self is ShellKind.FISH:
            return ".config/fish/config.fish"
        return ".bashrc"

    def profile_path(self, home: str) -> str:
        return f"{home.rstrip('/')}/{self.profile_relpath}"

    def reload_command(self, profile_path: str) -> str:
        source = shlex.quote(f"source {profile_path}")
        return f"{self.value} -c {source}"


def detect_shell(shell: Optional[str]) -> Optional[ShellKind]:
    """Map a $SHELL value (path or bare name) to a supported shell, else None."""
    if not shell:
        return None
    name = os.path.basename(shell.strip())
    try:
        return ShellKind(name)
    except ValueError:
        return None


def shell_name(shell: Optional[str]) -> str:
    return os.path.basename((shell or "").strip())


def has_marker(lines) -> bool:
    """``lines`` is what a grep for the marker returned; None when the file is missing."""
    return any(PROFILE_MARKER in line for line in lines or ())


def render_env_block(kind: ShellKind, hadoop_dir: str, java_home: str) -> str:
    env = Environment(
        loader=FileSystemLoader(str(find_project_root() / "resources" / "profile")),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )
    template = env.get_template(f"{kind.value}.j2")
    return template.render(hadoop_dir=hadoop_dir, java_home=java_home)
