from contextlib import ExitStack
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from hadoop_byoc.core.config import settings as _settings

HOST_MODULES = [
    "hadoop_byoc.core.host_facts",
    "hadoop_byoc.core.cmd_utils",
    "hadoop_byoc.deploys.hadoop",
    "hadoop_byoc.deploys.env_profile",
    "hadoop_byoc.deploys.hdfs_dirs",
    "hadoop_byoc.deploys.ssh",
    "hadoop_byoc.deploys.start_service",
]

OPERATION_MODULES = {
    "hadoop_byoc.deploys.java": ["apt", "server"],
    "hadoop_byoc.deploys.hadoop": ["files", "server"],
    "hadoop_byoc.deploys.env_profile": ["files", "server"],
    "hadoop_byoc.deploys.conf_overlay": ["files"],
    "hadoop_byoc.deploys.hdfs_dirs": ["files", "server"],
    "hadoop_byoc.deploys.ssh": ["apt", "files", "server", "systemd"],
    "hadoop_byoc.core.deploy_utils": ["server"],
}


class FakeHost:
    """Answers the pyinfra facts the deploys ask for from plain attributes."""

    def __init__(self):
        self.home = "/home/alice"
        self.user = "alice"
        self.shell = "bash"
        self.arch = "amd64"
        self.files = set()
        self.dirs = set()
        self.groups = ["alice"]
        self.users = {"alice": {"group": "alice", "groups": []}}
        self.grep_results = {}
        self.authorized = False

    def get_fact(self, fact, **kwargs):
        name = fact.__name__
        if name == "Home":
            return self.home
        if name == "User":
            return self.user
        if name == "Groups":
            return list(self.groups)
        if name == "Users":
            return dict(self.users)
        if name == "File":
            return {"mode": 644} if kwargs["path"] in self.files else None
        if name == "Directory":
            return {"mode": 755} if kwargs["path"] in self.dirs else None
        if name == "FindInFile":
            return self.grep_results.get(kwargs["path"])
        if name == "Command":
            command = kwargs["command"]
            if "basename" in command:
                return self.shell
            if "dpkg --print-architecture" in command:
                return self.arch
            if "grep -qxFf" in command:
                return "present" if self.authorized else "absent"
        raise AssertionError(f"Unexpected fact {name} {kwargs}")


@pytest.fixture
def fake_host():
    fake = FakeHost()
    with ExitStack() as stack:
        for module in HOST_MODULES:
            stack.enter_context(patch(f"{module}.host", fake))
        yield fake


@pytest.fixture
def ops():
    # Children of one parent so the order across operation modules is kept in parent.mock_calls
    parent = MagicMock()
    mocks = SimpleNamespace(
        parent=parent,
        files=parent.files,
        server=parent.server,
        apt=parent.apt,
        systemd=parent.systemd,
    )
    with ExitStack() as stack:
        for module, names in OPERATION_MODULES.items():
            for op_module in names:
                stack.enter_context(patch(f"{module}.{op_module}", getattr(mocks, op_module)))
        yield mocks


@pytest.fixture
def settings(monkeypatch):
    """The settings singleton; attributes set through monkeypatch are restored after the test."""
    monkeypatch.setattr(_settings, "HADOOP_USER", None)
    monkeypatch.setattr(_settings, "JAVA_HOME", None)
    monkeypatch.setattr(_settings, "SSH_ENABLE_ON_BOOT", False)
    monkeypatch.setattr(_settings, "NAMENODE_REFORMAT", False)
    monkeypatch.setattr(_settings, "HADOOP_DIR", "/usr/local/hadoop")
    monkeypatch.setattr(_settings, "HADOOP_VERSION", "3.4.0")
    return _settings


def op_names(op) -> list:
    """Names of every operation queued on a mocked pyinfra function."""
    return [c.kwargs.get("name") for c in op.call_args_list]


def shell_commands(server) -> list:
    commands = []
    for c in server.shell.call_args_list:
        commands.extend(c.kwargs["commands"])
    return commands
