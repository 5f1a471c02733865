import subprocess

import pytest

from hadoop_byoc.core.deploy_utils import render_script
from hadoop_byoc.deploys.start_service import start_service


def queued_script(ops):
    call = ops.server.shell.call_args
    assert call.kwargs["name"] == "Start Hadoop services"
    return call.kwargs["commands"][0]


def test_fresh_namenode_is_formatted(fake_host, ops, settings):
    start_service()

    script = queued_script(ops)
    assert "export HADOOP_HOME=/usr/local/hadoop" in script
    assert "export JAVA_HOME=/usr/lib/jvm/java-11-openjdk-amd64" in script
    assert "export FORMAT_NAMENODE=yes" in script
    assert script.index("namenode -format") < script.index("start-dfs.sh") < script.index("start-yarn.sh")


def test_formatted_namenode_is_kept(fake_host, ops, settings):
    fake_host.files.add("/usr/local/hadoop/hdfs/name/current/VERSION")

    start_service()

    assert "export FORMAT_NAMENODE=no" in queued_script(ops)


def test_reformat_forced(fake_host, ops, settings, monkeypatch):
    fake_host.files.add("/usr/local/hadoop/hdfs/name/current/VERSION")
    monkeypatch.setattr(settings, "NAMENODE_REFORMAT", True)

    start_service()

    assert "export FORMAT_NAMENODE=yes" in queued_script(ops)


def write_stub(path, exit_code=0):
    """Executable that records how it was called, then exits with ``exit_code``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f'#!/bin/sh\necho "{path.name} $*" >> "$HADOOP_HOME/calls.log"\nexit {exit_code}\n')
    path.chmod(0o755)


@pytest.fixture
def hadoop_home(tmp_path):
    home = tmp_path / "hadoop"
    write_stub(home / "bin" / "hdfs")
    write_stub(home / "sbin" / "start-dfs.sh")
    write_stub(home / "sbin" / "start-yarn.sh")
    return home


def run_start_script(hadoop_home, format_namenode="yes"):
    script = render_script(
        "resources/scripts/start_hadoop.sh",
        envs={"HADOOP_HOME": str(hadoop_home), "JAVA_HOME": "/usr/lib/jvm/java-11", "FORMAT_NAMENODE": format_namenode},
    )
    return subprocess.run(["sh", "-c", script], capture_output=True, text=True)


def recorded_calls(hadoop_home):
    log = hadoop_home / "calls.log"
    return log.read_text().splitlines() if log.exists() else []


def test_start_script_runs_format_dfs_and_yarn(hadoop_home):
    result = run_start_script(hadoop_home)

    assert result.returncode == 0, result.stdout
    assert recorded_calls(hadoop_home) == ["hdfs namenode -format -force", "start-dfs.sh ", "start-yarn.sh "]


def test_start_script_stops_at_failed_dfs_start(hadoop_home):
    write_stub(hadoop_home / "sbin" / "start-dfs.sh", exit_code=3)

    result = run_start_script(hadoop_home)

    assert result.returncode == 1
    assert "Failed to start Hadoop services: start-dfs.sh" in result.stdout
    assert [c for c in recorded_calls(hadoop_home) if c.startswith("start-yarn.sh")] == []


def test_start_script_stops_at_failed_format(hadoop_home):
    write_stub(hadoop_home / "bin" / "hdfs", exit_code=1)

    result = run_start_script(hadoop_home)

    assert result.returncode == 1
    assert "Failed to start Hadoop services: namenode format" in result.stdout
    assert recorded_calls(hadoop_home) == ["hdfs namenode -format -force"]


def test_start_script_without_format_never_calls_hdfs(hadoop_home):
    result = run_start_script(hadoop_home, format_namenode="no")

    assert result.returncode == 0
    assert [c for c in recorded_calls(hadoop_home) if c.startswith("hdfs")] == []
    assert recorded_calls(hadoop_home) == ["start-dfs.sh ", "start-yarn.sh "]
