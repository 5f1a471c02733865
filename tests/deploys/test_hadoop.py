from hadoop_byoc.deploys.hadoop import install_hadoop
from tests.conftest import shell_commands


def test_uses_tarball_from_home(fake_host, ops, settings):
    fake_host.files.add("/home/alice/hadoop-3.4.0.tar.gz")

    install_hadoop()

    ops.files.download.assert_not_called()
    assert shell_commands(ops.server) == [
        "tar -xzf /home/alice/hadoop-3.4.0.tar.gz -C /usr/local",
        "mv /usr/local/hadoop-3.4.0 /usr/local/hadoop",
    ]


def test_uses_tarball_from_downloads(fake_host, ops, settings):
    fake_host.files.add("/home/alice/Downloads/hadoop-3.4.0.tar.gz")

    install_hadoop()

    ops.files.download.assert_not_called()
    assert shell_commands(ops.server)[0] == "tar -xzf /home/alice/Downloads/hadoop-3.4.0.tar.gz -C /usr/local"


def test_downloads_when_not_cached(fake_host, ops, settings):
    install_hadoop()

    download = ops.files.download.call_args.kwargs
    assert download["src"] == "https://downloads.apache.org/hadoop/common/hadoop-3.4.0/hadoop-3.4.0.tar.gz"
    assert download["dest"] == "/home/alice/hadoop-3.4.0.tar.gz"
    assert shell_commands(ops.server)[0] == "tar -xzf /home/alice/hadoop-3.4.0.tar.gz -C /usr/local"


def test_extract_and_move_run_as_root(fake_host, ops, settings):
    install_hadoop()

    assert all(c.kwargs["_sudo"] for c in ops.server.shell.call_args_list)


def test_skipped_when_already_installed(fake_host, ops, settings):
    fake_host.files.add("/usr/local/hadoop/bin/hdfs")

    install_hadoop()

    ops.files.download.assert_not_called()
    ops.server.shell.assert_not_called()
