import pytest

from touchgest.args import PROGRAM_NAME, parse_args, print_help, print_version


def test_no_arguments_is_client_mode():
    args = parse_args([])
    assert args.client_mode is True
    assert args.daemon_mode is False
    assert args.debug is False
    assert args.quiet is False
    assert args.exit is False
    assert (args.start_threshold, args.finish_threshold) == (-1, -1)


def test_daemon_mode_without_thresholds():
    args = parse_args(["--daemon"])
    assert args.daemon_mode is True
    assert args.client_mode is False
    assert (args.start_threshold, args.finish_threshold) == (-1, -1)


def test_daemon_mode_with_thresholds():
    args = parse_args(["--daemon", "10", "20.5"])
    assert args.start_threshold == 10.0
    assert args.finish_threshold == 20.5


def test_daemon_with_only_one_threshold_uses_defaults():
    args = parse_args(["--daemon", "10"])
    assert (args.start_threshold, args.finish_threshold) == (-1, -1)


@pytest.mark.parametrize(
    "argv",
    [["--daemon", "abc", "20"], ["--daemon", "10", "--debug"], ["--daemon", "1e999", "2"]],
)
def test_invalid_thresholds_use_defaults(argv):
    args = parse_args(argv)
    assert (args.start_threshold, args.finish_threshold) == (-1, -1)


def test_threshold_reads_numeric_prefix():
    args = parse_args(["--daemon", "5x", "7"])
    assert (args.start_threshold, args.finish_threshold) == (5.0, 7.0)


def test_thresholds_follow_daemon_anywhere():
    args = parse_args(["--debug", "--daemon", "1.5", "2.5"])
    assert args.debug is True
    assert (args.start_threshold, args.finish_threshold) == (1.5, 2.5)


def test_daemon_and_client_both_set():
    args = parse_args(["--daemon", "--client"])
    assert args.daemon_mode is True
    assert args.client_mode is True


def test_client_flag_ignores_numbers():
    args = parse_args(["--client", "10", "20"])
    assert args.client_mode is True
    assert (args.start_threshold, args.finish_threshold) == (-1, -1)


@pytest.mark.parametrize("flag", ["--debug", "-d"])
def test_debug_flags(flag):
    assert parse_args([flag]).debug is True


@pytest.mark.parametrize("flag", ["--quiet", "-q"])
def test_quiet_flags(flag):
    assert parse_args([flag]).quiet is True


@pytest.mark.parametrize("flag", ["--version", "-v"])
def test_version_flag_prints_and_exits(flag, capsys):
    args = parse_args([flag])
    assert args.exit is True
    out = capsys.readouterr().out
    assert out.startswith(PROGRAM_NAME)
    assert "Usage:" not in out


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help_flag_prints_usage(flag, capsys):
    args = parse_args([flag])
    assert args.exit is True
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert "--daemon" in out


def test_print_version_single_line(capsys):
    print_version()
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert out.rstrip("\n").endswith(".")


def test_print_help_starts_with_version(capsys):
    print_version()
    version = capsys.readouterr().out
    print_help()
    assert capsys.readouterr().out.startswith(version)


def test_default_argv_comes_from_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "--daemon", "3", "4"])
    args = parse_args()
    assert args.daemon_mode is True
    assert (args.start_threshold, args.finish_threshold) == (3.0, 4.0)