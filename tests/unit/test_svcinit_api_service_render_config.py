"""Unit tests for rendering Upstart job files."""

import itertools

import pytest
from pydantic import ValidationError

from svcinit.api.service.Capabilities import Capabilities
from svcinit.api.service.ServiceDescription import ServiceDescription
from svcinit.api.service.ServiceError import RenderFailureError
from svcinit.api.service._upstart._render_config import (
    ExecStrategy,
    _render_config,
    _resolve_executable,
    _select_exec_strategy,
)

EXEC = "/some/path/to/exec"

EXPECTED_SETUID_JOB = """\
# test

description    "test"

start on filesystem or runlevel [2345]
stop on runlevel [!2345]

setuid myrmex

respawn
respawn limit 10 5
umask 022

console none

pre-start script
    test -x /some/path/to/exec || { stop; exit 0; }
end script

# Start
exec /some/path/to/exec
"""


def _desc(**kwargs) -> ServiceDescription:
    fields = {"name": "test", "display_name": "test", "description": "test", "executable": EXEC}
    fields.update(kwargs)
    return ServiceDescription(**fields)


def _caps(kill=False, setuid=True, ssd=True) -> Capabilities:
    return Capabilities(has_kill_stanza=kill, has_setuid=setuid, has_start_stop_daemon=ssd)


def _exec_lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.startswith("exec ")]


def test_render_upstart_1_4_with_user():
    text = _render_config(_desc(user_name="myrmex"), _caps(), EXEC)
    assert text == EXPECTED_SETUID_JOB


def test_render_is_deterministic():
    desc = _desc(user_name="svc", arguments=("a", 'b"c'), chroot="/srv", working_directory="/srv/app")
    caps = _caps(kill=True, setuid=False, ssd=False)
    assert _render_config(desc, caps, EXEC) == _render_config(desc, caps, EXEC)


def test_display_name_line_only_when_set():
    assert 'description    "test"' in _render_config(_desc(), _caps(), EXEC)
    assert "description    " not in _render_config(_desc(display_name=""), _caps(), EXEC)


def test_kill_stanza_follows_capability():
    assert "kill signal INT\n" in _render_config(_desc(), _caps(kill=True), EXEC)
    assert "kill signal" not in _render_config(_desc(), _caps(kill=False), EXEC)


def test_chroot_and_chdir_only_when_set():
    text = _render_config(_desc(chroot="/srv/jail", working_directory="/var/lib/app"), _caps(), EXEC)
    assert "chroot /srv/jail\n" in text
    assert "chdir /var/lib/app\n" in text

    plain = _render_config(_desc(), _caps(), EXEC)
    assert "chroot" not in plain
    assert "chdir" not in plain


def test_fixed_directives_always_present():
    text = _render_config(_desc(), _caps(kill=False, setuid=False, ssd=False), EXEC)
    for line in (
        "start on filesystem or runlevel [2345]",
        "stop on runlevel [!2345]",
        "respawn",
        "respawn limit 10 5",
        "umask 022",
        "console none",
        f"    test -x {EXEC} || {{ stop; exit 0; }}",
    ):
        assert line in text.splitlines()


def test_setuid_needs_user_and_capability():
    assert "setuid" not in _render_config(_desc(), _caps(setuid=True), EXEC)
    assert "setuid svc" in _render_config(_desc(user_name="svc"), _caps(setuid=True), EXEC)
    assert "setuid" not in _render_config(_desc(user_name="svc"), _caps(setuid=False), EXEC)


def test_start_stop_daemon_wrapper():
    """User set, no setuid, daemon helper present -> start-stop-daemon with -c."""
    text = _render_config(_desc(user_name="svc", arguments=("-v",)), _caps(setuid=False, ssd=True), EXEC)
    assert _exec_lines(text) == [f'exec start-stop-daemon --start -c svc --exec {EXEC} "-v"']


def test_su_wrapper_without_daemon_helper():
    """User set, no setuid, no daemon helper -> su keeping argument boundaries."""
    text = _render_config(_desc(user_name="svc", arguments=("-v",)), _caps(setuid=False, ssd=False), EXEC)
    expected = "exec su -s /bin/sh -c 'exec \"$0\" \"$@\"' svc -- " + EXEC + ' "-v"'
    assert _exec_lines(text) == [expected]
    assert "start-stop-daemon" not in text


@pytest.mark.parametrize(
    ("user", "setuid", "ssd"),
    list(itertools.product(["", "svc"], [False, True], [False, True])),
)
def test_exactly_one_exec_strategy(user, setuid, ssd):
    desc = _desc(user_name=user)
    caps = _caps(kill=setuid, setuid=setuid, ssd=ssd)
    text = _render_config(desc, caps, EXEC)

    lines = _exec_lines(text)
    assert len(lines) == 1

    strategy = _select_exec_strategy(desc, caps)
    if not user:
        assert strategy is ExecStrategy.DIRECT
    elif setuid:
        assert strategy is ExecStrategy.SETUID
    elif ssd:
        assert strategy is ExecStrategy.START_STOP_DAEMON
    else:
        assert strategy is ExecStrategy.SU

    wrapped = strategy in (ExecStrategy.START_STOP_DAEMON, ExecStrategy.SU)
    assert lines[0].startswith(f"exec {EXEC}") is not wrapped


def test_arguments_are_quoted_individually():
    text = _render_config(_desc(arguments=("--name", "two words", 'say "hi"')), _caps(), EXEC)
    assert _exec_lines(text) == [f'exec {EXEC} "--name" "two words" "say \\"hi\\""']


def test_embedded_quote_does_not_end_argument():
    line = _exec_lines(_render_config(_desc(arguments=('a"b',)), _caps(), EXEC))[0]
    arg = line[len(f"exec {EXEC} "):]
    assert arg == '"a\\"b"'
    # Only the outer quotes are unescaped
    unescaped = [i for i, ch in enumerate(arg) if ch == '"' and (i == 0 or arg[i - 1] != "\\")]
    assert unescaped == [0, len(arg) - 1]


def test_all_false_and_all_true_corners_render():
    for caps in (_caps(False, False, False), _caps(True, True, True)):
        for user in ("", "svc"):
            text = _render_config(_desc(user_name=user, chroot="/c", working_directory="/w"), caps, EXEC)
            assert text.startswith("# test\n")
            assert text.endswith("\n")
            assert "{{" not in text and "{%" not in text


def test_render_requires_executable_path():
    with pytest.raises(RenderFailureError):
        _render_config(_desc(), _caps(), "")


def test_resolve_executable_accepts_executable_file(tmp_path):
    prog = tmp_path / "prog"
    prog.write_text("#!/bin/sh\n")
    prog.chmod(0o755)
    assert _resolve_executable(str(prog)) == str(prog.resolve())


def test_resolve_executable_rejects_missing(tmp_path):
    with pytest.raises(RenderFailureError, match="not found"):
        _resolve_executable(str(tmp_path / "missing"))


def test_resolve_executable_rejects_non_executable(tmp_path):
    prog = tmp_path / "prog"
    prog.write_text("data")
    prog.chmod(0o644)
    with pytest.raises(RenderFailureError, match="not executable"):
        _resolve_executable(str(prog))


def test_resolve_executable_rejects_directory(tmp_path):
    with pytest.raises(RenderFailureError, match="not a file"):
        _resolve_executable(str(tmp_path))


def test_line_break_cannot_add_directives():
    with pytest.raises(ValidationError):
        _desc(description="hello\nexec /bin/evil")


@pytest.mark.parametrize(
    "fields",
    [
        {"description": "hello\nexec /bin/evil"},
        {"chroot": "/srv\nexec /bin/evil"},
        {"arguments": ("ok", "x\nexec /bin/evil")},
    ],
)
def test_render_refuses_unvalidated_line_breaks(fields):
    base = {"name": "test", "display_name": "test", "description": "test", "executable": EXEC}
    desc = ServiceDescription.model_construct(**{**base, **fields})
    with pytest.raises(RenderFailureError, match="contains a line break"):
        _render_config(desc, _caps(), EXEC)
