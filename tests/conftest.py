"""Shared pytest configuration and fixtures for all tests."""

import json
import stat
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no real init system")
    config.addinivalue_line("markers", "integration: tests that run real subprocesses against a sandbox")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def write_script(path: Path, body: str) -> Path:
    """Write an executable /bin/sh script."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def make_script():
    """Fixture form of write_script for tests that need their own fake binaries."""
    return write_script


@pytest.fixture
def sandbox(tmp_path: Path) -> Path:
    """A fake root with an /etc/init directory and an executable program."""
    (tmp_path / "etc" / "init").mkdir(parents=True)
    write_script(tmp_path / "usr" / "bin" / "myapp", "exec sleep 30\n")
    return tmp_path


@pytest.fixture
def upstart_data(sandbox: Path) -> dict:
    """Upstart backend data pointing every path into the sandbox."""
    return {
        "config_dir": str(sandbox / "etc" / "init"),
        "init_path": str(sandbox / "sbin" / "init"),
        "initctl": str(sandbox / "sbin" / "initctl"),
        "start_stop_daemon_path": str(sandbox / "sbin" / "start-stop-daemon"),
        "udev_bridge_path": str(sandbox / "sbin" / "upstart-udev-bridge"),
        "restart_delay_secs": 0.0,
        "control_timeout_secs": 5.0,
    }


@pytest.fixture
def description_dict(sandbox: Path) -> dict:
    return {
        "name": "myapp",
        "display_name": "My App",
        "description": "Runs my app",
        "executable": str(sandbox / "usr" / "bin" / "myapp"),
        "arguments": ["--port", "8080"],
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture(upstart_data: dict, description_dict: dict, sandbox: Path) -> dict:
    """Minimal valid svcinit configuration dict, sandboxed."""
    return {
        "service": {"type": "upstart", "data": dict(upstart_data)},
        "description": dict(description_dict),
        "log": {"level": "DEBUG", "file": str(sandbox / "svcinit.log")},
    }


@pytest.fixture
def svcinit_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up SVCINIT_HOME with a minimal config file.

    Returns:
        Path to the svcinit home directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("SVCINIT_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict), encoding="utf-8")
    return home


# =============================================================================
# Test Helpers
# =============================================================================


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run
