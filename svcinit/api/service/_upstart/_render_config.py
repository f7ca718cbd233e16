"""Render an Upstart job file from a service description."""

import os
from enum import Enum
from pathlib import Path

from ....templating import render_template
from ..Capabilities import Capabilities
from ..ServiceDescription import ServiceDescription, has_line_break
from ..ServiceError import RenderFailureError


class ExecStrategy(str, Enum):
    """How the final `exec` line launches the program."""

    DIRECT = "direct"
    SETUID = "setuid"
    START_STOP_DAEMON = "start-stop-daemon"
    SU = "su"


# The job stops with INT so the program's stop handler gets a chance to run.
UPSTART_SCRIPT = """\
# {{ description }}

{% if display_name %}
description    "{{ display_name }}"

{% endif %}
{% if has_kill_stanza %}
kill signal INT
{% endif %}
{% if chroot %}
chroot {{ chroot }}
{% endif %}
{% if working_directory %}
chdir {{ working_directory }}
{% endif %}
start on filesystem or runlevel [2345]
stop on runlevel [!2345]

{% if strategy == "setuid" %}
setuid {{ user_name }}

{% endif %}
respawn
respawn limit 10 5
umask 022

console none

pre-start script
    test -x {{ path }} || { stop; exit 0; }
end script

# Start
{% if strategy == "start-stop-daemon" %}
exec start-stop-daemon --start -c {{ user_name }} --exec {{ path }}{{ arguments|quote_args }}
{% elif strategy == "su" %}
exec su -s /bin/sh -c 'exec "$0" "$@"' {{ user_name }} -- {{ path }}{{ arguments|quote_args }}
{% else %}
exec {{ path }}{{ arguments|quote_args }}
{% endif %}
"""


def _select_exec_strategy(description: ServiceDescription, capabilities: Capabilities) -> ExecStrategy:
    if not description.user_name:
        return ExecStrategy.DIRECT
    if capabilities.has_setuid:
        return ExecStrategy.SETUID
    if capabilities.has_start_stop_daemon:
        return ExecStrategy.START_STOP_DAEMON
    return ExecStrategy.SU


def _resolve_executable(executable: str) -> str:
    """Return the absolute path of an existing executable file.

    Raises:
        RenderFailureError: If the path is missing, not a file, or not executable
    """
    if not executable:
        raise RenderFailureError("Executable path is empty")
    path = Path(executable).expanduser()
    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise RenderFailureError(f"Executable not found: {executable}") from e
    if not resolved.is_file():
        raise RenderFailureError(f"Executable is not a file: {resolved}")
    if not os.access(resolved, os.X_OK):
        raise RenderFailureError(f"Executable is not executable: {resolved}")
    return str(resolved)


def _render_config(description: ServiceDescription, capabilities: Capabilities, executable_path: str) -> str:
    """Render the job file text. Pure: touches neither the filesystem nor the host."""
    if not executable_path:
        raise RenderFailureError(f"No executable path for service {description.name!r}")

    strategy = _select_exec_strategy(description, capabilities)
    context = {
        "description": description.description,
        "display_name": description.display_name,
        "chroot": description.chroot,
        "working_directory": description.working_directory,
        "user_name": description.user_name,
        "arguments": list(description.arguments),
        "path": executable_path,
        "has_kill_stanza": capabilities.has_kill_stanza,
        "strategy": strategy.value,
    }
    # Descriptions built with model_construct() skip validation
    for key, value in context.items():
        values = value if isinstance(value, list) else [value]
        if any(isinstance(v, str) and has_line_break(v) for v in values):
            raise RenderFailureError(f"{key} for service {description.name!r} contains a line break")
    return render_template(UPSTART_SCRIPT, context)
