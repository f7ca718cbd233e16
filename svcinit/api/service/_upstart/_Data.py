"""Upstart specific service configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """Upstart backend configuration data.

    Defaults match a stock Upstart host; override them to point at a sandbox.
    """

    model_config = ConfigDict(extra="forbid")

    config_dir: str = Field("/etc/init", description="Directory holding <name>.conf job files")
    init_path: str = Field("/sbin/init", description="Init binary queried with --version")
    initctl: str = Field("initctl", description="Control command used for start/stop/status")
    start_stop_daemon_path: str = Field(
        "/sbin/start-stop-daemon", description="Daemon helper used to drop privileges when setuid is unavailable"
    )
    udev_bridge_path: str = Field("/sbin/upstart-udev-bridge", description="Binary whose presence marks an Upstart host")
    restart_delay_secs: float = Field(0.05, ge=0, description="Pause between stop and start on restart")
    control_timeout_secs: float = Field(30.0, gt=0, description="Timeout for control and probe commands")

    @field_validator("config_dir", "init_path", "initctl")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("service.data paths must not be empty when service.type is 'upstart'")
        return v
