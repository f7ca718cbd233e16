"""Unit tests for ServiceDescription."""

import pytest
from pydantic import ValidationError

from svcinit.api.service.ServiceDescription import ServiceDescription


def test_defaults():
    desc = ServiceDescription(name="app", executable="/usr/bin/app")
    assert desc.arguments == ()
    assert desc.user_name == ""
    assert desc.options == {}
    assert desc.user_service is False
    assert str(desc) == "app"


def test_arguments_keep_order():
    desc = ServiceDescription(name="app", executable="/usr/bin/app", arguments=["b", "a", "c"])
    assert desc.arguments == ("b", "a", "c")


def test_immutable():
    desc = ServiceDescription(name="app", executable="/usr/bin/app")
    with pytest.raises(ValidationError):
        desc.name = "other"  # type: ignore[misc]


@pytest.mark.parametrize("name", ["", "a/b", "my app", "tab\tname"])
def test_invalid_names(name):
    with pytest.raises(ValidationError):
        ServiceDescription(name=name, executable="/usr/bin/app")


def test_executable_required():
    with pytest.raises(ValidationError):
        ServiceDescription(name="app", executable="")


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        ServiceDescription(name="app", executable="/usr/bin/app", label="x")


def test_option_bag():
    desc = ServiceDescription(name="app", executable="/usr/bin/app", options={"user_service": True, "x": 1})
    assert desc.user_service is True
    assert desc.option("x") == 1
    assert desc.option("missing", "default") == "default"


@pytest.mark.parametrize(
    "field", ["display_name", "description", "executable", "user_name", "working_directory", "chroot"]
)
@pytest.mark.parametrize("value", ["hello\nexec /bin/evil", "a\rb"])
def test_line_breaks_rejected(field, value):
    fields = {"name": "app", "executable": "/usr/bin/app", field: value}
    with pytest.raises(ValidationError, match=f"description.{field} must not contain line breaks"):
        ServiceDescription(**fields)


def test_line_break_in_argument_rejected():
    with pytest.raises(ValidationError, match=r"arguments\[1\] must not contain line breaks"):
        ServiceDescription(name="app", executable="/usr/bin/app", arguments=["ok", "x\nexec /bin/evil"])
