"""Thin wrapper around Jinja2 for rendering service definition files."""

from __future__ import annotations

from typing import Any, Dict, Iterable

from jinja2 import BaseLoader, Environment, StrictUndefined


def quote_arg(value: str) -> str:
    """Wrap a single argument in double quotes, escaping embedded quotes.

    Backslashes are passed through unescaped, so an argument ending in ``\\``
    or containing ``\\"`` does not survive the shell intact. Job files written
    by earlier releases quote the same way.
    """
    return '"' + value.replace('"', '\\"') + '"'


def quote_args(values: Iterable[str]) -> str:
    """Render an argument list as ` "a" "b"` (leading space per argument)."""
    return "".join(" " + quote_arg(v) for v in values)


_ENV = Environment(
    loader=BaseLoader(),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
    autoescape=False,
)
_ENV.filters["cmd"] = quote_arg
_ENV.filters["quote_args"] = quote_args


def render_template(template: str, context: Dict[str, Any]) -> str:
    tmpl = _ENV.from_string(template)
    return tmpl.render(**context)
