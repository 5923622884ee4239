from __future__ import annotations

"""
lzi Commands

Replays each construction pattern from the command line.
"""

import typing as t
import typer
from lzi.logging import REVERSE_LOGLEVEL_MAPPING
from . import demos

cmd = typer.Typer(no_args_is_help = True, help = "LZI CLI")
cmd.add_typer(demos.cmd, name="run", help = "Run a construction pattern")


def validate_log_level(value: t.Optional[str]) -> t.Optional[str]:
    if value is None: return value
    level = value.upper()
    if level not in REVERSE_LOGLEVEL_MAPPING:
        choices = ', '.join(sorted(REVERSE_LOGLEVEL_MAPPING))
        raise typer.BadParameter(f"'{value}' is not one of: {choices}")
    return level


@cmd.callback()
def configure(
    log_level: t.Optional[str] = typer.Option(None, '--log-level', callback = validate_log_level, help = "Override LZI_LOG_LEVEL"),
):
    from lzi.configs import get_settings
    from lzi.logging import change_logger_level
    change_logger_level(log_level or get_settings().log_level)


def main():
    cmd()

if __name__ == '__main__':
    main()
