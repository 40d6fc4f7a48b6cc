"""
Inspect resource kinds, build request URLs and decode collection responses of a Kubernetes-style API.
"""

from enum import Enum
from pathlib import Path
import sys
from typing import Any, Optional

from loguru import logger
from typer import BadParameter, Context, Option, Typer

from kubemodel.config import ClientConfig
from kubemodel.kinds import Kind
from kubemodel.resources import ListableResource, Resource


def new_typer(**kwargs: Any) -> Typer:
    return Typer(no_args_is_help=True, pretty_exceptions_enable=False, **kwargs)


app = new_typer(help=__doc__)


class LogLevel(str, Enum):
    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@app.callback()
def _callback(
    ctx: Context,
    log_level: LogLevel = Option(LogLevel.INFO, "--log-level", "-l", help="The log level to use."),
    config: Optional[Path] = Option(
        None,
        "--config",
        "-c",
        help=f"Path to the `{ClientConfig.FILENAME}` to use. If not set, it will be searched in the current directory "
        "and its parents.",
    ),
) -> None:
    logger.remove()
    logger.add(sys.stderr, level=log_level.name)
    ctx.obj = ClientConfig.load(config, required=config is not None)


def resource_type_for(kind: str) -> type[ListableResource]:
    """
    Resolve a kind name or route given on the command line to its resource class.
    """

    try:
        resource_type = Resource.for_kind(Kind.parse(kind))
    except ValueError as exc:
        raise BadParameter(str(exc), param_hint="KIND") from exc
    assert issubclass(resource_type, ListableResource), resource_type
    return resource_type


from . import items  # noqa: F401,E402
from . import kinds  # noqa: F401,E402
from . import url  # noqa: F401,E402


def main() -> None:
    app()
