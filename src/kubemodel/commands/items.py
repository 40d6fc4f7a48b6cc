import sys
from pathlib import Path

import yaml
from loguru import logger
from typer import Argument, Exit

from kubemodel.resources import MalformedResponseError, Status
from . import app, resource_type_for


@app.command()
def items(
    kind: str = Argument(..., help="The resource kind of the collection, e.g. `Pod`."),
    file: str = Argument(..., help="A JSON or YAML file with the collection response, or `-` to read from stdin."),
) -> None:
    """
    Decode a collection response and print `namespace/name` of each item in the order returned by the server. Items
    without a name are printed as `-`.
    """

    resource_type = resource_type_for(kind)

    try:
        content = sys.stdin.read() if file == "-" else Path(file).read_text()
        payload = yaml.safe_load(content)
    except (OSError, yaml.YAMLError) as exc:
        logger.error("Cannot read {} collection response from '{}': {}", resource_type.kind(), file, exc)
        raise Exit(1)

    try:
        if isinstance(payload, dict) and payload.get("kind") == "Status":
            status = Status.load(payload)
            logger.error("The server responded with {} ({}): {}", status.status, status.reason, status.message)
            raise Exit(1)
        resources = resource_type.load_list(payload)
    except MalformedResponseError as exc:
        logger.error("Malformed {} collection response: {}", resource_type.kind(), exc)
        raise Exit(1)

    for resource in resources:
        metadata = resource.metadata  # type: ignore[attr-defined]
        name = metadata.name or "-"
        print(f"{metadata.namespace}/{name}" if metadata.namespace else name)
