from typing import Optional

from typer import Argument, BadParameter, Context, Option

from kubemodel.config import ClientConfig
from kubemodel.paths import resource_url
from . import app, resource_type_for


@app.command()
def url(
    ctx: Context,
    kind: str = Argument(..., help="The resource kind, e.g. `Pod`, `pod` or `pods`."),
    name: Optional[str] = Argument(None, help="The name of a single object."),
    namespace: Optional[str] = Option(None, "--namespace", "-n", help="The namespace to address."),
    all_namespaces: bool = Option(False, "--all-namespaces", "-A", help="Address all namespaces."),
    label_selector: Optional[str] = Option(None, help="Restrict the list by labels, e.g. `app=web`."),
    field_selector: Optional[str] = Option(None, help="Restrict the list by fields, e.g. `status.phase=Running`."),
    resource_version: Optional[str] = Option(None, help="List as of this resource version."),
    timeout: Optional[int] = Option(None, min=0, help="Server-side timeout of the request in seconds."),
) -> None:
    """
    Print the URL for a list or get request. Selectors and timeout default to the values in the configuration.
    """

    config: ClientConfig = ctx.obj
    resource_type = resource_type_for(kind)

    query = config.default_query()
    if label_selector is not None:
        query = query.with_label_selector(label_selector)
    if field_selector is not None:
        query = query.with_field_selector(field_selector)
    if resource_version is not None:
        query = query.with_resource_version(resource_version)
    if timeout is not None:
        query = query.with_timeout_seconds(timeout)

    if namespace is None and resource_type.namespaced() and not all_namespaces:
        namespace = config.namespace

    try:
        print(
            resource_url(config.server, resource_type, namespace, name, query, all_namespaces=all_namespaces)
        )
    except ValueError as exc:
        raise BadParameter(str(exc)) from exc
