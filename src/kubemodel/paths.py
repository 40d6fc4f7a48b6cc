"""
Build collection and object paths for resource types.
"""

from urllib.parse import urlencode

from kubemodel.query import ListQuery
from kubemodel.resources import Resource


def resource_path(
    resource_type: type[Resource],
    namespace: str | None = None,
    name: str | None = None,
    *,
    all_namespaces: bool = False,
) -> str:
    """
    Return the path of the collection of *resource_type*, or of the object *name* in it.

        resource_path(Pod)                          # /api/v1/namespaces/default/pods
        resource_path(Deployment, "prod", "web")    # /apis/apps/v1/namespaces/prod/deployments/web
        resource_path(Node, name="node-1")          # /api/v1/nodes/node-1
        resource_path(Pod, all_namespaces=True)     # /api/v1/pods

    Args:
        resource_type: The resource class.
        namespace: The namespace. Falls back to the default namespace of the resource type.
        name: The name of a single object.
        all_namespaces: Address the collection across all namespaces.
    Raises:
        ValueError: If a namespace is given for a cluster-scoped resource type, or if *all_namespaces* is combined
            with a *namespace* or a *name*.
    """

    kind = resource_type.kind()

    if all_namespaces and (namespace is not None or name is not None):
        raise ValueError("all_namespaces cannot be combined with a namespace or name")

    if not resource_type.namespaced():
        if namespace is not None:
            raise ValueError(f"Cannot select a namespace for cluster-scoped kind {kind}")
        path = f"{resource_type.api_root()}/{kind.route}"
    elif all_namespaces:
        path = f"{resource_type.api_root()}/{kind.route}"
    else:
        namespace = namespace or resource_type.default_namespace()
        path = f"{resource_type.api_root()}/namespaces/{namespace}/{kind.route}"

    if name is not None:
        path = f"{path}/{name}"
    return path


def resource_url(
    server: str,
    resource_type: type[Resource],
    namespace: str | None = None,
    name: str | None = None,
    query: ListQuery | None = None,
    *,
    all_namespaces: bool = False,
) -> str:
    """
    Join the *server* base URL with the path from `resource_path()` and the rendered *query*.
    """

    url = server.rstrip("/") + resource_path(resource_type, namespace, name, all_namespaces=all_namespaces)
    pairs = query.render() if query is not None else []
    if pairs:
        url = f"{url}?{urlencode(pairs)}"
    return url
