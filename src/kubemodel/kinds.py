"""
The closed set of resource kinds known to `kubemodel` and their REST collection routes.
"""

from enum import Enum, unique


@unique
class Kind(Enum):
    """
    A resource kind. The member name is the canonical kind name as it appears in the `kind` field of a manifest, the
    member value is the lowercase, plural collection route of the kind under its API root.

    Because the route is the member value, every kind has exactly one route by construction, and `@unique` rejects
    two kinds sharing a route at import time.
    """

    ConfigMap = "configmaps"
    DaemonSet = "daemonsets"
    Deployment = "deployments"
    NetworkPolicy = "networkpolicies"
    Node = "nodes"
    Pod = "pods"
    Secret = "secrets"
    Service = "services"

    def __str__(self) -> str:
        # Always the canonical name, never the route. Use `route()` to get the path segment.
        return self.name

    @property
    def route(self) -> str:
        """
        The REST collection path segment of the kind, e.g. `networkpolicies` for `NetworkPolicy`.
        """

        return self.value

    @staticmethod
    def parse(value: str) -> "Kind":
        """
        Look up a kind by its canonical name or its route, case-insensitively. Accepts `Pod`, `pod` and `pods`.

        Raises:
            ValueError: If *value* names no known kind.
        """

        lowered = value.lower()
        for kind in Kind:
            if lowered in (kind.name.lower(), kind.value):
                return kind
        raise ValueError(f"Unsupported resource kind: {value!r}")


def route(kind: Kind) -> str:
    """
    Return the REST collection path segment for *kind*.
    """

    return kind.route


assert all(kind.value and kind.value == kind.value.lower() for kind in Kind), "Kind routes must be lowercase"
