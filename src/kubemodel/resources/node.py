from dataclasses import dataclass, field
from typing import Any

from kubemodel.kinds import Kind
from kubemodel.resources import ListableResource, ListMetadata, Metadata


@dataclass(kw_only=True)
class Node(ListableResource, kind=Kind.Node, default_namespace=None):
    """
    A worker machine of the cluster. Nodes are cluster-scoped and have no namespace.
    """

    metadata: Metadata = field(default_factory=Metadata)
    spec: dict[str, Any] | None = None
    status: dict[str, Any] | None = None

    @property
    def unschedulable(self) -> bool:
        return bool(self.spec and self.spec.get("unschedulable"))

    @classmethod
    def list_type(cls) -> type["NodeList"]:
        return NodeList


@dataclass
class NodeList:
    metadata: ListMetadata = field(default_factory=ListMetadata)
    items: list[Node] | None = None
