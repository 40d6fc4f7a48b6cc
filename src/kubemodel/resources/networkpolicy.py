from dataclasses import dataclass, field
from typing import Any

from kubemodel.kinds import Kind
from kubemodel.resources import ListableResource, ListMetadata, Metadata


@dataclass(kw_only=True)
class NetworkPolicy(ListableResource, kind=Kind.NetworkPolicy, api_root="/apis/networking.k8s.io/v1"):
    """
    Describes what network traffic is allowed for a set of pods. Served by the `networking.k8s.io` group.
    """

    metadata: Metadata = field(default_factory=Metadata)
    spec: dict[str, Any] | None = None

    @classmethod
    def list_type(cls) -> type["NetworkPolicyList"]:
        return NetworkPolicyList


@dataclass
class NetworkPolicyList:
    metadata: ListMetadata = field(default_factory=ListMetadata)
    items: list[NetworkPolicy] | None = None
