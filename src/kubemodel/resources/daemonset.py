from dataclasses import dataclass, field
from typing import Any

from kubemodel.kinds import Kind
from kubemodel.resources import ListableResource, ListMetadata, Metadata


@dataclass(kw_only=True)
class DaemonSet(ListableResource, kind=Kind.DaemonSet, api_root="/apis/apps/v1"):
    metadata: Metadata = field(default_factory=Metadata)
    spec: dict[str, Any] | None = None
    status: dict[str, Any] | None = None

    @classmethod
    def list_type(cls) -> type["DaemonSetList"]:
        return DaemonSetList


@dataclass
class DaemonSetList:
    metadata: ListMetadata = field(default_factory=ListMetadata)
    items: list[DaemonSet] | None = None
