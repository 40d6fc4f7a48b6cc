from dataclasses import dataclass, field
from typing import Any

from kubemodel.kinds import Kind
from kubemodel.resources import ListableResource, ListMetadata, Metadata


@dataclass(kw_only=True)
class Service(ListableResource, kind=Kind.Service):
    metadata: Metadata = field(default_factory=Metadata)
    spec: dict[str, Any] | None = None
    status: dict[str, Any] | None = None

    @classmethod
    def list_type(cls) -> type["ServiceList"]:
        return ServiceList


@dataclass
class ServiceList:
    metadata: ListMetadata = field(default_factory=ListMetadata)
    items: list[Service] | None = None
