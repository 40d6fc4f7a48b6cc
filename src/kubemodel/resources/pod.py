from dataclasses import dataclass, field
from typing import Any

from kubemodel.kinds import Kind
from kubemodel.resources import ListableResource, ListMetadata, Metadata


@dataclass(kw_only=True)
class Pod(ListableResource, kind=Kind.Pod):
    metadata: Metadata = field(default_factory=Metadata)
    spec: dict[str, Any] | None = None
    status: dict[str, Any] | None = None

    @property
    def phase(self) -> str | None:
        """
        The lifecycle phase reported by the server, e.g. `Pending` or `Running`.
        """

        if self.status is not None:
            return self.status.get("phase")
        return None

    @classmethod
    def list_type(cls) -> type["PodList"]:
        return PodList


@dataclass
class PodList:
    metadata: ListMetadata = field(default_factory=ListMetadata)
    items: list[Pod] | None = None
