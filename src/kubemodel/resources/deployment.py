from dataclasses import dataclass, field
from typing import Any

from kubemodel.kinds import Kind
from kubemodel.resources import ListableResource, ListMetadata, Metadata


@dataclass(kw_only=True)
class Deployment(ListableResource, kind=Kind.Deployment, api_root="/apis/apps/v1"):
    metadata: Metadata = field(default_factory=Metadata)
    spec: dict[str, Any] | None = None
    status: dict[str, Any] | None = None

    @property
    def replicas(self) -> int | None:
        """
        The desired number of replicas, if the spec declares it.
        """

        if self.spec is not None:
            return self.spec.get("replicas")
        return None

    @classmethod
    def list_type(cls) -> type["DeploymentList"]:
        return DeploymentList


@dataclass
class DeploymentList:
    metadata: ListMetadata = field(default_factory=ListMetadata)
    items: list[Deployment] | None = None
