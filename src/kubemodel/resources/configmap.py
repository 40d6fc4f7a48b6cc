from dataclasses import dataclass, field

from kubemodel.kinds import Kind
from kubemodel.resources import ListableResource, ListMetadata, Metadata


@dataclass(kw_only=True)
class ConfigMap(ListableResource, kind=Kind.ConfigMap):
    """
    Non-confidential configuration data as key-value pairs.
    """

    metadata: Metadata = field(default_factory=Metadata)
    data: dict[str, str] | None = None
    binaryData: dict[str, str] | None = None
    """ Base64 encoded values for keys whose content is not valid UTF-8. """

    immutable: bool | None = None

    @classmethod
    def list_type(cls) -> type["ConfigMapList"]:
        return ConfigMapList


@dataclass
class ConfigMapList:
    metadata: ListMetadata = field(default_factory=ListMetadata)
    items: list[ConfigMap] | None = None
