import base64
from dataclasses import dataclass, field

from kubemodel.kinds import Kind
from kubemodel.resources import ListableResource, ListMetadata, Metadata


@dataclass(kw_only=True)
class Secret(ListableResource, kind=Kind.Secret):
    """
    Confidential data. Values in `data` are base64 encoded on the wire, `stringData` is a write-only convenience that
    the server merges into `data`.
    """

    metadata: Metadata = field(default_factory=Metadata)
    type: str | None = None
    data: dict[str, str] | None = None
    stringData: dict[str, str] | None = None
    immutable: bool | None = None

    def decoded_data(self) -> dict[str, bytes]:
        """
        Return the values of `data` with the base64 encoding removed.
        """

        return {key: base64.b64decode(value) for key, value in (self.data or {}).items()}

    @classmethod
    def list_type(cls) -> "type[SecretList]":  # `type` is shadowed by the field above
        return SecretList


@dataclass
class SecretList:
    metadata: ListMetadata = field(default_factory=ListMetadata)
    items: list[Secret] | None = None
