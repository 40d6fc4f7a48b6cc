"""
This package contains the typed resource model: the shared `Metadata` and `Status` shapes, the `Resource` and
`ListableResource` base classes and one resource class per `Kind`.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, NewType, TypeVar, cast

from databind.core import Alias, ConversionError, ExtraKeys, SerializeDefaults
from databind.json import dump as ser, load as deser
from loguru import logger
from typing_extensions import Self

from kubemodel.kinds import Kind

CORE_API_ROOT = "/api/v1"
""" The API root of the core group. Resources in named groups live under `/apis/<group>/<version>`. """

DEFAULT_NAMESPACE = "default"
""" The namespace that namespaced resources fall back to. """

Manifest = NewType("Manifest", dict[str, Any])
""" Represents a resource in its wire format. """

T = TypeVar("T")


class MalformedResponseError(ValueError):
    """
    Raised when data received from the API server does not match the shape of the type it is decoded into.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(f"{message} (at {path!r})" if path else message)
        self.message = message
        self.path = path
        """ Dotted path of the offending field, e.g. `metadata.labels`. Empty if it is the document itself. """


def _conversion_path(error: ConversionError) -> str:
    parts: list[str] = []
    context = error.context
    while context is not None:
        if isinstance(context.key, (str, int)):
            parts.append(str(context.key))
        context = context.parent
    return ".".join(reversed(parts))


def decode(payload: Any, datatype: type[T], filename: str | None = None) -> T:
    """
    Deserialize *payload* into *datatype*. Keys that the datatype does not model are ignored, but missing or mistyped
    fields are not.

    Raises:
        MalformedResponseError: If the payload does not match *datatype*.
    """

    try:
        return cast(T, deser(payload, datatype, filename=filename, settings=[ExtraKeys()]))
    except ConversionError as exc:
        raise MalformedResponseError(exc.message, _conversion_path(exc)) from exc
    except (TypeError, ValueError) as exc:
        # Some collection converters fail on scalars before a conversion context is attached.
        raise MalformedResponseError(f"Cannot decode {datatype.__name__}: {exc}") from exc


def encode(value: Any, datatype: Any) -> dict[str, Any]:
    """
    Serialize *value* as *datatype*, leaving out fields that are at their default value.
    """

    return cast(dict[str, Any], ser(value, datatype, settings=[SerializeDefaults(False)]))


@dataclass
class Metadata:
    """
    Object metadata. Every field is optional because the server fills them in as the object progresses through its
    lifecycle, and objects created on the client side usually only have a name.
    """

    name: str | None = None
    namespace: str | None = None
    uid: str | None = None
    resourceVersion: str | None = None
    creationTimestamp: datetime | None = None
    """ Always a timezone-aware UTC instant. Naive values are taken to be UTC. """

    annotations: dict[str, str] | None = None
    labels: dict[str, str] | None = None

    def __post_init__(self) -> None:
        if self.creationTimestamp is not None:
            if self.creationTimestamp.tzinfo is None:
                self.creationTimestamp = self.creationTimestamp.replace(tzinfo=timezone.utc)
            else:
                self.creationTimestamp = self.creationTimestamp.astimezone(timezone.utc)

        # Key order is part of the wire output, keep it stable.
        if self.annotations is not None:
            self.annotations = dict(sorted(self.annotations.items()))
        if self.labels is not None:
            self.labels = dict(sorted(self.labels.items()))

    @classmethod
    def load(cls, payload: Any) -> "Metadata":
        return decode(payload, cls)

    def dump(self) -> dict[str, Any]:
        return encode(self, Metadata)


@dataclass
class ListMetadata:
    """
    Metadata of a collection response. The `resourceVersion` can be passed to `ListQuery.with_resource_version()` to
    continue watching from the point in time of the list.
    """

    resourceVersion: str | None = None
    continue_: Annotated[str | None, Alias("continue")] = None


@dataclass
class Status:
    """
    The response body the API server returns for failed requests and for some deletions.
    """

    kind: str
    apiVersion: str
    metadata: Metadata
    status: str
    message: str
    reason: str | None = None
    code: int | None = None

    @classmethod
    def load(cls, payload: Any) -> "Status":
        return decode(payload, cls)

    def dump(self) -> dict[str, Any]:
        return encode(self, Status)

    def is_failure(self) -> bool:
        return self.status == "Failure"


class Resource(ABC):
    """
    Base class for all resource types. Subclasses are dataclasses that describe the wire format of the resource and
    declare their kind and scope as class arguments:

        @dataclass(kw_only=True)
        class Node(ListableResource, kind=Kind.Node, default_namespace=None):
            ...

    The kind, API root and default namespace are fixed per class. There is exactly one class per `Kind`.
    """

    KIND: ClassVar[Kind]
    """ The kind of the resource. """

    API_ROOT: ClassVar[str]
    """ The path prefix the collection route of the resource is served under, e.g. `/api/v1` or `/apis/apps/v1`. """

    DEFAULT_NAMESPACE: ClassVar[str | None]
    """ The namespace to use when none is given, or `None` if the resource is cluster-scoped. """

    _registry: ClassVar[dict[Kind, type["Resource"]]] = {}

    def __init_subclass__(
        cls,
        kind: Kind | None = None,
        api_root: str = CORE_API_ROOT,
        default_namespace: str | None = DEFAULT_NAMESPACE,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)

        # Intermediate base classes such as `ListableResource` do not bind a kind.
        if kind is None:
            return

        if kind in Resource._registry:
            raise TypeError(f"Kind {kind} is already bound to {Resource._registry[kind].__qualname__}")

        cls.KIND = kind
        cls.API_ROOT = api_root
        cls.DEFAULT_NAMESPACE = default_namespace
        Resource._registry[kind] = cls

    @classmethod
    def kind(cls) -> Kind:
        return cls.KIND

    @classmethod
    def default_namespace(cls) -> str | None:
        return cls.DEFAULT_NAMESPACE

    @classmethod
    def api_root(cls) -> str:
        return cls.API_ROOT

    @classmethod
    def namespaced(cls) -> bool:
        return cls.DEFAULT_NAMESPACE is not None

    @classmethod
    def api_version(cls) -> str:
        """
        The `apiVersion` of the resource, derived from the API root. `/api/v1` gives `v1` and `/apis/apps/v1` gives
        `apps/v1`.
        """

        prefix, _, version = cls.API_ROOT.strip("/").partition("/")
        if prefix in ("api", "apis") and version:
            return version
        return cls.API_ROOT.strip("/")

    @staticmethod
    def for_kind(kind: Kind) -> type["Resource"]:
        """
        Return the resource class bound to *kind*.
        """

        return Resource._registry[kind]

    @classmethod
    def load(cls, manifest: Mapping[str, Any]) -> "Self":
        """
        Load a resource from its wire format. If called on `Resource` directly, the class to deserialize into is
        selected by the `kind` field of the manifest. If called on a subclass, the `kind` field may be absent (as it
        is for items of some collection responses) but must match if present.

        Raises:
            MalformedResponseError: If the manifest does not describe a resource of the expected kind and shape.
        """

        if not isinstance(manifest, Mapping):
            raise MalformedResponseError(f"Expected an object, got {type(manifest).__name__}")

        kind = manifest.get("kind")
        if "KIND" not in vars(cls):
            try:
                subcls = Resource.for_kind(Kind[kind])
            except (KeyError, TypeError):
                raise MalformedResponseError(f"Unsupported resource kind: {kind!r}", "kind") from None
            return cast(Self, subcls.load(manifest))

        if kind is not None and kind != cls.KIND.name:
            raise MalformedResponseError(f"Expected kind {cls.KIND.name!r}, got {kind!r}", "kind")

        body = {key: value for key, value in manifest.items() if key not in ("apiVersion", "kind")}
        return decode(body, cls)

    def dump(self) -> Manifest:
        """
        Dump the resource to its wire format. Fields that are not set are left out.
        """

        return Manifest({"apiVersion": self.api_version(), "kind": self.KIND.name, **encode(self, type(self))})


class ListableResource(Resource):
    """
    A resource whose collection route returns a wrapper object (`<Kind>List`) rather than a bare array.
    """

    @classmethod
    @abstractmethod
    def list_type(cls) -> type[Any]:
        """
        Return the dataclass that describes the collection response. It must have an `items` field.
        """

    @classmethod
    def list_items(cls, response: Any) -> list["Self"]:
        """
        Extract the members of a decoded collection response in the order the server returned them. An absent
        `items` field yields an empty list.
        """

        return list(response.items or [])

    @classmethod
    def load_list(cls, payload: Any) -> list["Self"]:
        """
        Decode a collection response and return its members.

        Raises:
            MalformedResponseError: If the payload does not match the collection response shape.
        """

        items = cls.list_items(decode(payload, cls.list_type()))
        logger.debug("Decoded {} {} item(s) from collection response", len(items), cls.KIND)
        return items


from kubemodel.resources.configmap import ConfigMap, ConfigMapList  # noqa: E402
from kubemodel.resources.daemonset import DaemonSet, DaemonSetList  # noqa: E402
from kubemodel.resources.deployment import Deployment, DeploymentList  # noqa: E402
from kubemodel.resources.networkpolicy import NetworkPolicy, NetworkPolicyList  # noqa: E402
from kubemodel.resources.node import Node, NodeList  # noqa: E402
from kubemodel.resources.pod import Pod, PodList  # noqa: E402
from kubemodel.resources.secret import Secret, SecretList  # noqa: E402
from kubemodel.resources.service import Service, ServiceList  # noqa: E402

__all__ = [
    "ConfigMap",
    "ConfigMapList",
    "DaemonSet",
    "DaemonSetList",
    "Deployment",
    "DeploymentList",
    "ListMetadata",
    "ListableResource",
    "MalformedResponseError",
    "Manifest",
    "Metadata",
    "NetworkPolicy",
    "NetworkPolicyList",
    "Node",
    "NodeList",
    "Pod",
    "PodList",
    "Resource",
    "Secret",
    "SecretList",
    "Service",
    "ServiceList",
    "Status",
]
