"""
Typed resource model and list-query construction for a Kubernetes-style REST API.
"""

from kubemodel.kinds import Kind, route
from kubemodel.paths import resource_path, resource_url
from kubemodel.query import ListQuery, format_label_selector
from kubemodel.resources import ListableResource, MalformedResponseError, Metadata, Resource, Status

__version__ = "0.1.0"

__all__ = [
    "Kind",
    "ListQuery",
    "ListableResource",
    "MalformedResponseError",
    "Metadata",
    "Resource",
    "Status",
    "format_label_selector",
    "resource_path",
    "resource_url",
    "route",
]
