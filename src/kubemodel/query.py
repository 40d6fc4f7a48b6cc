"""
Query parameters for list (and watch) requests against a collection route.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace

FIELD_SELECTOR = "fieldSelector"
LABEL_SELECTOR = "labelSelector"
RESOURCE_VERSION = "resourceVersion"
TIMEOUT_SECONDS = "timeoutSeconds"


def format_label_selector(labels: Mapping[str, str]) -> str:
    """
    Render a mapping of label keys to values as an equality-based label selector, e.g. `app=web,tier=frontend`.
    Keys are sorted so that the same mapping always yields the same selector.
    """

    return ",".join(f"{key}={value}" for key, value in sorted(labels.items()))


@dataclass(frozen=True)
class ListQuery:
    """
    An immutable set of optional list parameters. Every `with_*()` method returns a new `ListQuery` and leaves the
    receiver untouched, so a base query can be shared and refined freely.

        query = ListQuery().with_label_selector("tier=frontend").with_timeout_seconds(30)
        query.render()  # [("labelSelector", "tier=frontend"), ("timeoutSeconds", "30")]

    Selector syntax is not validated, the API server is the authority on selector grammar.
    """

    field_selector: str | None = None
    label_selector: str | None = None
    resource_version: str | None = None
    timeout_seconds: int | None = None

    def with_field_selector(self, field_selector: str) -> "ListQuery":
        """
        Restrict the list to objects whose fields match *field_selector*, e.g. `spec.nodeName=node-1`.

        Note that values are passed through verbatim. A value containing a comma, an equals sign or an ampersand
        cannot be expressed safely, because the selector grammar has no escaping for them. See
        https://github.com/kubernetes/kubernetes/issues/1362.
        """

        return replace(self, field_selector=field_selector)

    def with_label_selector(self, label_selector: str | Mapping[str, str]) -> "ListQuery":
        """
        Restrict the list to objects whose labels match *label_selector*. A mapping is rendered with
        `format_label_selector()`. Replaces any label selector set before.
        """

        if not isinstance(label_selector, str):
            label_selector = format_label_selector(label_selector)
        return replace(self, label_selector=label_selector)

    def with_resource_version(self, resource_version: str) -> "ListQuery":
        return replace(self, resource_version=resource_version)

    def with_timeout_seconds(self, timeout_seconds: int) -> "ListQuery":
        if isinstance(timeout_seconds, bool) or not isinstance(timeout_seconds, int):
            raise TypeError(f"timeout_seconds must be an int, got {type(timeout_seconds).__name__}")
        if timeout_seconds < 0:
            raise ValueError(f"timeout_seconds must not be negative, got {timeout_seconds}")
        return replace(self, timeout_seconds=timeout_seconds)

    def render(self) -> list[tuple[str, str]]:
        """
        Return the query pairs for all parameters that are set, sorted by key.
        """

        params: dict[str, str] = {}
        if self.field_selector is not None:
            params[FIELD_SELECTOR] = self.field_selector
        if self.label_selector is not None:
            params[LABEL_SELECTOR] = self.label_selector
        if self.resource_version is not None:
            params[RESOURCE_VERSION] = self.resource_version
        if self.timeout_seconds is not None:
            params[TIMEOUT_SECONDS] = str(self.timeout_seconds)
        return sorted(params.items())
