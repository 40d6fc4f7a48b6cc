import pytest

from kubemodel.paths import resource_path, resource_url
from kubemodel.query import ListQuery
from kubemodel.resources import Deployment, NetworkPolicy, Node, Pod


def test__resource_path__namespaced_falls_back_to_default_namespace() -> None:
    assert resource_path(Pod) == "/api/v1/namespaces/default/pods"
    assert resource_path(Pod, "kube-system", "coredns") == "/api/v1/namespaces/kube-system/pods/coredns"


def test__resource_path__named_groups() -> None:
    assert resource_path(Deployment, "prod", "web") == "/apis/apps/v1/namespaces/prod/deployments/web"
    assert resource_path(NetworkPolicy) == "/apis/networking.k8s.io/v1/namespaces/default/networkpolicies"


def test__resource_path__cluster_scoped() -> None:
    assert resource_path(Node) == "/api/v1/nodes"
    assert resource_path(Node, name="node-1") == "/api/v1/nodes/node-1"
    with pytest.raises(ValueError):
        resource_path(Node, "default")


def test__resource_path__all_namespaces() -> None:
    assert resource_path(Pod, all_namespaces=True) == "/api/v1/pods"
    assert resource_path(Node, all_namespaces=True) == "/api/v1/nodes"
    with pytest.raises(ValueError):
        resource_path(Pod, name="web", all_namespaces=True)


def test__resource_url() -> None:
    query = ListQuery().with_label_selector("tier=frontend").with_timeout_seconds(30)
    assert (
        resource_url("https://k8s.example.com:6443/", Pod, query=query)
        == "https://k8s.example.com:6443/api/v1/namespaces/default/pods?labelSelector=tier%3Dfrontend&timeoutSeconds=30"
    )
    assert resource_url("https://k8s", Node, query=ListQuery()) == "https://k8s/api/v1/nodes"
