import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from kubemodel.commands import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    file = tmp_path / "kubemodel.yaml"
    file.write_text("server: https://k8s.example.com:6443\nnamespace: prod\ntimeoutSeconds: 30\n")
    return file


def test__kinds(runner: CliRunner, config_file: Path) -> None:
    result = runner.invoke(app, ["--config", str(config_file), "kinds"])

    assert result.exit_code == 0, result.output
    lines = result.stdout.splitlines()
    assert lines[0].split() == ["KIND", "ROUTE", "API", "ROOT", "DEFAULT", "NAMESPACE"]
    assert lines[4].split() == ["NetworkPolicy", "networkpolicies", "/apis/networking.k8s.io/v1", "default"]
    assert lines[5].split() == ["Node", "nodes", "/api/v1", "-"]


def test__url(runner: CliRunner, config_file: Path) -> None:
    result = runner.invoke(
        app, ["--config", str(config_file), "url", "deployment", "web", "--label-selector", "app=web"]
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == (
        "https://k8s.example.com:6443/apis/apps/v1/namespaces/prod/deployments/web"
        "?labelSelector=app%3Dweb&timeoutSeconds=30"
    )


def test__url__cluster_scoped_ignores_configured_namespace(runner: CliRunner, config_file: Path) -> None:
    result = runner.invoke(app, ["--config", str(config_file), "url", "nodes", "--timeout", "5"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "https://k8s.example.com:6443/api/v1/nodes?timeoutSeconds=5"


def test__url__unknown_kind(runner: CliRunner, config_file: Path) -> None:
    result = runner.invoke(app, ["--config", str(config_file), "url", "ingress"])
    assert result.exit_code != 0


def test__items(runner: CliRunner, config_file: Path, tmp_path: Path) -> None:
    response = tmp_path / "pods.json"
    response.write_text(
        json.dumps(
            {
                "apiVersion": "v1",
                "kind": "PodList",
                "metadata": {"resourceVersion": "99"},
                "items": [
                    {"metadata": {"name": "web-1", "namespace": "prod"}},
                    {"metadata": {"name": "web-0", "namespace": "prod"}},
                ],
            }
        )
    )

    result = runner.invoke(app, ["--config", str(config_file), "items", "pods", str(response)])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["prod/web-1", "prod/web-0"]


def test__items__from_stdin(runner: CliRunner, config_file: Path) -> None:
    result = runner.invoke(
        app,
        ["--config", str(config_file), "items", "Node", "-"],
        input="kind: NodeList\nitems:\n- metadata: {name: node-1}\n",
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["node-1"]


def test__items__status_response(runner: CliRunner, config_file: Path, tmp_path: Path) -> None:
    response = tmp_path / "status.yaml"
    response.write_text(
        "kind: Status\napiVersion: v1\nmetadata: {}\nstatus: Failure\nmessage: forbidden\nreason: Forbidden\n"
        "code: 403\n"
    )

    result = runner.invoke(app, ["--config", str(config_file), "items", "pods", str(response)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test__items__malformed_response(runner: CliRunner, config_file: Path, tmp_path: Path) -> None:
    response = tmp_path / "pods.yaml"
    response.write_text("kind: PodList\nitems: 42\n")

    result = runner.invoke(app, ["--config", str(config_file), "items", "pods", str(response)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test__items__unreadable_response(runner: CliRunner, config_file: Path, tmp_path: Path) -> None:
    response = tmp_path / "pods.yaml"
    response.write_text("items: [\n")

    result = runner.invoke(app, ["--config", str(config_file), "items", "pods", str(response)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)

    result = runner.invoke(app, ["--config", str(config_file), "items", "pods", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test__items__without_name(runner: CliRunner, config_file: Path) -> None:
    result = runner.invoke(
        app,
        ["--config", str(config_file), "items", "pods", "-"],
        input="kind: PodList\nitems:\n- metadata: {namespace: prod}\n- metadata: {}\n",
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["prod/-", "-"]
