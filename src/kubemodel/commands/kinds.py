from kubemodel.kinds import Kind
from kubemodel.resources import Resource
from . import app


@app.command()
def kinds() -> None:
    """
    List the supported resource kinds with their route, API root and default namespace.
    """

    rows = [("KIND", "ROUTE", "API ROOT", "DEFAULT NAMESPACE")]
    for kind in Kind:
        resource_type = Resource.for_kind(kind)
        rows.append((str(kind), kind.route, resource_type.api_root(), resource_type.default_namespace() or "-"))

    widths = [max(len(row[idx]) for row in rows) for idx in range(len(rows[0]))]
    for row in rows:
        print("  ".join(value.ljust(width) for value, width in zip(row, widths)).rstrip())
