from dataclasses import dataclass
from pathlib import Path
from typing import Literal, overload

from loguru import logger

from kubemodel.query import ListQuery


@dataclass
class ClientConfig:
    """
    Configuration for building requests, stored in a `kubemodel.yaml` file.
    """

    FILENAME = "kubemodel.yaml"

    server: str = "https://localhost:6443"
    """ Base URL of the API server. """

    namespace: str | None = None
    """ Namespace to use instead of the default namespace of a namespaced resource type. """

    labelSelector: str | None = None
    fieldSelector: str | None = None
    timeoutSeconds: int | None = None

    def default_query(self) -> ListQuery:
        """
        Return a `ListQuery` with the selectors and timeout of this configuration applied.
        """

        query = ListQuery()
        if self.labelSelector is not None:
            query = query.with_label_selector(self.labelSelector)
        if self.fieldSelector is not None:
            query = query.with_field_selector(self.fieldSelector)
        if self.timeoutSeconds is not None:
            query = query.with_timeout_seconds(self.timeoutSeconds)
        return query

    @overload
    @staticmethod
    def find_config_file(cwd: Path | None = None, not_found_ok: Literal[False] = False) -> Path: ...

    @overload
    @staticmethod
    def find_config_file(cwd: Path | None = None, not_found_ok: Literal[True] = True) -> Path | None: ...

    @staticmethod
    def find_config_file(cwd: Path | None = None, not_found_ok: bool = False) -> Path | None:
        """
        Return the closest `kubemodel.yaml`, looking in *cwd* (the working directory by default) first and then in each
        of its parents.
        """

        start = cwd or Path.cwd()
        candidates = (directory / ClientConfig.FILENAME for directory in (start, *start.parents))
        file = next((candidate for candidate in candidates if candidate.is_file()), None)
        if file is None and not not_found_ok:
            raise FileNotFoundError(f"No '{ClientConfig.FILENAME}' in '{start}' or above")
        return file

    @staticmethod
    def load(file: Path | None = None, /, *, cwd: Path | None = None, required: bool = False) -> "ClientConfig":
        """
        Load the configuration from the given file, or from the `kubemodel.yaml` found in *cwd* or its parents. If
        there is no such file, the default configuration is returned unless *required* is set.
        """

        from databind.json import load as deser
        from yaml import safe_load

        if file is None:
            file = ClientConfig.find_config_file(cwd, not_found_ok=not required)
        if file is None:
            logger.debug("No '{}' found, using the default configuration", ClientConfig.FILENAME)
            return ClientConfig()

        logger.debug("Loading configuration from '{}'", file)
        return deser(safe_load(file.read_text()) or {}, ClientConfig, filename=str(file))
