"""Servicio de repositorios y tags.

Los nombres de repositorio incluyen el proyecto (`library/nginx`) y se
interpolan tal cual en el path: `repositories/library/nginx/tags`.

Harbor API docs: https://github.com/vmware/harbor/blob/release-1.4.0/docs/swagger.yaml#L891
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from pydantic import TypeAdapter

from harbor_client.adapters.http_client import decode_body, http_delete, http_get
from harbor_client.adapters.query import encode_query
from harbor_client.core.domain.models import Repository, Tag, TagDetail
from harbor_client.core.domain.options import ListRepositoriesOptions

if TYPE_CHECKING:
    from harbor_client.client import Client

_REPOSITORY_LIST = TypeAdapter(list[Repository] | None)
_TAG_LIST = TypeAdapter(list[Tag] | None)
_TAG_DETAIL = TypeAdapter(TagDetail)


class RepositoriesService:
    """Operaciones sobre `repositories/`."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def list_repositories(
        self,
        options: ListRepositoriesOptions | None = None,
    ) -> tuple[list[Repository], httpx.Response]:
        """Busca repositorios por proyecto y nombre.

        Harbor API docs: https://github.com/vmware/harbor/blob/release-1.4.0/docs/swagger.yaml#L892
        """

        query = encode_query(options or ListRepositoriesOptions())
        body, resp = http_get(self._client, query, "repositories")
        return decode_body(body, _REPOSITORY_LIST, resp) or [], resp

    def list_repository_tags(self, repo_name: str) -> tuple[list[Tag], httpx.Response]:
        """Tags de un repositorio.

        Si Harbor está desplegado con Notary, `signature` indica si la imagen
        está firmada; `None` significa sin firmar.

        Harbor API docs: https://github.com/vmware/harbor/blob/release-1.4.0/docs/swagger.yaml#L1054
        """

        body, resp = http_get(self._client, None, f"repositories/{repo_name}/tags")
        return decode_body(body, _TAG_LIST, resp) or [], resp

    def get_repository_tag(self, repo_name: str, tag: str) -> tuple[TagDetail, httpx.Response]:
        """Harbor API docs: https://github.com/vmware/harbor/blob/release-1.4.0/docs/swagger.yaml#L999"""

        body, resp = http_get(self._client, None, f"repositories/{repo_name}/tags/{tag}")
        return decode_body(body, _TAG_DETAIL, resp), resp

    def delete_repository_tag(self, repo_name: str, tag: str) -> httpx.Response:
        """Harbor API docs: https://github.com/vmware/harbor/blob/release-1.4.0/docs/swagger.yaml#L1025"""

        return http_delete(self._client, f"repositories/{repo_name}/tags/{tag}")

    def delete_repository(self, repo_name: str) -> httpx.Response:
        """Borra el repositorio con todos sus tags.

        Harbor API docs: https://github.com/vmware/harbor/blob/release-1.4.0/docs/swagger.yaml#L944
        """

        return http_delete(self._client, f"repositories/{repo_name}")

    # Alias cortos.
    list_tags = list_repository_tags
    get_tag = get_repository_tag
    delete_tag = delete_repository_tag
