"""Servicio de proyectos.

Harbor API docs: https://github.com/vmware/harbor/blob/release-1.4.0/docs/swagger.yaml#L45
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from pydantic import TypeAdapter

from harbor_client.adapters.http_client import decode_body, http_get
from harbor_client.adapters.query import encode_query
from harbor_client.core.domain.models import Project
from harbor_client.core.domain.options import ListProjectsOptions

if TYPE_CHECKING:
    from harbor_client.client import Client

_PROJECT = TypeAdapter(Project)
_PROJECT_LIST = TypeAdapter(list[Project] | None)


class ProjectsService:
    """Operaciones sobre `projects/`."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def get_project_by_id(self, project_id: int) -> tuple[Project, httpx.Response]:
        """Detalle de un proyecto por su ID.

        Harbor API docs: https://github.com/vmware/harbor/blob/release-1.4.0/docs/swagger.yaml#L149
        """

        body, resp = http_get(self._client, None, f"projects/{project_id}")
        return decode_body(body, _PROJECT, resp), resp

    def list_projects(
        self,
        options: ListProjectsOptions | None = None,
    ) -> tuple[list[Project], httpx.Response]:
        """Lista los proyectos, filtrables por nombre, visibilidad y propietario.

        Harbor API docs: https://github.com/vmware/harbor/blob/release-1.4.0/docs/swagger.yaml#L46
        """

        query = encode_query(options or ListProjectsOptions())
        body, resp = http_get(self._client, query, "projects")
        return decode_body(body, _PROJECT_LIST, resp) or [], resp
