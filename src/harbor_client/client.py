"""Cliente de la API de gestión de Harbor.

Por qué una clase central:
- Es la única fuente de parámetros de conexión (base URL, credenciales y
  transporte) para todos los servicios de recursos.
- Se crea una vez y se comparte: no guarda estado por llamada, así que es
  seguro reutilizarla desde varios hilos a la vez.
"""

from __future__ import annotations

import httpx

from harbor_client.adapters.http_client import build_http_client
from harbor_client.adapters.services import ProjectsService, RepositoriesService
from harbor_client.core.config import BasicAuth, TransportSettings


class Client:
    """Punto de entrada: `client.projects` y `client.repositories`."""

    def __init__(
        self,
        base_url: str,
        *,
        http: httpx.Client | None = None,
        basic_auth: BasicAuth | None = None,
        settings: TransportSettings | None = None,
    ) -> None:
        self._owns_http = http is None
        self.http = http if http is not None else build_http_client(settings)
        self.base_url = base_url
        self.basic_auth = basic_auth or BasicAuth()

        self.projects = ProjectsService(self)
        self.repositories = RepositoriesService(self)

    def set_basic_auth(self, username: str, password: str) -> Client:
        """Reemplaza las credenciales y devuelve el mismo cliente (fluent)."""

        self.basic_auth = BasicAuth(username=username, password=password)
        return self

    def close(self) -> None:
        # Un transporte inyectado pertenece al llamador.
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r}, username={self.basic_auth.username!r})"


def new_client(
    http: httpx.Client | None = None,
    base_url: str = "",
    username: str = "",
    password: str = "",
    *,
    settings: TransportSettings | None = None,
) -> Client:
    """Crea un `Client`.

    Si no se pasa `http`, se construye un transporte por defecto a partir de
    `settings` (o de `TransportSettings()`): conexión 30s, keep-alive 120s,
    handshake TLS 10s, espera de respuesta 30s y 20 conexiones ociosas.
    """

    return Client(base_url, http=http, settings=settings).set_basic_auth(username, password)
