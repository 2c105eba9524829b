"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, pool de conexiones, auth básica y validación de status
  para que todos los servicios de recursos se comporten igual.
- Facilita testeo: el `httpx.Client` se puede sustituir por uno con
  `httpx.MockTransport`.

Sin reintentos ni backoff: cualquier fallo sube al llamador en el acto.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError

from harbor_client.adapters.query import QueryParams
from harbor_client.core.config import TransportSettings
from harbor_client.core.errors import (
    BodyReadError,
    DecodingError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
)

if TYPE_CHECKING:
    from harbor_client.client import Client

# Pasa por `logging` del host: silencioso salvo que la aplicación lo configure.
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json;charset=UTF-8"


def build_http_client(settings: TransportSettings | None = None) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/pool para que todas las llamadas se comporten igual.
    - Los límites se aplican por separado: conexión (+TLS) y espera de respuesta.
    """

    settings = settings or TransportSettings()
    return httpx.Client(
        timeout=httpx.Timeout(
            connect=settings.connect_budget_seconds,
            read=settings.response_header_timeout_seconds,
            write=None,
            pool=None,
        ),
        limits=httpx.Limits(
            max_connections=None,
            max_keepalive_connections=settings.max_idle_connections_per_host,
            keepalive_expiry=settings.keepalive_seconds,
        ),
        headers={"User-Agent": settings.user_agent},
    )


def build_url(base_url: str, sub_path: str, query: QueryParams | None = None) -> httpx.URL:
    """`base_url + "/" + sub_path`, con los query params añadidos (no reemplazados)."""

    try:
        url = httpx.URL(f"{base_url}/{sub_path}")
        if query:
            items = list(url.params.multi_items())
            for key, values in query.items():
                items.extend((key, value) for value in values)
            url = url.copy_with(params=httpx.QueryParams(items))
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise RequestConstructionError(
            f"invalid request URL for path {sub_path!r}",
            details={"base_url": base_url, "path": sub_path},
        ) from exc
    return url


def http_get(client: Client, query: QueryParams | None, sub_path: str) -> tuple[bytes, httpx.Response]:
    """GET autenticado; devuelve el body completo y la respuesta (ya cerrada)."""

    url = build_url(client.base_url, sub_path, query)
    request = _build_request(client, "GET", url, headers={"Content-Type": JSON_CONTENT_TYPE})
    response = _send(client, request)
    try:
        _check_status(response)
        try:
            body = response.read()
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise BodyReadError(
                f"failed reading response body: {exc}",
                response=response,
                details={"url": str(url)},
            ) from exc
    finally:
        response.close()
    return body, response


def http_delete(client: Client, sub_path: str) -> httpx.Response:
    """DELETE autenticado; la respuesta hace de acuse de recibo."""

    url = build_url(client.base_url, sub_path)
    request = _build_request(client, "DELETE", url)
    response = _send(client, request)
    try:
        _check_status(response)
    finally:
        response.close()
    return response


def decode_body(body: bytes, adapter: TypeAdapter[T], response: httpx.Response | None = None) -> T:
    try:
        return adapter.validate_json(body)
    except ValidationError as exc:
        raise DecodingError(
            f"unexpected response payload: {exc.error_count()} validation error(s)",
            response=response,
            details={"errors": exc.errors(include_url=False)},
        ) from exc


def _build_request(
    client: Client,
    method: str,
    url: httpx.URL,
    *,
    headers: dict[str, str] | None = None,
) -> httpx.Request:
    try:
        return client.http.build_request(method, url, headers=headers)
    except httpx.InvalidURL as exc:
        raise RequestConstructionError(
            f"cannot build {method} request: {exc}",
            details={"url": str(url)},
        ) from exc


def _send(client: Client, request: httpx.Request) -> httpx.Response:
    # Sin credenciales no hay cabecera, aunque el httpx.Client inyectado tenga auth propia.
    auth = None
    if not client.basic_auth.is_empty():
        auth = httpx.BasicAuth(client.basic_auth.username, client.basic_auth.password)

    logger.debug(
        "Sending registry request",
        method=request.method,
        host=request.url.host,
        path=request.url.path,
        param_count=len(request.url.params),
    )
    try:
        response = client.http.send(request, stream=True, auth=auth)
    except httpx.UnsupportedProtocol as exc:
        raise RequestConstructionError(
            f"unsupported URL scheme: {exc}",
            details={"url": str(request.url)},
        ) from exc
    except httpx.TransportError as exc:
        logger.warning("Registry transport failure", method=request.method, error=str(exc))
        raise TransportError(
            f"{request.method} {request.url.path} failed: {exc}",
            details={"url": str(request.url)},
        ) from exc
    logger.debug("Registry response received", status_code=response.status_code)
    return response


def _check_status(response: httpx.Response) -> None:
    if response.status_code != httpx.codes.OK:
        logger.warning(
            "Unexpected registry status",
            status_code=response.status_code,
            path=response.request.url.path,
        )
        raise UnexpectedStatusError(
            response.status_code,
            response=response,
            details={"url": str(response.request.url)},
        )
