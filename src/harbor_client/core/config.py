"""Configuración del cliente.

Por qué aquí:
- Centraliza credenciales y parámetros de transporte sin contaminar los
  servicios de recursos.
- Toda la configuración llega de forma programática desde la aplicación que
  embebe la librería: no se leen variables de entorno.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class BasicAuth(BaseModel):
    """Credenciales HTTP Basic.

    Un par vacío (usuario y password en blanco) significa "sin autenticación":
    el ejecutor no envía la cabecera `Authorization` en ese caso.
    """

    model_config = ConfigDict(frozen=True)

    username: str = Field(default="", description="Usuario de Harbor.")
    password: str = Field(default="", repr=False, description="Password de Harbor.")

    def is_empty(self) -> bool:
        return not self.username and not self.password


class TransportSettings(BaseModel):
    """Parámetros del transporte HTTP por defecto.

    Por qué pydantic:
    - Tipado + validación en el borde sin ensuciar el ejecutor con lógica.
    - Un único contrato para construir el `httpx.Client` por defecto.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    connect_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout para establecer la conexión TCP (segundos).",
    )
    keepalive_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Tiempo máximo que una conexión ociosa se mantiene viva (segundos).",
    )
    tls_handshake_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout del handshake TLS (segundos).",
    )
    response_header_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Tiempo máximo de espera de la respuesta del servidor (segundos).",
    )
    max_idle_connections_per_host: int = Field(
        default=20,
        ge=1,
        le=1000,
        description="Conexiones keep-alive ociosas conservadas en el pool.",
    )
    user_agent: str = Field(
        default="harbor-client/0.1",
        min_length=1,
        description="User-Agent enviado en cada petición.",
    )

    @property
    def connect_budget_seconds(self) -> float:
        # httpx cuenta el handshake TLS dentro del timeout de conexión.
        return self.connect_timeout_seconds + self.tls_handshake_timeout_seconds
