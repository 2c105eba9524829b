"""Errores del cliente de Harbor.

Todas las excepciones heredan de `HarborError` para que el llamador pueda
capturarlas en bloque o distinguir la etapa que falló (construcción de la
petición, transporte, status, lectura del body, decoding o encoding).
"""

from __future__ import annotations

from typing import Any

import httpx


class HarborError(Exception):
    """Base de todos los errores del cliente."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Args:
            message: Mensaje legible.
            response: Respuesta HTTP asociada, si llegó a existir.
            details: Contexto adicional (url, path, etc.).
        """
        self.message = message
        self.response = response
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "status_code": self.response.status_code if self.response is not None else None,
            "details": self.details,
        }


class RequestConstructionError(HarborError):
    """La URL o la petición no se pudieron construir."""


class TransportError(HarborError):
    """Fallo de conexión, TLS o timeout."""


class UnexpectedStatusError(HarborError):
    """El servidor respondió con un status distinto de 200."""

    def __init__(
        self,
        status_code: int,
        *,
        response: httpx.Response | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            f"request status code exception : {status_code}",
            response=response,
            details=details,
        )
        self.status_code = status_code


class BodyReadError(HarborError):
    """El stream de la respuesta falló mientras se leía."""


class DecodingError(HarborError):
    """El body no es JSON válido o no encaja con el tipo esperado."""


class EncodingError(HarborError):
    """El valor de opciones no se pudo convertir en query params."""
