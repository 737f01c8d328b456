"""Configuração HTTP compartilhada entre as rotas do Boletim."""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from boletim.domain.exceptions import BoletimError

_log = logging.getLogger("boletim.api")


class ApiError(Exception):
    """Erro de rota convertido em resposta ``{message, error}``."""

    def __init__(
        self, status_code: int, message: str, *, error: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error


def api_error(exc: BoletimError, message: str) -> ApiError:
    """Associa a mensagem da rota ao texto do erro do colaborador."""

    return ApiError(exc.status_code, message, error=exc.error or exc.message)


def _error_body(message: str, error: Optional[str]) -> dict[str, str]:
    body = {"message": message}
    if error:
        body["error"] = error
    return body


def _log_failure(request: Request, status_code: int, message: str, error: Optional[str]) -> None:
    level = logging.ERROR if status_code >= 500 else logging.WARNING
    _log.log(
        level,
        "%s %s -> %d %s%s",
        request.method,
        request.url.path,
        status_code,
        message,
        f": {error}" if error else "",
    )


def configure_cors(app: FastAPI) -> None:
    """Libera o acesso de qualquer origem, como esperado pelo frontend."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def register_error_handlers(app: FastAPI) -> None:
    """Converte erros conhecidos em respostas JSON com mensagem legível."""

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        _log_failure(request, exc.status_code, exc.message, exc.error)
        return JSONResponse(
            status_code=exc.status_code, content=_error_body(exc.message, exc.error)
        )

    @app.exception_handler(BoletimError)
    async def handle_boletim_error(request: Request, exc: BoletimError) -> JSONResponse:
        _log_failure(request, exc.status_code, exc.message, exc.error)
        return JSONResponse(
            status_code=exc.status_code, content=_error_body(exc.message, exc.error)
        )


def coerce_text(value: Any) -> Any:
    """Converte escalares JSON em texto, como o armazenamento fazia antes.

    ``true``/``false`` viram ``"true"``/``"false"``; objetos e listas seguem
    para a validação do modelo.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


__all__ = [
    "ApiError",
    "api_error",
    "coerce_text",
    "configure_cors",
    "register_error_handlers",
]
