"""Adaptadores de infraestrutura compartilhados pelos serviços."""

from .database import MongoClientFactory, MongoSettings
from .web import ApiError, api_error, configure_cors, register_error_handlers

__all__ = [
    "ApiError",
    "MongoClientFactory",
    "MongoSettings",
    "api_error",
    "configure_cors",
    "register_error_handlers",
]
