"""Modelo Pydantic para notícias recebidas pela API."""
from __future__ import annotations

from pydantic import BaseModel, field_validator

from boletim.domain import ArticleContent
from boletim.infrastructure.web import coerce_text


class ArticlePayload(BaseModel):
    """Corpo das requisições de criação e edição de notícias.

    Os campos são opcionais: valores ausentes são gravados como ``null`` e
    números ou booleanos são gravados como texto.
    """

    #: Título da notícia.
    title: str | None = None
    #: Texto descritivo da notícia.
    description: str | None = None
    #: Endereço da imagem de capa.
    imageUrl: str | None = None

    @field_validator("title", "description", "imageUrl", mode="before")
    @classmethod
    def _scalar_as_text(cls, value):
        return coerce_text(value)

    def to_domain(self) -> ArticleContent:
        """Converte os dados recebidos em ``ArticleContent``."""

        return ArticleContent(
            title=self.title,
            description=self.description,
            image_url=self.imageUrl,
        )


__all__ = ["ArticlePayload"]
