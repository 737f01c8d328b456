"""Entidades que representam notícias armazenadas."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ArticleContent:
    """Campos editáveis de uma notícia, sem identificador."""

    #: Título exibido na listagem de notícias.
    title: Optional[str] = None
    #: Texto descritivo da notícia.
    description: Optional[str] = None
    #: Endereço da imagem de capa.
    image_url: Optional[str] = None


@dataclass(frozen=True)
class NewsArticle:
    """Representa uma notícia persistida na coleção de artigos."""

    #: Identificador gerado pelo armazenamento; nunca muda após a criação.
    id: str
    #: Título exibido na listagem de notícias.
    title: Optional[str] = None
    #: Texto descritivo da notícia.
    description: Optional[str] = None
    #: Endereço da imagem de capa.
    image_url: Optional[str] = None

    @property
    def content(self) -> ArticleContent:
        return ArticleContent(
            title=self.title,
            description=self.description,
            image_url=self.image_url,
        )


__all__ = ["ArticleContent", "NewsArticle"]
