"""Articles service dependency container."""

from .container import ArticlesContainer, build_articles_container

__all__ = ["ArticlesContainer", "build_articles_container"]
