"""Entidades de domínio utilizadas pelo Boletim."""
from .article import ArticleContent, NewsArticle
from .weather import WeatherAlert, WeatherSnapshot

__all__ = ["ArticleContent", "NewsArticle", "WeatherAlert", "WeatherSnapshot"]
