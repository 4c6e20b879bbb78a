"""Infra HTTP compartilhada."""

from app.infra.http.base import HttpClient, HttpClientConfig

__all__ = ["HttpClient", "HttpClientConfig"]
