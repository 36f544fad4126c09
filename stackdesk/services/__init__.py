"""Outbound services: HTTP access to the stack API."""

from .request_pipeline import RequestPipeline, join_url, parse_body, resolve_base_url

__all__ = ["RequestPipeline", "join_url", "parse_body", "resolve_base_url"]
