"""Ingestion layer.

Adapters that turn raw vessel-source payloads into validated models.
"""

__all__: list[str] = []
