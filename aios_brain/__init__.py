"""Public package interface for the AIOS brain knowledge store."""

from .store import KnowledgeStore, QueryResult, QueryStatus
from .registry import ServiceRegistry, start_services

__all__ = ["KnowledgeStore", "QueryResult", "QueryStatus", "ServiceRegistry", "start_services"]
