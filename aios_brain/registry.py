"""
Named-service registry and boot sequence.

Services are published under a logical name so other components can look
them up without holding a direct reference. The knowledge store is started
first so it is available before anything that depends on it.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import Config
from .store import KnowledgeStore

logger = logging.getLogger(__name__)


class ServiceNotFoundError(LookupError):
    """Raised by require_service for names nothing was registered under."""


class ServiceRegistry:
    def __init__(self):
        self._lock = threading.Lock()
        self._services: Dict[str, Any] = {}

    def add_service(self, name: str, service: Any):
        with self._lock:
            replaced = name in self._services
            self._services[name] = service
        if replaced:
            logger.info(f"Replaced service binding for '{name}'")

    def get_service(self, name: str) -> Optional[Any]:
        with self._lock:
            return self._services.get(name)

    def require_service(self, name: str) -> Any:
        service = self.get_service(name)
        if service is None:
            raise ServiceNotFoundError(f"No service registered under '{name}'")
        return service

    def list_services(self) -> List[str]:
        with self._lock:
            return sorted(self._services)

    def clear(self):
        with self._lock:
            self._services.clear()


# Process-wide registry
service_manager = ServiceRegistry()


def add_service(name: str, service: Any):
    service_manager.add_service(name, service)


def get_service(name: str) -> Optional[Any]:
    return service_manager.get_service(name)


@dataclass
class BootReport:
    started: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


def default_services() -> List[Tuple[str, Callable[[], Any]]]:
    """(name, factory) pairs in start order."""
    return [(Config.brain.SERVICE_NAME, KnowledgeStore)]


def start_services(
    registry: Optional[ServiceRegistry] = None,
    services: Optional[List[Tuple[str, Callable[[], Any]]]] = None,
) -> BootReport:
    """
    Construct and publish each service in order.

    A service that fails to start is logged and skipped so the rest still come up.
    """
    registry = registry or service_manager
    services = services if services is not None else default_services()
    report = BootReport()

    for name, factory in services:
        try:
            logger.info(f"Starting service '{name}'")
            registry.add_service(name, factory())
            logger.info(f"Service '{name}' started successfully")
            report.started.append(name)
        except Exception:
            logger.exception(f"Failure starting service '{name}'")
            report.failed.append(name)

    logger.info(f"Boot complete: {len(report.started)} started, {len(report.failed)} failed")
    return report


def shutdown_services(registry: Optional[ServiceRegistry] = None):
    """Call shutdown() on every registered service that has one."""
    registry = registry or service_manager
    for name in registry.list_services():
        service = registry.get_service(name)
        shutdown = getattr(service, "shutdown", None)
        if callable(shutdown):
            shutdown()
            logger.info(f"Service '{name}' shut down")
