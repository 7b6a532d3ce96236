"""
Dependency injection container using dependency-injector.
Holds process-wide singletons; request-scoped services are built per session.
"""

from dependency_injector import containers, providers

from equity_payroll.controllers.health_controller import HealthController
from equity_payroll.services.health_service import HealthService


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""
    
    # Uptime is measured from the first use of the singleton
    health_service = providers.Singleton(
        HealthService,
    )
    
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def set_container(container: Container) -> None:
    """Replace the global container (app startup and tests)."""
    global _container
    _container = container
