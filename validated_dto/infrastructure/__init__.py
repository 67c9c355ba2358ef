"""Infrastructure layer.

Adapters implementing the application ports: class discovery, runtime
introspection, file output and console logging.
"""

from .container import DependencyContainer

__all__ = ["DependencyContainer"]
