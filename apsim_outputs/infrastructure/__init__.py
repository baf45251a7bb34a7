"""Infrastructure layer for APSIM output loading.

This layer contains adapters for the filesystem and the console.
It implements the ports defined in the application layer.
"""

from .container import DependencyContainer, create_default_container

__all__ = ["DependencyContainer", "create_default_container"]
