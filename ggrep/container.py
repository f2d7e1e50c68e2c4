"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from .adapters import ScandirWalker, FileLineScanner
from .core import SearchService


class Container:
    """Dependency injection container for the application"""

    def __init__(self, walker=None, scanner=None):
        # Adapters (infrastructure)
        self.walker = walker or ScandirWalker()
        self.scanner = scanner or FileLineScanner()

        # Services (use cases)
        self.search = SearchService(
            walker=self.walker,
            scanner=self.scanner
        )
