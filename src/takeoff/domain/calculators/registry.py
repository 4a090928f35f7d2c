"""Calculator registry for assembly descriptors."""

from __future__ import annotations

import re
from typing import Callable, TypeVar

from .protocol import AssemblyDescriptor

D = TypeVar("D", bound=AssemblyDescriptor)

_NAME_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")


class CalculatorRegistry:
    """Singleton registry for calculator assembly descriptors.

    Descriptors are registered under a lowercase calculator name such as
    ``deck`` and looked up by the pipeline at run time.

    Example:
        @calculator_registry.register("deck")
        class DeckDescriptor:
            ...

        descriptor_cls = calculator_registry.get("deck")
    """

    _instance: CalculatorRegistry | None = None
    _descriptors: dict[str, type[AssemblyDescriptor]]

    def __new__(cls) -> CalculatorRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._descriptors = {}
        return cls._instance

    def register(self, name: str) -> Callable[[type[D]], type[D]]:
        """Decorator to register a descriptor class.

        Args:
            name: Unique lowercase calculator name.

        Returns:
            A decorator that registers the class and returns it unchanged.

        Raises:
            ValueError: If the name is already registered or malformed.
        """

        def decorator(cls: type[D]) -> type[D]:
            if name in self._descriptors:
                raise ValueError(f"Calculator '{name}' already registered")
            if not _NAME_PATTERN.match(name):
                raise ValueError(
                    f"Invalid calculator name '{name}': use lowercase letters, "
                    "digits, '-' or '_'"
                )
            self._descriptors[name] = cls
            return cls

        return decorator

    def get(self, name: str) -> type[AssemblyDescriptor]:
        """Get a descriptor class by calculator name.

        Raises:
            KeyError: If no calculator is registered under the name.
        """
        if name not in self._descriptors:
            raise KeyError(f"Unknown calculator: {name}")
        return self._descriptors[name]

    def __contains__(self, name: object) -> bool:
        return name in self._descriptors

    def list(self) -> list[str]:
        """List all registered calculator names, sorted."""
        return sorted(self._descriptors.keys())

    def clear(self) -> None:
        """Clear all registered descriptors.

        Intended for tests only.
        """
        self._descriptors = {}


# Singleton instance for convenient access
calculator_registry = CalculatorRegistry()
