"""Registry document sources, looked up by name (``github``, ``file``)."""

from __future__ import annotations

from typing import Callable, Dict, Type

from .base import MarkdownSourceBase

_REGISTRY: Dict[str, Type[MarkdownSourceBase]] = {}


def register(name: str) -> Callable[[Type[MarkdownSourceBase]], Type[MarkdownSourceBase]]:
    """Class decorator adding a source under ``name``; names are unique."""

    def decorator(cls: Type[MarkdownSourceBase]) -> Type[MarkdownSourceBase]:
        if not issubclass(cls, MarkdownSourceBase):
            raise TypeError(f"{cls.__name__} is not a MarkdownSourceBase")
        if name in _REGISTRY:
            raise ValueError(f"Source name '{name}' already registered")
        cls.name = name
        _REGISTRY[name] = cls
        return cls

    return decorator


def get(name: str, **cfg) -> MarkdownSourceBase:
    """Build the source registered as ``name`` with ``cfg``."""
    if name not in _REGISTRY:
        raise ValueError(f"Unknown registry source '{name}'")
    return _REGISTRY[name](**cfg)


def list_sources() -> list[str]:
    return sorted(_REGISTRY)


# Registration happens on import
from . import github, local  # noqa: E402,F401

__all__ = ["MarkdownSourceBase", "get", "list_sources", "register"]
