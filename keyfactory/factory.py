"""A keyed registry that builds products by name."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, TypeVar

__all__ = ["Product", "Factory", "register", "UNKNOWN_KEY_MESSAGE"]

UNKNOWN_KEY_MESSAGE = "the message key is not exist!"

_T = TypeVar("_T", bound=type)


class Product(ABC):
    """Interface that every object built by a :class:`Factory` provides."""

    @abstractmethod
    def fun(self) -> int:
        """Do the product's work and return its result."""


class Factory:
    """Maps string keys to callables that build new :class:`Product` objects.

    A key is bound once: later registrations under the same key are ignored.
    """

    _instance: ClassVar[Factory | None] = None

    def __init__(self) -> None:
        self._creators: dict[str, Callable[[], Product]] = {}

    @classmethod
    def instance(cls) -> Factory:
        """Return the process-wide factory, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance

    def register(self, key: str, creator: Callable[..., Product], *args: Any) -> bool:
        """Bind ``key`` to ``creator``, called with ``args`` on each produce.

        Returns True if the key was new, False if it was already bound
        (in which case the existing binding is kept).
        """
        if key in self._creators:
            return False
        self._creators[key] = functools.partial(creator, *args) if args else creator
        return True

    def produce(self, key: str) -> Product:
        """Build a new product for ``key``.

        Raises ValueError if no creator is bound to ``key``.
        """
        try:
            creator = self._creators[key]
        except KeyError:
            raise ValueError(UNKNOWN_KEY_MESSAGE) from None
        product = creator()
        if not isinstance(product, Product):
            raise TypeError(
                f"creator for {key!r} returned {type(product).__name__}, not a Product"
            )
        return product

    def keys(self) -> list[str]:
        """Return the registered keys in sorted order."""
        return sorted(self._creators)

    def __contains__(self, key: object) -> bool:
        return key in self._creators

    def __len__(self) -> int:
        return len(self._creators)


def register(key: str, *args: Any) -> Callable[[_T], _T]:
    """Class decorator binding the class to ``key`` in the shared factory."""

    def decorate(cls: _T) -> _T:
        Factory.instance().register(key, cls, *args)
        return cls

    return decorate