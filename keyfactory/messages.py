"""Messages and a keyed factory that builds them by name."""

from __future__ import annotations

import functools
from typing import Any, Callable, ClassVar, TypeVar

__all__ = ["Message", "Message1", "MessageFactory", "register_message"]

UNKNOWN_KEY_MESSAGE = "the message key is not exist!"

_T = TypeVar("_T", bound=type)


class Message:
    """Base message; handling it produces no output."""

    name: ClassVar[str] = ""

    def foo(self) -> str:
        """Handle the message and return its name."""
        return self.name


class MessageFactory:
    """Maps string keys to callables that build new :class:`Message` objects.

    A key is bound once: later registrations under the same key are ignored.
    """

    _instance: ClassVar[MessageFactory | None] = None

    def __init__(self) -> None:
        self._creators: dict[str, Callable[[], Message]] = {}

    @classmethod
    def instance(cls) -> MessageFactory:
        """Return the process-wide message factory, creating it on first use."""
        if cls.__dict__.get("_instance") is None:
            cls._instance = cls()
        return cls._instance

    def register(self, key: str, creator: Callable[..., Message], *args: Any) -> bool:
        """Bind ``key`` to ``creator``, called with ``args`` on each produce.

        Returns True if the key was new, False if it was already bound.
        """
        if key in self._creators:
            return False
        self._creators[key] = functools.partial(creator, *args) if args else creator
        return True

    def produce(self, key: str) -> Message:
        """Build a new message for ``key``; ValueError if the key is unknown."""
        try:
            creator = self._creators[key]
        except KeyError:
            raise ValueError(UNKNOWN_KEY_MESSAGE) from None
        message = creator()
        if not isinstance(message, Message):
            raise TypeError(
                f"creator for {key!r} returned {type(message).__name__}, not a Message"
            )
        return message

    def __contains__(self, key: object) -> bool:
        return key in self._creators


def register_message(key: str, *args: Any) -> Callable[[_T], _T]:
    """Class decorator binding the class to ``key`` in the shared message factory."""

    def decorate(cls: _T) -> _T:
        MessageFactory.instance().register(key, cls, *args)
        return cls

    return decorate


@register_message("message1")
class Message1(Message):
    """Message that announces itself when built and when handled."""

    name: ClassVar[str] = "message1"

    def __init__(self, a: int | None = None) -> None:
        self.a = a
        print(self.name)

    def foo(self) -> str:
        """Print the message's name and return it."""
        print(self.name)
        return self.name