"""A concrete product registered in the shared factory as ``BClass``."""

from __future__ import annotations

import sys

from keyfactory.factory import Product, register

__all__ = ["BClass"]


@register("BClass")
class BClass(Product):
    """Product holding a fixed value, which ``fun`` reports and returns."""

    def __init__(self) -> None:
        self._m = 10

    def fun(self) -> int:
        """Report the held value on stderr and return it."""
        print("BClass::fun", self._m, file=sys.stderr)
        return self._m