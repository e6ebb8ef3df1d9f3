# keyfactory

Small factories that build objects from a string key. Product classes
register themselves under a key. Callers then ask the factory for a new
instance by that key, without importing the concrete class.

## Installing

```
pip install keyfactory
```

## Products

`keyfactory.factory` holds the abstract `Product` interface, with a single
`fun()` method. It also holds the process-wide `Factory` that builds
products:

```python
from keyfactory.factory import Factory, Product, register

@register("Widget")
class Widget(Product):
    def fun(self) -> int:
        return 42

product = Factory.instance().produce("Widget")
assert product.fun() == 42
```

Any extra arguments given to `register` are passed to the constructor
each time the product is built:

```python
@register("Sized", 3)
class Sized(Product):
    def __init__(self, size: int) -> None:
        self.size = size

    def fun(self) -> int:
        return self.size
```

You can also register a creator directly with
`Factory.instance().register(key, creator, *args)`.

- `register` returns `True` when the key is new.
- It returns `False` when the key was already bound. The first binding of a key is kept and later ones are ignored.
- `Factory.instance().keys()` lists the registered keys in sorted order.
- `key in factory` tests whether a key is bound, and `len(factory)` counts the bindings.

Errors:

- Asking for a key that was never registered raises `ValueError` with the message `the message key is not exist!`.
- If a creator returns something that is not a `Product`, `produce` raises `TypeError`.

`keyfactory.bclass` provides `BClass`, which is registered as `"BClass"` when the module is imported. Its `fun()` prints `BClass::fun 10` to standard error and returns `10`:

```python
import keyfactory.bclass
from keyfactory.factory import Factory

assert Factory.instance().produce("BClass").fun() == 10
```

## Messages

`keyfactory.messages` uses the same arrangement for messages:

- the `Message` base class, whose `foo()` returns the message's `name` (empty for the base class);
- the `MessageFactory` singleton, which has `register`, `produce` and `in`;
- the `register_message(key, *args)` class decorator.

`MessageFactory` behaves like `Factory` for duplicate keys. It raises `ValueError` for unknown keys and `TypeError` when a creator returns something that is not a `Message`.

`Message1` is registered under `"message1"`. It takes an optional argument `a`. It prints `message1` when it is built and again each time `foo()` is called, and `foo()` returns `"message1"`:

```python
from keyfactory.messages import MessageFactory

message = MessageFactory.instance().produce("message1")
assert message.foo() == "message1"
```

## What it does not do

This is a library only. It has no command-line program. Registrations live in memory for the life of the process, and nothing is stored or loaded from disk.