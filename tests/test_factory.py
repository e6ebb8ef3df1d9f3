import pytest

from keyfactory.factory import UNKNOWN_KEY_MESSAGE, Factory, Product, register


class Counter(Product):
    def __init__(self, start=0, step=1):
        self.start = start
        self.step = step

    def fun(self):
        return self.start + self.step


class Other(Product):
    def fun(self):
        return -1


def test_product_is_abstract():
    with pytest.raises(TypeError):
        Product()


def test_produce_builds_registered_class():
    factory = Factory()
    assert factory.register("counter", Counter) is True
    product = factory.produce("counter")
    assert isinstance(product, Counter)
    assert product.start == 0


def test_produce_returns_fresh_objects():
    factory = Factory()
    factory.register("counter", Counter)
    first = factory.produce("counter")
    second = factory.produce("counter")
    assert first is not second
    assert type(first) is type(second)


def test_register_with_arguments_passes_them_each_time():
    factory = Factory()
    factory.register("counter", Counter, 5, 7)
    for _ in range(2):
        product = factory.produce("counter")
        assert (product.start, product.step) == (5, 7)


def test_duplicate_key_keeps_first_binding():
    factory = Factory()
    assert factory.register("item", Counter) is True
    assert factory.register("item", Other) is False
    assert isinstance(factory.produce("item"), Counter)
    assert len(factory) == 1


def test_unknown_key_raises_value_error():
    factory = Factory()
    with pytest.raises(ValueError) as excinfo:
        factory.produce("missing")
    assert str(excinfo.value) == UNKNOWN_KEY_MESSAGE


def test_creator_must_return_product():
    factory = Factory()
    factory.register("bad", lambda: object())
    with pytest.raises(TypeError):
        factory.produce("bad")


def test_keys_are_sorted_and_membership_works():
    factory = Factory()
    for key in ["zeta", "alpha", "mid"]:
        factory.register(key, Counter)
    assert factory.keys() == sorted(["zeta", "alpha", "mid"])
    assert "alpha" in factory
    assert "beta" not in factory


def test_instance_is_shared():
    Factory.instance().register("test-factory-shared-key", Counter, 2, 3)
    assert "test-factory-shared-key" in Factory.instance().keys()
    product = Factory.instance().produce("test-factory-shared-key")
    assert isinstance(product, Counter)
    assert product.fun() == 5


def test_instances_are_independent_from_shared():
    factory = Factory()
    factory.register("only-local-key", Counter)
    assert "only-local-key" not in Factory.instance()


def test_register_decorator_binds_in_shared_factory():
    @register("test-factory-decorated", 3)
    class Decorated(Product):
        def __init__(self, value):
            self.value = value

        def fun(self):
            return self.value

    assert Decorated.__name__ == "Decorated"
    product = Factory.instance().produce("test-factory-decorated")
    assert isinstance(product, Decorated)
    assert product.fun() == 3