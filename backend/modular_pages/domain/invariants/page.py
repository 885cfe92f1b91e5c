from .module import assert_module
from .exceptions import InvariantViolation

def assert_page(page, publish=False):
    modules = page.modules

    if publish and not modules:
        raise InvariantViolation("Cannot publish page without modules.")

    orders = [module.order for module in modules]
    expected = list(range(1, len(orders) + 1))

    if sorted(orders) != expected:
        raise InvariantViolation(
            f"Module orders are not consecutive starting from 1: {orders}"
        )

    for module in modules:
        assert_module(module, publish=publish)
