"""Facade: one call to place an order drives several subsystems."""

from __future__ import annotations


def _say(message: str) -> str:
    print(message)
    return message


class Inventory:
    def update_stock(self) -> str:
        """Update stock; print and return the message."""
        return _say("Inventory: Stock updated.")


class Payment:
    def process_payment(self) -> str:
        """Process the payment; print and return the message."""
        return _say("Payment: Payment processed successfully.")


class Shipping:
    def arrange_shipping(self) -> str:
        """Arrange shipping; print and return the message."""
        return _say("Shipping: Shipping arranged.")


class OrderFacade:
    """Places an order by coordinating inventory, payment and shipping."""

    def __init__(self) -> None:
        self.inventory = Inventory()
        self.payment = Payment()
        self.shipping = Shipping()

    def place_order(self) -> list[str]:
        """Run every step of an order; return the lines printed."""
        return [
            _say("--- Placing Order ---"),
            self.inventory.update_stock(),
            self.payment.process_payment(),
            self.shipping.arrange_shipping(),
            _say("--- Order Completed ---"),
        ]


def main(argv: list[str] | None = None) -> int:
    OrderFacade().place_order()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())