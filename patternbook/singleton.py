"""Singleton: a thread-safe, lazily created payment gateway."""

from __future__ import annotations

import threading


class PaymentGateway:
    """The one payment gateway; obtain it with :meth:`get_instance`."""

    _instance: PaymentGateway | None = None
    _lock = threading.Lock()

    def __init__(self) -> None:
        raise TypeError("use PaymentGateway.get_instance() instead")

    def __copy__(self) -> PaymentGateway:
        # Copying never yields a second gateway.
        return self

    def __deepcopy__(self, memo: dict) -> PaymentGateway:
        memo[id(self)] = self
        return self

    @classmethod
    def get_instance(cls) -> PaymentGateway:
        """Return the single instance, creating it on first use."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = object.__new__(cls)
                print("PaymentGateway Initialized.")
            return cls._instance

    def process_payment(self, amount: float) -> str:
        """Process a payment; print and return the message."""
        message = f"Processing payment of ₹{amount:g}"
        print(message)
        return message


def main(argv: list[str] | None = None) -> int:
    first = PaymentGateway.get_instance()
    first.process_payment(1500.00)
    second = PaymentGateway.get_instance()
    second.process_payment(3000.00)
    if first is second:
        print("Both instances are the same. Singleton works!")
    else:
        print("Instances are different. Singleton failed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())