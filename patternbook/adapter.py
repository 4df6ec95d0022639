"""Adapter: lets a Micro USB charger serve a USB-C port."""

from __future__ import annotations

from abc import ABC, abstractmethod


class USBCPort(ABC):
    """The interface clients expect: something that plugs into USB-C."""

    @abstractmethod
    def connect_with_usbc(self) -> list[str]:
        """Connect over USB-C; print and return the lines reported."""


class MicroUSBCharger:
    """An existing charger that only speaks Micro USB."""

    def connect_with_micro_usb(self) -> str:
        """Connect over Micro USB; print and return the message."""
        message = "Micro USB charger connected and charging..."
        print(message)
        return message


class USBAdapter(USBCPort):
    """Presents a Micro USB charger as a USB-C device."""

    def __init__(self, charger: MicroUSBCharger) -> None:
        self.charger = charger

    def connect_with_usbc(self) -> list[str]:
        message = "Adapter converting USB-C to Micro USB..."
        print(message)
        return [message, self.charger.connect_with_micro_usb()]


def main(argv: list[str] | None = None) -> int:
    adapter = USBAdapter(MicroUSBCharger())
    print("Client connecting using USB-C port:")
    adapter.connect_with_usbc()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())