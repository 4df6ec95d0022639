"""Proxy: guards employee-table changes behind an admin role check."""

from abc import ABC, abstractmethod
from typing import Callable


class EmployeeTable(ABC):
    """Operations on the employee table."""

    @abstractmethod
    def create(self, name: str) -> str:
        """Create an employee; print and return the message."""

    @abstractmethod
    def delete(self, name: str) -> str:
        """Delete an employee; print and return the message."""

    @abstractmethod
    def get(self, name: str) -> str:
        """Fetch an employee; print and return the message."""


class Employee(EmployeeTable):
    """The real employee table."""

    _MESSAGES = {
        "create": "Employee '{}' created.",
        "delete": "Employee '{}' deleted.",
        "get": "Fetching details of employee: {}",
    }

    def _report(self, action: str, name: str) -> str:
        message = self._MESSAGES[action].format(name)
        print(message)
        return message

    def create(self, name: str) -> str:
        return self._report("create", name)

    def delete(self, name: str) -> str:
        return self._report("delete", name)

    def get(self, name: str) -> str:
        return self._report("get", name)


class EmployeeProxy(EmployeeTable):
    """Forwards to a real table; only the admin role may create or delete."""

    def __init__(self, employee: Employee, role: str) -> None:
        self.employee = employee
        self.role = role

    def _admin_only(self, operation: Callable[[str], str], name: str) -> str:
        if self.role != "admin":
            raise PermissionError(
                f"Access Denied: Only admin can {operation.__name__} employee."
            )
        return operation(name)

    def create(self, name: str) -> str:
        return self._admin_only(self.employee.create, name)

    def delete(self, name: str) -> str:
        return self._admin_only(self.employee.delete, name)

    def get(self, name: str) -> str:
        return self.employee.get(name)


def _run(table: EmployeeTable, name: str) -> None:
    for action in (table.create, table.get, table.delete):
        try:
            action(name)
        except PermissionError as exc:
            print(exc)


def main(argv: list[str] | None = None) -> int:
    real = Employee()
    print("--- Admin Access ---")
    _run(EmployeeProxy(real, "admin"), "Alice")
    print("\n--- User Access ---")
    _run(EmployeeProxy(real, "user"), "Bob")
    return 0