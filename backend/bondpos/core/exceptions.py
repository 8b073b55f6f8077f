"""Domain exceptions raised by the store and services.

The HTTP layer maps them in ``bondpos.main``:

* ``NotFoundError`` -> 404
* ``InvalidStatusTransition`` -> 400
* anything not derived from ``BondPOSError`` -> 500
"""

from typing import Iterable, List


class BondPOSError(Exception):
    """Base class for expected, client-attributable errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message}


class NotFoundError(BondPOSError):
    """A referenced entity ID is absent from the store."""

    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidStatusTransition(BondPOSError):
    """An order status change that the lifecycle does not allow."""

    def __init__(self, current: str, target: str, allowed: Iterable[str] = ()):
        super().__init__(f"Cannot change order status from {current} to {target}")
        self.current = current
        self.target = target
        self.allowed: List[str] = sorted(allowed)

    def to_dict(self) -> dict:
        return {"detail": self.message, "allowed": self.allowed}
