"""Data models for user records."""

from dataclasses import dataclass, replace
from typing import Any


@dataclass
class User:
    """A registered user.

    ``id`` is assigned by the repository and cannot be reassigned once set.
    ``name`` and ``email`` are updated in place by the repository.
    """

    id: int
    name: str
    email: str

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError("id must be an integer")
        if self.id < 1:
            raise ValueError("id must be positive")

    def __setattr__(self, key: str, value: Any) -> None:
        if key == "id" and "id" in self.__dict__:
            raise AttributeError("id cannot be changed after creation")
        super().__setattr__(key, value)

    def copy(self) -> "User":
        return replace(self)
