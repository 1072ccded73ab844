"""Domain entities - internal representation (framework-agnostic)."""

from dataclasses import dataclass


@dataclass
class Todo:
    """Todo domain entity.

    The id is assigned by the store on creation and never changes.
    """
    id: str
    title: str
    done: bool = False
