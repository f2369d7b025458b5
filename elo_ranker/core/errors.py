"""
Exceptions raised by the ranking engine.
"""


class RankerError(Exception):
    """Base class for all ranking errors."""


class DuplicateItemError(RankerError, ValueError):
    """Raised when adding an item whose id is already registered."""

    def __init__(self, item_id: str):
        super().__init__(f"Item with id {item_id} already exists")
        self.item_id = item_id


class ItemNotFoundError(RankerError, LookupError):
    """Raised when an operation refers to an unknown item id."""

    def __init__(self, item_id: str):
        super().__init__(f"Item with id {item_id} not found")
        self.item_id = item_id


class SelfComparisonError(RankerError, ValueError):
    """Raised when an item is compared with itself."""

    def __init__(self, item_id: str):
        super().__init__(f"Cannot compare item {item_id} with itself")
        self.item_id = item_id


class ConfigurationRangeError(RankerError, ValueError):
    """Raised when a numeric parameter falls outside its accepted range."""


class NoOpponentError(RankerError):
    """Raised when no opponent is left for the item that needs a comparison."""

    def __init__(self, item_id: str):
        super().__init__(f"No opponent available for item {item_id}")
        self.item_id = item_id
