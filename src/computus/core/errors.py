class ComputusError(Exception):
    """Base error."""

class FeastTableError(ComputusError, LookupError):
    """Raised when a fixed feast name is missing from the movable-feast table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Feast '{name}' is not in the movable-feast table")
