class OutOfRangeError(ValueError):
    """Raised when a field value does not fit its bit-width bound.

    Attributes:
        field (str): Name of the offending field, e.g. ``"Timestamp"``.
        value (int): The rejected value.
        bound (int): The largest accepted value (inclusive).
        minimum (int): The smallest accepted value (inclusive).
    """

    def __init__(self, field: str, value: int, bound: int, minimum: int = 0):
        self.field = field
        self.value = value
        self.bound = bound
        self.minimum = minimum
        super().__init__(
            f"Invalid {field} value: {value}. Must be between {minimum} and {bound}."
        )
