class SubSequenceRangeError(ValueError):
    """A sub-sequence index or length was negative."""

    def __init__(self, parameter: str, value: int):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{parameter} must be >= 0, got {value}")
