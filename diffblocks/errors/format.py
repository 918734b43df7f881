class UnsupportedFormatError(ValueError):
    """A sub-sequence was rendered with a format tag other than 'S' or 'T'."""

    def __init__(self, format_spec: str):
        self.format_spec = format_spec
        super().__init__(f"Unsupported format {format_spec!r}; expected 'S' or 'T'")
