class ShapeMismatch(ValueError):
    """Raised when a pixel buffer does not hold exactly ``width * height * 4`` bytes."""

    def __init__(self, expected: int, actual: int, width: int, height: int) -> None:
        self.expected = expected
        self.actual = actual
        self.width = width
        self.height = height
        super().__init__(
            f"buffer of length {actual} does not match a {width}x{height} RGBA image "
            f"(expected {expected} bytes)"
        )
