"""Exceptions raised by particle_hsl."""


class InvalidArgumentError(ValueError):
    """A required argument was missing or of the wrong kind."""


class ColorFormatError(ValueError):
    """Text could not be parsed as an HSL colour."""

    def __init__(self, message: str, text: object = None) -> None:
        super().__init__(message)
        self.text = text

    def __reduce__(self):
        return (self.__class__, (self.args[0], self.text))
