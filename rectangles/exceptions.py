class RectanglesError(Exception):
    pass


class InputError(RectanglesError):
    """Recoverable problem with something the user typed. The message is
    shown to the user as-is."""

    pass


class InvalidCommandError(InputError):
    pass


class DuplicateNameError(InputError):
    pass


class InvalidNumberError(InputError):
    pass


class InvalidDimensionsError(InputError):
    pass


class RectanglesParameterError(RectanglesError):
    pass
