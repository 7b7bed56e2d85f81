class EnvError(ValueError):
    """Base error for environment retrieval and parsing."""


class NotSetError(EnvError):
    """Variable is absent from the environment."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Environment variable not set: {name}")
        self.name = name


class ParseError(EnvError):
    """Variable is present but its parser rejected the raw value."""

    def __init__(self, name: str, cause: BaseException) -> None:
        super().__init__(f"Parsing {name} value: {cause}")
        self.name = name
        self.cause = cause


class ElementError(EnvError):
    """One element of a delimited list failed to parse."""

    def __init__(self, index: int, cause: BaseException) -> None:
        super().__init__(f"Element {index}: {cause}")
        self.index = index
        self.cause = cause


class EntryFormatError(EnvError):
    """Map entry does not split into exactly a key and a value."""

    def __init__(self, index: int, separator: str, entry: str) -> None:
        super().__init__(f'Element {index} doesn\'t have exactly one separator ("{separator}"): {entry}')
        self.index = index
        self.separator = separator
        self.entry = entry


class MapKeyError(EnvError):
    """Key part of a map entry failed to parse."""

    def __init__(self, index: int, cause: BaseException) -> None:
        super().__init__(f"Element {index} key: {cause}")
        self.index = index
        self.cause = cause


class MapValueError(EnvError):
    """Value part of a map entry failed to parse."""

    def __init__(self, index: int, cause: BaseException) -> None:
        super().__init__(f"Element {index} value: {cause}")
        self.index = index
        self.cause = cause


def root_cause(err: BaseException) -> BaseException:
    """Follows `.cause` links down to the innermost error."""
    while isinstance(getattr(err, "cause", None), BaseException):
        err = err.cause
    return err
