# errors.py ----------------------------------------------------


class MarkupError(Exception):
    """Base class for every error raised by pymarkup."""


class UnsupportedNodeError(MarkupError, TypeError):
    def __init__(self, value) -> None:
        self.value = value
        super().__init__(
            f"unsupported node {type(value).__name__}: {value!r}"
        )


class MaxResolutionDepthError(MarkupError, RecursionError):
    def __init__(self, name: str, max_depth: int, detail: str = "") -> None:
        self.name = name
        self.max_depth = max_depth
        message = f"maximum resolution depth exceeded ({max_depth}) while resolving <{name}>"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class HandlerMaterializationError(MarkupError):
    pass


class ConfigError(MarkupError, ValueError):
    pass
