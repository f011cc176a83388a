

class StopwatchError(ValueError):
    """Base class of errors raised when a stopwatch is misused
    """


class SwStartError(StopwatchError):
    """This error raises when a running stopwatch is started
    """

    def __init__(self, message: str = "stopwatch already started") -> None:
        super().__init__(message)


class SwStopError(StopwatchError):
    """This error raises when a stopped stopwatch is stopped
    """

    def __init__(self, message: str = "stopwatch already stopped") -> None:
        super().__init__(message)


class SwGuardError(StopwatchError):
    """This error raises when a guard cannot be created because
     the stopwatch is already running
    """

    def __init__(self, inner: SwStartError) -> None:
        super().__init__(f"failed to create guard: {inner}")
        self.inner = inner


class StopwatchOverflowError(OverflowError):
    """This error raises when a checked operation overflows
     the representable range of durations
    """
