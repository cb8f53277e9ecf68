class UnwrapError(RuntimeError):
    """Raised when a container payload is read without checking its variant first.

    This signals a bug in the calling code, not a recoverable failure.
    """

    def __init__(self, msg: str, payload: object = None) -> None:
        super().__init__(msg)
        self.payload = payload
        """The payload of the variant that was actually held, if any."""


class OptionUnwrapError(UnwrapError): ...


class ResultUnwrapError(UnwrapError): ...
