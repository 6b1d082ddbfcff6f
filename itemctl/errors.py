class ItemctlError(Exception):
    pass


class MissingFlagError(ItemctlError):
    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"-{flag} flag has to be specified")


class InvalidOperationError(ItemctlError):
    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation {operation} not allowed!")


class DecodeError(ItemctlError):
    """Backing file or item content is not valid record JSON."""
