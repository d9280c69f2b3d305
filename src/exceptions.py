class MissingCodeSourceError(ValueError):
    pass


class FunctionDeployError(RuntimeError):
    pass


class UnexpectedResponseError(FunctionDeployError):
    pass
