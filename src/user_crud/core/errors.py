class UserCrudError(Exception):
    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.args[0]} (caused by: {self.cause})"
        return str(self.args[0])


class ConfigurationError(UserCrudError):
    pass


class ValidationError(UserCrudError):
    def __init__(
        self,
        message: str,
        fields: tuple[str, ...] = (),
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.fields = fields
