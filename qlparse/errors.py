"""qlparse error types."""


class QlError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ParseError(QlError):
    pass


class ConfigError(QlError):
    pass
