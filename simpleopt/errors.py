class OptionException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

class OptionSpecException(OptionException):
    pass

class OptionParseException(OptionException):
    pass

class MalformedTableError(OptionSpecException):
    def __init__(self, reason: str):
        super().__init__(f"Malformed option table: {reason}")
        self.reason = reason

class UnrecognizedOptionError(OptionParseException):
    def __init__(self, option: str):
        super().__init__(f"Option ‘{option}’ does not exist")
        self.option = option

class MissingArgumentError(OptionParseException):
    def __init__(self, option: str):
        super().__init__(f"Option ‘{option}’ is missing an argument")
        self.option = option

class BadArgumentError(OptionParseException):
    def __init__(self, option: str, arg: str):
        super().__init__(f"Argument ‘{arg}’ for option ‘{option}’ failed to parse")
        self.option = option
        self.arg = arg

class ArgumentTooLongError(OptionParseException):
    def __init__(self, option: str):
        super().__init__(f"Argument for option ‘{option}’ is too long")
        self.option = option

class TooManyArgumentsError(OptionParseException):
    def __init__(self, arg: str):
        super().__init__(f"Too many non-option arguments, no room for ‘{arg}’")
        self.arg = arg

class OptionValueError(OptionException):
    def __init__(self, option: str, wanted: str):
        super().__init__(f"Option ‘{option}’ holds no {wanted} value")
        self.option = option
        self.wanted = wanted
