class MinigrepError(Exception):
    """Base class for errors that abort a run."""


class MissingArgument(MinigrepError):
    MESSAGES = {
        "query": "Missing the first argument (query)",
        "filename": "Missing the second argument (filename)",
    }

    def __init__(self, name: str):
        self.name = name
        super().__init__(self.MESSAGES.get(name, f"Missing argument ({name})"))


class FileUnreadable(MinigrepError):
    def __init__(self, filename: str, reason: str = ""):
        self.filename = filename
        self.reason = reason
        message = f"Could not open the file {filename}"
        super().__init__(f"{message}: {reason}" if reason else message)


class SettingsError(MinigrepError):
    pass


class UnparseableStyle(UserWarning):
    def __init__(self, value: str):
        self.value = value
        super().__init__("Could not parse the third argument (style) as a u8")


class ExtraArguments(UserWarning):
    def __init__(self, extra):
        self.extra = list(extra)
        super().__init__("Too many arguments; the 4th one and up will be discarded")
