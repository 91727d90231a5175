from pathlib import Path


class FenceAppError(Exception):
    """Base user-facing application error."""


class FenceFileError(FenceAppError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingConfigFileError(FenceFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class InvalidConfigFormatError(FenceFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config format ({detail})")


class InvalidConfigSchemaError(FenceFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class SourceParseError(FenceFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Cannot parse source ({detail})")


class InvalidPatternError(FenceAppError):
    def __init__(self, pattern: str, detail: str) -> None:
        self.pattern = pattern
        self.detail = detail
        super().__init__(f"Invalid regular expression {pattern!r} ({detail})")
