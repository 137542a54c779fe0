from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

@dataclass(eq=False)
class ResultError(Exception):
    message: str
    code: Optional[str] = None

    def __str__(self) -> str:
        if self.code:
            return f"{self.message} (code={self.code})"
        return self.message

@dataclass(eq=False)
class ResultShapeError(ResultError):
    pass

@dataclass(eq=False)
class ResultDecodeError(ResultError):
    pass

@dataclass(eq=False)
class ResultEncodeError(ResultError):
    pass

@dataclass(eq=False)
class ConfigurationError(ResultError):
    pass
