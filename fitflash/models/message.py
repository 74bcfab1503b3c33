from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel


class MessageKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    MESSAGE = "message"


class FormMessage(BaseModel):
    """Feedback shown under an auth or settings form after a redirect."""

    kind: MessageKind
    text: str

    @property
    def is_error(self) -> bool:
        return self.kind == MessageKind.ERROR

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> Optional["FormMessage"]:
        """
        Build a message from query parameters.

        Looks for "success", then "error", then "message". Returns None if
        none of them is present.
        """
        for kind in MessageKind:
            if kind.value in params:
                return cls(kind=kind, text=params[kind.value])
        return None
