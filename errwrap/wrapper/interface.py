from abc import ABC, abstractmethod
from typing import Optional


class ErrorWrapper(ABC):
    """Wrapper interface for creating and wrapping errors."""

    @abstractmethod
    def wrap_error(self, err: Optional[BaseException], message: Optional[str] = None) -> Optional[BaseException]:
        raise NotImplementedError

    @abstractmethod
    def wrap_string(self, text: str, message: Optional[str] = None) -> Optional[BaseException]:
        raise NotImplementedError
