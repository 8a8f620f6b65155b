from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_JOINER = "."
MESSAGE_SEPARATOR = ": "


class ErrorKind(str, Enum):
    RAW = "RAW"
    WRAPPED = "WRAPPED"
    FOREIGN = "FOREIGN"


class ErrorSource(str, Enum):
    CONFIG = "CONFIG"
    WRAPPER = "WRAPPER"


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str
    message: str
    source: ErrorSource
    details: Dict[str, Any] = Field(default_factory=dict)


class WrapperConfig(BaseModel):
    """Fixed settings of a single wrapper factory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    joiner: str = Field(default=DEFAULT_JOINER, min_length=1, max_length=1)
    prefix: str = ""


class ErrorReport(BaseModel):
    """Serializable snapshot of one value in an error chain."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ErrorKind
    text: str
    type_name: str
    prefix: Optional[str] = None
    message: Optional[str] = None
    joiner: Optional[str] = None
    inner: Optional["ErrorReport"] = None


ErrorReport.model_rebuild()
