from dataclasses import dataclass
from enum import Enum

from ...constants import Defaults


class ErrorPolicy(str, Enum):
    """What a batch load does when a single file fails to parse."""

    ABORT = "abort"
    SKIP = "skip"


class DuplicateConstantPolicy(str, Enum):
    """How repeated constant keys within one file are resolved."""

    LAST_WINS = "last"
    ERROR = "error"


@dataclass(slots=True)
class OutReadOptions:
    add_constants: bool = Defaults.ADD_CONSTANTS
    duplicate_constants: DuplicateConstantPolicy = DuplicateConstantPolicy.LAST_WINS
    encoding: str = Defaults.ENCODING
