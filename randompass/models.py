"""
randompass.models
Request and record values passed between the charset builder, the sampler
and the result assembler.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ValidationError

MIN_LENGTH = 6
DEFAULT_LENGTH = 16
DEFAULT_COUNT = 1

EXPORT_NUMBER_FIELD = "PasswordNumber"
EXPORT_VALUE_FIELD = "PasswordValue"


@dataclass(frozen=True)
class GenerationRequest:
    """
    One generation call: how many passwords, how long, and which character
    classes they draw from.
    """

    count: int = DEFAULT_COUNT
    length: int = DEFAULT_LENGTH
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_digits: bool = True
    include_specials: bool = True
    custom_specials: Optional[str] = None

    @classmethod
    def from_exclusions(
        cls,
        count: int = DEFAULT_COUNT,
        length: int = DEFAULT_LENGTH,
        exclude_uppercase: bool = False,
        exclude_lowercase: bool = False,
        exclude_numbers: bool = False,
        exclude_specials: bool = False,
        specials: Optional[str] = None,
    ) -> "GenerationRequest":
        return cls(
            count=count,
            length=length,
            include_uppercase=not exclude_uppercase,
            include_lowercase=not exclude_lowercase,
            include_digits=not exclude_numbers,
            include_specials=not exclude_specials,
            custom_specials=specials,
        )

    def validate(self) -> None:
        if self.count < 1:
            raise ValidationError(f"count must be >= 1 (got {self.count})")
        if self.length < MIN_LENGTH:
            raise ValidationError(f"length must be >= {MIN_LENGTH} (got {self.length})")


@dataclass(frozen=True)
class PasswordRecord:
    index: int
    value: str

    def as_row(self) -> Dict[str, Any]:
        return {EXPORT_NUMBER_FIELD: self.index, EXPORT_VALUE_FIELD: self.value}
