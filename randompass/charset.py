"""
randompass.charset
Resolve the enabled character classes (and an optional custom set of special
characters) into the selection pool the sampler draws from.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .errors import ValidationError
from .models import GenerationRequest

logger = logging.getLogger(__name__)


class CharacterClass(Enum):
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGIT = "digit"
    SPECIAL = "special"


# inclusive code point ranges
CLASS_RANGES: Dict[CharacterClass, Tuple[Tuple[int, int], ...]] = {
    CharacterClass.UPPERCASE: ((0x41, 0x5A),),
    CharacterClass.LOWERCASE: ((0x61, 0x7A),),
    CharacterClass.DIGIT: ((0x30, 0x39),),
    CharacterClass.SPECIAL: ((0x21, 0x2F), (0x3A, 0x40), (0x5B, 0x60), (0x7B, 0x7E)),
}

# pool concatenation order
CLASS_ORDER = (
    CharacterClass.UPPERCASE,
    CharacterClass.LOWERCASE,
    CharacterClass.DIGIT,
    CharacterClass.SPECIAL,
)


def class_characters(char_class: CharacterClass) -> str:
    """Return every character of a class, in code point order."""
    return "".join(
        chr(cp)
        for start, end in CLASS_RANGES[char_class]
        for cp in range(start, end + 1)
    )


SPECIAL_CHARACTERS = class_characters(CharacterClass.SPECIAL)

UNSUPPORTED_SPECIAL_WARNING = "Unsupported special character included: '{}' (This will not be included)"


def resolve_specials(custom: Optional[str]) -> Tuple[str, List[str]]:
    """
    Narrow the special class to the characters of `custom`.

    Every character outside the canonical special set is dropped with a
    warning, in input order. Accepted repeats keep their first occurrence. No
    custom string means the full canonical set.
    """
    if not custom:
        return SPECIAL_CHARACTERS, []

    accepted: List[str] = []
    warnings: List[str] = []
    for ch in custom:
        if ch in SPECIAL_CHARACTERS:
            if ch not in accepted:
                accepted.append(ch)
        else:
            warnings.append(UNSUPPORTED_SPECIAL_WARNING.format(ch))
    return "".join(accepted), warnings


def enabled_classes(request: GenerationRequest) -> List[CharacterClass]:
    flags = {
        CharacterClass.UPPERCASE: request.include_uppercase,
        CharacterClass.LOWERCASE: request.include_lowercase,
        CharacterClass.DIGIT: request.include_digits,
        CharacterClass.SPECIAL: request.include_specials,
    }
    return [c for c in CLASS_ORDER if flags[c]]


def build_pool(request: GenerationRequest) -> Tuple[str, List[str]]:
    """
    Build the selection pool for `request`.

    Returns the pool and the (possibly empty) list of warnings raised while
    filtering custom specials. Raises ValidationError when no class is
    selected or when the selected classes leave nothing to draw from.
    """
    classes = enabled_classes(request)
    if not classes:
        raise ValidationError("No character type selected")

    warnings: List[str] = []
    parts = []
    for char_class in classes:
        if char_class is CharacterClass.SPECIAL:
            specials, warnings = resolve_specials(request.custom_specials)
            parts.append(specials)
        else:
            parts.append(class_characters(char_class))

    pool = "".join(parts)
    if not pool:
        raise ValidationError("No usable characters left in the selected character types")

    logger.debug(
        "built pool of %d characters from %s",
        len(pool),
        ", ".join(c.value for c in classes),
    )
    return pool, warnings
