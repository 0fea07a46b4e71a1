"""
randompass.generator
Password sampling over a selection pool, using the OS CSPRNG by default.
"""

import logging
from dataclasses import dataclass, field
from random import Random, SystemRandom
from typing import List, Optional

from .charset import build_pool
from .errors import ValidationError
from .models import MIN_LENGTH, GenerationRequest, PasswordRecord
from .output import OutputShape, assemble

logger = logging.getLogger(__name__)

_sysrand = SystemRandom()


def sample_passwords(
    pool: str,
    length: int,
    count: int,
    rng: Optional[Random] = None,
) -> List[PasswordRecord]:
    """
    Draw `count` independent passwords of `length` characters from `pool`.

    Within one password every pool position is used at most once, so
    `length` may not exceed the pool size. `rng` defaults to SystemRandom;
    any object with a Random-compatible `sample` works.
    """
    if not pool:
        raise ValidationError("No character type selected")
    if length < MIN_LENGTH:
        raise ValidationError(f"length must be >= {MIN_LENGTH} (got {length})")
    if count < 1:
        raise ValidationError(f"count must be >= 1 (got {count})")
    if length > len(pool):
        raise ValidationError(
            f"Password length {length} exceeds available character pool size ({len(pool)})"
        )

    rng = rng or _sysrand
    records = []
    for index in range(1, count + 1):
        records.append(PasswordRecord(index=index, value="".join(rng.sample(pool, length))))
    logger.debug("sampled %d password(s) of length %d", count, length)
    return records


@dataclass
class GenerationResult:
    output: OutputShape
    warnings: List[str] = field(default_factory=list)
    pool: str = ""


def generate(
    request: GenerationRequest,
    exportable: bool = False,
    rng: Optional[Random] = None,
) -> GenerationResult:
    """
    Validate `request`, build its pool, sample and assemble the passwords.

    Raises ValidationError before any password is drawn if the request can't
    be satisfied. Unsupported custom specials are reported in
    `GenerationResult.warnings` and never stop generation.
    """
    request.validate()
    pool, warnings = build_pool(request)
    records = sample_passwords(pool, request.length, request.count, rng=rng)
    return GenerationResult(output=assemble(records, exportable), warnings=warnings, pool=pool)
