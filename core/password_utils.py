# core/password_utils.py
from __future__ import annotations
import enum
import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Tuple

from core.config import DEFAULT_CONFIG, AppConfig
from core.errors import ConfigurationError
from core.random_utils import IndexSource, SecureIndexSource, secure_choice, secure_shuffle
from core.strength_utils import StrengthAssessment, assess_strength

logger = logging.getLogger(__name__)


class CharacterClass(enum.Enum):
    UPPER = "upper"
    LOWER = "lower"
    DIGIT = "digit"
    SPECIAL = "special"

    def members(self, config: AppConfig = DEFAULT_CONFIG) -> str:
        t = config.tables
        return {
            CharacterClass.UPPER: t.upper,
            CharacterClass.LOWER: t.lower,
            CharacterClass.DIGIT: t.digits,
            CharacterClass.SPECIAL: t.special,
        }[self]


# Canonical iteration order; keeps the guaranteed draws reproducible under a seeded source
CLASS_ORDER: Tuple[CharacterClass, ...] = tuple(CharacterClass)
ALL_CLASSES = frozenset(CharacterClass)


@dataclass(frozen=True)
class GenerationRequest:
    length: int = 16
    classes: frozenset = ALL_CLASSES
    exclude_ambiguous: bool = False
    require_all: bool = True
    special_chars: Optional[str] = None
    count: int = 1

    @classmethod
    def from_flags(
        cls,
        length: int,
        use_upper: bool = True,
        use_lower: bool = True,
        use_digits: bool = True,
        use_special: bool = True,
        **kwargs,
    ) -> "GenerationRequest":
        flags = {
            CharacterClass.UPPER: use_upper,
            CharacterClass.LOWER: use_lower,
            CharacterClass.DIGIT: use_digits,
            CharacterClass.SPECIAL: use_special,
        }
        return cls(length=length, classes=frozenset(c for c, on in flags.items() if on), **kwargs)


class CharacterUniverse(NamedTuple):
    """
    combined: every usable character once, in class order
    groups:   (class, stripped members) per enabled class that still has members
    """
    combined: str
    groups: Tuple[Tuple[CharacterClass, str], ...]


class GeneratedPassword(NamedTuple):
    password: str
    assessment: StrengthAssessment


def build_universe(
    classes: Iterable[CharacterClass],
    exclude_ambiguous: bool = False,
    config: AppConfig = DEFAULT_CONFIG,
) -> CharacterUniverse:
    """
    Strip ambiguous characters from every enabled class and join what is left.
    Raises ConfigurationError when nothing is enabled or nothing is left.
    """
    enabled = set(classes)
    if not enabled:
        raise ConfigurationError("No character classes selected.")

    groups: List[Tuple[CharacterClass, str]] = []
    for cc in CLASS_ORDER:
        if cc not in enabled:
            continue
        members = cc.members(config)
        if exclude_ambiguous:
            members = "".join(ch for ch in members if ch not in config.ambiguous)
        if members:
            groups.append((cc, members))

    combined = "".join(dict.fromkeys(ch for _, members in groups for ch in members))
    if not combined:
        raise ConfigurationError("Character universe is empty after removing ambiguous characters.")
    return CharacterUniverse(combined, tuple(groups))


def _check_request(request: GenerationRequest, universe: CharacterUniverse, config: AppConfig) -> None:
    if not config.min_length <= request.length <= config.max_length:
        raise ConfigurationError(
            f"Length must be between {config.min_length} and {config.max_length}, got {request.length}."
        )
    if request.require_all and request.length < len(universe.groups):
        raise ConfigurationError(
            f"Length ({request.length}) is too short for {len(universe.groups)} required classes."
        )


def _resolve(request: GenerationRequest, config: AppConfig) -> Tuple[AppConfig, CharacterUniverse]:
    cfg = config.with_special(request.special_chars)
    universe = build_universe(request.classes, request.exclude_ambiguous, cfg)
    _check_request(request, universe, cfg)
    return cfg, universe


def generate_from_universe(
    length: int,
    universe: CharacterUniverse,
    require_all: bool = True,
    source: Optional[IndexSource] = None,
) -> str:
    """
    Generate a password of 'length' from a prepared universe.
    With require_all, one character is drawn from each group first; the rest come
    from the combined alphabet, then everything is Fisher-Yates shuffled.
    """
    if require_all and length < len(universe.groups):
        raise ConfigurationError(
            f"Length ({length}) is too short for {len(universe.groups)} required classes."
        )
    src = source or SecureIndexSource()

    chars: List[str] = []
    if require_all:
        chars.extend(secure_choice(members, src) for _, members in universe.groups)
    while len(chars) < length:
        chars.append(secure_choice(universe.combined, src))
    secure_shuffle(chars, src)
    return "".join(chars)


def generate_password(
    request: GenerationRequest,
    config: AppConfig = DEFAULT_CONFIG,
    source: Optional[IndexSource] = None,
) -> str:
    _, universe = _resolve(request, config)
    return generate_from_universe(request.length, universe, request.require_all, source)


def generate_batch(
    request: GenerationRequest,
    config: AppConfig = DEFAULT_CONFIG,
    source: Optional[IndexSource] = None,
) -> List[GeneratedPassword]:
    """
    Generate request.count passwords, each paired with its strength assessment.
    All constraint checks run before the first draw; an entropy failure aborts the batch.
    """
    if not 1 <= request.count <= config.max_count:
        raise ConfigurationError(f"Count must be between 1 and {config.max_count}, got {request.count}.")
    cfg, universe = _resolve(request, config)
    src = source or SecureIndexSource()

    logger.info(
        "Generating %d password(s): length=%d classes=%s exclude_ambiguous=%s require_all=%s",
        request.count,
        request.length,
        ",".join(cc.value for cc, _ in universe.groups),
        request.exclude_ambiguous,
        request.require_all,
    )
    results: List[GeneratedPassword] = []
    for _ in range(request.count):
        pw = generate_from_universe(request.length, universe, request.require_all, src)
        results.append(GeneratedPassword(pw, assess_strength(pw, cfg.tables.special)))
    return results


def entropy_bits(length: int, alphabet_size: int) -> float:
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return length * math.log2(alphabet_size)


def entropy_label(bits: float) -> str:
    if bits < 50:  return "Weak"
    if bits < 80:  return "Fair"
    if bits < 110: return "Strong"
    return "Very strong"
