"""
Secure password generation utilities.

Turns a set of character constraints into a deduplicated alphabet and
draws passwords from it with a cryptographically secure random source.
"""

import logging
import random
import secrets
import string
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Set

from ..exceptions import EmptyAlphabetError, InvalidSpecError, NoUsableCategoryError
from .validation import get_validation_error_message, split_chars


logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 12
DEFAULT_COUNT = 1

# Character pools
UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
DEFAULT_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Visually confusing characters removable as a block
AMBIGUOUS_CHARS = frozenset("0Ol1I")

_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)

# Shared entropy source, only ever advanced by draws
_system_random = secrets.SystemRandom()


@dataclass(frozen=True)
class ConstraintSpec:
    """Immutable description of the passwords to generate."""

    length: int = DEFAULT_LENGTH
    count: int = DEFAULT_COUNT
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_digits: bool = True
    include_symbols: bool = True
    custom_symbols: Optional[str] = None
    exclude_chars: FrozenSet[str] = frozenset()
    include_chars: FrozenSet[str] = frozenset()
    no_ambiguous: bool = False

    def __post_init__(self) -> None:
        error_msg = get_validation_error_message(self.length, self.count)
        if error_msg:
            raise InvalidSpecError(error_msg)

        # Accept any iterable of characters but store frozensets
        object.__setattr__(self, "exclude_chars", frozenset(self.exclude_chars))
        object.__setattr__(self, "include_chars", frozenset(self.include_chars))

    @classmethod
    def from_options(cls,
                     length: int = DEFAULT_LENGTH,
                     count: int = DEFAULT_COUNT,
                     no_uppercase: bool = False,
                     no_lowercase: bool = False,
                     no_numbers: bool = False,
                     no_symbols: bool = False,
                     symbols: Optional[str] = None,
                     exclude: Optional[str] = None,
                     include: Optional[str] = None,
                     no_ambiguous: bool = False) -> "ConstraintSpec":
        """
        Build a spec from raw command-line option values.

        Args:
            length: Password length
            count: Number of passwords
            no_uppercase: Disable uppercase letters
            no_lowercase: Disable lowercase letters
            no_numbers: Disable digits
            no_symbols: Disable symbols
            symbols: Custom symbol pool replacing the default one
            exclude: Characters to remove from the alphabet
            include: Characters to add to the alphabet
            no_ambiguous: Remove ambiguous characters (0, O, l, 1, I)

        Returns:
            ConstraintSpec instance
        """
        return cls(
            length=length,
            count=count,
            include_uppercase=not no_uppercase,
            include_lowercase=not no_lowercase,
            include_digits=not no_numbers,
            include_symbols=not no_symbols,
            custom_symbols=symbols,
            exclude_chars=split_chars(exclude),
            include_chars=split_chars(include),
            no_ambiguous=no_ambiguous,
        )

    @property
    def symbol_pool(self) -> str:
        """Symbols used when the symbol category is enabled."""
        if self.custom_symbols is not None:
            return self.custom_symbols
        return DEFAULT_SYMBOLS


def _has_surviving_category(spec: ConstraintSpec, chars: Set[str]) -> bool:
    """Check whether an enabled category still contributes a character of its class."""
    if spec.include_uppercase and any(c in UPPERCASE for c in chars):
        return True
    if spec.include_lowercase and any(c in LOWERCASE for c in chars):
        return True
    if spec.include_digits and any(c in DIGITS for c in chars):
        return True
    if spec.include_symbols and any(c not in _ALPHANUMERIC for c in chars):
        return True
    return False


def build_charset(spec: ConstraintSpec) -> str:
    """
    Build the final alphabet for a constraint spec.

    Categories are added first, then manual includes, then ambiguous and
    excluded characters are removed, so exclusion always wins.

    Args:
        spec: Password constraints

    Returns:
        String of unique characters eligible for sampling

    Raises:
        EmptyAlphabetError: If no characters survive
        NoUsableCategoryError: If length > 1 and neither an enabled category
            nor a manual include contributed a character
    """
    chars: Set[str] = set()

    if spec.include_uppercase:
        chars.update(UPPERCASE)

    if spec.include_lowercase:
        chars.update(LOWERCASE)

    if spec.include_digits:
        chars.update(DIGITS)

    if spec.include_symbols:
        chars.update(spec.symbol_pool)

    chars.update(spec.include_chars)

    if spec.no_ambiguous:
        chars -= AMBIGUOUS_CHARS

    chars -= spec.exclude_chars

    if not chars:
        raise EmptyAlphabetError()

    if spec.length > 1 and not spec.include_chars and not _has_surviving_category(spec, chars):
        raise NoUsableCategoryError()

    logger.debug("Built alphabet of %d characters", len(chars))
    return ''.join(sorted(chars))


def sample(alphabet: str, length: int, count: int = 1,
           rng: Optional[random.Random] = None) -> List[str]:
    """
    Draw passwords uniformly from an alphabet.

    Every character is an independent draw with replacement.

    Args:
        alphabet: Characters to draw from
        length: Characters per password
        count: Number of passwords
        rng: Random source, defaults to the system CSPRNG

    Returns:
        List of ``count`` passwords
    """
    if not alphabet:
        raise EmptyAlphabetError()

    rng = rng or _system_random
    return [''.join(rng.choice(alphabet) for _ in range(length)) for _ in range(count)]


class PasswordGenerator:
    """Generate passwords for a fixed set of constraints."""

    def __init__(self, spec: ConstraintSpec, rng: Optional[random.Random] = None):
        """
        Initialize password generator with constraints.

        Args:
            spec: Password constraints
            rng: Optional random source (tests inject a seeded one)

        Raises:
            ValidationError: If the constraints leave no usable alphabet
        """
        self.spec = spec
        self.rng = rng
        self.charset = build_charset(spec)

    def generate(self) -> List[str]:
        """
        Generate passwords.

        Returns:
            List of ``spec.count`` passwords of ``spec.length`` characters
        """
        logger.debug("Generating %d password(s) of length %d", self.spec.count, self.spec.length)
        return sample(self.charset, self.spec.length, self.spec.count, rng=self.rng)

    def get_charset_info(self) -> str:
        """
        Get human-readable description of character set.

        Returns:
            Description of enabled character types and rules
        """
        parts = []

        if self.spec.include_uppercase:
            parts.append("uppercase")
        if self.spec.include_lowercase:
            parts.append("lowercase")
        if self.spec.include_digits:
            parts.append("digits")
        if self.spec.include_symbols:
            parts.append("custom symbols" if self.spec.custom_symbols is not None else "symbols")
        if self.spec.include_chars:
            parts.append("included chars")

        info = ", ".join(parts) or "no categories"

        rules = []
        if self.spec.no_ambiguous:
            rules.append("excluding ambiguous chars")
        if self.spec.exclude_chars:
            rules.append(f"excluding {len(self.spec.exclude_chars)} chosen chars")
        if rules:
            info += f" ({', '.join(rules)})"

        noun = "character" if len(self.charset) == 1 else "characters"
        return f"{info}; {len(self.charset)} {noun}"


def generate_passwords(rng: Optional[random.Random] = None, **options) -> List[str]:
    """
    Convenience function to generate passwords.

    Args:
        rng: Optional random source
        **options: Keyword arguments accepted by ``ConstraintSpec.from_options``

    Returns:
        List of generated passwords
    """
    spec = ConstraintSpec.from_options(**options)
    return PasswordGenerator(spec, rng=rng).generate()
