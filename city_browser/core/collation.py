"""
Locale-aware string collation for the ordering engine.

Strings are compared the way an English-locale collator with default
strength does it: case is ignored, accented letters sort next to their
base letter (so 'São Paulo' sorts between 'Mumbai' and 'Shanghai'), and
accents only break ties between otherwise equal strings.

The collator is a stateless value object. Sort functions take it as an
argument, with DEFAULT_COLLATOR used when none is given.
"""
from __future__ import annotations

import unicodedata
from functools import lru_cache
from typing import Tuple

PRIMARY = "primary"
SECONDARY = "secondary"

# Letters NFKD leaves whole; without folding they sort after "z"
_BASE_LETTER_FOLDS = str.maketrans(
    {
        "æ": "ae",
        "ð": "d",
        "đ": "d",
        "ħ": "h",
        "ı": "i",
        "ĸ": "k",
        "ł": "l",
        "ø": "o",
        "œ": "oe",
        "ŧ": "t",
        "þ": "th",
    }
)


@lru_cache(maxsize=65536)
def _collation_key(text: str) -> Tuple[str, str]:
    folded = text.casefold()
    decomposed = unicodedata.normalize("NFKD", folded).translate(_BASE_LETTER_FOLDS)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, folded


class Collator:
    __slots__ = ()

    def sort_key(self, text: str) -> Tuple[str, str]:
        """
        Two-level key: (base letters, case-folded text).

        Base letters come from the NFKD decomposition with combining marks
        dropped, so 'é' and 'e' share the same primary weight.
        """
        return _collation_key(text)

    def compare(self, a: str, b: str) -> int:
        ka = self.sort_key(a)
        kb = self.sort_key(b)
        return (ka > kb) - (ka < kb)

    def equals(self, a: str, b: str, strength: str = PRIMARY) -> bool:
        """
        Equality at the given strength.

        - primary: ignores case and accents ('ERRÖR' equals 'error')
        - secondary: ignores case only
        """
        ka = self.sort_key(a)
        kb = self.sort_key(b)
        if strength == PRIMARY:
            return ka[0] == kb[0]
        if strength == SECONDARY:
            return ka == kb
        raise ValueError(f"Unknown collation strength: {strength!r}")

    def __repr__(self) -> str:
        return "Collator()"


DEFAULT_COLLATOR = Collator()
