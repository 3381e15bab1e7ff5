#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Caesar shift over a fixed alphabet (English / Turkish)"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional

log = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# ALPHABETS
# ═══════════════════════════════════════════════════════════════════════════════

EN_ALPHA = 'abcdefghijklmnopqrstuvwxyz'
TR_ALPHA = 'abcçdefgğhıijklmnoöprsştuüvyz'


@dataclass(frozen=True)
class Alphabet:
    """Ordered set of letters with a reverse lookup letter -> position"""
    letters: str
    index_map: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index_map = {c: i for i, c in enumerate(self.letters)}
        if len(index_map) != len(self.letters):
            raise ValueError(f"duplicate letters in alphabet {self.letters!r}")
        object.__setattr__(self, 'index_map', MappingProxyType(index_map))

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, i: int) -> str:
        return self.letters[i]

    def __contains__(self, char: str) -> bool:
        return char in self.index_map

    def index(self, char: str) -> Optional[int]:
        return self.index_map.get(char)


ENGLISH = Alphabet(EN_ALPHA)  # 26
TURKISH = Alphabet(TR_ALPHA)  # 29

ALPHABETS: Dict[str, Alphabet] = {'tr': TURKISH, 'en': ENGLISH}
LANGUAGE_NAMES = {'tr': 'Turkish', 'en': 'English'}


# ═══════════════════════════════════════════════════════════════════════════════
# SHIFT
# ═══════════════════════════════════════════════════════════════════════════════

class Direction(Enum):
    LEFT = 'left'
    RIGHT = 'right'

    @property
    def sign(self) -> int:
        return -1 if self is Direction.LEFT else 1


@lru_cache(maxsize=128)
def _table(letters: str, offset: int) -> dict:
    size = len(letters)
    shifted = ''.join(letters[(i + offset) % size] for i in range(size))
    return str.maketrans(letters, shifted)


def shift(message: str, amount: int, direction: Direction, alphabet: Alphabet) -> str:
    """
    Rotates every letter of `message` by `amount` positions inside `alphabet`.

    LEFT subtracts the offset, RIGHT adds it; both wrap around the alphabet.
    Characters outside the alphabet are copied unchanged, so the result always
    has the length of the input.
    """
    size = len(alphabet)
    normalized = amount % size
    offset = (direction.sign * normalized) % size
    log.debug("shift %+d %s over %d letters -> offset %d",
              amount, direction.value, size, offset)
    return message.translate(_table(alphabet.letters, offset))


class Operation(Enum):
    CIPHER = 'cipher'
    DECIPHER = 'decipher'

    def apply(self, message: str, amount: int, direction: Direction,
              alphabet: Alphabet) -> str:
        if self is Operation.CIPHER:
            return shift(message, amount, direction, alphabet)
        return shift(message, -amount, direction, alphabet)

    def describe(self, word: str, result: str) -> str:
        if self is Operation.CIPHER:
            return f"Original {word} -> Ciphered {result}"
        return f"Ciphered {word} -> Deciphered {result}"


# ═══════════════════════════════════════════════════════════════════════════════
# INPUT VALIDATION
# ═══════════════════════════════════════════════════════════════════════════════

_INT_RE = re.compile(r'[+-]?[0-9]+')


class InvalidWord(ValueError):
    """Word rejected by normalize_word; `reason` is 'empty' or 'alphabet'"""

    def __init__(self, word: str, reason: str):
        super().__init__(f"invalid word {word!r}: {reason}")
        self.word = word
        self.reason = reason


def parse_int(text: str) -> int:
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    return int(text)


def normalize_word(text: str, alphabet: Alphabet) -> str:
    """Lowercases the input and checks it is one token of alphabet letters"""
    word = text.strip().lower()
    if not word or any(c.isspace() for c in word):
        raise InvalidWord(word, 'empty')
    if not all(c in alphabet for c in word):
        raise InvalidWord(word, 'alphabet')
    return word
