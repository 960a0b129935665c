"""Classification of free-form `generate` arguments.

`namesmith generate` accepts loose tokens in any order, e.g.
``namesmith generate female hispanic 1.5 0.5``. Every token is classified
into exactly one tagged result:

- NumberToken: a bias exponent (first = given names, second = surnames)
- KeywordToken: a gender keyword or surname group keyword
- UnknownToken: anything else
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal, Union

from ..sources import normalize_gender, normalize_group

_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True)
class NumberToken:
    value: float


@dataclass(frozen=True)
class KeywordToken:
    kind: Literal["gender", "group"]
    value: str  # canonical key


@dataclass(frozen=True)
class UnknownToken:
    text: str


Token = Union[NumberToken, KeywordToken, UnknownToken]


def classify_token(text: str) -> Token:
    """Classify one argument. Never raises."""
    token = text.strip()
    if _NUMBER_RE.fullmatch(token):
        return NumberToken(float(token))
    if gender := normalize_gender(token):
        return KeywordToken("gender", gender)
    if group := normalize_group(token):
        return KeywordToken("group", group)
    return UnknownToken(text)


@dataclass
class TokenSelection:
    """What a list of tokens asks for. Later keywords override earlier ones."""

    biases: list[float] = field(default_factory=list)
    gender: str | None = None
    group: str | None = None
    unknown: list[str] = field(default_factory=list)

    @property
    def given_bias(self) -> float | None:
        return self.biases[0] if self.biases else None

    @property
    def surname_bias(self) -> float | None:
        if len(self.biases) > 1:
            return self.biases[1]
        return self.given_bias


def resolve_tokens(tokens: list[str]) -> TokenSelection:
    """Fold classified tokens into a TokenSelection."""
    selection = TokenSelection()
    for text in tokens:
        token = classify_token(text)
        if isinstance(token, NumberToken):
            selection.biases.append(token.value)
        elif isinstance(token, KeywordToken):
            if token.kind == "gender":
                selection.gender = token.value
            else:
                selection.group = token.value
        else:
            selection.unknown.append(token.text)
    return selection
