"""
services/selection.py
Randomized auxiliary content for a request: practice, tone, structure,
insights and an optional card.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, TypeVar

from prompts.content_bank import Card, ContentBank, Structure, Tone

T = TypeVar("T")


class RandomSource:
    """Uniform selection helpers over a ``random.Random``. Not cryptographic."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    @classmethod
    def seeded(cls, seed) -> "RandomSource":
        return cls(random.Random(seed))

    def pick_one(self, items: Sequence[T]) -> T:
        if not items:
            raise ValueError("cannot pick from an empty sequence")
        return self._rng.choice(items)

    def sample(self, items: Sequence[T], k: int) -> list:
        return self._rng.sample(list(items), min(k, len(items)))

    def chance(self, probability: float) -> bool:
        return self._rng.random() < probability


@dataclass(frozen=True)
class Selection:
    practice: str
    product: str
    tone: Tone
    structure: Structure
    insights: Tuple[str, ...]
    card: Optional[Card] = None


class ContentSelector:
    def __init__(self, bank: ContentBank, rng: Optional[RandomSource] = None):
        self.bank = bank
        self.rng = rng or RandomSource()

    def pick_practice(self, theme: str) -> Tuple[str, str]:
        entry = self.bank.ritual_for(theme)
        return self.rng.pick_one(entry.practices), entry.product

    def pick_insights(self, lang: str) -> Tuple[str, ...]:
        pool = self.bank.insights_for(lang)
        if not pool:
            return ()
        k = 2 if self.rng.chance(self.bank.two_insights_probability) else 1
        return tuple(self.rng.sample(pool, k))

    def pick_card(self) -> Optional[Card]:
        cards = self.bank.all_cards()
        if not cards or not self.rng.chance(self.bank.card_probability):
            return None
        return self.rng.pick_one(cards)

    def select(self, theme: str, lang: str) -> Selection:
        """Each draw is independent; only the practice and product depend on the theme."""
        practice, product = self.pick_practice(theme)
        return Selection(
            practice=practice,
            product=product,
            tone=self.rng.pick_one(self.bank.tones),
            structure=self.rng.pick_one(self.bank.structures),
            insights=self.pick_insights(lang),
            card=self.pick_card(),
        )
