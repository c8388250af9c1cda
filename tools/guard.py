#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Content guard: validates the content tables so edits to the copy don't break
the selection rules.

Checks:
- Every theme has a ritual entry (neutral is mandatory) with practices
- 20 tones and 5 structures, unique ids
- Insights exist for every supported language
- Every card is localized in every supported language
- Fallback message per supported language
- Probabilities are within [0, 1]
- Classifier rules only emit known themes

Run manually:
  python -m tools.guard
"""
import sys
from typing import List, Tuple

from prompts.content_bank import DEFAULT_CONTENT, THEMES, ContentBank
from services.classifier import THEME_RULES


def run_checks(bank: ContentBank = DEFAULT_CONTENT) -> Tuple[List[str], List[str]]:
    errors: List[str] = []
    warns: List[str] = []

    def must(cond, msg):
        if not cond:
            errors.append(msg)

    def should(cond, msg):
        if not cond:
            warns.append(msg)

    # --- Rituals ---
    must("neutral" in bank.rituals, "rituals: 'neutral' entry missing")
    for theme in THEMES:
        entry = bank.rituals.get(theme)
        should(entry is not None, f"rituals: no dedicated entry for '{theme}' (neutral is used)")
        if entry is not None:
            must(len(entry.practices) > 0, f"rituals: '{theme}' has no practices")
            should(len(entry.practices) > 1, f"rituals: '{theme}' has a single practice")
            should(bool(entry.product), f"rituals: '{theme}' has no product suggestion")

    # --- Tones / structures ---
    must(len(bank.tones) == 20, f"tones: expected 20, found {len(bank.tones)}")
    must(len({t.id for t in bank.tones}) == len(bank.tones), "tones: duplicate ids")
    must(len(bank.structures) == 5, f"structures: expected 5, found {len(bank.structures)}")
    must(len({s.id for s in bank.structures}) == len(bank.structures), "structures: duplicate ids")
    for s in bank.structures:
        must(len(s.sections) > 0, f"structures: '{s.id}' has no sections")

    # --- Per-language content ---
    for lang in bank.supported_languages:
        must(len(bank.insights.get(lang, ())) >= 2, f"insights: need at least 2 for '{lang}'")
        must(bool(bank.fallback_messages.get(lang)), f"fallback: missing message for '{lang}'")

    cards = bank.all_cards()
    must(len({c.id for c in cards}) == len(cards), "cards: duplicate ids")
    for category, group in bank.cards.items():
        for card in group:
            must(card.category == category, f"cards: '{card.id}' filed under '{category}'")
            for lang in bank.supported_languages:
                must(bool(card.title.get(lang)), f"cards: '{card.id}' has no '{lang}' title")
                must(bool(card.message.get(lang)), f"cards: '{card.id}' has no '{lang}' message")

    # --- Constants ---
    must(0.0 <= bank.card_probability <= 1.0, "card_probability must be within [0, 1]")
    must(0.0 <= bank.two_insights_probability <= 1.0, "two_insights_probability must be within [0, 1]")

    # --- Classifier ---
    for theme, _ in THEME_RULES:
        must(theme in THEMES, f"classifier: rule emits unknown theme '{theme}'")

    return errors, warns


def main() -> int:
    errors, warns = run_checks()
    if errors:
        print("\n❌ Guard failed with the following errors:")
        for e in errors:
            print("   -", e)
    if warns:
        print("\n⚠️  Warnings:")
        for w in warns:
            print("   -", w)
    if errors:
        return 1
    print("✅ Guard passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
