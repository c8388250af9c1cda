"""
services/relay.py
Turns the raw completion text into the outbound result.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from prompts.content_bank import ContentBank
from services.selection import Selection


@dataclass(frozen=True)
class AnalysisResult:
    text: str
    theme: str
    lang: str
    selection: Selection
    used_fallback: bool = False

    def to_payload(self) -> Dict[str, Any]:
        s = self.selection
        return {
            "ok": True,
            "text": self.text,
            "theme": self.theme,
            "lang": self.lang,
            "practice": s.practice,
            "product": s.product,
            "tone": s.tone.id,
            "structure": s.structure.id,
            "insights": list(s.insights),
            "card": s.card.id if s.card is not None else None,
        }


def relay(raw_text: Optional[str], *, lang: str, theme: str,
          selection: Selection, bank: ContentBank) -> AnalysisResult:
    """Empty generations are a soft condition: the localized fallback replaces them."""
    text = (raw_text or "").strip()
    if text:
        return AnalysisResult(text=text, theme=theme, lang=lang, selection=selection)
    return AnalysisResult(
        text=bank.fallback_message(lang),
        theme=theme,
        lang=lang,
        selection=selection,
        used_fallback=True,
    )
