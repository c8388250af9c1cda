# server/prompting.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List

from prompts.system_prompt import SYSTEM_PROMPT
from services.selection import Selection


@dataclass(frozen=True)
class AssembledPrompt:
    system: str
    user: str


class PromptAssembler:
    """
    Builds the instruction document for the Chat Completions API.
    Section order is fixed:
      1) target language + no-mixing rule
      2) the user's message, verbatim
      3) detected theme, as context only
      4) auxiliary selections (practice, product, tone, structure, insights, card)
      5) closing instruction
    """

    LANGUAGE_RULES = (
        "RULES:\n"
        "- You MUST answer 100% in this TARGET LANGUAGE. Do not mix languages.\n"
        "- If the user's text is in another language, you still answer only in the TARGET LANGUAGE.\n"
        "- Use the user's own words and context so it feels very specific to them."
    )

    MAX_PRACTICE_MINUTES = 5

    def __init__(self, system_prompt: str = SYSTEM_PROMPT):
        self.system_prompt = system_prompt.strip()

    def _selection_blocks(self, lang: str, selection: Selection) -> List[str]:
        blocks = [
            f"SUGGESTED MICRO-PRACTICE YOU MAY ADAPT (keep duration under "
            f"{self.MAX_PRACTICE_MINUTES} minutes, adapt wording to TARGET LANGUAGE):\n"
            f"{selection.practice}",
        ]
        if selection.product:
            blocks.append(
                "SUGGESTED PRODUCT / AMBIANCE (optional, keep it short):\n"
                f"{selection.product}"
            )
        blocks.append(f"TONE: {selection.tone.label} (id: {selection.tone.id})")
        blocks.append(
            f"STRUCTURE ({selection.structure.label}, id: {selection.structure.id}):\n"
            f"{selection.structure.describe()}"
        )
        if selection.insights:
            lines = "\n".join(f"- {i}" for i in selection.insights)
            blocks.append(f"INSIGHTS YOU MAY WEAVE IN:\n{lines}")
        if selection.card is not None:
            title, message = selection.card.localized(lang)
            blocks.append(
                f"ORACLE CARD DRAWN ({selection.card.id}):\n"
                f"Title: {title}\nMessage: {message}\n"
                "Mention this card briefly and gently, as a symbol, never as a prediction."
            )
        return blocks

    def assemble(self, *, lang: str, text: str, theme: str, selection: Selection) -> AssembledPrompt:
        sections = [
            f"TARGET LANGUAGE (ISO code): {lang}\n\n{self.LANGUAGE_RULES}",
            f"USER MESSAGE (feelings / situation):\n{text}",
            f"DETECTED EMOTION THEME (for context only, you may refine it): {theme}",
            *self._selection_blocks(lang, selection),
            (
                f"Now produce your answer following the STRUCTURE above, one heading per section, "
                f"written entirely in the TARGET LANGUAGE ({lang}). "
                "Do not repeat phrasing from earlier answers; find fresh words for this person."
            ),
        ]
        return AssembledPrompt(system=self.system_prompt, user="\n\n".join(sections) + "\n")

    @staticmethod
    def messages(prompt: AssembledPrompt) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": prompt.system},
            {"role": "user", "content": prompt.user},
        ]
