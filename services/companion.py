"""
services/companion.py
classify -> resolve language -> select -> assemble -> complete -> relay.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from prompts.content_bank import ContentBank
from server.prompting import AssembledPrompt, PromptAssembler
from services.classifier import classify_theme, resolve_language
from services.openai_client import CompletionClient
from services.relay import AnalysisResult, relay
from services.selection import ContentSelector, RandomSource, Selection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreparedRequest:
    text: str
    theme: str
    lang: str
    selection: Selection
    prompt: AssembledPrompt


class CompanionPipeline:
    def __init__(self, bank: ContentBank, rng: Optional[RandomSource] = None,
                 assembler: Optional[PromptAssembler] = None):
        self.bank = bank
        self.selector = ContentSelector(bank, rng)
        self.assembler = assembler or PromptAssembler()

    def prepare(self, text: str, lang_hint: Optional[str] = None) -> PreparedRequest:
        text = (text or "").strip()
        if not text:
            raise ValueError("Missing text")
        theme = classify_theme(text)
        lang = resolve_language(lang_hint, text, self.bank.supported_languages)
        selection = self.selector.select(theme, lang)
        prompt = self.assembler.assemble(lang=lang, text=text, theme=theme, selection=selection)
        logger.info("[analyze] theme=%s lang=%s tone=%s structure=%s card=%s",
                    theme, lang, selection.tone.id, selection.structure.id,
                    selection.card.id if selection.card else None)
        return PreparedRequest(text=text, theme=theme, lang=lang,
                               selection=selection, prompt=prompt)

    async def run(self, prepared: PreparedRequest, client: CompletionClient) -> AnalysisResult:
        raw = await client.complete(PromptAssembler.messages(prepared.prompt))
        result = relay(raw, lang=prepared.lang, theme=prepared.theme,
                       selection=prepared.selection, bank=self.bank)
        if result.used_fallback:
            logger.warning("[analyze] empty completion, using %s fallback", prepared.lang)
        return result
