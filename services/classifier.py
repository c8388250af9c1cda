"""
services/classifier.py
Keyword theme classification and target-language resolution.

Both functions are pure: same input, same output. The rule tables are plain
ordered data; the first matching rule wins, so reordering them changes results.
"""
from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence, Tuple

from prompts.content_bank import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

NEUTRAL = "neutral"

# (theme, pattern) in priority order. FR + EN keywords, with a few ES / AR ones.
THEME_RULES: Tuple[Tuple[str, re.Pattern[str]], ...] = tuple(
    (theme, re.compile(pattern))
    for theme, pattern in (
        ("stress", r"stress|angoiss|\bpression|overwhelm|burnout|agobi|estr[eé]s|ضغط|توتر"),
        ("fear", r"peur|crain|inqui|anxi|afraid|scared|fear|terrif|miedo|asustad|خائف|خوف|قلق"),
        ("guilt", r"culpabil|regret|honte|guilt|ashamed|culpa|verg[uü]enza|ذنب"),
        ("uncertainty", r"perdu|incertitude|doute|choix|uncertain|doubt|confused|decision|d[ée]cision|\bno sé\b|duda|حيرة"),
        ("anger", r"col[eè]re|frustration|blessure|angry|anger|\brage|furious|enojad|enfadad|غضب"),
        ("sadness", r"tristesse|\bvide\b|\bsad|emptiness|d[ée]prim|triste|\bcr(?:y|ied|ying)\b|pleure|حزين|حزن"),
        ("inspiration", r"inspir|cr[ée]ativ|motivat|id[ée]e|idea|excited|ilusi[oó]n"),
        ("exhaustion", r"fatigue|\b[ée]puis|exhaust|\btired|drained|worn out|agotad|cansad|تعب|منهك"),
        ("loneliness", r"solitude|\bseul(?:e|es|s)?\b|lonely|alone|isolat|soledad|وحيد|وحدة"),
        ("existential", r"sens de (?:la|ma) vie|meaning of (?:my )?life|purpose|pointless|existen|why am i here|[àa] quoi bon|sentido de (?:la|mi) vida|معنى"),
    )
)

# (lang, detector) in priority order; "en" is the fallback.
LANGUAGE_RULES: Tuple[Tuple[str, re.Pattern[str]], ...] = (
    ("fr", re.compile(r"\bje\b|\bj['’]|ne sais pas|travail|emploi|\bville\b|changer|\bpeur\b|avenir|\bdois\b|devrais|ressens|\bc['’]est\b|\bça\b")),
    ("es", re.compile(r"\byo\b|\bno sé\b|trabajo|ciudad|miedo|futuro|deber[ií]a|\bsiento\b|\bestoy\b")),
    ("ar", re.compile(r"[\u0600-\u06FF\u0750-\u077F]")),
)


def normalize(text: Optional[str]) -> str:
    return (text or "").strip().lower()


def classify_theme(
    text: str,
    rules: Iterable[Tuple[str, re.Pattern[str]]] = THEME_RULES,
) -> str:
    """Return the theme of the first rule matching anywhere in ``text``, else neutral."""
    t = normalize(text)
    for theme, pattern in rules:
        if pattern.search(t):
            return theme
    return NEUTRAL


def detect_language(
    text: str,
    rules: Iterable[Tuple[str, re.Pattern[str]]] = LANGUAGE_RULES,
) -> str:
    t = normalize(text)
    for lang, pattern in rules:
        if pattern.search(t):
            return lang
    return DEFAULT_LANGUAGE


def resolve_language(
    hint: Optional[str],
    text: str,
    supported: Sequence[str] = SUPPORTED_LANGUAGES,
) -> str:
    """
    An explicit hint always wins over detection. Hints outside the supported
    set resolve to the default language rather than leaking through.
    """
    lang = normalize(hint)
    if lang:
        return lang if lang in supported else DEFAULT_LANGUAGE
    detected = detect_language(text)
    return detected if detected in supported else DEFAULT_LANGUAGE
