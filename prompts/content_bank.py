"""
prompts/content_bank.py
Data tables for the companion: rituals per theme, tones, structures,
insights per language, and the oracle cards.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

THEMES: Tuple[str, ...] = (
    "stress", "fear", "guilt", "uncertainty", "anger", "sadness",
    "inspiration", "exhaustion", "loneliness", "existential", "neutral",
)

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("en", "fr", "es", "ar")
DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class RitualEntry:
    practices: Tuple[str, ...]
    product: str = ""


@dataclass(frozen=True)
class Tone:
    id: str
    label: str


@dataclass(frozen=True)
class Structure:
    id: str
    label: str
    sections: Tuple[str, ...]

    def describe(self) -> str:
        return "\n".join(f"{i}) {s}" for i, s in enumerate(self.sections, 1))


@dataclass(frozen=True)
class Card:
    id: str
    category: str
    title: Mapping[str, str]
    message: Mapping[str, str]

    def localized(self, lang: str) -> Tuple[str, str]:
        title = self.title.get(lang) or self.title[DEFAULT_LANGUAGE]
        message = self.message.get(lang) or self.message[DEFAULT_LANGUAGE]
        return title, message


@dataclass(frozen=True)
class ContentBank:
    """Immutable content configuration shared by every request."""
    rituals: Mapping[str, RitualEntry]
    tones: Tuple[Tone, ...]
    structures: Tuple[Structure, ...]
    insights: Mapping[str, Tuple[str, ...]]
    cards: Mapping[str, Tuple[Card, ...]]
    fallback_messages: Mapping[str, str]
    card_probability: float = 0.35
    two_insights_probability: float = 0.5
    supported_languages: Tuple[str, ...] = field(default=SUPPORTED_LANGUAGES)

    def __post_init__(self):
        if "neutral" not in self.rituals:
            raise ValueError("content bank needs a 'neutral' ritual entry")
        for theme, entry in self.rituals.items():
            if not entry.practices:
                raise ValueError(f"ritual entry '{theme}' has no practices")

    def ritual_for(self, theme: str) -> RitualEntry:
        return self.rituals.get(theme) or self.rituals["neutral"]

    def insights_for(self, lang: str) -> Tuple[str, ...]:
        return self.insights.get(lang) or self.insights.get(DEFAULT_LANGUAGE, ())

    def all_cards(self) -> Tuple[Card, ...]:
        return tuple(c for group in self.cards.values() for c in group)

    def fallback_message(self, lang: str) -> str:
        return self.fallback_messages.get(lang) or self.fallback_messages[DEFAULT_LANGUAGE]


# --- Rituals (English; the model adapts wording to the target language) ---
RITUAL_BANK: Dict[str, RitualEntry] = {
    "stress": RitualEntry(
        practices=(
            "Sit down and feel the support under your body. For one minute, let your shoulders drop a little on each exhale. You don't need to fix the stress, just let your body know it can soften 2%.",
            "Place both feet on the floor. For 60 seconds, gently press your toes and heels into the ground and imagine the floor taking 5% of your load.",
            "Open a page and create three tiny boxes: \"Now\", \"Later\", \"Not today\". Move each worry into one box. Circle only one \"Now\" item.",
        ),
        product="Zen Moon Diffuser",
    ),
    "fear": RitualEntry(
        practices=(
            "Place one hand on your chest, one on your belly. Say quietly: \"Right now I am here, I am breathing.\" Repeat it 5 times while noticing three details in the room.",
            "Walk 10 slow steps. With each step, name something you have already survived or handled in your life, even a small thing.",
            "Draw a small ladder with three steps. On the first, write one action you could take even with fear. On the second, what could come after. Leave the third blank for later.",
        ),
        product="Warm Focus Lamp",
    ),
    "guilt": RitualEntry(
        practices=(
            "Write one sentence starting with: \"Today I forgive myself a little for...\". Read it back in a very gentle voice, as if talking to a younger you.",
            "Place your hand on your heart and imagine a friend who did the same thing. What would you tell them? Whisper that sentence to yourself.",
            "On a page, make two columns: \"What happened\" and \"What I learned\". Move at least one item from the first column into the second.",
        ),
        product="Clarity Candle",
    ),
    "uncertainty": RitualEntry(
        practices=(
            "Set a 3-minute timer. Minute 1: write what you are afraid of losing. Minute 2: what you might gain. Minute 3: what would make the situation 10% more bearable.",
            "Draw two boxes: \"Take space\" and \"Stay where I am\". Under each, write one very small action you could try this month, without committing forever.",
            "Take a coin. Heads is option A, tails is option B. Notice how your body feels while the coin is in the air. That reaction is information.",
        ),
        product="Horizon Mind Projector",
    ),
    "anger": RitualEntry(
        practices=(
            "Do 10 strong exhales through the mouth, like blowing out candles, while gently shaking your hands and shoulders. Then feel your heartbeat slowing down.",
            "Write everything you would like to shout, uncensored. When you are done, crumple or tear the paper and exhale slowly.",
            "Press your feet into the ground and imagine sending the heat from your body down into the floor. Let the strength of the anger become clarity.",
        ),
        product="Soft Sandalwood Incense",
    ),
    "sadness": RitualEntry(
        practices=(
            "Sit near a window if possible. For two minutes, watch how the light changes on one object, and allow the sadness to be there without fixing it.",
            "Put a hand on your chest and whisper: \"Right now my heart feels...\" and finish the sentence honestly, without judging it.",
            "Choose one very soft action for yourself: a glass of water, stretching your back, or looking at something beautiful for 30 seconds. Let it be enough.",
        ),
        product="Calm Soul Bracelet",
    ),
    "inspiration": RitualEntry(
        practices=(
            "Write three ideas you would try if you were allowed to be imperfect. Circle the one that makes your body feel a little lighter.",
            "Set a 3-minute timer and write without stopping: \"If I followed my curiosity, I would...\". Do not correct, just let it flow.",
            "Pick one object around you as a symbol of your next chapter. Write one sentence starting with: \"This object reminds me that...\"",
        ),
        product="ASTRO-MIND Projector",
    ),
    "exhaustion": RitualEntry(
        practices=(
            "Lie down or lean back for three minutes. On each exhale, let one part of your body become heavier: jaw, shoulders, hands, legs.",
            "Write the one task that truly matters today and cross out one that can wait. Give yourself permission to do less.",
            "Drink a glass of water slowly, noticing its temperature. Then close your eyes for ten breaths, doing nothing else.",
        ),
        product="Lavender Rest Pillow",
    ),
    "loneliness": RitualEntry(
        practices=(
            "Think of one person who once made you feel seen. Write them a two-line message, even if you never send it.",
            "Place both hands on your upper arms in a gentle self-hug. Breathe slowly five times and say: \"I am keeping myself company.\"",
            "Step outside or open a window for two minutes and notice three signs of life around you: a sound, a movement, a light.",
        ),
        product="Warm Glow Candle",
    ),
    "existential": RitualEntry(
        practices=(
            "Look at the sky or a wide view for two minutes. Let the question stay open, and notice that you are still breathing inside it.",
            "Write: \"Today, something that matters to me is...\" and finish the sentence three different ways.",
            "Hold a small object in your hand. Notice its weight and texture for one minute, as an anchor in this present moment.",
        ),
        product="Night Sky Projector",
    ),
    "neutral": RitualEntry(
        practices=(
            "For one minute, feel the contact points between your body and what you are sitting or standing on. Let your breath get 5% slower.",
            "Take five slow breaths. On each inhale think: \"I arrive\". On each exhale: \"I soften\".",
            "Create a small clarity corner: place one item you love somewhere you can see it. Let it remind you that you are allowed to pause.",
        ),
        product="Zen Moon Diffuser",
    ),
}

TONES: Tuple[Tone, ...] = (
    Tone("gentle", "gentle and soft-spoken"),
    Tone("warm", "warm like a trusted friend"),
    Tone("poetic", "poetic, with images of light and sky"),
    Tone("grounded", "grounded and concrete"),
    Tone("calm", "calm and slow"),
    Tone("encouraging", "quietly encouraging"),
    Tone("tender", "tender and caring"),
    Tone("clear", "clear and simple"),
    Tone("hopeful", "hopeful without forcing positivity"),
    Tone("steady", "steady, like a hand on the shoulder"),
    Tone("playful", "lightly playful"),
    Tone("reflective", "reflective and curious"),
    Tone("compassionate", "deeply compassionate"),
    Tone("spacious", "spacious, leaving room for silence"),
    Tone("honest", "honest and direct, yet kind"),
    Tone("nurturing", "nurturing, like a safe nest"),
    Tone("serene", "serene, like a still lake"),
    Tone("earthy", "earthy, with images of roots and soil"),
    Tone("luminous", "luminous, with images of dawn"),
    Tone("breathful", "paced by the rhythm of the breath"),
)

STRUCTURES: Tuple[Structure, ...] = (
    Structure("companion", "Emotional companion", (
        "Emotional Mirror", "What seems to matter underneath",
        "Micro-practices (1-3, under 5 minutes each)", "Gentle next step", "Care reminder",
    )),
    Structure("navigator", "Dilemma navigator", (
        "Energy Reading", "Clarity Insight", "Personalized Ritual",
        "Guidance Phrase", "Care reminder",
    )),
    Structure("compass", "Inner compass", (
        "Where you are", "What you need", "One small practice", "Care reminder",
    )),
    Structure("letter", "Soft letter", (
        "A few words for you", "What I hear underneath", "A ritual for today",
        "A sentence to keep", "Care reminder",
    )),
    Structure("horizon", "Horizon map", (
        "The weather inside", "The horizon you long for", "The bridge (a micro-practice)",
        "First step on the bridge", "Care reminder",
    )),
)

INSIGHTS: Dict[str, Tuple[str, ...]] = {
    "en": (
        "Feelings are messengers, not verdicts.",
        "A tired nervous system sees every problem as bigger than it is.",
        "You do not need the whole path, only the next step.",
        "Rest is part of the work, not a reward for it.",
        "What you resist often asks to be heard, not fixed.",
        "Small honest actions create more safety than big promises.",
    ),
    "fr": (
        "Les émotions sont des messagères, pas des verdicts.",
        "Un système nerveux fatigué voit chaque problème plus grand qu'il n'est.",
        "Tu n'as pas besoin de tout le chemin, seulement du prochain pas.",
        "Le repos fait partie du travail, ce n'est pas une récompense.",
        "Ce que tu repousses demande souvent à être entendu, pas réparé.",
        "De petits gestes sincères créent plus de sécurité que de grandes promesses.",
    ),
    "es": (
        "Las emociones son mensajeras, no veredictos.",
        "Un sistema nervioso cansado ve cada problema más grande de lo que es.",
        "No necesitas todo el camino, solo el siguiente paso.",
        "El descanso es parte del trabajo, no un premio.",
        "Lo que resistes a menudo pide ser escuchado, no arreglado.",
        "Pequeñas acciones honestas crean más seguridad que grandes promesas.",
    ),
    "ar": (
        "المشاعر رسائل وليست أحكامًا.",
        "الجهاز العصبي المتعب يرى كل مشكلة أكبر مما هي عليه.",
        "لا تحتاج إلى الطريق كله، فقط إلى الخطوة التالية.",
        "الراحة جزء من العمل وليست مكافأة عليه.",
        "ما تقاومه غالبًا يطلب أن يُسمع لا أن يُصلح.",
        "الأفعال الصغيرة الصادقة تمنح أمانًا أكثر من الوعود الكبيرة.",
    ),
}

CARDS: Dict[str, Tuple[Card, ...]] = {
    "light": (
        Card(
            id="light-dawn",
            category="light",
            title={"en": "Dawn", "fr": "Aube", "es": "Amanecer", "ar": "الفجر"},
            message={
                "en": "Even the longest night ends in a soft first light.",
                "fr": "Même la plus longue nuit se termine par une douce première lumière.",
                "es": "Incluso la noche más larga termina en una suave primera luz.",
                "ar": "حتى أطول ليل ينتهي بضوء أول ناعم.",
            },
        ),
        Card(
            id="light-candle",
            category="light",
            title={"en": "Candle", "fr": "Bougie", "es": "Vela", "ar": "الشمعة"},
            message={
                "en": "A small flame is enough to see the next step.",
                "fr": "Une petite flamme suffit pour voir le prochain pas.",
                "es": "Una pequeña llama basta para ver el siguiente paso.",
                "ar": "لهب صغير يكفي لرؤية الخطوة التالية.",
            },
        ),
    ),
    "breath": (
        Card(
            id="breath-tide",
            category="breath",
            title={"en": "Tide", "fr": "Marée", "es": "Marea", "ar": "المد"},
            message={
                "en": "Like the tide, you are allowed to come and go.",
                "fr": "Comme la marée, tu as le droit d'aller et venir.",
                "es": "Como la marea, tienes permiso para ir y venir.",
                "ar": "مثل المد، يحق لك أن تأتي وتذهب.",
            },
        ),
        Card(
            id="breath-pause",
            category="breath",
            title={"en": "Pause", "fr": "Pause", "es": "Pausa", "ar": "وقفة"},
            message={
                "en": "Between two breaths there is always a place to rest.",
                "fr": "Entre deux respirations, il y a toujours un lieu pour se reposer.",
                "es": "Entre dos respiraciones siempre hay un lugar para descansar.",
                "ar": "بين نفسين هناك دائمًا مكان للراحة.",
            },
        ),
    ),
    "horizon": (
        Card(
            id="horizon-path",
            category="horizon",
            title={"en": "Path", "fr": "Chemin", "es": "Camino", "ar": "الطريق"},
            message={
                "en": "The path appears as you walk it.",
                "fr": "Le chemin apparaît à mesure que tu marches.",
                "es": "El camino aparece a medida que lo recorres.",
                "ar": "يظهر الطريق كلما مشيت فيه.",
            },
        ),
        Card(
            id="horizon-sky",
            category="horizon",
            title={"en": "Open Sky", "fr": "Ciel ouvert", "es": "Cielo abierto", "ar": "سماء مفتوحة"},
            message={
                "en": "Your heart is wider than this moment.",
                "fr": "Ton coeur est plus vaste que ce moment.",
                "es": "Tu corazón es más amplio que este momento.",
                "ar": "قلبك أوسع من هذه اللحظة.",
            },
        ),
    ),
}

FALLBACK_MESSAGES: Dict[str, str] = {
    "en": "I couldn't generate guidance right now.",
    "fr": "Je n'ai pas pu générer de guidance pour le moment.",
    "es": "No pude generar una guía en este momento.",
    "ar": "لم أتمكن من إنشاء إرشاد في الوقت الحالي.",
}


def build_content_bank(card_probability: float = 0.35,
                       two_insights_probability: float = 0.5) -> ContentBank:
    return ContentBank(
        rituals=MappingProxyType(dict(RITUAL_BANK)),
        tones=TONES,
        structures=STRUCTURES,
        insights=MappingProxyType(dict(INSIGHTS)),
        cards=MappingProxyType(dict(CARDS)),
        fallback_messages=MappingProxyType(dict(FALLBACK_MESSAGES)),
        card_probability=card_probability,
        two_insights_probability=two_insights_probability,
    )


DEFAULT_CONTENT = build_content_bank()
