# src/voluntrack/shared/language.py
"""
Language Resources - Ukrainian Report Texts

Reports are written for Ukrainian volunteers, so every canned text the
report generator can fall back to lives here, keyed by purpose.

Files that USE this module:
- voluntrack.application.report_generator (canned summaries, insights, prompt framing)
- voluntrack.adapters.formatting.formatter (date and estimate phrases)

Files that this module USES:
- None
"""
from typing import Dict

LANG_UKRAINIAN = "uk"

DEFAULT_PERIOD_LABEL = "Останні транзакції"

TEXTS: Dict[str, str] = {
    # Canned summary for empty history and for generation failures
    "fallback_summary": (
        "ШІ тимчасово недоступний, але логіка моніторингу активна. "
        "VolunTrack AI показує прозорість казначейства для волонтерів: "
        "баланс та орієнтовний обмін на USDC доступні. "
        "Підключіть гаманець та виконайте транзакції для повних звітів."
    ),
    "estimate_note": "Орієнтовна вартість обміну балансу: {value}.",
    "no_history_insight": "Історія транзакцій ще порожня: виконайте перші транзакції, щоб отримати повний звіт.",
    "missing_credential_summary": (
        "Генерація AI-звітів вимкнена: додайте ключ GENERATION_API_KEY до конфігурації, "
        "щоб отримувати звіти казначейства."
    ),
    "ai_insight": "Звіт згенеровано за допомогою AI на основі даних блокчейну.",
    "system_prompt": (
        "Ти — помічник казначейства для волонтерів. Пиши коротко, зрозуміло і лише українською мовою."
    ),
    "prompt_intro": (
        "Підготуй короткий фінансовий звіт для донорів про останні транзакції гаманця "
        "волонтерської організації ({period})."
    ),
    "prompt_entries_header": "Транзакції:",
    "prompt_estimate": "Додатковий контекст: орієнтовна вартість балансу при обміні становить {value}.",
    "prompt_outro": "Опиши активність гаманця і додай одну практичну пораду.",
    "unknown_date": "дата невідома",
}


def translate(key: str, **kwargs) -> str:
    """
    Look up a Ukrainian text and fill in its placeholders.

    Args:
        key: Text key
        **kwargs: Placeholder values

    Returns:
        Formatted text, or the key itself if it is unknown
    """
    text = TEXTS.get(key, key)
    if kwargs:
        return text.format(**kwargs)
    return text
