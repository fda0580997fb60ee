# autocenter/models/common.py
from typing import Dict, List, Literal

Language = Literal["ar", "en"]
LANGUAGES = ("ar", "en")

FIRST_STAGE = 0
FINAL_STAGE = 6

# Index i means the same workshop milestone in every language
TRACKING_STEPS: Dict[str, List[str]] = {
    "ar": [
        "تم استلام الطلب",
        "فحص المركبة",
        "اكتمل التشخيص",
        "جاري الإصلاح",
        "فحص الجودة",
        "الغسيل والتنظيف النهائي",
        "جاهزة للاستلام",
    ],
    "en": [
        "Request Received",
        "Vehicle Inspection",
        "Diagnosis Complete",
        "Repair in Progress",
        "Quality Check",
        "Final Wash & Detailing",
        "Ready for Pickup",
    ],
}


def normalize_language(lang: str | None, default: str = "ar") -> str:
    lang = (lang or "").strip().lower()
    return lang if lang in LANGUAGES else default


def get_tracking_steps(lang: str) -> List[str]:
    return list(TRACKING_STEPS[normalize_language(lang)])


def stage_label(stage: int, lang: str) -> str:
    if not FIRST_STAGE <= stage <= FINAL_STAGE:
        raise ValueError(f"stage out of range: {stage}")
    return TRACKING_STEPS[normalize_language(lang)][stage]


def next_stage(stage: int) -> int:
    """Stages only move forward by one and stop at the final stage."""
    return min(FINAL_STAGE, stage + 1)


def progress_percent(stage: int) -> float:
    return round(stage / FINAL_STAGE * 100, 2)


def text_direction(lang: str) -> str:
    return "rtl" if normalize_language(lang) == "ar" else "ltr"
