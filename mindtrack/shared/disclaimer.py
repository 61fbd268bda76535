"""
MindTrack Support Notes
Deterministic selection of the support note shown alongside every analysis.

RULES (LOCKED):
1. risk_level == "high"  -> professional-support note
2. anything else         -> general wellness note

NOTE: risk_level comes from the scoring engine. This module only picks text.
"""

GENERAL_WELLNESS_NOTE = (
    "MindTrack offers self-reflection tools, not medical advice. "
    "It is not a substitute for professional mental health care."
)

PROFESSIONAL_SUPPORT_NOTE = (
    "Your answers suggest social media may be weighing on you. "
    "Consider talking with someone you trust or a licensed mental health professional. "
    "If you are in crisis, contact your local emergency number or a crisis line right away."
)


def choose_support_note(risk_level: str) -> str:
    """
    Return the support note for a risk level.

    Unknown values get the general note.

    Example:
        >>> choose_support_note("high")
        "Your answers suggest social media may be weighing on you. ..."
    """
    if (risk_level or "").lower() == "high":
        return PROFESSIONAL_SUPPORT_NOTE
    return GENERAL_WELLNESS_NOTE
