"""
Personalized insight sentences, selected by overall-score band.
"""

STRENGTH_THRESHOLD = 7.5
BALANCED_THRESHOLD = 5.5
CONCERN_THRESHOLD = 3.5


def build_insight(
    platform_name: str,
    overall_score: float,
    risk_factors: int,
    protective_factors: int,
    processed_count: int,
) -> str:
    """
    Templated insight for an adjusted overall score.

    Bands: >=7.5 strength, >=5.5 balanced, >=3.5 concern, else significant
    impact. With nothing processed there is no pattern to describe, so a
    degraded sentence is returned instead of a band sentence.
    """
    if processed_count == 0:
        return (
            f"We don't have enough answers about your {platform_name} usage to identify clear patterns yet. "
            f"Complete the assessment to receive a personalized wellness insight."
        )

    if overall_score >= STRENGTH_THRESHOLD:
        return (
            f"Your {platform_name} usage patterns show strong digital wellness habits. "
            f"You demonstrate {protective_factors} protective factors that support your mental health."
        )
    if overall_score >= BALANCED_THRESHOLD:
        return (
            f"Your {platform_name} usage shows a balanced approach with room for improvement. "
            f"Focus on addressing the {risk_factors} risk factors identified in your responses."
        )
    if overall_score >= CONCERN_THRESHOLD:
        return (
            f"Your {platform_name} usage patterns indicate several areas of concern. "
            f"The {risk_factors} risk factors suggest it may be impacting your mental wellness more than supporting it."
        )
    return (
        f"Your {platform_name} usage shows significant impact on your mental health. "
        f"With {risk_factors} risk factors present, consider implementing boundaries and seeking additional support."
    )
