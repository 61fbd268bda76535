"""
MindTrack Question Catalog
Version 1.0.0

Static per-platform questionnaires. Order within a platform is the order
the assessment form presents the questions.

Principle: the catalog is pure data. Scoring metadata lives in
mindtrack.scoring.weights and must only reference ids defined here.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from .models import AnswerOption, Question


def _q(question_id: str, prompt: str, options: Iterable[Tuple[str, str]]) -> Question:
    return Question(
        id=question_id,
        prompt=prompt,
        options=tuple(AnswerOption(value=v, label=l) for v, l in options),
    )


PLATFORM_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType({
    "instagram": "Instagram",
    "facebook": "Facebook",
    "snapchat": "Snapchat",
    "twitter": "Twitter/X",
})

PLATFORM_ALIASES: Mapping[str, str] = MappingProxyType({
    "x": "twitter",
    "twitter/x": "twitter",
})


# ============================================================================
# INSTAGRAM
# ============================================================================

_INSTAGRAM = (
    _q("current_experience", "How would you describe your current experience with Instagram?", [
        ("uplifting", "Uplifting and inspiring"),
        ("mixed", "A mix of fun and distraction"),
        ("overwhelming", "Sometimes overwhelming"),
        ("balance", "I'd like to explore a healthier balance"),
    ]),
    _q("usage_frequency", "How often do you use Instagram during your free time?", [
        ("rarely", "Rarely"),
        ("occasionally", "Occasionally"),
        ("few_times", "A few times a day"),
        ("regularly", "Regularly throughout the day"),
    ]),
    _q("content_type", "What type of content do you engage with the most?", [
        ("educational", "Educational and career-oriented"),
        ("fitness", "Fitness, motivation, or self-growth"),
        ("entertainment", "Entertainment and lifestyle"),
        ("mixed", "Mixed or not sure"),
    ]),
    _q("feeling_after", "After using Instagram, how do you typically feel?", [
        ("energized", "Energized and positive"),
        ("neutral", "Neutral"),
        ("distracted", "Slightly distracted"),
        ("drained", "Emotionally drained or overstimulated"),
    ]),
    _q("self_image_influence", "Has Instagram influenced your self-image or emotions?", [
        ("not_really", "Not really"),
        ("sometimes", "Sometimes I feel inspired, other times unsure"),
        ("reflected", "Yes, I've reflected more on how I view myself"),
        ("understand_better", "Yes, and I'm looking to understand this better"),
    ]),
    _q("personal_growth", "Does Instagram help or hinder your personal growth?", [
        ("supports", "It supports my goals"),
        ("both", "A bit of both"),
        ("distracts", "It distracts me at times"),
        ("realign", "I'd like to realign my time better"),
    ]),
    _q("engagement_importance", "How important are likes/comments/followers to you?", [
        ("not_important", "Not important"),
        ("somewhat", "Somewhat noticeable"),
        ("track", "I often track them"),
        ("affected", "I feel affected when engagement changes"),
    ]),
    _q("boundaries", "Would you consider taking breaks or setting boundaries with Instagram?", [
        ("already_take", "I already take breaks regularly"),
        ("considered", "I've considered it but haven't started"),
        ("hard_to_step", "It's hard to step away"),
        ("help_needed", "I'd like help creating healthy boundaries"),
    ]),
    _q("support_interest", "Would you be interested in resources or support for mindful Instagram use?", [
        ("yes", "Yes, that would be helpful"),
        ("maybe", "Maybe, if it fits my needs"),
        ("not_now", "Not right now"),
        ("not_sure", "I'm not sure"),
    ]),
)


# ============================================================================
# FACEBOOK
# ============================================================================

_FACEBOOK = (
    _q("check_frequency", "How often do you check Facebook?", [
        ("occasionally", "Occasionally"),
        ("once_twice", "Once or twice daily"),
        ("several_times", "Several times a day"),
        ("continuously", "Continuously throughout the day"),
    ]),
    _q("main_use", "What do you mainly use Facebook for?", [
        ("staying_touch", "Staying in touch with friends/family"),
        ("sharing_memories", "Sharing memories or thoughts"),
        ("browsing_groups", "Browsing groups or marketplace"),
        ("mix_everything", "A mix of everything"),
    ]),
    _q("feeling_after", "How do you usually feel after using Facebook?", [
        ("connected", "Connected and positive"),
        ("neutral", "Neutral"),
        ("distracted", "Slightly distracted or overwhelmed"),
        ("anxious", "Anxious or left out"),
    ]),
    _q("comparing_life", "Do you find yourself comparing your life with others based on posts?", [
        ("not_at_all", "Not at all"),
        ("occasionally", "Occasionally"),
        ("frequently", "Frequently"),
        ("almost_always", "Almost always"),
    ]),
    _q("meaningful_time", "How often do you feel your time on Facebook is meaningful?", [
        ("very_often", "Very often"),
        ("sometimes", "Sometimes"),
        ("rarely", "Rarely"),
        ("unsure", "Unsure"),
    ]),
    _q("interactions_influence", "Do interactions (likes, comments) influence how you feel about yourself or others?", [
        ("not_really", "Not really"),
        ("occasionally", "Occasionally"),
        ("sometimes", "Yes, sometimes"),
        ("frequently", "Yes, frequently"),
    ]),
    _q("family_posts_trigger", "Do family posts or social updates ever trigger emotional reactions?", [
        ("not_at_all", "Not at all"),
        ("slightly", "Slightly"),
        ("often", "Often"),
        ("strongly", "Strongly"),
    ]),
    _q("support_or_distract", "Does Facebook support or distract you from personal goals or mental peace?", [
        ("supports", "It supports me"),
        ("mix_both", "A mix of both"),
        ("distracts_occasionally", "It distracts me occasionally"),
        ("affects_deeply", "It affects me deeply"),
    ]),
    _q("groups_support", "Do you use Facebook groups or communities for emotional support or hobbies?", [
        ("yes_regularly", "Yes, regularly"),
        ("sometimes", "Sometimes"),
        ("rarely", "Rarely"),
        ("no", "No"),
    ]),
    _q("wellness_tips", "Are you open to mental wellness tips tailored to your Facebook use?", [
        ("yes", "Yes"),
        ("maybe", "Maybe"),
        ("not_sure", "Not sure"),
        ("no", "No"),
    ]),
)


# ============================================================================
# SNAPCHAT
# ============================================================================

_SNAPCHAT = (
    _q("daily_usage", "How often do you use Snapchat daily?", [
        ("less_30min", "Less than 30 minutes"),
        ("30min_1hour", "30 minutes to 1 hour"),
        ("1_2hours", "1-2 hours"),
        ("more_2hours", "More than 2 hours"),
    ]),
    _q("primary_use", "What do you primarily use Snapchat for?", [
        ("staying_connected", "Staying connected with friends"),
        ("sharing_moments", "Sharing personal moments"),
        ("exploring_content", "Exploring content/stories"),
        ("maintaining_streaks", "Maintaining streaks"),
    ]),
    _q("streak_breaks", "How do you feel when a streak breaks or snaps go unanswered?", [
        ("unaffected", "Unaffected"),
        ("slightly_concerned", "Slightly concerned"),
        ("stressed", "Stressed or anxious"),
        ("upset", "Upset or emotional"),
    ]),
    _q("feel_left_out", "Do you ever feel left out due to content shared by others?", [
        ("never", "Never"),
        ("rarely", "Rarely"),
        ("sometimes", "Sometimes"),
        ("often", "Often"),
    ]),
    _q("appearing_perfect", "How much effort do you put into appearing fun or perfect on Snapchat?", [
        ("none", "None - I post casually"),
        ("little", "A little - for fun"),
        ("moderate", "Moderate - I like to be seen a certain way"),
        ("lot", "A lot - I feel pressured to present a certain image"),
    ]),
    _q("feel_understood", "Do you feel seen and understood through your Snapchat interactions?", [
        ("always", "Yes, always"),
        ("mostly", "Mostly"),
        ("sometimes", "Sometimes"),
        ("rarely", "Rarely"),
    ]),
    _q("emotional_effect", "How does using Snapchat affect your emotional state overall?", [
        ("happy_connected", "I feel happy and connected"),
        ("neutral", "Neutral"),
        ("mixed_emotions", "Mixed emotions"),
        ("drained", "Emotionally drained sometimes"),
    ]),
    _q("impact_goals", "Has your Snapchat use ever impacted your studies, work, or goals?", [
        ("never", "Never"),
        ("rarely", "Rarely"),
        ("occasionally", "Occasionally"),
        ("often", "Often"),
    ]),
    _q("real_self", "Do you feel comfortable expressing your real self on Snapchat?", [
        ("always", "Always"),
        ("mostly", "Mostly"),
        ("sometimes", "Sometimes"),
        ("not_really", "Not really"),
    ]),
    _q("balance_tips", "Would you like tips to better balance your digital and emotional life?", [
        ("definitely", "Definitely"),
        ("maybe", "Maybe"),
        ("not_sure", "Not sure"),
        ("no", "No"),
    ]),
)


# ============================================================================
# TWITTER / X
# ============================================================================

_TWITTER = (
    _q("experience", "How would you describe your experience with Twitter/X?", [
        ("engaging", "Engaging and informative"),
        ("mixed", "A mix of value and noise"),
        ("intense", "Sometimes intense or draining"),
        ("habit", "I use it mostly out of habit"),
    ]),
    _q("content_interaction", "What kind of content do you usually interact with?", [
        ("news", "News and world events"),
        ("memes", "Memes and humor"),
        ("discussions", "Discussions and debates"),
        ("variety", "A variety / not sure"),
    ]),
    _q("feeling_after", "After scrolling through Twitter, how do you typically feel?", [
        ("informed", "Informed and curious"),
        ("neutral", "Neutral or unaffected"),
        ("overwhelmed", "A bit overwhelmed or reactive"),
        ("unsettled", "Emotionally unsettled"),
    ]),
    _q("trending_topics", "How frequently do trending topics affect your emotions or opinions?", [
        ("rarely", "Rarely"),
        ("sometimes", "Sometimes"),
        ("frequently", "Frequently"),
        ("very_often", "Very often"),
    ]),
    _q("online_arguments", "Do online arguments or intense threads impact your mood?", [
        ("not_at_all", "Not at all"),
        ("occasionally", "Occasionally"),
        ("sometimes_affect", "Yes, they sometimes affect me"),
        ("significantly", "Yes, quite significantly"),
    ]),
    _q("express_emotions", "Do you use Twitter to express emotions or vent?", [
        ("never", "Never"),
        ("rarely", "Rarely"),
        ("sometimes", "Sometimes"),
        ("frequently", "Frequently"),
    ]),
    _q("pressure_respond", "Do you feel pressure to respond or stay constantly updated?", [
        ("no_pressure", "No pressure at all"),
        ("mild_pressure", "Mild pressure"),
        ("quite_often", "Quite often"),
        ("constantly", "Constantly"),
    ]),
    _q("focus_wellbeing", "Does Twitter support or hinder your daily focus and well-being?", [
        ("helps", "It helps me stay sharp and informed"),
        ("neutral", "It's neutral"),
        ("bit_distracting", "It's a bit distracting"),
        ("affects_significantly", "It affects my focus significantly"),
    ]),
    _q("feel_safe", "How safe or respected do you feel on Twitter?", [
        ("very_safe", "Very safe and respected"),
        ("mostly_okay", "Mostly okay"),
        ("sometimes_judged", "Sometimes judged or misunderstood"),
        ("exposed_negativity", "Often exposed to negativity"),
    ]),
    _q("stress_strategies", "Are you open to strategies that help reduce online stress?", [
        ("definitely", "Definitely"),
        ("maybe", "Maybe"),
        ("thinking_about", "I'm thinking about it"),
        ("not_now", "Not right now"),
    ]),
)


QUESTION_CATALOG: Mapping[str, Tuple[Question, ...]] = MappingProxyType({
    "instagram": _INSTAGRAM,
    "facebook": _FACEBOOK,
    "snapchat": _SNAPCHAT,
    "twitter": _TWITTER,
})


def normalize_platform(raw: str) -> str:
    """Lowercase/strip a platform name and resolve aliases ("x" -> "twitter")."""
    key = (raw or "").strip().lower()
    return PLATFORM_ALIASES.get(key, key)


def supported_platforms() -> Tuple[str, ...]:
    return tuple(QUESTION_CATALOG.keys())


def is_supported_platform(platform: str) -> bool:
    return normalize_platform(platform) in QUESTION_CATALOG


def get_questions(platform: str) -> Tuple[Question, ...]:
    """Ordered questions for a platform; empty for unknown platforms."""
    return QUESTION_CATALOG.get(normalize_platform(platform), ())


def get_question(platform: str, question_id: str):
    for question in get_questions(platform):
        if question.id == question_id:
            return question
    return None


def get_platform_display_name(platform: str) -> str:
    """
    Display name for a platform.

    Unknown platforms are title-cased as given; blank input becomes
    "this platform" so insight sentences stay readable.
    """
    key = normalize_platform(platform)
    if key in PLATFORM_DISPLAY_NAMES:
        return PLATFORM_DISPLAY_NAMES[key]
    cleaned = (platform or "").strip()
    if not cleaned:
        return "this platform"
    return cleaned[:1].upper() + cleaned[1:]
