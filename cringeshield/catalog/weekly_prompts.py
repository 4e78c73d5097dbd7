"""
15-week tiered challenge prompt catalog.

Every tier carries exactly 15 weeks x 3 prompts. Prompt ids are derived from
tier, week and order: ``<prefix>_w<week>_p<order>`` (e.g. ``growing_w3_p2``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cringeshield.utils.common import is_strict_int

TOTAL_WEEKS = 15
PROMPTS_PER_WEEK = 3
TOTAL_PROMPTS_PER_TIER = TOTAL_WEEKS * PROMPTS_PER_WEEK


class WeeklyChallengeTier(str, Enum):
    """Difficulty tracks for the 15-week challenge."""
    SHY_STARTER = "shy_starter"
    GROWING_SPEAKER = "growing_speaker"
    CONFIDENT_CREATOR = "confident_creator"


TIER_PREFIXES: dict[WeeklyChallengeTier, str] = {
    WeeklyChallengeTier.SHY_STARTER: "shy",
    WeeklyChallengeTier.GROWING_SPEAKER: "growing",
    WeeklyChallengeTier.CONFIDENT_CREATOR: "confident",
}

TIER_LABELS: dict[WeeklyChallengeTier, str] = {
    WeeklyChallengeTier.SHY_STARTER: "Shy Starter",
    WeeklyChallengeTier.GROWING_SPEAKER: "Growing Speaker",
    WeeklyChallengeTier.CONFIDENT_CREATOR: "Confident Creator",
}


@dataclass(frozen=True)
class WeeklyPrompt:
    id: str
    week: int
    tier: WeeklyChallengeTier
    order: int
    text: str
    title: Optional[str] = None


def make_prompt_id(tier: WeeklyChallengeTier, week: int, order: int) -> str:
    return f"{TIER_PREFIXES[tier]}_w{week}_p{order}"


# (week, order, text)
# Shy Starter prompts are shorter and simpler, designed for beginners.
_SHY_STARTER = [
    # Week 1
    (1, 1, 'Say your name, where you\'re from, and one fun fact—no pressure, just a chill intro.'),
    (1, 2, 'Look around and describe 3 things near you. This gets you talking without thinking too hard.'),
    (1, 3, 'Talk for 30–60 seconds about something you love—music, a show, a snack—whatever feels easy.'),

    # Week 2
    (2, 1, 'Name three things you\'re grateful for and briefly explain why.'),
    (2, 2, 'Describe the weather today and how it makes you feel.'),
    (2, 3, 'Talk about a simple meal you enjoy cooking or eating.'),

    # Week 3
    (3, 1, 'Describe a place you visited that you enjoyed. Keep it simple - just the basics.'),
    (3, 2, 'Talk about one hobby or activity you like to do in your free time.'),
    (3, 3, 'Describe your morning routine in a few simple steps.'),

    # Week 4
    (4, 1, 'What\'s your favorite season of the year and why?'),
    (4, 2, 'Talk about a simple goal you have for this week.'),
    (4, 3, 'Describe your favorite way to relax after a busy day.'),

    # Week 5
    (5, 1, 'Talk about one item you use every day and why it\'s useful to you.'),
    (5, 2, 'Describe a color you like and why you like it.'),
    (5, 3, 'Talk about a simple activity that makes you happy.'),

    # Week 6
    (6, 1, 'Describe your favorite piece of clothing and why you like it.'),
    (6, 2, 'Talk about a beverage you enjoy drinking regularly.'),
    (6, 3, 'Describe a typical weekend for you in simple terms.'),

    # Week 7
    (7, 1, 'Talk about the last good news you received.'),
    (7, 2, 'Describe a simple childhood memory.'),
    (7, 3, 'Name three things you\'d like to do this month.'),

    # Week 8
    (8, 1, 'Describe the most recent photo you took with your phone.'),
    (8, 2, 'Talk about a sound you find pleasant or relaxing.'),
    (8, 3, 'Describe what you ate for a recent meal.'),

    # Week 9
    (9, 1, 'Talk about someone who has been helpful to you recently.'),
    (9, 2, 'Describe something interesting you saw recently.'),
    (9, 3, 'Talk about a simple decision you made today.'),

    # Week 10
    (10, 1, 'Name three things that make you smile and briefly explain why.'),
    (10, 2, 'Talk about how your speaking practice is going.'),
    (10, 3, 'Describe a small accomplishment from the past week.'),

    # Week 11
    (11, 1, 'Talk about a simple skill you\'d like to learn.'),
    (11, 2, 'Describe your favorite way to spend 30 minutes of free time.'),
    (11, 3, 'Talk about a small change you\'ve made recently.'),

    # Week 12
    (12, 1, 'Describe an object near you right now in detail.'),
    (12, 2, 'Talk about the last thing you did just for fun.'),
    (12, 3, 'Name three good habits you try to maintain.'),

    # Week 13
    (13, 1, 'Talk about a simple task you accomplished today.'),
    (13, 2, 'Describe your favorite snack and why you enjoy it.'),
    (13, 3, 'Talk about how your week is going so far.'),

    # Week 14
    (14, 1, 'Describe a simple tradition you enjoy.'),
    (14, 2, 'Talk about a small improvement you\'ve noticed in your speaking.'),
    (14, 3, 'Describe your plans for the rest of today.'),

    # Week 15
    (15, 1, 'Talk about your progress through this 15-week challenge.'),
    (15, 2, 'Describe how you feel about speaking on camera now compared to when you started.'),
    (15, 3, 'Share one speaking goal you have for the future.'),
]

# Growing Speaker prompts ask for a minute or two of structured talking.
_GROWING_SPEAKER = [
    # Week 1
    (1, 1, 'Introduce yourself and talk about what you hope to gain from this speaking challenge. Aim for 1 minute.'),
    (1, 2, 'Describe your ideal day from morning to evening. Include details about activities and feelings.'),
    (1, 3, 'Talk about a skill you\'ve developed over time. Describe how you started and how you\'ve improved.'),

    # Week 2
    (2, 1, 'Describe a place that means a lot to you. Include sensory details - what you see, hear, smell, etc.'),
    (2, 2, 'Talk about a hobby or interest you have. Explain what you enjoy about it and how you got started.'),
    (2, 3, 'Describe a challenging situation you overcame. What happened and what did you learn?'),

    # Week 3
    (3, 1, 'Talk about a book, movie, or show you enjoyed recently. Give a brief summary and your thoughts.'),
    (3, 2, 'Describe a person who has positively influenced your life. What qualities do you admire in them?'),
    (3, 3, 'Talk about a goal you\'re working toward. What steps are you taking to achieve it?'),

    # Week 4
    (4, 1, 'Describe your hometown or neighborhood. What makes it unique or special?'),
    (4, 2, 'Talk about a valuable lesson you learned from a mistake or failure.'),
    (4, 3, 'Describe a tradition or celebration that\'s important to you. Why is it meaningful?'),

    # Week 5
    (5, 1, 'Talk about a skill you wish you had. Why is it appealing and how might you learn it?'),
    (5, 2, 'Describe how you handle stress or difficult emotions. What strategies work for you?'),
    (5, 3, 'Talk about a trip or journey you remember fondly. What made it special?'),

    # Week 6
    (6, 1, 'Describe a change you\'ve noticed in yourself over the past few years. What caused this change?'),
    (6, 2, 'Talk about a time when you helped someone else. What did you do and how did it make you feel?'),
    (6, 3, 'Describe something you\'re curious about and would like to understand better. Why does it interest you?'),

    # Week 7
    (7, 1, 'Talk about a current challenge you\'re facing. How are you approaching it?'),
    (7, 2, 'Describe your approach to learning new things. What works best for you?'),
    (7, 3, 'Talk about a piece of advice that has been helpful to you. Who gave it and why was it valuable?'),

    # Week 8
    (8, 1, 'Describe a memory that makes you laugh. Set the scene and explain what happened.'),
    (8, 2, 'Talk about something you\'ve changed your mind about over time. What led to this shift?'),
    (8, 3, 'Describe a routine or habit that improves your life. How did you develop it?'),

    # Week 9
    (9, 1, 'Talk about a technology that has impacted your life. How do you use it and what difference has it made?'),
    (9, 2, 'Describe a social issue you care about. Why is it important to you?'),
    (9, 3, 'Talk about a recent accomplishment you\'re proud of. What made it challenging or significant?'),

    # Week 10
    (10, 1, 'Describe a time when you had to adapt to an unexpected situation. How did you handle it?'),
    (10, 2, 'Talk about a skill you\'ve improved during this speaking challenge. What specific progress have you noticed?'),
    (10, 3, 'Describe something you appreciate about your life right now. Why is it meaningful to you?'),

    # Week 11
    (11, 1, 'Talk about a decision you made that turned out well. What factors did you consider?'),
    (11, 2, 'Describe how you prioritize your time and energy. What strategies help you focus on what matters?'),
    (11, 3, 'Talk about a personal strength you rely on. How does it help you in different situations?'),

    # Week 12
    (12, 1, 'Describe a project or activity you\'re working on currently. What are your goals for it?'),
    (12, 2, 'Talk about a misconception people might have about you. What\'s the reality?'),
    (12, 3, 'Describe a time when you took a risk. What was the outcome and what did you learn?'),

    # Week 13
    (13, 1, 'Talk about a difference between how you were a year ago and how you are now.'),
    (13, 2, 'Describe a time when you received unexpected kindness. How did it affect you?'),
    (13, 3, 'Talk about something you\'ve recently discovered about yourself. What led to this insight?'),

    # Week 14
    (14, 1, 'Describe a quality you value in your relationships with others. Why is this important to you?'),
    (14, 2, 'Talk about how your perspective on public speaking has evolved during this challenge.'),
    (14, 3, 'Describe a meaningful conversation you had recently. What made it valuable?'),

    # Week 15
    (15, 1, 'Talk about the most important thing you\'ve learned during this 15-week challenge.'),
    (15, 2, 'Describe how you plan to continue developing your speaking skills after this challenge.'),
    (15, 3, 'Share advice you would give to someone just starting their speaking practice journey.'),
]

# Confident Creator prompts are longer, analytical and persuasive pieces.
_CONFIDENT_CREATOR = [
    # Week 1
    (1, 1, 'Give a comprehensive introduction of yourself including your background, interests, and what you hope to achieve through this speaking challenge. Aim for 2-3 minutes.'),
    (1, 2, 'Discuss a transformative experience that shaped your perspective or values. Explain the context, the change, and its lasting impact.'),
    (1, 3, 'Present your thoughts on the importance of effective communication in today\'s world. Include examples from different contexts like professional settings, relationships, and social change.'),

    # Week 2
    (2, 1, 'Analyze a significant trend or change you\'ve observed in society. Discuss potential causes, implications, and your perspective on it.'),
    (2, 2, 'Present a mini lecture on a topic you\'re knowledgeable about. Structure it with an introduction, key points, and a conclusion.'),
    (2, 3, 'Discuss a complex problem in your field or area of interest. Explain the various dimensions of the issue and potential approaches to addressing it.'),

    # Week 3
    (3, 1, 'Present a book, film, or artwork that had a profound impact on you. Analyze its themes, techniques, and why it resonated with you personally.'),
    (3, 2, 'Discuss the role of mentorship in personal and professional development. Draw from your experiences as both a mentor and mentee if applicable.'),
    (3, 3, 'Present a persuasive argument for a change you believe should be implemented in your workplace, community, or society at large.'),

    # Week 4
    (4, 1, 'Analyze how your cultural background has influenced your worldview, values, and approach to life\'s challenges.'),
    (4, 2, 'Discuss a time when you had to navigate a complex ethical dilemma. Explain the competing values at stake and how you reached your decision.'),
    (4, 3, 'Present a vision for your personal or professional development over the next five years. Discuss specific milestones and how you plan to achieve them.'),

    # Week 5
    (5, 1, 'Analyze a historical event or period and its relevance to current issues or challenges we face today.'),
    (5, 2, 'Present a complex concept from your field of expertise in an accessible way for a general audience.'),
    (5, 3, 'Discuss how technology has transformed a specific aspect of human experience, considering both benefits and potential concerns.'),

    # Week 6
    (6, 1, 'Present a comparative analysis of two contrasting approaches, systems, or philosophies related to a topic of interest.'),
    (6, 2, 'Discuss a time when you had to lead during a challenging situation. What leadership principles guided your actions?'),
    (6, 3, 'Analyze how your perspective on a significant issue has evolved over time, examining the factors that contributed to this change.'),

    # Week 7
    (7, 1, 'Present a case study of a successful innovation or initiative. Analyze the factors that contributed to its success and lessons that can be applied elsewhere.'),
    (7, 2, 'Discuss the tension between tradition and progress in a specific context. Consider the value of preserving tradition alongside the need for adaptation.'),
    (7, 3, 'Analyze a system or process that could be improved. Identify specific issues and present a detailed recommendation for change.'),

    # Week 8
    (8, 1, 'Present an analysis of how media influences public perception of a particular issue. Consider different media formats and their varying impacts.'),
    (8, 2, 'Discuss the concept of resilience through the lens of a challenging experience you\'ve faced. What factors enable people to navigate adversity effectively?'),
    (8, 3, 'Analyze how global trends are likely to affect your industry or field of interest in the coming decade.'),

    # Week 9
    (9, 1, 'Present a complex ethical issue facing society today. Analyze different perspectives and articulate your own nuanced position.'),
    (9, 2, 'Discuss the interplay between individual action and systemic change in addressing a social or environmental challenge.'),
    (9, 3, 'Analyze a failed project or initiative. What went wrong, and what lessons can be derived from this experience?'),

    # Week 10
    (10, 1, 'Present your philosophy on continued learning and growth. How do you approach acquiring new knowledge and skills throughout your life?'),
    (10, 2, 'Analyze how your communication style has evolved throughout this speaking challenge. What specific improvements have you observed?'),
    (10, 3, 'Discuss the relationship between vulnerability and authentic leadership. How can leaders effectively balance strength and openness?'),

    # Week 11
    (11, 1, 'Present a strategic analysis of a decision you made that had significant consequences. What factors did you consider, and how did you evaluate alternatives?'),
    (11, 2, 'Discuss the concept of work-life integration rather than work-life balance. How can these domains complement rather than compete with each other?'),
    (11, 3, 'Analyze how diversity of perspective contributes to better outcomes in teams, organizations, or communities.'),

    # Week 12
    (12, 1, 'Present a synthesized view of a complex topic by drawing from multiple disciplines or perspectives.'),
    (12, 2, 'Discuss how you navigate tensions between competing values or priorities in your decision-making process.'),
    (12, 3, 'Analyze the role of storytelling in effective communication. How can narratives be used to convey complex ideas and inspire action?'),

    # Week 13
    (13, 1, 'Present a critical analysis of a popular assumption or "conventional wisdom" in your field that deserves reconsideration.'),
    (13, 2, 'Discuss the relationship between short-term actions and long-term vision. How do you balance immediate needs with bigger picture goals?'),
    (13, 3, 'Analyze how your core values have been tested and reinforced through challenging experiences.'),

    # Week 14
    (14, 1, 'Present an analysis of how power dynamics affect communication in different contexts and how to navigate them effectively.'),
    (14, 2, 'Discuss how your approach to public speaking has transformed during this challenge. What specific techniques have you developed?'),
    (14, 3, 'Analyze the interplay between expertise and continuous improvement. How can specialists avoid the trap of complacency?'),

    # Week 15
    (15, 1, 'Present a comprehensive reflection on your growth journey through this 15-week speaking challenge. Discuss specific improvements and breakthrough moments.'),
    (15, 2, 'Discuss how you plan to apply your enhanced communication skills in various aspects of your personal and professional life.'),
    (15, 3, 'Deliver an inspirational talk for others seeking to improve their speaking abilities. Share key insights and strategies from your experience.'),
]

_TITLES = {
    "shy_w1_p1": "Introduce Yourself",
    "shy_w1_p2": "Describe What You See",
    "shy_w1_p3": "My Favorite Thing",
}


def _build(tier: WeeklyChallengeTier, rows: list[tuple[int, int, str]]) -> list[WeeklyPrompt]:
    out: list[WeeklyPrompt] = []
    for week, order, text in rows:
        pid = make_prompt_id(tier, week, order)
        out.append(WeeklyPrompt(id=pid, week=week, tier=tier, order=order, text=text, title=_TITLES.get(pid)))
    return out


ALL_WEEKLY_PROMPTS: tuple[WeeklyPrompt, ...] = tuple(
    _build(WeeklyChallengeTier.SHY_STARTER, _SHY_STARTER)
    + _build(WeeklyChallengeTier.GROWING_SPEAKER, _GROWING_SPEAKER)
    + _build(WeeklyChallengeTier.CONFIDENT_CREATOR, _CONFIDENT_CREATOR)
)

_BY_ID: dict[str, WeeklyPrompt] = {p.id: p for p in ALL_WEEKLY_PROMPTS}


def parse_tier(value: object) -> Optional[WeeklyChallengeTier]:
    """Return the tier for a raw value, or None if it is not a known tier."""
    if isinstance(value, WeeklyChallengeTier):
        return value
    if not isinstance(value, str):
        return None
    try:
        return WeeklyChallengeTier(value)
    except ValueError:
        return None


def is_valid_tier(value: object) -> bool:
    return parse_tier(value) is not None


def is_valid_week(value: object) -> bool:
    return is_strict_int(value) and 1 <= value <= TOTAL_WEEKS


def get_prompts(week: int, tier: WeeklyChallengeTier | str) -> list[WeeklyPrompt]:
    """Prompts for one (tier, week), sorted by order."""
    t = parse_tier(tier)
    return sorted(
        (p for p in ALL_WEEKLY_PROMPTS if p.week == week and p.tier == t),
        key=lambda p: p.order,
    )


def get_prompt_by_id(prompt_id: str) -> Optional[WeeklyPrompt]:
    return _BY_ID.get(prompt_id)


def prompts_for_tier(tier: WeeklyChallengeTier | str) -> list[WeeklyPrompt]:
    t = parse_tier(tier)
    return [p for p in ALL_WEEKLY_PROMPTS if p.tier == t]


def prompt_ids_for_week(tier: WeeklyChallengeTier | str, week: int) -> set[str]:
    return {p.id for p in get_prompts(week, tier)}
