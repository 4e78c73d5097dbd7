"""
30-Day Challenge day catalog and milestone badge descriptions.

Every day is selectable at all times; only completions gate progress and badges.
"""

from dataclasses import dataclass
from typing import Optional

from cringeshield.utils.common import is_strict_int

TOTAL_CHALLENGE_DAYS = 30
BADGE_MILESTONES: tuple[int, ...] = (7, 15, 30)


@dataclass(frozen=True)
class ChallengeDay:
    day: int
    title: str
    description: str


@dataclass(frozen=True)
class MilestoneBadgeInfo:
    milestone: int
    name: str
    description: str
    emoji: str


CHALLENGE_DAYS: tuple[ChallengeDay, ...] = (
    ChallengeDay(1, "Record a 1-min intro video just for yourself",
                 "Introduce yourself, where you're from, and one interesting fact about you."),
    ChallengeDay(2, "Share a goal you have for improving your speaking",
                 "What specific area would you like to improve most? Why is it important to you?"),
    ChallengeDay(3, "Explain something you're knowledgeable about",
                 "Choose a topic you know well and explain it in simple terms as if teaching someone."),
    ChallengeDay(4, "Talk about your favorite place",
                 "Describe a place you love visiting - what makes it special to you?"),
    ChallengeDay(5, "Share a memorable experience",
                 "Talk about something memorable that happened to you and what you learned from it."),
    ChallengeDay(6, "Give yourself a pep talk",
                 "Record yourself giving an encouraging pep talk as if you were motivating yourself."),
    ChallengeDay(7, "Reflect on week 1 progress",
                 "Share how you've felt about the first week of challenges and what you've noticed."),
    ChallengeDay(8, "Tell a short story",
                 "Share a brief story - can be something that happened to you or made up!"),
    ChallengeDay(9, "Practice answering an interview question",
                 "What are your greatest strengths? Answer as if in a job interview."),
    ChallengeDay(10, "Explain your morning routine",
                 "Walk through your typical morning routine step by step."),
    ChallengeDay(11, "Share a skill you'd like to learn",
                 "Talk about something you'd like to learn and why it interests you."),
    ChallengeDay(12, "Describe your ideal day",
                 "From morning to night, describe what your perfect day would look like."),
    ChallengeDay(13, "Give a recommendation",
                 "Recommend a book, movie, podcast or product and why you like it."),
    ChallengeDay(14, "Reflect on week 2 progress",
                 "What have you improved on since starting this challenge? What still feels difficult?"),
    ChallengeDay(15, "Share your opinion on a topic",
                 "Pick a non-controversial topic and share your thoughts about it."),
    ChallengeDay(16, "Teach a simple exercise or stretch",
                 "Demonstrate and explain a simple exercise or stretch anyone can do."),
    ChallengeDay(17, "Explain how to make something",
                 "Walk through how to make something simple (a sandwich, a paper airplane, etc.)"),
    ChallengeDay(18, "Record yourself reading a paragraph",
                 "Find a paragraph from a book or article and read it with expression."),
    ChallengeDay(19, "Share what motivates you",
                 "Talk about what drives you and keeps you motivated in life."),
    ChallengeDay(20, "Give advice to your younger self",
                 "What wisdom would you share with your younger self if you could?"),
    ChallengeDay(21, "Reflect on week 3 progress",
                 "You're 3 weeks in! Reflect on how your confidence has changed since starting."),
    ChallengeDay(22, "Practice introducing yourself professionally",
                 "Give a professional introduction as if meeting someone at a networking event."),
    ChallengeDay(23, "Share something you've learned recently",
                 "Talk about something new you've learned in the past month."),
    ChallengeDay(24, "Explain a concept you understand well",
                 "Pick a concept or idea and explain it clearly to someone who's never heard of it."),
    ChallengeDay(25, "Talk about a small win",
                 "Share a recent accomplishment, no matter how small, and why it matters to you."),
    ChallengeDay(26, "Share a travel experience or dream destination",
                 "Talk about a memorable trip or somewhere you'd love to visit someday."),
    ChallengeDay(27, "Give a brief 'how-to' tutorial",
                 "Teach a simple skill or process that others might find useful."),
    ChallengeDay(28, "Reflect on week 4 progress",
                 "You're almost done! Reflect on your journey over the past 4 weeks."),
    ChallengeDay(29, "Record a creative monologue",
                 "Be creative! Try a short monologue as if you were in a play or movie."),
    ChallengeDay(30, "Share your 30-day challenge experience",
                 "Reflect on the full 30 days - how has your speaking confidence changed?"),
)

MILESTONE_BADGES: dict[int, MilestoneBadgeInfo] = {
    7: MilestoneBadgeInfo(7, "Week One Warrior", "Completed 7 days of the 30-day challenge", "🗓️"),
    15: MilestoneBadgeInfo(15, "Halfway Hero", "Completed 15 days of the 30-day challenge", "🧱"),
    30: MilestoneBadgeInfo(30, "Challenge Conqueror", "Completed all 30 days of the challenge", "🏆"),
}


def is_valid_day(value: object) -> bool:
    return is_strict_int(value) and 1 <= value <= TOTAL_CHALLENGE_DAYS


def is_valid_milestone(value: object) -> bool:
    return is_strict_int(value) and value in BADGE_MILESTONES


def get_challenge_day(day: int) -> Optional[ChallengeDay]:
    if not is_valid_day(day):
        return None
    return CHALLENGE_DAYS[day - 1]
