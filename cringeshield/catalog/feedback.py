"""Coaching phrases used for recording feedback."""

FEEDBACK_STRENGTHS: tuple[str, ...] = (
    "Clear voice with good projection",
    "Maintained consistent pace throughout",
    "Used engaging examples in your story",
    "Good eye contact with the camera",
    "Natural gestures that reinforced your points",
    "Effective use of pauses for emphasis",
)

FEEDBACK_IMPROVEMENTS: tuple[str, ...] = (
    "Noticed a few filler words - try pausing instead",
    "Consider varying your tone for more emphasis",
    "Try speaking slightly slower during important points",
    "Remember to smile more to appear more approachable",
    "Consider structuring your response with a clear beginning and conclusion",
)

# Inclusive bounds of the confidence score handed back with feedback.
MIN_FEEDBACK_SCORE = 55
MAX_FEEDBACK_SCORE = 84
