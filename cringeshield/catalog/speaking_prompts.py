"""Seed prompts for free practice, grouped by category."""

RANDOM_CATEGORY = "random"

SEED_PROMPTS: dict[str, list[str]] = {
    "casual": [
        "Tell me about your favorite hobby and why you enjoy it.",
        "Describe your ideal weekend. What activities would you include?",
        "If you could travel anywhere in the world, where would you go and why?",
    ],
    "interview": [
        "Tell me about yourself and your background.",
        "What are your greatest strengths and how do they help you in your work?",
        "Describe a challenging situation you faced and how you overcame it.",
    ],
    "storytelling": [
        "Share a memorable experience from your childhood.",
        "Tell a story about a time when you learned an important lesson.",
        "Describe an adventure or journey that changed your perspective.",
    ],
    "presentation": [
        "Introduce a product or service you're passionate about and explain why others should try it.",
        "Give a short presentation about a topic you're knowledgeable about.",
        "Explain a complex concept in simple terms as if teaching someone new to the subject.",
    ],
    "introduction": [
        "Introduce yourself to a new team at work, highlighting your skills and interests.",
        "Imagine you're meeting new neighbors. How would you introduce yourself?",
        "Practice a 30-second elevator pitch about your professional background.",
    ],
    "social_media": [
        "Create a 30-second TikTok-style intro about something you're passionate about.",
        "Record a YouTube-style welcome to your channel and explain what content viewers can expect.",
        "Do a quick review of your favorite app or product as if for an Instagram story.",
        "Create a short tutorial on how to do something you're good at, perfect for a social media reel.",
        "Practice a trending challenge or dance explanation as if teaching your followers.",
    ],
    RANDOM_CATEGORY: [
        "If you could have any superpower, what would it be and how would you use it?",
        "Describe your dream home in detail.",
        "What's something you believe that most people disagree with?",
    ],
}


def iter_seed_prompts():
    """Yield (category, text) pairs in a stable order."""
    for category, texts in SEED_PROMPTS.items():
        for text in texts:
            yield category, text
