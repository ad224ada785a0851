"""
Fixed copy used by the interaction: quick replies, jokes and status texts.
"""
from dataclasses import dataclass
from typing import Dict, Tuple
from .interaction_types import MoodTier


@dataclass(frozen=True)
class QuickReply:
    """Canned message the user can send with one click."""
    text: str
    is_positive: bool


QUICK_REPLIES: Tuple[QuickReply, ...] = (
    QuickReply("You're amazing! 💖", True),
    QuickReply("You're annoying! 😤", False),
    QuickReply("You brighten my day! ☀️", True),
    QuickReply("I don't like you! 👎", False),
    QuickReply("You're absolutely wonderful! ✨", True),
    QuickReply("You're boring! 😴", False),
    QuickReply("You make everything better! 🌟", True),
    QuickReply("You're useless! 💔", False),
    QuickReply("You're the best! 🎉", True),
    QuickReply("You're terrible! 😠", False),
    QuickReply("You're so kind! 💝", True),
    QuickReply("I hate this! 🤬", False),
    QuickReply("You're incredible! 🚀", True),
    QuickReply("You're stupid! 🙄", False),
    QuickReply("You're fantastic! 🎊", True),
    QuickReply("Go away! 😡", False),
)

JOKES: Tuple[str, ...] = (
    "Why don't scientists trust atoms? Because they make up everything!",
    "I told my wife she was drawing her eyebrows too high. She looked surprised.",
    "Why don't eggs tell jokes? They'd crack each other up!",
    "What do you call a fake noodle? An impasta!",
    "Why did the scarecrow win an award? He was outstanding in his field!",
    "What do you call a bear with no teeth? A gummy bear!",
    "Why don't skeletons fight each other? They don't have the guts!",
    "What did the ocean say to the beach? Nothing, it just waved!",
)

MOOD_MESSAGES: Dict[MoodTier, str] = {
    MoodTier.ANGRY: "I'm still angry! Keep trying...",
    MoodTier.SAD: "I'm feeling a bit sad... cheer me up more!",
    MoodTier.NEUTRAL: "I'm starting to feel better...",
    MoodTier.HAPPY: "You're making me smile! Almost there!",
    MoodTier.EXCITED: "I'm so happy now! Let me analyze your photo!",
}

MOOD_EMOJIS: Dict[MoodTier, str] = {
    MoodTier.ANGRY: "😠",
    MoodTier.SAD: "😢",
    MoodTier.NEUTRAL: "😐",
    MoodTier.HAPPY: "😊",
    MoodTier.EXCITED: "🤩",
}

REFUSAL_TITLE = "I'm Not in the Mood!"
REFUSAL_MESSAGE = (
    "I'm in a really bad mood right now! I don't feel like analyzing your mood. "
    "If you want me to help you, you need to cheer me up first with some nice "
    "messages, jokes, or compliments!"
)

ANALYZING_MESSAGE = "Thank you for cheering me up! Now I'm analyzing your photo..."

DISCLOSURE_TITLE = "YOU ARE FOOLED!"
DISCLOSURE_MESSAGE = (
    "I was just pretending to be moody! 😄 "
    "Thanks for playing along with my little prank!"
)
