import os

ANTHROPIC_API_URL = os.getenv("ANTHROPIC_API_URL", "https://api.anthropic.com/v1/messages")
ANTHROPIC_VERSION = "2023-06-01"
ANTHROPIC_DEADLINE_SECONDS = float(os.getenv("ANTHROPIC_DEADLINE_SECONDS", "9.0"))

OPENAI_API_URL = os.getenv("OPENAI_API_URL", "https://api.openai.com/v1/chat/completions")
OPENAI_DEADLINE_SECONDS = float(os.getenv("OPENAI_DEADLINE_SECONDS", "9.5"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Translations shorter than this fraction of the source are logged as suspect.
SHORT_TRANSLATION_RATIO = 0.5
