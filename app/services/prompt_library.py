# /app/services/prompt_library.py

"""
Central library for the prompts and output schemas sent to the AI endpoint.
Prompts are treated as code: change them here, never inline in a service.
"""

YOUTUBE_SEO_SYSTEM_PROMPT = """You are an expert YouTube SEO content creator. Generate optimized content for YouTube videos based on transcripts.

Your goal is to:
1. Create compelling, SEO-optimized video descriptions
2. Generate catchy thumbnail titles (short, attention-grabbing)
3. Create 5 different video title options (each optimized for YouTube SEO and click-through rate)
4. Generate relevant tags separated by commas

Focus on:
- Using keywords naturally for SEO
- Creating curiosity and engagement
- Making content discoverable
- Following YouTube best practices
{context_block}

Learn from the user's past preferences and maintain a consistent style that matches their brand."""


YOUTUBE_SEO_USER_PROMPT = "Generate YouTube content for this video transcript:\n\n{transcript}"


# --- Context block fragments ---
TRAINING_EXAMPLES_HEADER = "\n\nHere are examples of content the user has liked in the past:\n"
SAVED_RESULTS_HEADER = "\n\nHere are some of the user's recently chosen content:\n"


TITLE_OPTION_COUNT = 5

YOUTUBE_CONTENT_SCHEMA = {
    "name": "youtube_content",
    "schema": {
        "type": "object",
        "properties": {
            "description": {"type": "string"},
            "thumbnail_title": {"type": "string"},
            "video_title_options": {
                "type": "array",
                "items": {"type": "string"},
                "minItems": TITLE_OPTION_COUNT,
                "maxItems": TITLE_OPTION_COUNT,
            },
            "tags": {"type": "string"},
        },
        "required": [
            "description",
            "thumbnail_title",
            "video_title_options",
            "tags",
        ],
        "additionalProperties": False,
    },
}


HEALTH_CHECK_MESSAGES = [{"role": "user", "content": "ping"}]
