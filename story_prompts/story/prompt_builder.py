"""
Prompt Builder - instruction and response schema construction.

Builds the single instruction string sent to Gemini: a fixed rule set
(character pinning, hook scene, scene consistency, prompt count, output
format) followed by the user's pasted prompts verbatim. Also declares the
structured-output schema the model must follow.
"""

import logging

from google.genai import types

logger = logging.getLogger("story_prompts")

PUPPY_DESCRIPTION = "A cute fluffy white puppy wearing a yellow bandana"
BABY_DESCRIPTION = "a 5-month-old baby in a yellow onesie"

HOOK_SCENE = (
    f'A witch is standing with her back to "{BABY_DESCRIPTION}". '
    "The baby is on the floor, playing happily and unaware. "
    "The witch must be secretly holding a dangerous object behind her back "
    "(e.g., a large, writhing centipede, a glowing poison potion, or a sharp, cursed dagger). "
    "The scene must feel tense and ominous."
)

RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "hook": types.Schema(
            type=types.Type.STRING,
            description=(
                "A single, powerful, and cinematic prompt for the very first scene. "
                "This should be exceptionally descriptive and engaging, following the "
                "specific hook scene requirements."
            ),
        ),
        "storyPrompts": types.Schema(
            type=types.Type.ARRAY,
            description=(
                "An array of strings, where each string is a detailed, realistic prompt "
                "for a subsequent scene in the story."
            ),
            items=types.Schema(type=types.Type.STRING),
        ),
    },
    required=["hook", "storyPrompts"],
)


def count_prompts(raw_input: str) -> int:
    """
    Count the lines that are non-empty after trimming whitespace.

    >>> count_prompts("a\\n\\nb\\nc\\n")
    3
    """
    return sum(1 for line in raw_input.split("\n") if line.strip())


def _format_rules(prompt_count: int) -> str:
    """Format the numbered rule block."""
    lines = [
        "**CRITICAL INSTRUCTIONS - YOU MUST FOLLOW THESE RULES WITHOUT EXCEPTION:**",
        "",
        "1.  **Character Consistency:**",
        f'    *   Whenever you mention a "puppy", you MUST use the exact phrase: "{PUPPY_DESCRIPTION}".',
        f'    *   Whenever you mention a "baby", you MUST use the exact phrase: "{BABY_DESCRIPTION}".',
        "    *   Maintain these exact descriptions every single time these characters appear in any prompt.",
        "",
        "2.  **Hook Scene Requirement:**",
        f"    *   The 'hook' prompt MUST describe the following specific scene: {HOOK_SCENE}",
        "",
        "3.  **General Scene Consistency:**",
        "    *   Maintain strict consistency throughout all prompts. If a scene is set during the 'day' "
        "in a 'forest', subsequent scenes in that location must also be in a 'forest' during the 'day', "
        "unless the story narrative explicitly transitions to 'night'. Do not change locations or time "
        "of day randomly between prompts. All details must be consistent.",
        "",
        "4.  **Prompt Count:**",
        f"    *   The user has provided {prompt_count} prompts. You MUST generate exactly {prompt_count} "
        "new story prompts in the 'storyPrompts' array, in addition to the hook.",
        "",
        "5.  **Output Format:**",
        "    *   The output must be a valid JSON object matching the provided schema. Do not include any "
        "text, markdown, or code block formatting outside of the JSON object.",
    ]
    return "\n".join(lines)


def build_story_prompt(raw_input: str) -> str:
    """
    Build the full instruction string for one generation request.

    Args:
        raw_input: The user's pasted prompts, appended verbatim

    Returns:
        Instruction text ready to send as the request contents
    """
    prompt_count = count_prompts(raw_input)
    logger.debug(f"[PromptBuilder] Building instruction for {prompt_count} prompts")

    sections = [
        "You are an expert story crafter and a prompt engineer for AI video generation models.",
        "Your task is to analyze a user's collection of story ideas and generate a completely new, "
        "consistent, and cinematic story based on them.",
        "",
        _format_rules(prompt_count),
        "",
        "**User's Original Prompts for Inspiration:**",
        "---",
        raw_input,
        "---",
        "",
        "Now, based on all the above rules and the user's ideas, generate the new story.",
    ]
    return "\n".join(sections)
