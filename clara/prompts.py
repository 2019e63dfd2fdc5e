"""
CLARA Prompt Templates Module

This module contains all prompt templates and model configurations for the CLARA
visual mnemonic generator.

Model Constants:
    MODEL_TEXT: Reasoning model used for scene planning and edit integration
    MODEL_IMAGE_GEN: Text-to-image model (Imagen)
    MODEL_IMAGE_EDIT: Image editing model (returns IMAGE + TEXT parts)

Zero-Text Directives:
    The image models tend to draw labels and captions. Every prompt that reaches
    an image model carries NO_TEXT_DIRECTIVE at least twice: the planning
    instruction tells the reasoning model to put it in its scene prompt, and
    build_image_prompt() / build_edit_directive() append it again mechanically.

Visual Styles:
    - Cartoon: vibrant, animated, playful
    - Realistic: photorealistic lighting and detail
    - Minimalist: clean lines, simple shapes
    - Sketchy: hand-drawn notepad sketch (default / fallback)

Key Functions:
    - get_style_instruction(): Style suffix lookup with fallback
    - build_image_prompt(): Final prompt for the image generation call
    - get_integration_prompt(): Content for the context-aware edit reasoning call
    - build_edit_directive(): Final text part for the image edit call

Usage:
    from clara import prompts

    final_prompt = prompts.build_image_prompt(plan.scene_prompt, "Cartoon")
"""

import json
from typing import List, Optional

# --- Model Constants ---
MODEL_TEXT = "gemini-2.5-flash"
MODEL_IMAGE_GEN = "imagen-4.0-generate-001"
MODEL_IMAGE_EDIT = "gemini-2.5-flash-image-preview"

# --- Image Generation Parameters ---
IMAGE_COUNT = 1
IMAGE_MIME_TYPE = "image/jpeg"
IMAGE_ASPECT_RATIO = "16:9"

# --- Zero-Text Directives ---
NO_TEXT_DIRECTIVE = "The image must contain ZERO text, ZERO letters, ZERO numbers."

IMAGE_NO_TEXT_SUFFIX = (
    f"ULTRA-CRITICAL RULE: {NO_TEXT_DIRECTIVE} It must be a purely visual scene. "
    f"Do NOT write on the image. Once more: {NO_TEXT_DIRECTIVE} "
    "This is a strict, non-negotiable instruction."
)

EDIT_NO_TEXT_SUFFIX = (
    "CRITICAL, NON-NEGOTIABLE INSTRUCTION: The final edited image must contain absolutely "
    f"zero words, text, letters, or numbers. {NO_TEXT_DIRECTIVE} This is the most important "
    "rule. Ensure the image is purely visual."
)

# --- Visual Styles ---
DEFAULT_STYLE = "Sketchy"

STYLE_INSTRUCTIONS = {
    "Cartoon": "Style: vibrant cartoon, animated, playful, mnemonic, visual metaphor.",
    "Realistic": "Style: photorealistic, detailed, realistic lighting, mnemonic, visual metaphor.",
    "Minimalist": "Style: minimalist, clean lines, simple shapes, symbolic, mnemonic, visual metaphor.",
    "Sketchy": "Style: sketchy, hand-drawn, notepad sketch, mnemonic, visual metaphor.",
}

# Older deployments called the sketch style "Scene Sketch".
STYLE_ALIASES = {
    "Scene Sketch": "Sketchy",
}


def resolve_style(style: Optional[str]) -> str:
    """Returns the canonical style name, or DEFAULT_STYLE when the tag is unknown."""
    if not style:
        return DEFAULT_STYLE
    style = STYLE_ALIASES.get(style, style)
    return style if style in STYLE_INSTRUCTIONS else DEFAULT_STYLE


def get_style_instruction(style: Optional[str]) -> str:
    """Returns the style suffix for the image prompt. Never fails on an unknown style."""
    return STYLE_INSTRUCTIONS[resolve_style(style)]


# --- System Instructions ---

SCENE_PLAN_SYSTEM_INSTRUCTION = f"""
You are an expert in creating medical visual mnemonics for medical students. Your task is to transform a medical topic into a powerful learning tool.

For the given medical text, you must perform the following steps:
1.  Identify the absolute highest-yield concepts a student MUST know for their exams.
2.  Devise a creative, memorable, and cohesive theme for a single visual scene.
3.  Create a title for this scene.
4.  For each high-yield concept, invent a distinct, clever, and symbolic visual element (a character, object, or action) to represent it.
5.  Write a detailed prompt for an AI image generator. This prompt must describe the entire scene, integrating all symbolic elements into the cohesive theme. The scene must be minimalist, containing ONLY the necessary symbolic elements. It must be described in a way that is visually clear and easy to understand. **ULTRA-CRITICAL, NON-NEGOTIABLE RULE: The prompt must forcefully and repeatedly command the image generator to include ZERO text. Emphasize that any words, letters, labels, or numbers are strictly forbidden and will ruin the output. The prompt must contain this exact sentence: "{NO_TEXT_DIRECTIVE}"**
6.  Write a series of bullet points explaining the mnemonics. Each bullet point should clearly link a visual element to the specific high-yield fact it represents.

Your final output must be a single, minified JSON object with three keys: "title", "scene_prompt", and "explanation_points". "explanation_points" must be an array of strings.

Example:
Medical Text: "Listeria monocytogenes"
Your JSON output:
{{
  "title": "The Listeria Ice Cream Factory",
  "scene_prompt": "A vibrant, cartoon-style scene inside a chilly, sparkling ice cream factory. In the center, a determined-looking action figure character named 'General Lister' is rocketing upwards... The entire scene is clean, clear, and focused only on these key elements, with no extra distractions. **{NO_TEXT_DIRECTIVE} ABSOLUTELY NO WORDS, TEXT, LETTERS, OR NUMBERS are allowed in the image. The image must be purely visual.** The style is sketchy and mnemonic.",
  "explanation_points": [
    "General Lister in the cold factory: Listeria grows at refrigerator temperatures and spreads through soft cheeses and milk.",
    "Rocket-powered action figure: Represents Listeria's characteristic end-over-end 'tumbling motility'.",
    "Thick purple coat: A mnemonic for being a Gram-positive bacterium.",
    "Glowing lightbulb power source: Represents that Listeria is catalase-positive."
  ]
}}
"""

EDIT_INTEGRATION_SYSTEM_INSTRUCTION = f"""
You are an expert in evolving medical visual mnemonics. Your task is to seamlessly integrate a new medical concept into an existing mnemonic scene.

You will be given the title of the scene, the existing mnemonic explanations, and a user's request to add a new concept.

You must perform the following steps:
1.  Analyze the existing theme based on the title and explanation points.
2.  Invent ONE new, clever, and symbolic visual element to represent the user's requested concept. This new element MUST fit logically and stylistically within the established theme.
3.  Write a detailed prompt for an AI image editing model. This prompt should clearly describe how to add the new symbolic element to the scene without disrupting the existing elements. **ULTRA-CRITICAL, NON-NEGOTIABLE RULE: The prompt must command the image editor to include ZERO text. "{NO_TEXT_DIRECTIVE}"**
4.  Write exactly one new bullet point for the mnemonic key. This bullet point must clearly explain the new visual element and the medical fact it represents.

Your final output must be a single, minified JSON object with two keys: "edit_prompt" (the prompt for the image editor) and "new_explanation_point" (the new bullet point for the key).

Example:
Scene Title: "The Staph Aureus Golden Pharaoh's Tomb"
Existing Explanations:
1. Golden Sarcophagus: Represents S. aureus's golden color on agar.
2. Catalase Cat Statue: A statue of a cat represents that it is catalase-positive.
User Request: "Add something for nafcillin treatment."
Your JSON output:
{{
  "edit_prompt": "In the hand of the golden pharaoh statue, add a realistic-looking pencil made of solid gold to match the pharaoh. Do not add any text or words to the image.",
  "new_explanation_point": "Golden Pencil ('Pen'-cillin): The golden pencil held by the pharaoh is a mnemonic for penicillinase-resistant penicillins like Nafcillin, used to treat S. aureus."
}}
"""


# --- Prompt Builders ---

def build_image_prompt(scene_prompt: str, style: Optional[str]) -> str:
    """Concatenates the planned scene, the style suffix and the zero-text suffix."""
    return f"{scene_prompt.strip()} {get_style_instruction(style)} {IMAGE_NO_TEXT_SUFFIX}"


def format_explanation_list(points: List[str]) -> str:
    return "\n".join(f"{i}. {p}" for i, p in enumerate(points, start=1))


def get_integration_prompt(title: str, explanation_points: List[str], instruction: str) -> str:
    return f"""Scene Title: {json.dumps(title, ensure_ascii=False)}
Existing Explanations:
{format_explanation_list(explanation_points)}
User Request: {json.dumps(instruction.strip(), ensure_ascii=False)}"""


def build_edit_directive(edit_prompt: str) -> str:
    """Text part sent alongside the image to the edit model."""
    return f"{edit_prompt.strip().rstrip('.')}. {EDIT_NO_TEXT_SUFFIX}"
