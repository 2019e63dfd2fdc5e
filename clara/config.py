"""
CLARA configuration.

Settings are read from the process environment, with a ``.env`` file loaded
first (python-dotenv). The Streamlit app may pass an API key from
``st.secrets`` which takes precedence over the environment.

Environment variables:
    GEMINI_API_KEY / API_KEY: Gemini API credential (required before any call)
    CLARA_TEXT_MODEL: Reasoning model name
    CLARA_IMAGE_MODEL: Image generation model name
    CLARA_EDIT_MODEL: Image edit model name
    CLARA_DEFAULT_STYLE: Initially selected style in the UI
    CLARA_EDIT_MODE: "context-aware" (default) or "context-free"
    CLARA_LOG_LEVEL: Logging level name
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from . import prompts
from .schemas import EditMode

# Load variables from .env
load_dotenv()


class Settings(BaseModel):
    api_key: Optional[str] = None
    text_model: str = prompts.MODEL_TEXT
    image_model: str = prompts.MODEL_IMAGE_GEN
    edit_model: str = prompts.MODEL_IMAGE_EDIT
    default_style: str = "Cartoon"
    edit_mode: EditMode = EditMode.CONTEXT_AWARE
    log_level: str = "INFO"


def parse_edit_mode(value: Optional[str]) -> EditMode:
    """Unknown or missing values fall back to the context-aware mode."""
    try:
        return EditMode((value or "").strip().lower())
    except ValueError:
        return EditMode.CONTEXT_AWARE


def load_settings(api_key: Optional[str] = None) -> Settings:
    return Settings(
        api_key=api_key or os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY"),
        text_model=os.getenv("CLARA_TEXT_MODEL", prompts.MODEL_TEXT),
        image_model=os.getenv("CLARA_IMAGE_MODEL", prompts.MODEL_IMAGE_GEN),
        edit_model=os.getenv("CLARA_EDIT_MODEL", prompts.MODEL_IMAGE_EDIT),
        default_style=prompts.resolve_style(os.getenv("CLARA_DEFAULT_STYLE", "Cartoon")),
        edit_mode=parse_edit_mode(os.getenv("CLARA_EDIT_MODE")),
        log_level=os.getenv("CLARA_LOG_LEVEL", "INFO"),
    )
