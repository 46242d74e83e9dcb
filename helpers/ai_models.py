"""
AI Backend Adapter

This module provides a single "generate text from prompt" capability over the
generative-text providers the assistant supports. Every backend returns the
raw generated text, or None when the provider call fails for any reason.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

import google.generativeai as genai
from flask import current_app
from openai import OpenAI

logger = logging.getLogger(__name__)


class AIModel(Enum):
    """Supported generative-text backends."""

    GEMINI = "gemini"
    DEEPSEEK = "deepseek"


DEFAULT_MODEL = AIModel.GEMINI


class BaseTextModel(ABC):
    """Base class for generative-text backends."""

    def __init__(self, api_key: Optional[str], model_name: str, temperature=0.7):
        self.api_key = api_key
        self.model_name = model_name
        self.temperature = temperature

    def generate_text(self, prompt: str) -> Optional[str]:
        """
        Generate text for a fully composed prompt.

        Returns:
            The generated text as returned by the provider (untrimmed), or None
            if the backend is not configured or the provider call failed.
        """
        if not self.api_key:
            logger.error(
                f"{self.get_backend_name()} backend called without an API key configured."
            )
            return None

        try:
            return self._call_api(prompt)
        except Exception as e:
            logger.error(
                f"{self.get_backend_name()} API call with model {self.model_name} failed: {str(e)}"
            )
            return None

    @abstractmethod
    def _call_api(self, prompt: str) -> Optional[str]:
        """Call the provider and return its text output."""
        pass

    def get_backend_name(self) -> str:
        """Get the name of this backend."""
        return self.__class__.__name__.replace("TextModel", "")


class GeminiTextModel(BaseTextModel):
    """Google Gemini backend."""

    def _call_api(self, prompt: str) -> Optional[str]:
        genai.configure(api_key=self.api_key)
        model = genai.GenerativeModel(self.model_name)

        response = model.generate_content(
            prompt,
            generation_config=genai.types.GenerationConfig(
                temperature=self.temperature,
            ),
        )
        return response.text


class DeepSeekTextModel(BaseTextModel):
    """DeepSeek backend, reached through its OpenAI-compatible endpoint."""

    def __init__(self, api_key, model_name, temperature=0.7, base_url=None):
        super().__init__(api_key, model_name, temperature)
        self.base_url = base_url

    def _call_api(self, prompt: str) -> Optional[str]:
        client = OpenAI(api_key=self.api_key, base_url=self.base_url)

        response = client.chat.completions.create(
            model=self.model_name,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
        )
        if not response.choices:
            return None
        return response.choices[0].message.content


def get_text_model(model: AIModel) -> BaseTextModel:
    """Build the backend for the given model from the application config."""
    config = current_app.config
    temperature = config.get("AI_TEMPERATURE", 0.7)

    if model is AIModel.GEMINI:
        return GeminiTextModel(
            api_key=config.get("GEMINI_API_KEY"),
            model_name=config.get("GEMINI_MODEL_NAME", "gemini-1.5-pro"),
            temperature=temperature,
        )
    if model is AIModel.DEEPSEEK:
        return DeepSeekTextModel(
            api_key=config.get("DEEPSEEK_API_KEY"),
            model_name=config.get("DEEPSEEK_MODEL_NAME", "deepseek-chat"),
            temperature=temperature,
            base_url=config.get("DEEPSEEK_BASE_URL"),
        )
    raise ValueError(f"No backend available for model: {model}")


def generate_text(prompt: str, model: AIModel = DEFAULT_MODEL) -> Optional[str]:
    """Generate text for a prompt with the selected backend."""
    text_model = get_text_model(model)
    logger.info(
        f"Dispatching prompt ({len(prompt)} chars) to {text_model.get_backend_name()} model {text_model.model_name}"
    )
    return text_model.generate_text(prompt)
