"""Prompt construction for the try-on request."""

from .prompt_builder import TRY_ON_INSTRUCTION, EncodedImage, PromptBuilder

__all__ = ["EncodedImage", "PromptBuilder", "TRY_ON_INSTRUCTION"]
