"""PromptForge - storyboard Masterprompts for classic 2D Bangladeshi cartoons."""

__version__ = "0.1.0"
