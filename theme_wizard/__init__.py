"""CNX theme wizard.

Collects brand, NAP, SEO, content and design answers in six steps and turns
them into the theme-creation prompt handed to a coding agent.
"""

from .controller import Stage, WizardController, WizardStateError
from .models import WizardData, WizardUpdate, slugify
from .prompt_gen import PromptGenerator, generate_prompt
from .validator import StepCheck, can_advance

__all__ = [
    "PromptGenerator",
    "Stage",
    "StepCheck",
    "WizardController",
    "WizardData",
    "WizardStateError",
    "WizardUpdate",
    "can_advance",
    "generate_prompt",
    "slugify",
]

__version__ = "0.1.0"
