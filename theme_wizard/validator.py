"""Minimal per-step checks run before the wizard advances."""

from __future__ import annotations

from pydantic import BaseModel

from theme_wizard.models import WizardData


class StepCheck(BaseModel):
    """Outcome of ``can_advance``: ``ok`` or a message for the user."""

    ok: bool = True
    message: str | None = None


def can_advance(step: int, data: WizardData) -> StepCheck:
    """Check whether the required fields of *step* are filled in.

    Only the transition is gated; the user can keep editing the step after a
    failed check.

    Args:
        step: Current step number (1-6).
        data: The form state as it stands.

    Returns:
        ``StepCheck(ok=True)`` or ``StepCheck(ok=False, message=...)``.
    """
    if step == 1 and not data.repo_url.startswith("http"):
        return StepCheck(ok=False, message="Informe a URL do repositório GitHub.")
    if step == 2 and not data.brand_name.strip():
        return StepCheck(ok=False, message="Informe o nome da marca.")
    if step == 2 and not data.niche:
        return StepCheck(ok=False, message="Selecione o nicho do blog.")
    if step == 6 and len(data.home_sections) == 0:
        return StepCheck(ok=False, message="Selecione pelo menos 1 seção para a home.")
    return StepCheck(ok=True)
