"""Wizard flow controller.

A small finite-state machine over three stages::

    type-select --select_type("blog")--> wizard(step 1..6) --next() at 6--> prompt-result
         ^                                 |  back() at step 1                    |
         +---------------------------------+----------------- restart() ---------+

Transitions are methods; each one clears the validation error and fires
``on_scroll_top`` so the UI can bring the new screen into view.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from theme_wizard.catalog import TOTAL_STEPS, unlocked_site_types
from theme_wizard.models import WizardData, WizardUpdate, slugify
from theme_wizard.prompt_gen import generate_prompt
from theme_wizard.validator import can_advance


class Stage(str, Enum):
    TYPE_SELECT = "type-select"
    WIZARD = "wizard"
    PROMPT_RESULT = "prompt-result"


class WizardStateError(Exception):
    """Raised when a transition is requested from a stage that does not allow it."""

    def __init__(self, stage: Stage, message: str) -> None:
        self.stage = stage
        super().__init__(f"Stage {stage.value}: {message}")


class WizardController:
    """Drives one interactive wizard session.

    Attributes:
        stage: Current stage.
        step: Current step (1-6); meaningful only in the ``wizard`` stage.
        data: The form state collected so far.
        error: Validation message from the last failed ``next()``, or ``""``.
        prompt: The generated prompt once the flow is complete.
    """

    def __init__(self, on_scroll_top: Callable[[], None] | None = None) -> None:
        self.on_scroll_top = on_scroll_top
        self.stage = Stage.TYPE_SELECT
        self.step = 1
        self.data = WizardData()
        self.error = ""
        self.prompt = ""
        self._slug_edited = False

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require(self, stage: Stage, action: str) -> None:
        if self.stage != stage:
            raise WizardStateError(self.stage, f"cannot {action} outside the {stage.value} stage")

    def _scroll_top(self) -> None:
        if self.on_scroll_top is not None:
            self.on_scroll_top()

    @property
    def is_last_step(self) -> bool:
        return self.step == TOTAL_STEPS

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def select_type(self, type_id: str) -> bool:
        """Start the wizard for *type_id*.

        Locked or unknown site types are ignored.

        Returns:
            ``True`` if the wizard started.
        """
        self._require(Stage.TYPE_SELECT, "select a site type")
        if type_id not in {t.id for t in unlocked_site_types()}:
            return False
        self.stage = Stage.WIZARD
        self.step = 1
        self.error = ""
        self._scroll_top()
        return True

    def update(self, changes: WizardUpdate) -> WizardData:
        """Apply a step's edits to the form state.

        While the slug has not been edited by hand, renaming the brand keeps
        ``theme_slug`` in sync with it. Setting the slug back to the one derived
        from the brand name resumes the syncing.
        """
        self._require(Stage.WIZARD, "edit answers")
        if changes.theme_slug is not None:
            brand_name = changes.brand_name if changes.brand_name is not None else self.data.brand_name
            self._slug_edited = changes.theme_slug != slugify(brand_name)
        elif changes.brand_name is not None and not self._slug_edited:
            changes = changes.model_copy(update={"theme_slug": slugify(changes.brand_name)})
        self.data = self.data.apply(changes)
        self.error = ""
        return self.data

    def toggle_home_section(self, section_id: str) -> WizardData:
        self._require(Stage.WIZARD, "edit answers")
        self.data = self.data.toggle_home_section(section_id)
        self.error = ""
        return self.data

    def next(self) -> bool:
        """Validate the current step and move forward.

        On the last step this generates the prompt and switches to the
        result stage.

        Returns:
            ``False`` if validation failed (``error`` holds the reason).
        """
        self._require(Stage.WIZARD, "advance")
        check = can_advance(self.step, self.data)
        if not check.ok:
            self.error = check.message or ""
            return False

        self.error = ""
        if self.step < TOTAL_STEPS:
            self.step += 1
        else:
            self.prompt = generate_prompt(self.data)
            self.stage = Stage.PROMPT_RESULT
        self._scroll_top()
        return True

    def back(self) -> None:
        """Go to the previous step, or back to type selection from step 1."""
        self._require(Stage.WIZARD, "go back")
        self.error = ""
        if self.step > 1:
            self.step -= 1
        else:
            self.stage = Stage.TYPE_SELECT
        self._scroll_top()

    def restart(self) -> None:
        """Discard every answer and return to type selection."""
        self._require(Stage.PROMPT_RESULT, "restart")
        self.stage = Stage.TYPE_SELECT
        self.step = 1
        self.data = WizardData()
        self.prompt = ""
        self.error = ""
        self._slug_edited = False
        self._scroll_top()
