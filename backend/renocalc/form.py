"""Interactive form state for building a request one field at a time.

Holds the request being edited, the current field errors and the last
breakdown. Editing a field clears that field's error right away, without
waiting for the next submit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from renocalc.exceptions import InvalidInputError
from renocalc.models.enums import ScopeItem
from renocalc.models.request import RenovationRequest

if TYPE_CHECKING:
    from renocalc.engine import EstimateEngine
    from renocalc.models.breakdown import CostBreakdown

logger = logging.getLogger(__name__)

INVALID_NUMBER_MESSAGE = "Please enter a positive number"


class EstimateForm:
    """Editable request plus its field errors and latest result."""

    def __init__(
        self,
        engine: EstimateEngine,
        request: RenovationRequest | None = None,
    ) -> None:
        self._engine = engine
        self._request = request or RenovationRequest()
        self._errors: dict[str, str] = {}
        self._breakdown: CostBreakdown | None = None

    @property
    def request(self) -> RenovationRequest:
        return self._request

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def breakdown(self) -> CostBreakdown | None:
        return self._breakdown

    def set_field(self, name: str, value: Any) -> None:
        """Set one request field and clear any error recorded for it.

        Raises:
            KeyError: If ``name`` is not a request field.
        """
        if name not in RenovationRequest.model_fields:
            msg = f"Unknown request field '{name}'"
            raise KeyError(msg)
        self._request = self._request.with_changes(**{name: value})
        self._errors.pop(name, None)

    def toggle_scope(self, item: ScopeItem) -> None:
        """Select ``item`` if it is not selected, otherwise deselect it."""
        item = ScopeItem(item)
        selected = set(self._request.scope_items)
        selected.symmetric_difference_update({item})
        self.set_field("scope_items", frozenset(selected))

    def submit(self) -> CostBreakdown | None:
        """Validate and, if complete, calculate the current request.

        Missing and unparsable fields are recorded in :attr:`errors` and
        ``None`` is returned.
        """
        try:
            result = self._engine.estimate(self._request)
        except InvalidInputError as exc:
            logger.debug("Rejected %s=%r", exc.field, exc.value)
            self._errors = {exc.field: INVALID_NUMBER_MESSAGE}
            self._breakdown = None
            return None
        self._errors = dict(result.validation.errors)
        self._breakdown = result.breakdown
        return self._breakdown
