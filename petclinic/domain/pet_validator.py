from __future__ import annotations

from datetime import date
from typing import Optional

from petclinic.domain.errors import Errors, FUTURE_BIRTH_DATE, REQUIRED


class PetValidator:
    """Field rules a pet must satisfy before it is stored.

    Every rule runs on its own; a failing rule never hides another one.
    Problems are recorded into the ``errors`` collection handed in by the
    caller, so several validators can add to the same collection.
    """

    def supports(self, obj) -> bool:
        return all(hasattr(obj, attr) for attr in ('name', 'type', 'birth_date'))

    def validate(self, pet, errors: Errors, today: Optional[date] = None) -> None:
        name = pet.name
        if name is None or not name.strip():
            errors.reject_value('name', REQUIRED)

        if pet.type is None:
            errors.reject_value('type', REQUIRED)

        birth_date = pet.birth_date
        if birth_date is None:
            errors.reject_value('birth_date', REQUIRED)
        elif birth_date > (today or date.today()):
            errors.reject_value('birth_date', FUTURE_BIRTH_DATE)
