"""Turns submitted pet form text into a Pet the domain rules can check."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from petclinic.domain.errors import Errors, TYPE_MISMATCH
from petclinic.domain.pet_type_formatter import ParseError, PetTypeFormatter
from petclinic.models import Pet


DATE_FORMAT = '%Y-%m-%d'


def _raw(value) -> str:
    return (value or '').strip()


def parse_birth_date(value: str):
    return datetime.strptime(value, DATE_FORMAT).date()


def bind_pet(form, formatter: PetTypeFormatter, errors: Errors, existing: Optional[Pet] = None) -> Pet:
    """Build a detached Pet from ``form``.

    Conversion failures are recorded as ``typeMismatch`` on the field
    instead of aborting the request. Blank values stay absent so the
    validator reports them as required. When editing, an absent type keeps
    the type already stored on ``existing``.
    """
    pet = Pet(name=form.name.data)
    if existing is not None:
        pet.id = existing.id

    raw_date = _raw(form.birth_date.data)
    if raw_date:
        try:
            pet.birth_date = parse_birth_date(raw_date)
        except ValueError:
            errors.reject_value('birth_date', TYPE_MISMATCH, f'invalid date: {raw_date}')

    raw_type = form.type.data or ''
    if raw_type.strip():
        try:
            pet.type = formatter.parse(raw_type)
        except ParseError as exc:
            errors.reject_value('type', TYPE_MISMATCH, str(exc))
    elif existing is not None:
        pet.type = existing.type

    return pet


def pet_form_data(pet: Pet, formatter: PetTypeFormatter) -> dict:
    """Initial form values for an existing pet."""
    return {
        'id': pet.id,
        'name': pet.name,
        'birth_date': pet.birth_date.strftime(DATE_FORMAT) if pet.birth_date else '',
        'type': formatter.print(pet.type) if pet.type is not None else '',
    }
