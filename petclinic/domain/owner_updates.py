from __future__ import annotations

from datetime import date
from typing import Optional

from petclinic.domain.errors import DUPLICATE, Errors
from petclinic.domain.pet_validator import PetValidator


OWNER_ID_MISMATCH_MESSAGE = 'Owner ID mismatch. Please try again.'


def _normalized_name(name) -> str:
    return (name or '').strip().casefold()


def find_duplicate_pet(owner, pet):
    """Return another pet of ``owner`` already using ``pet``'s name, if any.

    Names are compared case-insensitively (``str.casefold``) after trimming.
    A stored pet is never its own duplicate: it is recognised by id, an
    unsaved one by object identity. Unsaved pets of the owner are ignored.
    """
    wanted = _normalized_name(pet.name)
    if not wanted:
        return None
    for other in owner.pets:
        if other is pet or other.id is None:
            continue
        if pet.id is not None and other.id == pet.id:
            continue
        if _normalized_name(other.name) == wanted:
            return other
    return None


def validate_pet_submission(
    owner,
    pet,
    errors: Errors,
    validator: Optional[PetValidator] = None,
    today: Optional[date] = None,
) -> bool:
    """Run the field rules and the duplicate-name check for one pet.

    Returns True when nothing was recorded into ``errors``.
    """
    count_before = errors.error_count
    (validator or PetValidator()).validate(pet, errors, today=today)

    if find_duplicate_pet(owner, pet) is not None:
        errors.reject_value('name', DUPLICATE, 'already exists')

    return errors.error_count == count_before


def owner_ids_match(path_owner_id, submitted_owner_id) -> bool:
    """Whether the owner id in the URL is the one the form was filled for."""
    if submitted_owner_id is None or submitted_owner_id == '':
        # Nothing submitted, the form stays bound to the owner from the URL.
        return True
    try:
        return int(path_owner_id) == int(submitted_owner_id)
    except (TypeError, ValueError):
        return False


def apply_pet_changes(owner, submitted):
    """Fold a validated submission into the owner's pets.

    Edits copy name, birth date and type onto the stored pet; a new pet is
    attached to the owner. Returns the pet that has to be persisted.
    """
    existing = owner.get_pet_by_id(submitted.id) if submitted.id is not None else None
    if existing is None:
        submitted.name = submitted.name.strip()
        owner.add_pet(submitted)
        return submitted

    existing.name = submitted.name.strip()
    existing.birth_date = submitted.birth_date
    existing.type = submitted.type
    return existing
