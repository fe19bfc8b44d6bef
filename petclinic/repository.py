"""SQLAlchemy-backed storage used by the web layer.

The domain package only relies on the method names exposed here, so tests
can swap these classes for plain doubles.
"""

from __future__ import annotations

from typing import List, Optional

from flask import current_app

from petclinic.domain.pagination import Page, PageRequest
from petclinic.extensions import db
from petclinic.models import Owner, PetType, Vet


class OwnerRepository:
    """Owners, their pets and the pet type reference list."""

    def __init__(self, session=None):
        self.session = session or db.session

    def find_by_id(self, owner_id) -> Optional[Owner]:
        return self.session.get(Owner, owner_id)

    def find_by_last_name_starting_with(self, prefix: str, request: PageRequest) -> Page[Owner]:
        query = Owner.query
        if prefix:
            query = query.filter(Owner.last_name.startswith(prefix, autoescape=True))

        total = query.count()
        if request.offset >= total:
            return Page.of([], request, total)
        items = (
            query.order_by(Owner.id.asc())
            .offset(request.offset)
            .limit(request.size)
            .all()
        )
        return Page.of(items, request, total)

    def find_pet_types(self) -> List[PetType]:
        return PetType.query.order_by(PetType.name.asc()).all()

    def save(self, entity):
        try:
            self.session.add(entity)
            self.session.commit()
        except Exception as exc:
            self.session.rollback()
            current_app.logger.exception('Failed to save %r: %s', entity, exc)
            raise
        return entity


class VetRepository:
    """Read-only access to veterinarians."""

    def find_all(self) -> List[Vet]:
        return Vet.query.order_by(Vet.id.asc()).all()

    def find_page(self, request: PageRequest) -> Page[Vet]:
        query = Vet.query
        total = query.count()
        if request.offset >= total:
            return Page.of([], request, total)
        items = query.order_by(Vet.id.asc()).offset(request.offset).limit(request.size).all()
        return Page.of(items, request, total)
