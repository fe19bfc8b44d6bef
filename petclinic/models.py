"""
Database Models for the PetClinic Application

This module defines all database models using SQLAlchemy ORM.
Models include Owner, Pet, PetType, Visit, Vet and Specialty.
"""

from datetime import date

from petclinic.extensions import db


vet_specialties = db.Table(
    'vet_specialties',
    db.Column('vet_id', db.Integer, db.ForeignKey('vets.id', ondelete='CASCADE'), primary_key=True),
    db.Column('specialty_id', db.Integer, db.ForeignKey('specialties.id', ondelete='CASCADE'), primary_key=True),
)


class PetType(db.Model):
    """Reference data label assigned to a pet (dog, cat, ...)."""

    __tablename__ = 'types'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), unique=True, nullable=False, index=True)

    def __str__(self):
        return self.name or ''

    def __repr__(self):
        return f'<PetType {self.name}>'


class Owner(db.Model):
    """Clinic client with contact details and the pets they own."""

    __tablename__ = 'owners'

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(30), nullable=False)
    last_name = db.Column(db.String(30), nullable=False, index=True)
    address = db.Column(db.String(255), nullable=False)
    city = db.Column(db.String(80), nullable=False)
    telephone = db.Column(db.String(20), nullable=False)

    # Relationships
    pets = db.relationship(
        'Pet',
        back_populates='owner',
        order_by='Pet.id',
        cascade='all, delete-orphan',
    )

    @property
    def is_new(self):
        return self.id is None

    @property
    def full_name(self):
        return f'{self.first_name or ""} {self.last_name or ""}'.strip()

    def add_pet(self, pet):
        if pet.is_new and pet not in self.pets:
            self.pets.append(pet)

    def get_pet(self, name, ignore_new=False):
        """Return the pet with the given name (case insensitive), or None.

        With ``ignore_new`` unsaved pets are skipped.
        """
        if not name:
            return None
        wanted = name.strip().casefold()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if (pet.name or '').strip().casefold() == wanted:
                return pet
        return None

    def get_pet_by_id(self, pet_id):
        for pet in self.pets:
            if pet.id is not None and pet.id == pet_id:
                return pet
        return None

    def add_visit(self, pet_id, visit):
        """Attach a visit to one of this owner's pets."""
        pet = self.get_pet_by_id(pet_id)
        if pet is None:
            raise ValueError(f'Invalid Pet identifier: {pet_id}')
        pet.add_visit(visit)
        return pet

    def __repr__(self):
        return f'<Owner {self.id} {self.full_name}>'


class Pet(db.Model):
    """Animal belonging to exactly one owner."""

    __tablename__ = 'pets'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(30), nullable=False)
    birth_date = db.Column(db.Date)
    type_id = db.Column(db.Integer, db.ForeignKey('types.id'), nullable=False, index=True)
    owner_id = db.Column(db.Integer, db.ForeignKey('owners.id', ondelete='CASCADE'), nullable=False, index=True)

    # Relationships
    type = db.relationship('PetType', lazy='joined')
    owner = db.relationship('Owner', back_populates='pets')
    visits = db.relationship(
        'Visit',
        back_populates='pet',
        order_by='Visit.visit_date',
        cascade='all, delete-orphan',
    )

    @property
    def is_new(self):
        return self.id is None

    def add_visit(self, visit):
        self.visits.append(visit)

    def __repr__(self):
        return f'<Pet {self.id} {self.name}>'


class Visit(db.Model):
    """A dated clinic visit for a pet."""

    __tablename__ = 'visits'

    id = db.Column(db.Integer, primary_key=True)
    visit_date = db.Column(db.Date, nullable=False, default=date.today)
    description = db.Column(db.String(255), nullable=False)
    pet_id = db.Column(db.Integer, db.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False, index=True)

    pet = db.relationship('Pet', back_populates='visits')

    def __init__(self, **kwargs):
        super(Visit, self).__init__(**kwargs)
        if self.visit_date is None:
            self.visit_date = date.today()

    def __repr__(self):
        return f'<Visit {self.id} {self.visit_date}>'


class Specialty(db.Model):
    """Veterinary specialty (radiology, surgery, dentistry)."""

    __tablename__ = 'specialties'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(80), unique=True, nullable=False)

    def __repr__(self):
        return f'<Specialty {self.name}>'


class Vet(db.Model):
    """Veterinarian working at the clinic."""

    __tablename__ = 'vets'

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(30), nullable=False)
    last_name = db.Column(db.String(30), nullable=False, index=True)

    specialties = db.relationship(
        'Specialty',
        secondary=vet_specialties,
        lazy='selectin',
        passive_deletes=True,
    )

    @property
    def specialty_names(self):
        return sorted(s.name for s in self.specialties)

    @property
    def nr_of_specialties(self):
        return len(self.specialties)

    def to_dict(self):
        return {
            'id': self.id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'specialties': [{'id': s.id, 'name': s.name} for s in sorted(self.specialties, key=lambda s: s.name)],
        }

    def __repr__(self):
        return f'<Vet {self.first_name} {self.last_name}>'
