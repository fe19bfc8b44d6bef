from datetime import date

import click
from flask.cli import with_appcontext

from petclinic.extensions import db
from petclinic.models import Owner, Pet, PetType, Specialty, Vet, Visit


PET_TYPES = ('cat', 'dog', 'lizard', 'snake', 'bird', 'hamster')

SPECIALTIES = ('radiology', 'surgery', 'dentistry')

VETS = (
    ('James', 'Carter', ()),
    ('Helen', 'Leary', ('radiology',)),
    ('Linda', 'Douglas', ('surgery', 'dentistry')),
    ('Rafael', 'Ortega', ('surgery',)),
    ('Henry', 'Stevens', ('radiology',)),
    ('Sharon', 'Jenkins', ()),
)

OWNERS = (
    ('George', 'Franklin', '110 W. Liberty St.', 'Madison', '6085551023'),
    ('Betty', 'Davis', '638 Cardinal Ave.', 'Sun Prairie', '6085551749'),
    ('Eduardo', 'Rodriquez', '2693 Commerce St.', 'McFarland', '6085558763'),
    ('Harold', 'Davis', '563 Friendly St.', 'Windsor', '6085553198'),
    ('Peter', 'McTavish', '2387 S. Fair Way', 'Madison', '6085552765'),
    ('Jean', 'Coleman', '105 N. Lake St.', 'Monona', '6085552654'),
    ('Jeff', 'Black', '1450 Oak Blvd.', 'Monona', '6085555387'),
    ('Maria', 'Escobito', '345 Maple St.', 'Madison', '6085557683'),
    ('David', 'Schroeder', '2749 Blackhawk Trail', 'Madison', '6085559435'),
    ('Carlos', 'Estaban', '2335 Independence La.', 'Waunakee', '6085555487'),
)

# (name, birth date, type, index into OWNERS)
PETS = (
    ('Leo', date(2010, 9, 7), 'cat', 0),
    ('Basil', date(2012, 8, 6), 'hamster', 1),
    ('Rosy', date(2011, 4, 17), 'dog', 2),
    ('Jewel', date(2010, 3, 7), 'dog', 2),
    ('Iggy', date(2010, 11, 30), 'lizard', 3),
    ('George', date(2010, 1, 20), 'snake', 4),
    ('Samantha', date(2012, 9, 4), 'cat', 5),
    ('Max', date(2012, 9, 4), 'cat', 5),
    ('Lucky', date(2011, 8, 6), 'bird', 6),
    ('Mulligan', date(2007, 2, 24), 'dog', 7),
    ('Freddy', date(2010, 3, 9), 'bird', 8),
    ('Lucky', date(2010, 6, 24), 'dog', 9),
    ('Sly', date(2012, 6, 8), 'cat', 9),
)

# (pet name, owner index, date, description)
VISITS = (
    ('Samantha', 5, date(2013, 1, 1), 'rabies shot'),
    ('Max', 5, date(2013, 1, 2), 'rabies shot'),
    ('Max', 5, date(2013, 1, 3), 'neutered'),
    ('Samantha', 5, date(2013, 1, 4), 'spayed'),
)


def seed_pet_types() -> int:
    """Insert missing pet types; returns how many were created."""
    existing = {t.name for t in PetType.query.all()}
    created = 0
    for name in PET_TYPES:
        if name not in existing:
            db.session.add(PetType(name=name))
            created += 1
    db.session.commit()
    return created


def seed_sample_data() -> bool:
    """Load the demo clinic. Returns False when owners already exist."""
    seed_pet_types()
    if Owner.query.first() is not None:
        return False

    types = {t.name: t for t in PetType.query.all()}

    specialties = {}
    for name in SPECIALTIES:
        specialty = Specialty.query.filter_by(name=name).first() or Specialty(name=name)
        specialties[name] = specialty
    for first_name, last_name, names in VETS:
        db.session.add(Vet(
            first_name=first_name,
            last_name=last_name,
            specialties=[specialties[n] for n in names],
        ))

    owners = []
    for first_name, last_name, address, city, telephone in OWNERS:
        owner = Owner(
            first_name=first_name,
            last_name=last_name,
            address=address,
            city=city,
            telephone=telephone,
        )
        db.session.add(owner)
        owners.append(owner)

    for name, birth_date, type_name, owner_index in PETS:
        owners[owner_index].pets.append(Pet(name=name, birth_date=birth_date, type=types[type_name]))

    db.session.flush()
    for pet_name, owner_index, visit_date, description in VISITS:
        pet = owners[owner_index].get_pet(pet_name)
        pet.add_visit(Visit(visit_date=visit_date, description=description))

    db.session.commit()
    return True


@click.command('seed-pet-types')
@with_appcontext
def seed_pet_types_command() -> None:
    """Seed the pet type reference list."""
    created = seed_pet_types()
    click.echo(f"Seeded {created} pet types. Total pet types: {PetType.query.count()}")


@click.command('seed-sample-data')
@with_appcontext
def seed_sample_data_command() -> None:
    """Seed vets, owners, pets and visits for a demo clinic."""
    if not seed_sample_data():
        click.echo('Owners already present, sample data not loaded.')
        return
    click.echo(
        f"Seeded {Owner.query.count()} owners, {Pet.query.count()} pets "
        f"and {Vet.query.count()} vets."
    )
