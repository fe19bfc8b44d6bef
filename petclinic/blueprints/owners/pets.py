from __future__ import annotations

from datetime import date

from flask import abort, current_app, flash, redirect, render_template, request, url_for

from petclinic.domain.errors import Errors
from petclinic.domain.owner_updates import apply_pet_changes, validate_pet_submission
from petclinic.domain.pet_type_formatter import PetTypeFormatter
from petclinic.forms import PetForm, VisitForm
from petclinic.models import Visit
from petclinic.repository import OwnerRepository

from . import owners_bp
from .binding import bind_pet, pet_form_data
from .routes import load_owner_or_404


PET_FORM_TEMPLATE = 'pets/create_or_update_pet_form.html'


def _pet_or_404(owner, pet_id):
    pet = owner.get_pet_by_id(pet_id)
    if pet is None:
        current_app.logger.info('Pet %s not found for owner %s', pet_id, owner.id)
        abort(404)
    return pet


def _render_pet_form(form, owner, errors, repository, pet=None):
    return render_template(
        PET_FORM_TEMPLATE,
        form=form,
        owner=owner,
        pet=pet,
        errors=errors,
        pet_types=repository.find_pet_types(),
    )


def _record_form_errors(form, errors):
    # PetForm carries no field validators, so only CSRF failures end up here.
    if not form.validate():
        for field, messages in form.errors.items():
            for message in messages:
                errors.reject_value(field, 'invalid', message)


def _process_pet_submission(owner, repository, existing=None):
    form = PetForm()
    errors = Errors('pet')
    formatter = PetTypeFormatter(repository)

    _record_form_errors(form, errors)
    submitted = bind_pet(form, formatter, errors, existing=existing)
    validate_pet_submission(owner, submitted, errors)

    if errors.has_errors():
        current_app.logger.debug('Rejected pet for owner %s: %r', owner.id, errors)
        return _render_pet_form(form, owner, errors, repository, pet=existing)

    pet = apply_pet_changes(owner, submitted)
    try:
        repository.save(owner)
    except Exception:
        flash('Unable to save pet. Please try again.', 'danger')
        return _render_pet_form(form, owner, errors, repository, pet=existing)

    if existing is None:
        current_app.logger.info('Added pet %s to owner %s', pet.id, owner.id)
        flash('New Pet has been Added', 'success')
    else:
        flash('Pet details has been edited', 'success')
    return redirect(url_for('owners.show_owner', owner_id=owner.id))


@owners_bp.route('/owners/<int:owner_id>/pets/new', methods=['GET', 'POST'])
def create_pet(owner_id):
    owner = load_owner_or_404(owner_id)
    repository = OwnerRepository()

    if request.method == 'POST':
        return _process_pet_submission(owner, repository)

    return _render_pet_form(PetForm(), owner, Errors('pet'), repository)


@owners_bp.route('/owners/<int:owner_id>/pets/<int:pet_id>/edit', methods=['GET', 'POST'])
def edit_pet(owner_id, pet_id):
    owner = load_owner_or_404(owner_id)
    pet = _pet_or_404(owner, pet_id)
    repository = OwnerRepository()

    if request.method == 'POST':
        return _process_pet_submission(owner, repository, existing=pet)

    form = PetForm(data=pet_form_data(pet, PetTypeFormatter(repository)))
    return _render_pet_form(form, owner, Errors('pet'), repository, pet=pet)


@owners_bp.route('/owners/<int:owner_id>/pets/<int:pet_id>/visits/new', methods=['GET', 'POST'])
def create_visit(owner_id, pet_id):
    owner = load_owner_or_404(owner_id)
    pet = _pet_or_404(owner, pet_id)
    form = VisitForm()

    if form.validate_on_submit():
        visit = Visit(
            visit_date=form.visit_date.data or date.today(),
            description=form.description.data.strip(),
        )
        owner.add_visit(pet.id, visit)
        try:
            OwnerRepository().save(owner)
        except Exception:
            flash('Unable to book the visit. Please try again.', 'danger')
        else:
            current_app.logger.info('Booked visit %s for pet %s', visit.id, pet.id)
            flash('Your visit has been booked', 'success')
            return redirect(url_for('owners.show_owner', owner_id=owner.id))

    return render_template('pets/create_or_update_visit_form.html', form=form, owner=owner, pet=pet)
