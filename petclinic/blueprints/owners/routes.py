from __future__ import annotations

from flask import abort, current_app, flash, redirect, render_template, request, url_for

from petclinic.domain.errors import Errors
from petclinic.domain.owner_search import SearchOutcome, search_owners
from petclinic.domain.owner_updates import OWNER_ID_MISMATCH_MESSAGE, owner_ids_match
from petclinic.forms import FindOwnersForm, OwnerForm
from petclinic.models import Owner
from petclinic.repository import OwnerRepository

from . import owners_bp


def _owners() -> OwnerRepository:
    return OwnerRepository()


def load_owner_or_404(owner_id: int) -> Owner:
    owner = _owners().find_by_id(owner_id)
    if owner is None:
        current_app.logger.info('Owner %s not found', owner_id)
        abort(404)
    return owner


@owners_bp.route('/owners/new', methods=['GET', 'POST'])
def create_owner():
    form = OwnerForm()
    if form.validate_on_submit():
        owner = form.populate_owner(Owner())
        try:
            _owners().save(owner)
        except Exception:
            flash('Unable to save owner. Please try again.', 'danger')
        else:
            current_app.logger.info('Created owner %s', owner.id)
            flash('New Owner Created', 'success')
            return redirect(url_for('owners.show_owner', owner_id=owner.id))
    return render_template('owners/create_or_update_owner_form.html', form=form, owner=None)


@owners_bp.route('/owners/find')
def find_owners():
    form = FindOwnersForm(request.args)
    return render_template('owners/find_owners.html', form=form, errors=Errors('owner'))


@owners_bp.route('/owners')
def list_owners():
    """Search owners by last-name prefix.

    One match redirects straight to that owner, none re-renders the search
    form with a ``notFound`` error, several render one page of the list.
    """
    form = FindOwnersForm(request.args)
    errors = Errors('owner')
    page = request.args.get('page', 1, type=int)

    result = search_owners(
        _owners(),
        form.last_name.data,
        page=page,
        errors=errors,
        page_size=current_app.config.get('OWNERS_PER_PAGE', 20),
    )

    if result.outcome == SearchOutcome.NOT_FOUND:
        return render_template('owners/find_owners.html', form=form, errors=errors)

    if result.outcome == SearchOutcome.SINGLE_MATCH:
        return redirect(url_for('owners.show_owner', owner_id=result.owner.id))

    return render_template(
        'owners/owners_list.html',
        owners=result.page.items,
        page=result.page,
        current_page=result.current_page,
        total_pages=result.total_pages,
        total_items=result.total_items,
        last_name=result.last_name,
    )


@owners_bp.route('/owners/<int:owner_id>')
def show_owner(owner_id):
    owner = load_owner_or_404(owner_id)
    return render_template('owners/owner_details.html', owner=owner)


@owners_bp.route('/owners/<int:owner_id>/edit', methods=['GET', 'POST'])
def edit_owner(owner_id):
    owner = load_owner_or_404(owner_id)

    if request.method == 'GET':
        form = OwnerForm(obj=owner)
        return render_template('owners/create_or_update_owner_form.html', form=form, owner=owner)

    form = OwnerForm()
    if not form.validate_on_submit():
        return render_template('owners/create_or_update_owner_form.html', form=form, owner=owner)

    if not owner_ids_match(owner_id, form.id.data):
        current_app.logger.warning(
            'Owner id mismatch on edit: path=%s submitted=%s', owner_id, form.id.data
        )
        flash(OWNER_ID_MISMATCH_MESSAGE, 'error')
        return redirect(url_for('owners.edit_owner', owner_id=owner_id))

    form.populate_owner(owner)
    try:
        _owners().save(owner)
    except Exception:
        flash('Unable to update owner. Please try again.', 'danger')
        return render_template('owners/create_or_update_owner_form.html', form=form, owner=owner)

    flash('Owner Values Updated', 'success')
    return redirect(url_for('owners.show_owner', owner_id=owner.id))
