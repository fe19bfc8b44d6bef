from __future__ import annotations

from flask import current_app, jsonify, render_template, request

from petclinic.domain.pagination import page_request_for
from petclinic.repository import VetRepository

from . import vets_bp


@vets_bp.route('/vets.html')
def show_vet_list():
    page = request.args.get('page', 1, type=int)
    per_page = current_app.config.get('VETS_PER_PAGE', 5)
    vets_page = VetRepository().find_page(page_request_for(page, per_page))
    return render_template(
        'vets/vet_list.html',
        vets=vets_page.items,
        page=vets_page,
        current_page=vets_page.current_page,
        total_pages=vets_page.total_pages,
        total_items=vets_page.total,
    )


@vets_bp.route('/vets')
def show_resources_vet_list():
    """Machine-readable vet list."""
    vets = VetRepository().find_all()
    return jsonify({'vet_list': [vet.to_dict() for vet in vets]})
