"""Owner screens: search, details, creation and update."""

from petclinic.domain.owner_updates import OWNER_ID_MISMATCH_MESSAGE
from petclinic.models import Owner


def rendered(captured_templates):
    template, context = captured_templates[-1]
    return template.name, context


def test_init_find_form(client, captured_templates):
    resp = client.get('/owners/find')
    assert resp.status_code == 200
    name, context = rendered(captured_templates)
    assert name == 'owners/find_owners.html'
    assert 'form' in context


def test_find_by_last_name_redirects_to_single_match(client, george):
    resp = client.get('/owners?page=1&last_name=Franklin')
    assert resp.status_code == 302
    assert resp.headers['Location'].endswith(f'/owners/{george.id}')


def test_find_no_owners_found(client, captured_templates):
    resp = client.get('/owners', query_string={'page': 1, 'last_name': 'Unknown Surname'})
    assert resp.status_code == 200
    name, context = rendered(captured_templates)
    assert name == 'owners/find_owners.html'
    assert context['errors'].codes('last_name') == ['notFound']
    assert 'has not been found' in resp.get_data(as_text=True)


def test_find_several_owners_lists_them(client, captured_templates):
    resp = client.get('/owners', query_string={'last_name': 'Davis'})
    assert resp.status_code == 200
    name, context = rendered(captured_templates)
    assert name == 'owners/owners_list.html'
    assert sorted(o.first_name for o in context['owners']) == ['Betty', 'Harold']
    assert context['total_items'] == 2
    assert context['current_page'] == 1
    assert context['total_pages'] == 1


def test_find_without_last_name_lists_everyone(client, captured_templates):
    resp = client.get('/owners')
    assert resp.status_code == 200
    _, context = rendered(captured_templates)
    assert context['total_items'] == 10
    assert len(context['owners']) == 10


def test_find_paginates_with_one_based_pages(app, client, captured_templates):
    app.config['OWNERS_PER_PAGE'] = 4

    client.get('/owners', query_string={'page': 1})
    _, first = rendered(captured_templates)
    client.get('/owners', query_string={'page': 3})
    _, last = rendered(captured_templates)

    assert first['total_pages'] == 3
    assert [o.id for o in first['owners']] == sorted(o.id for o in first['owners'])
    assert len(first['owners']) == 4
    assert last['current_page'] == 3
    assert len(last['owners']) == 2
    assert set(o.id for o in first['owners']).isdisjoint(o.id for o in last['owners'])


def test_find_with_invalid_page_shows_first_page(client, captured_templates):
    client.get('/owners', query_string={'page': 'abc'})
    _, context = rendered(captured_templates)
    assert context['current_page'] == 1


def test_find_with_oversized_page_shows_empty_list(client, captured_templates):
    resp = client.get('/owners', query_string={'page': str(10**18)})
    assert resp.status_code == 200
    name, context = rendered(captured_templates)
    assert name == 'owners/owners_list.html'
    assert context['owners'] == []
    assert context['total_items'] == 10


def test_empty_filter_with_single_owner_redirects(db, client, george):
    for owner in Owner.query.filter(Owner.id != george.id).all():
        db.session.delete(owner)
    db.session.commit()

    resp = client.get('/owners', query_string={'last_name': ''})
    assert resp.status_code == 302
    assert resp.headers['Location'].endswith(f'/owners/{george.id}')


def test_show_owner(client, captured_templates, george):
    resp = client.get(f'/owners/{george.id}')
    assert resp.status_code == 200
    name, context = rendered(captured_templates)
    assert name == 'owners/owner_details.html'
    owner = context['owner']
    assert owner.last_name == 'Franklin'
    assert owner.first_name == 'George'
    assert owner.address == '110 W. Liberty St.'
    assert owner.city == 'Madison'
    assert owner.telephone == '6085551023'
    assert owner.pets
    assert 'Leo' in resp.get_data(as_text=True)


def test_show_unknown_owner_is_404(client):
    resp = client.get('/owners/999')
    assert resp.status_code == 404


def test_init_creation_form(client, captured_templates):
    resp = client.get('/owners/new')
    assert resp.status_code == 200
    name, context = rendered(captured_templates)
    assert name == 'owners/create_or_update_owner_form.html'
    assert context['owner'] is None


def test_process_creation_form_success(client, flashes):
    resp = client.post('/owners/new', data={
        'first_name': 'Joe',
        'last_name': 'Bloggs',
        'address': '123 Caramel Street',
        'city': 'London',
        'telephone': '1316761638',
    })
    assert resp.status_code == 302
    created = Owner.query.filter_by(last_name='Bloggs').one()
    assert resp.headers['Location'].endswith(f'/owners/{created.id}')
    assert ('success', 'New Owner Created') in flashes()


def test_process_creation_form_has_errors(client, captured_templates):
    resp = client.post('/owners/new', data={
        'first_name': 'Joe',
        'last_name': 'Bloggs',
        'city': 'London',
        'telephone': 'not-digits',
    })
    assert resp.status_code == 200
    _, context = rendered(captured_templates)
    form = context['form']
    assert 'address' in form.errors
    assert 'telephone' in form.errors
    assert 'first_name' not in form.errors
    assert Owner.query.filter_by(last_name='Bloggs').count() == 0


def test_init_update_form(client, captured_templates, george):
    resp = client.get(f'/owners/{george.id}/edit')
    assert resp.status_code == 200
    _, context = rendered(captured_templates)
    assert context['form'].last_name.data == 'Franklin'
    assert context['owner'].id == george.id


def test_process_update_form_success(db, client, george, flashes):
    resp = client.post(f'/owners/{george.id}/edit', data={
        'id': george.id,
        'first_name': 'Joe',
        'last_name': 'Bloggs',
        'address': '123 Caramel Street',
        'city': 'London',
        'telephone': '1616291589',
    })
    assert resp.status_code == 302
    assert resp.headers['Location'].endswith(f'/owners/{george.id}')
    assert db.session.get(Owner, george.id).last_name == 'Bloggs'
    assert ('success', 'Owner Values Updated') in flashes()


def test_process_update_form_with_id_mismatch(db, client, george, flashes):
    resp = client.post(f'/owners/{george.id}/edit', data={
        'id': 2,
        'first_name': 'John',
        'last_name': 'Doe',
        'address': 'Center Street',
        'city': 'New York',
        'telephone': '0123456789',
    })
    assert resp.status_code == 302
    assert resp.headers['Location'].endswith(f'/owners/{george.id}/edit')
    assert ('error', OWNER_ID_MISMATCH_MESSAGE) in flashes()
    assert db.session.get(Owner, george.id).last_name == 'Franklin'
    assert Owner.query.filter_by(last_name='Doe').count() == 0


def test_process_update_form_has_errors(client, captured_templates, george):
    resp = client.post(f'/owners/{george.id}/edit', data={
        'id': george.id,
        'first_name': 'Joe',
        'last_name': 'Bloggs',
        'address': '',
        'telephone': '',
    })
    assert resp.status_code == 200
    name, context = rendered(captured_templates)
    assert name == 'owners/create_or_update_owner_form.html'
    assert 'address' in context['form'].errors
    assert 'telephone' in context['form'].errors
