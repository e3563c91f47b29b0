from werkzeug.datastructures import MultiDict

from scripthub.forms import CategoryForm, LoginForm, ScriptForm, ValidationResult


def test_validation_result_truthiness():
    assert ValidationResult().ok
    assert ValidationResult()
    assert not ValidationResult(['nope'])


def test_category_form_trims_and_derives_slug():
    form = CategoryForm.from_mapping(MultiDict({'name': '  Teleport Hack!  '}))
    assert form.name == 'Teleport Hack!'
    assert form.slug == 'teleport-hack'
    assert form.validate().ok


def test_category_form_rejects_blank_and_unsluggable_names():
    assert not CategoryForm.from_mapping({}).validate().ok
    assert not CategoryForm.from_mapping({'name': '   '}).validate().ok
    assert not CategoryForm.from_mapping({'name': '!!!'}).validate().ok


def test_script_form_defaults():
    form = ScriptForm.from_mapping(MultiDict({'title': 'Test', 'code': 'print(1)'}))
    assert form.description == ''
    assert form.category_id is None
    assert form.slug == 'test'
    assert form.validate().ok


def test_script_form_category_id_parsing():
    assert ScriptForm.from_mapping({'category_id': '3'}).category_id == 3
    assert ScriptForm.from_mapping({'category_id': 7}).category_id == 7
    assert ScriptForm.from_mapping({'category_id': ''}).category_id is None
    assert ScriptForm.from_mapping({'category_id': '0'}).category_id == 0
    assert ScriptForm.from_mapping({'category_id': 'abc'}).category_id is None


def test_script_form_requires_title_and_code():
    result = ScriptForm.from_mapping({'title': '', 'code': ''}).validate()
    assert not result.ok
    assert 'title is required' in result.errors
    assert 'code is required' in result.errors

    assert not ScriptForm.from_mapping({'title': 'ok', 'code': ''}).validate().ok
    assert not ScriptForm.from_mapping({'title': '', 'code': 'x'}).validate().ok
    assert not ScriptForm.from_mapping({'title': '???', 'code': 'x'}).validate().ok


def test_login_form():
    assert LoginForm.from_mapping({'username': 'a', 'password': 'b'}).validate().ok
    assert not LoginForm.from_mapping({'username': 'a'}).validate().ok
    assert not LoginForm.from_mapping({}).validate().ok
