"""Tests for FormController and the registration demo component."""

import json
from dataclasses import replace

import pytest

from pyqt_formdemo.exceptions import FieldTypeError, UnknownFieldError
from pyqt_formdemo.models import RegistrationData
from pyqt_formdemo.validation import ValidationKind


def test_starts_with_initial_record(controller):
    assert controller.model() == RegistrationData.initial()
    assert controller.submitted() is None
    assert not controller.is_valid()
    assert controller.touched_fields() == set()


def test_fill_sample_makes_form_valid(controller, sample):
    controller.fill_sample()
    assert controller.model() == sample
    assert controller.is_valid()
    assert controller.errors() == {}


def test_submit_valid_form_sets_snapshot(controller):
    controller.fill_sample()
    assert controller.submit() is True
    assert controller.submitted() == controller.model()


def test_submit_is_idempotent(controller):
    controller.fill_sample()
    controller.submit()
    first = controller.submitted()
    controller.submit()
    assert controller.submitted() == first


def test_failed_submit_clears_snapshot(controller):
    controller.fill_sample()
    controller.submit()
    controller.set_value('agree_to_terms', False)
    assert controller.submit() is False
    assert controller.submitted() is None


def test_submit_marks_all_fields_touched(controller):
    controller.submit()
    assert controller.touched_fields() == set(RegistrationData.field_names())
    assert all(controller.field(name).touched() for name in RegistrationData.field_names())


def test_reset_restores_initial_state(controller):
    controller.fill_sample()
    controller.submit()
    controller.reset()
    assert controller.model() == RegistrationData.initial()
    assert controller.submitted() is None
    assert controller.touched_fields() == set()
    assert not controller.is_valid()


def test_fill_sample_keeps_touched_and_snapshot(controller):
    controller.fill_sample()
    controller.submit()
    snapshot = controller.submitted()
    controller.set_value('first_name', 'Jane')
    controller.fill_sample()
    assert controller.submitted() == snapshot
    assert controller.touched_fields() == set(RegistrationData.field_names())


def test_mark_all_touched_does_not_change_validity(controller):
    controller.mark_all_touched()
    assert not controller.is_valid()
    assert controller.submitted() is None


def test_field_state_accessors(controller):
    first_name = controller.field('first_name')
    assert first_name.value() == ''
    assert first_name.invalid()
    assert [e.kind for e in first_name.errors()] == [ValidationKind.REQUIRED]
    assert not first_name.touched()

    first_name.set_value('Jo')
    first_name.mark_as_touched()
    assert first_name.value() == 'Jo'
    assert first_name.valid()
    assert first_name.touched()


def test_set_value_returns_fields_whose_validity_changed(controller, sample):
    controller.set_model(replace(sample, email_notifications=False, sms_notifications=False,
                                 push_notifications=False))
    assert controller.field('email_notifications').invalid()

    changed = controller.set_value('sms_notifications', True)
    assert changed == {'email_notifications'}

    assert controller.set_value('push_notifications', True) == set()


def test_set_value_reports_own_field(controller):
    assert controller.set_value('country', 'ca') == {'country'}
    assert controller.set_value('country', 'de') == set()


def test_set_value_rejects_contract_violations(controller):
    with pytest.raises(UnknownFieldError):
        controller.set_value('nickname', 'x')
    with pytest.raises(FieldTypeError):
        controller.set_value('age', '25')
    with pytest.raises(UnknownFieldError):
        controller.field('nickname')


def test_errors_only_lists_failing_fields(controller, sample):
    controller.set_model(replace(sample, age=17, bio=''))
    errors = controller.errors()
    assert set(errors) == {'age', 'bio'}
    assert errors['age'][0].message == 'You must be at least 18 years old'


def test_signals(controller):
    events = []
    controller.field_changed.connect(lambda name, value: events.append(('field', name, value)))
    controller.validity_changed.connect(lambda valid: events.append(('valid', valid)))
    controller.form_submitted.connect(lambda record: events.append(('submitted', record is not None)))
    controller.form_reset.connect(lambda: events.append(('reset',)))

    controller.fill_sample()
    assert ('valid', True) in events
    assert ('field', 'first_name', 'John') in events

    events.clear()
    controller.submit()
    assert events == [('submitted', True)]

    events.clear()
    controller.reset()
    assert ('valid', False) in events
    assert events[-1] == ('reset',)


def test_touched_signal_fires_once_per_field(controller):
    touched = []
    controller.touched_changed.connect(touched.append)
    controller.mark_all_touched()
    controller.mark_all_touched()
    assert sorted(touched) == sorted(RegistrationData.field_names())


def test_reentrant_write_from_listener_is_ignored(controller):
    controller.field_changed.connect(lambda name, value: controller.set_value('last_name', 'Loop'))
    controller.set_value('first_name', 'Ann')
    assert controller.model().first_name == 'Ann'
    assert controller.model().last_name == ''
    assert controller.flag_state() == {'_in_reset': False, '_dispatching': False}


def test_demo_component_flow(qapp):
    from pyqt_formdemo.forms import RegistrationFormDemo

    demo = RegistrationFormDemo()
    assert len(demo.countries) == 11
    assert demo.on_submit() is False
    assert demo.submitted_json() is None

    demo.fill_sample_data()
    assert demo.on_submit() is True
    assert json.loads(demo.submitted_json())['email'] == 'john.doe@example.com'

    demo.reset_form()
    assert demo.submitted_data is None
    assert demo.model == RegistrationData.initial()


def test_demo_component_honours_config(qapp, sample):
    from pyqt_formdemo.forms import RegistrationFormDemo
    from pyqt_formdemo.protocols import FormDemoConfig

    demo = RegistrationFormDemo(FormDemoConfig(enable_password_match_check=True, json_indent=4))
    demo.controller.set_model(replace(sample, confirm_password='Other123!'))
    assert demo.on_submit() is False

    demo.fill_sample_data()
    demo.on_submit()
    assert demo.submitted_json().startswith('{\n    "first_name"')


def test_malformed_birthdate_keeps_controller_usable(qapp):
    from pyqt_formdemo.forms import FormController
    from pyqt_formdemo.protocols import FormDemoConfig
    from pyqt_formdemo.validation import build_registration_schema

    schema = build_registration_schema(FormDemoConfig(enable_birthdate_age_check=True))
    controller = FormController(schema)
    controller.fill_sample()

    changed = controller.set_value('birthdate', '15/01/1999')
    assert changed == {'birthdate'}
    assert not controller.is_valid()
    assert [e.kind for e in controller.field('birthdate').errors()] == [ValidationKind.INVALID_DATE]

    controller.reset()
    assert controller.model() == RegistrationData.initial()


def test_reset_recovers_after_rejected_write(controller):
    controller.fill_sample()
    with pytest.raises(FieldTypeError):
        controller.set_value('age', '25')
    assert controller.model().age == 25
    assert controller.flag_state() == {'_in_reset': False, '_dispatching': False}

    controller.reset()
    assert controller.model() == RegistrationData.initial()
    assert controller.set_value('country', 'us') == {'country'}


def test_set_model_rejects_non_record(controller):
    with pytest.raises(TypeError):
        controller.set_model({'first_name': 'John'})
    assert controller.model() == RegistrationData.initial()
