import datetime

from views.event_views import has_checkout_input


def _values(**overrides):
    values = {"full_name": "", "email": "", "phone_number": "", "gender": None, "date_of_birth": None}
    values.update(overrides)
    return values


def test_untouched_checkout_has_no_input():
    assert has_checkout_input(_values()) is False
    assert has_checkout_input({}) is False


def test_prefilled_name_alone_is_not_input():
    assert has_checkout_input(_values(full_name="Sari"), default_name="Sari") is False
    assert has_checkout_input(_values(full_name="Sari Dewi"), default_name="Sari") is True


def test_any_typed_or_picked_field_counts():
    assert has_checkout_input(_values(email="a@b.com")) is True
    assert has_checkout_input(_values(phone_number="0812")) is True
    assert has_checkout_input(_values(gender="Perempuan")) is True
    assert has_checkout_input(_values(date_of_birth=datetime.date(2000, 1, 1))) is True


def test_whitespace_name_is_not_input():
    assert has_checkout_input(_values(full_name="   ")) is False
