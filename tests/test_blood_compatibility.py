import pytest

from algorithms.blood_compatibility import (
    BLOOD_TYPES,
    compatible_donor_types,
    get_compatible_recipients,
    is_compatible,
)


@pytest.mark.parametrize('requested, donors', [
    ('A+', {'A+', 'A-', 'O+', 'O-'}),
    ('A-', {'A-', 'O-'}),
    ('B+', {'B+', 'B-', 'O+', 'O-'}),
    ('B-', {'B-', 'O-'}),
    ('AB+', set(BLOOD_TYPES)),
    ('AB-', {'A-', 'B-', 'AB-', 'O-'}),
    ('O+', {'O+', 'O-'}),
    ('O-', {'O-'}),
])
def test_compatible_donor_types(requested, donors):
    assert compatible_donor_types(requested) == donors


def test_unknown_type_has_no_donors():
    assert compatible_donor_types('Z+') == frozenset()
    assert compatible_donor_types('') == frozenset()
    assert not is_compatible('O-', 'Z+')


def test_every_type_can_receive_from_itself_and_o_negative():
    for blood_type in BLOOD_TYPES:
        assert is_compatible(blood_type, blood_type)
        assert is_compatible('O-', blood_type)


def test_donor_type_is_not_universal():
    assert not is_compatible('A+', 'O+')
    assert not is_compatible('AB+', 'AB-')
    assert not is_compatible('B-', 'A-')


def test_compatible_recipients_mirror_the_table():
    assert sorted(get_compatible_recipients('O-')) == sorted(BLOOD_TYPES)
    assert get_compatible_recipients('AB+') == ['AB+']
    assert sorted(get_compatible_recipients('A-')) == sorted(['A+', 'A-', 'AB+', 'AB-'])
    for donor_type in BLOOD_TYPES:
        for recipient in get_compatible_recipients(donor_type):
            assert donor_type in compatible_donor_types(recipient)
