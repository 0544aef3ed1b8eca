import pytest

from tcalc.enums import ControlKey, ControllerType, Operation


@pytest.mark.parametrize("member", list(ControllerType))
def test_from_label_round_trip(member):
    assert ControllerType.from_label(member.value) is member


@pytest.mark.parametrize(
    "label", ["double", "float", "int", "uint8_t", "int64_t", "size_t", "Rational"]
)
def test_labels_match_selector_entries(label):
    assert ControllerType.from_label(label).value == label


def test_selector_entries_cover_every_type():
    labels = ["double", "float", "int", "uint8_t", "int64_t", "size_t", "Rational"]
    assert {ControllerType.from_label(label) for label in labels} == set(ControllerType)


def test_from_label_specific_entries():
    assert ControllerType.from_label("Rational") is ControllerType.RATIONAL
    assert ControllerType.from_label("uint8_t") is ControllerType.UINT8_T


@pytest.mark.parametrize("label", ["rational", "", "Double", "long"])
def test_from_label_rejects_unknown(label):
    with pytest.raises(ValueError):
        ControllerType.from_label(label)


@pytest.mark.parametrize(
    "name", ["MULTIPLICATION", "DIVISION", "SUBTRACTION", "ADDITION", "POWER"]
)
def test_operation_members(name):
    member = Operation[name]
    assert Operation(member.value) is member
    assert member.name == name


@pytest.mark.parametrize(
    "name",
    [
        "EQUALS",
        "CLEAR",
        "MEM_SAVE",
        "MEM_LOAD",
        "MEM_CLEAR",
        "PLUS_MINUS",
        "BACKSPACE",
        "EXTRA_KEY",
    ],
)
def test_control_key_members(name):
    member = ControlKey[name]
    assert ControlKey(member.value) is member
    assert member.name == name