import pytest

from rnastruct.motif_type import MotifType, str_to_type, type_to_str


@pytest.mark.parametrize(
    "mtype",
    [
        MotifType.TWOWAY,
        MotifType.NWAY,
        MotifType.HAIRPIN,
        MotifType.T_T,
        MotifType.T_T_T,
        MotifType.TWOWAY_SEGMENTS,
        MotifType.HELIX,
        MotifType.UNKNOWN,
    ],
)
def test_round_trip(mtype):
    assert str_to_type(type_to_str(mtype)) is mtype


def test_special_names():
    assert type_to_str(MotifType.T_T) == "2X_TWOWAY"
    assert type_to_str(MotifType.T_T_T) == "3X_TWOWAY"
    assert str_to_type("2X_TWOWAY") is MotifType.T_T


def test_enum_values_fixed():
    assert MotifType.HELIX == 9
    assert MotifType.UNKNOWN == 99
    assert MotifType(10) is MotifType.SSTRAND


def test_sstrand_named_but_not_parsed():
    assert type_to_str(MotifType.SSTRAND) == "SSTRAND"
    with pytest.raises(ValueError):
        str_to_type("SSTRAND")


@pytest.mark.parametrize(
    "mtype", [MotifType.TCONTACT, MotifType.ALL, MotifType.TCONTACT_H_H]
)
def test_unnamed_types_raise(mtype):
    with pytest.raises(ValueError):
        type_to_str(mtype)


def test_unknown_name_raises():
    with pytest.raises(ValueError):
        str_to_type("helix")