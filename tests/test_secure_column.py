import pytest

from circlestark.m31 import M31
from circlestark.qm31 import QM31
from circlestark.secure_column import SECURE_EXTENSION_DEGREE, SecureColumn


def test_zeros():
    column = SecureColumn.zeros(5)
    assert len(column) == 5
    assert len(column.columns) == SECURE_EXTENSION_DEGREE
    assert column.to_list() == [QM31.zero()] * 5


def test_set_then_at():
    column = SecureColumn.zeros(3)
    value = QM31.from_u32_unchecked(1, 2, 3, 4)
    column.set(1, value)
    assert column.at(1) == value
    assert column.at(0) == QM31.zero()
    assert [c[1] for c in column.columns] == list(value.to_m31_array())


def test_to_list_roundtrip():
    values = [QM31.from_u32_unchecked(i, i + 1, i + 2, i + 3) for i in range(6)]
    column = SecureColumn.zeros(len(values))
    for i, v in enumerate(values):
        column.set(i, v)
    assert column.to_list() == values


def test_empty_column():
    column = SecureColumn.zeros(0)
    assert len(column) == 0
    assert column.to_list() == []


def test_index_out_of_range():
    column = SecureColumn.zeros(2)
    with pytest.raises(IndexError):
        column.at(2)


def test_wrong_number_of_columns():
    with pytest.raises(ValueError):
        SecureColumn([[M31(1)], [M31(2)]])


def test_unequal_column_lengths():
    with pytest.raises(ValueError):
        SecureColumn([[M31(1)], [M31(2)], [M31(3)], []])