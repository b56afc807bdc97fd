from hypothesis import given
from hypothesis import strategies as st

from circlestark.fft import butterfly, ibutterfly
from circlestark.m31 import M31, P

elements = st.integers(min_value=0, max_value=P - 1).map(M31)
nonzero = st.integers(min_value=1, max_value=P - 1).map(M31)


@given(elements, elements, nonzero)
def test_inverse_butterfly_undoes_butterfly_up_to_two(v0, v1, twid):
    a, b = butterfly(v0, v1, twid)
    r0, r1 = ibutterfly(a, b, twid.inverse())
    assert r0 == v0.double()
    assert r1 == v1.double()


@given(elements, elements, nonzero)
def test_butterfly_undoes_inverse_butterfly_up_to_two(v0, v1, itwid):
    a, b = ibutterfly(v0, v1, itwid)
    r0, r1 = butterfly(a, b, itwid.inverse())
    assert r0 == v0.double()
    assert r1 == v1.double()


@given(elements, elements, elements)
def test_butterfly_sum_and_difference(v0, v1, twid):
    a, b = butterfly(v0, v1, twid)
    assert a + b == v0.double()
    assert a - b == (v1 * twid).double()


def test_butterfly_small_values():
    assert butterfly(M31(5), M31(3), M31(2)) == (M31(11), M31(P - 1))


def test_ibutterfly_small_values():
    assert ibutterfly(M31(5), M31(3), M31(4)) == (M31(8), M31(8))


@given(elements, elements)
def test_butterfly_with_zero_twiddle(v0, v1):
    assert butterfly(v0, v1, M31.zero()) == (v0, v0)