import numpy as np
import pytest
from fraclab.errors import DivisionByZero, InvalidCoefficient
from fraclab.fraction import ContinuedFraction, FractionKind
from fraclab.util import fmt_value


def reference(a1, a2, a3, x):
    return 1 / (a1 * x + 1 / (a2 * x + 1 / (a3 * x)))


def test_example_1():
    # inner = 1, middle = 2, outer = 1.5
    result = ContinuedFraction(1, 1, 1).evaluate(1)
    assert result == pytest.approx(1 / 1.5)
    assert fmt_value(result) == "0.6667"


@pytest.mark.parametrize(
    "a1,a2,a3,x",
    [(1.0, 2.0, 4.0, 0.5), (-2.0, 0.5, 1.0, 3.0), (0.0, 1.0, 1.0, 2.0), (2.5, -1.0, 7.0, -1.25)],
)
def test_matches_closed_form(a1, a2, a3, x):
    assert ContinuedFraction(a1, a2, a3).evaluate(x) == pytest.approx(reference(a1, a2, a3, x))


@pytest.mark.parametrize("coefficients", [(3, 1, 1), (1, 3, 1), (1, 1, 3)])
def test_three_rejected_in_any_position(coefficients):
    with pytest.raises(InvalidCoefficient) as info:
        ContinuedFraction(*coefficients)
    assert info.value.name == f"a{coefficients.index(3) + 1}"


def test_boundary_near_three():
    with pytest.raises(InvalidCoefficient):
        ContinuedFraction(3 + 0.5e-12, 1, 1)
    assert ContinuedFraction(3 + 1e-6, 1, 1).a1 == 3 + 1e-6


def test_inner_stage_fails_first():
    with pytest.raises(DivisionByZero) as info:
        ContinuedFraction(1, 1, 1).evaluate(0)
    assert info.value.stage == "inner"


def test_middle_stage():
    # a2*x + 1/(a3*x) = -1 + 1 = 0
    with pytest.raises(DivisionByZero) as info:
        ContinuedFraction(1, -1, 1).evaluate(1)
    assert info.value.stage == "middle"


def test_outer_stage():
    # middle = 1 + 1 = 2, outer = -0.5 + 0.5 = 0
    with pytest.raises(DivisionByZero) as info:
        ContinuedFraction(-0.5, 1, 1).evaluate(1)
    assert info.value.stage == "outer"


def test_describe_contains_all_coefficients():
    fraction = ContinuedFraction(1.25, -2.0, 3.000001)
    text = fraction.describe()
    assert "Continued fraction" in text
    for name, value in zip(("a1", "a2", "a3"), fraction.coefficients):
        assert f"{name}={value!r}" in text


def test_sample_agrees_with_evaluate():
    fraction = ContinuedFraction(1.0, 2.0, 4.0)
    xs = np.linspace(0.5, 3.0, 6)
    expected = [fraction.evaluate(x) for x in xs]
    np.testing.assert_allclose(fraction.sample(xs), expected, equal_nan=True)


def test_sample_undefined_stages():
    ys = ContinuedFraction(-0.5, 1, 1).sample([0.0, 1.0, 2.0])
    assert np.isnan(ys[0])
    assert np.isnan(ys[1])
    assert ys[2] == pytest.approx(reference(-0.5, 1, 1, 2.0))


def test_kind_create():
    fraction = FractionKind.CONTINUED.create(1, 2, 4)
    assert fraction == ContinuedFraction(1.0, 2.0, 4.0)
    with pytest.raises(TypeError):
        FractionKind.CONTINUED.create(1, 2)


@pytest.mark.parametrize("position", [0, 1, 2])
def test_non_finite_coefficient_rejected(position):
    coefficients = [1.0, 1.0, 1.0]
    coefficients[position] = float("inf")
    with pytest.raises(InvalidCoefficient) as info:
        ContinuedFraction(*coefficients)
    assert info.value.name == f"a{position + 1}"
