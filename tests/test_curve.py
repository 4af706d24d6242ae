import pytest

from schnorr_nopk import (
    G,
    ORDER,
    ContractViolation,
    Point,
    Scalar,
    fixed_base_multiply,
    points_equal,
    subtract_assume_unequal,
    variable_base_multiply,
    x_coordinates_differ,
)

GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

TWO_G_X = 0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5
TWO_G_Y = 0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A


def test_generator_coordinates():
    assert G.coordinates() == (GX, GY)


def test_from_coordinates_round_trip():
    assert Point.from_coordinates(GX, GY) == G


def test_from_coordinates_rejects_off_curve():
    with pytest.raises(ValueError):
        Point.from_coordinates(GX, GY + 1)


def test_identity_has_no_affine_coordinates():
    with pytest.raises(ValueError):
        Point.identity().x


def test_fixed_base_multiply_known_answer():
    P = fixed_base_multiply(G, 2)
    assert P.coordinates() == (TWO_G_X, TWO_G_Y)


def test_fixed_and_variable_base_agree(rng):
    k = Scalar.random(rng)
    assert variable_base_multiply(G, k) == fixed_base_multiply(G, k)


def test_fixed_base_multiply_other_generator():
    base = fixed_base_multiply(G, 3)
    assert fixed_base_multiply(base, 5) == fixed_base_multiply(G, 15)


def test_variable_base_multiply_edge_scalars():
    P = fixed_base_multiply(G, 7)
    assert variable_base_multiply(P, 1) == P
    assert variable_base_multiply(P, 0).is_inf()
    assert variable_base_multiply(P, ORDER).is_inf()
    assert variable_base_multiply(Point.identity(), 5).is_inf()


def test_scalar_reduced_mod_order():
    assert fixed_base_multiply(G, ORDER + 2) == fixed_base_multiply(G, 2)


def test_points_equal():
    inf = Point.identity()
    assert points_equal(inf, inf)
    assert not points_equal(inf, G)
    assert not points_equal(G, inf)
    assert points_equal(G, Point.from_coordinates(GX, GY))
    assert not points_equal(G, -G)


def test_x_coordinates_differ():
    assert x_coordinates_differ(G, fixed_base_multiply(G, 2))
    assert not x_coordinates_differ(G, -G)
    assert not x_coordinates_differ(G, Point.identity())


def test_subtract_assume_unequal():
    a = fixed_base_multiply(G, 10)
    b = fixed_base_multiply(G, 3)
    assert subtract_assume_unequal(a, b) == fixed_base_multiply(G, 7)


def test_subtract_recovers_nonce(rng):
    sk, e, k = Scalar.random(rng), Scalar.random(rng), Scalar.random(rng)
    pk = fixed_base_multiply(G, sk)
    s = k + sk * e
    R = subtract_assume_unequal(
        fixed_base_multiply(G, s), variable_base_multiply(pk, e),
    )
    assert R == fixed_base_multiply(G, k)


@pytest.mark.parametrize("b", [G, -G, Point.identity()])
def test_subtract_rejects_shared_x(b):
    with pytest.raises(ContractViolation):
        subtract_assume_unequal(G, b)


def test_contract_violation_is_assertion():
    assert issubclass(ContractViolation, AssertionError)


def test_points_only_multiplied_through_adapter():
    with pytest.raises(TypeError):
        Scalar(2) * G
    with pytest.raises(TypeError):
        2 * G
