"""
Tests for sRGB transfer functions
"""

import pytest

from blurhash_encoder.colors import SRGB_TO_LINEAR, linear_to_srgb, sign_pow, srgb_to_linear


class TestSrgbToLinear:
    def test_endpoints(self):
        assert srgb_to_linear(0) == 0.0
        assert srgb_to_linear(255) == pytest.approx(1.0)

    def test_linear_segment(self):
        """Dark values use the linear part of the curve"""
        assert srgb_to_linear(10) == pytest.approx(10 / 255 / 12.92)

    def test_gamma_segment(self):
        assert srgb_to_linear(128) == pytest.approx(0.21586, abs=1e-5)

    def test_lookup_table_matches_function(self):
        assert len(SRGB_TO_LINEAR) == 256
        for value in range(256):
            assert SRGB_TO_LINEAR[value] == srgb_to_linear(value)


class TestLinearToSrgb:
    def test_clamps_out_of_range(self):
        assert linear_to_srgb(-0.5) == 0
        assert linear_to_srgb(1.5) == 255

    def test_midpoint(self):
        assert linear_to_srgb(0.5) == 188

    def test_round_trip_every_byte(self):
        for value in range(256):
            assert linear_to_srgb(srgb_to_linear(value)) == value


class TestSignPow:
    def test_preserves_sign(self):
        assert sign_pow(4.0, 0.5) == pytest.approx(2.0)
        assert sign_pow(-4.0, 0.5) == pytest.approx(-2.0)

    def test_zero(self):
        assert sign_pow(0.0, 0.5) == 0.0
