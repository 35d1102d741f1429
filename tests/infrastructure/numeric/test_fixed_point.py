import unittest
from fractions import Fraction
from unittest import TestCase

from keyonnx.domain._errors import (
    DivisionByZeroError,
    DTypeMismatchError,
    NumericOverflowError,
)
from keyonnx.infrastructure.numeric import (
    FIXED_CONFIGS,
    FP8x23,
    FP16x16,
    FP32x32,
    FixedPoint,
)


def _fp(text, config=FP16x16):
    return FixedPoint.from_decimal(str(text), config)


class TestFixedPointEncoding(TestCase):
    def test_from_int_is_exact(self):
        x = FixedPoint.from_int(3, FP16x16)
        self.assertEqual(x.mag, 3 << 16)
        self.assertFalse(x.sign)
        self.assertEqual(float(FixedPoint.from_int(-7, FP32x32)), -7.0)

    def test_from_decimal(self):
        x = _fp("-1.5")
        self.assertEqual(x.mag, 98304)
        self.assertTrue(x.sign)

    def test_from_fraction_rounds_half_away_from_zero(self):
        # 1/2**17 is half a unit at FP16x16
        self.assertEqual(FixedPoint.from_fraction(Fraction(1, 1 << 17), FP16x16).mag, 1)
        x = FixedPoint.from_fraction(Fraction(-1, 1 << 17), FP16x16)
        self.assertEqual((x.mag, x.sign), (1, True))

    def test_from_float_uses_exact_binary_value(self):
        self.assertEqual(FixedPoint.from_float(0.75, FP8x23).mag, 3 << 21)
        with self.assertRaises(ValueError):
            FixedPoint.from_float(float("nan"), FP16x16)
        with self.assertRaises(ValueError):
            FixedPoint.from_float(float("inf"), FP16x16)

    def test_encode_dispatches_on_host_type(self):
        self.assertEqual(FixedPoint.encode(2, FP16x16), FixedPoint.from_int(2, FP16x16))
        self.assertEqual(FixedPoint.encode("0.5", FP16x16).mag, 1 << 15)
        self.assertEqual(FixedPoint.encode(Fraction(1, 4), FP16x16).mag, 1 << 14)
        with self.assertRaises(TypeError):
            FixedPoint.encode(object(), FP16x16)

    def test_encode_rejects_other_configurations(self):
        x = _fp("0.25", FP32x32)
        self.assertIs(FixedPoint.encode(x, FP32x32), x)
        with self.assertRaises(DTypeMismatchError):
            FixedPoint.encode(x, FP16x16)

    def test_zero_is_never_negative(self):
        self.assertFalse(FixedPoint(0, True, FP16x16).sign)
        self.assertEqual(FixedPoint(0, True, FP16x16), FixedPoint.zero(FP16x16))
        self.assertFalse(FixedPoint.from_int(0, FP16x16).neg().sign)

    def test_invalid_magnitudes(self):
        with self.assertRaises(ValueError):
            FixedPoint(-1, False, FP16x16)
        with self.assertRaises(NumericOverflowError):
            FixedPoint(FP16x16.max_mag + 1, False, FP16x16)
        with self.assertRaises(NumericOverflowError):
            FixedPoint.from_int(256, FP8x23)
        self.assertEqual(int(FixedPoint.from_int(255, FP8x23)), 255)

    def test_conversions(self):
        x = _fp("-2.75")
        self.assertEqual(int(x), -2)
        self.assertEqual(x.to_fraction(), Fraction(-11, 4))
        self.assertEqual(x.signed_mag(), -(11 << 14))

    def test_rescale(self):
        x = _fp("1.5")
        y = x.rescale(FP8x23)
        self.assertEqual(y.config, FP8x23)
        self.assertEqual(float(y), 1.5)
        self.assertEqual(y.rescale(FP16x16), x)
        with self.assertRaises(NumericOverflowError):
            FixedPoint.from_int(1000, FP16x16).rescale(FP8x23)

    def test_values_are_hashable(self):
        self.assertEqual(len({_fp("0.5"), _fp("0.5"), _fp("-0.5")}), 2)


class TestFixedPointArithmetic(TestCase):
    def test_add_follows_sign_magnitude_rules(self):
        self.assertEqual(float(_fp("1.5").add(_fp("-2.25"))), -0.75)
        self.assertEqual(float(_fp("-1.5") + _fp("-2.25")), -3.75)
        self.assertEqual(float(_fp("2.25") + _fp("-1.5")), 0.75)
        self.assertEqual(_fp("1.5") + _fp("-1.5"), FixedPoint.zero(FP16x16))

    def test_sub(self):
        self.assertEqual(float(_fp("1") - _fp("2.5")), -1.5)
        self.assertEqual(float(_fp("-1") - _fp("-2.5")), 1.5)

    def test_mul_truncates_magnitude(self):
        self.assertEqual(float(_fp("1.5") * FixedPoint.from_int(-2, FP16x16)), -3.0)
        tiny = FixedPoint(1, False, FP16x16)
        self.assertEqual((tiny * tiny).mag, 0)

    def test_div(self):
        one = FixedPoint.one(FP16x16)
        three = FixedPoint.from_int(3, FP16x16)
        self.assertEqual((one / three).mag, 21845)
        self.assertTrue((one / three.neg()).sign)

    def test_div_by_zero(self):
        with self.assertRaises(DivisionByZeroError):
            FixedPoint.one(FP16x16).div(FixedPoint.zero(FP16x16))

    def test_overflow_raises(self):
        for config in FIXED_CONFIGS:
            with self.subTest(config=config.name):
                top = FixedPoint(config.max_mag, False, config)
                with self.assertRaises(NumericOverflowError):
                    top.add(FixedPoint.one(config))
                with self.assertRaises(NumericOverflowError):
                    top.mul(FixedPoint.from_int(2, config))

    def test_config_mismatch(self):
        with self.assertRaises(DTypeMismatchError):
            FixedPoint.one(FP16x16).add(FixedPoint.one(FP32x32))
        with self.assertRaises(DTypeMismatchError):
            FixedPoint.one(FP16x16).compare(FixedPoint.one(FP8x23))


class TestFixedPointOrdering(TestCase):
    def test_compare(self):
        values = [_fp(v) for v in ("-2", "-1", "-0.5", "0", "0.5", "1", "2")]
        for i, a in enumerate(values):
            for j, b in enumerate(values):
                expected = (i > j) - (i < j)
                self.assertEqual(a.compare(b), expected)

    def test_rich_comparisons(self):
        self.assertTrue(_fp("-2") < _fp("-1"))
        self.assertTrue(_fp("1") >= _fp("1"))
        self.assertFalse(_fp("0.5") > _fp("0.75"))


class TestFixedPointRounding(TestCase):
    def test_floor_and_ceil(self):
        self.assertEqual(float(_fp("1.5").floor()), 1.0)
        self.assertEqual(float(_fp("-1.5").floor()), -2.0)
        self.assertEqual(float(_fp("1.5").ceil()), 2.0)
        self.assertEqual(float(_fp("-1.5").ceil()), -1.0)
        self.assertEqual(float(_fp("-0.5").ceil()), 0.0)
        self.assertFalse(_fp("-0.5").ceil().sign)

    def test_round_half_away_from_zero(self):
        self.assertEqual(float(_fp("2.5").round()), 3.0)
        self.assertEqual(float(_fp("-2.5").round()), -3.0)
        self.assertEqual(float(_fp("2.4").round()), 2.0)

    def test_integers_are_fixed_points_of_rounding(self):
        x = FixedPoint.from_int(-4, FP16x16)
        self.assertEqual(x.floor(), x)
        self.assertEqual(x.ceil(), x)
        self.assertEqual(x.round(), x)

    def test_signum(self):
        self.assertEqual(float(_fp("-3.5").signum()), -1.0)
        self.assertEqual(float(_fp("0").signum()), 0.0)
        self.assertEqual(float(_fp("0.25").signum()), 1.0)


if __name__ == "__main__":
    unittest.main()
