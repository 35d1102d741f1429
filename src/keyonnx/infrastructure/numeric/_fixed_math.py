"""
Transcendental functions over sign-magnitude fixed-point numbers.

Every function here is a deterministic, reproducible approximation built only
from `FixedPoint` arithmetic (``add``, ``sub``, ``mul``, ``div``):

1. The argument is widened by `GUARD_BITS` extra fractional bits.
2. The argument is range-reduced with fixed-point constants (π, ln 2, log2 e).
3. A series is summed term by term until the next term vanishes at the
   widened precision (at most `MAX_SERIES_TERMS` terms).
4. The result is rounded half away from zero back to the argument's
   configuration.

Because rounding happens in exactly one place per intermediate step, results
are bit-identical across runs and platforms. For arguments in the normal
range the error is within ±2 units of the last place.

Algorithms
----------
- exp2: split into integer part ``n`` and fraction ``r``; ``2**r`` as the
  Taylor series of ``e**(r ln 2)``, then shift by ``n``.
- exp: ``exp2(x * log2 e)``.
- ln: normalize to ``m * 2**e`` with ``m`` in [1, 2), then
  ``ln m = 2 atanh((m-1)/(m+1))`` by its odd series.
- sin/cos: reduce modulo 2π into [0, π/2] with symmetry, Taylor series.
- atan: reciprocal for ``|x| > 1``, two argument halvings
  ``atan x = 2 atan(x / (1 + sqrt(1 + x²)))``, Taylor series.
- asin/acos, hyperbolic and inverse hyperbolic functions: closed forms in
  terms of exp, ln, sqrt and atan.
- sqrt: exact integer square root of the rescaled magnitude (floor).
"""

from __future__ import annotations

import math
from typing import Optional

from ...domain._errors import (
    DivisionByZeroError,
    DTypeMismatchError,
    InvalidArgumentError,
    NumericOverflowError,
)
from ._fixed_config import FixedConfig
from ._fixed_point import FixedPoint

GUARD_BITS = 24
"""Extra fractional bits carried during evaluation."""

MAX_SERIES_TERMS = 256
"""Upper bound on series terms; series normally stop far earlier."""


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------
def _widen(x: FixedPoint) -> FixedPoint:
    cfg = x.config.widened(GUARD_BITS)
    return FixedPoint(x.mag << GUARD_BITS, x.sign, cfg)


def _narrow(w: FixedPoint, config: FixedConfig) -> FixedPoint:
    return w.rescale(config)


def _const(cfg: FixedConfig, name: str) -> FixedPoint:
    return FixedPoint(cfg.constant(name), False, cfg)


def _int(value: int, cfg: FixedConfig) -> FixedPoint:
    return FixedPoint.from_int(value, cfg)


def _one(cfg: FixedConfig) -> FixedPoint:
    return FixedPoint.one(cfg)


def _half_pi(cfg: FixedConfig) -> FixedPoint:
    return FixedPoint(cfg.constant("pi") >> 1, False, cfg)


def _sqrt_wide(w: FixedPoint) -> FixedPoint:
    return FixedPoint(math.isqrt(w.mag << w.config.frac_bits), False, w.config)


def _exp2_wide(w: FixedPoint, int_limit: Optional[int], name: str) -> FixedPoint:
    cfg = w.config
    one = _one(cfg)
    if w.mag == 0:
        return one
    n = w.mag >> cfg.frac_bits
    if w.sign:
        # 2**-n is below the widened resolution
        if n > cfg.frac_bits:
            return FixedPoint.zero(cfg)
        return one / _exp2_wide(w.abs(), None, name)
    if int_limit is not None and n >= int_limit:
        raise NumericOverflowError("exp", name)

    r = FixedPoint(w.mag & (cfg.one - 1), False, cfg)
    z = r * _const(cfg, "ln2")
    total = one
    term = one
    for k in range(1, MAX_SERIES_TERMS + 1):
        term = term * z / _int(k, cfg)
        if term.mag == 0:
            break
        total = total + term
    return FixedPoint(total.mag << n, False, cfg)


def _exp_wide(w: FixedPoint, int_limit: Optional[int], name: str) -> FixedPoint:
    return _exp2_wide(w * _const(w.config, "log2_e"), int_limit, name)


def _log2_parts(w: FixedPoint) -> tuple[int, FixedPoint]:
    """Split a positive widened value into ``(e, ln m)`` with ``w = m * 2**e``."""
    cfg = w.config
    e = w.mag.bit_length() - 1 - cfg.frac_bits
    mm = w.mag >> e if e >= 0 else w.mag << -e
    one = _one(cfg)
    m = FixedPoint(mm, False, cfg)
    z = (m - one) / (m + one)
    z2 = z * z
    power = z
    total = z
    for k in range(3, 2 * MAX_SERIES_TERMS + 3, 2):
        power = power * z2
        term = power / _int(k, cfg)
        if term.mag == 0:
            break
        total = total + term
    return e, total + total


def _ln_wide(w: FixedPoint, op: str = "ln") -> FixedPoint:
    if w.sign or w.mag == 0:
        raise InvalidArgumentError(op, "argument must be positive")
    e, ln_m = _log2_parts(w)
    if e == 0:
        return ln_m
    return _int(e, w.config) * _const(w.config, "ln2") + ln_m


def _sin_wide(w: FixedPoint) -> FixedPoint:
    cfg = w.config
    pi = _const(cfg, "pi")
    half_pi = _half_pi(cfg)
    negative = w.sign
    r = FixedPoint(w.mag % (pi.mag + pi.mag), False, cfg)
    if r >= pi:
        r = r - pi
        negative = not negative
    if r > half_pi:
        r = pi - r

    r2 = r * r
    term = r
    total = r
    subtract = True
    for k in range(1, 2 * MAX_SERIES_TERMS, 2):
        term = term * r2 / _int((k + 1) * (k + 2), cfg)
        if term.mag == 0:
            break
        total = total - term if subtract else total + term
        subtract = not subtract
    return FixedPoint(total.mag, total.sign != negative, cfg)


def _cos_wide(w: FixedPoint) -> FixedPoint:
    return _sin_wide(w.abs() + _half_pi(w.config))


def _atan_wide(w: FixedPoint) -> FixedPoint:
    cfg = w.config
    one = _one(cfg)
    a = w.abs()
    invert = a > one
    if invert:
        a = one / a
    for _ in range(2):
        a = a / (one + _sqrt_wide(one + a * a))

    a2 = a * a
    power = a
    total = a
    subtract = True
    for k in range(3, 2 * MAX_SERIES_TERMS + 3, 2):
        power = power * a2
        term = power / _int(k, cfg)
        if term.mag == 0:
            break
        total = total - term if subtract else total + term
        subtract = not subtract

    total = FixedPoint(total.mag << 2, total.sign, cfg)
    if invert:
        total = _half_pi(cfg) - total
    return FixedPoint(total.mag, total.sign != w.sign, cfg)


def _asin_wide(w: FixedPoint) -> FixedPoint:
    cfg = w.config
    one = _one(cfg)
    a = w.abs()
    if a > one:
        raise InvalidArgumentError("asin", "argument must lie in [-1, 1]")
    if a == one:
        res = _half_pi(cfg)
    else:
        res = _atan_wide(a / _sqrt_wide(one - a * a))
    return FixedPoint(res.mag, w.sign, cfg)


# ---------------------------------------------------------------------------
# public API
# ---------------------------------------------------------------------------
def exp2(x: FixedPoint) -> FixedPoint:
    """Return ``2**x``."""
    w = _widen(x)
    return _narrow(_exp2_wide(w, x.config.int_bits, x.config.name), x.config)


def exp(x: FixedPoint) -> FixedPoint:
    """Return ``e**x``."""
    w = _widen(x)
    return _narrow(_exp_wide(w, x.config.int_bits, x.config.name), x.config)


def ln(x: FixedPoint) -> FixedPoint:
    """
    Return the natural logarithm of `x`.

    Raises
    ------
    InvalidArgumentError
        If ``x <= 0``.
    """
    return _narrow(_ln_wide(_widen(x)), x.config)


def log2(x: FixedPoint) -> FixedPoint:
    """Return the base-2 logarithm of `x` (exact for powers of two)."""
    w = _widen(x)
    if w.sign or w.mag == 0:
        raise InvalidArgumentError("log2", "argument must be positive")
    e, ln_m = _log2_parts(w)
    res = _int(e, w.config) + ln_m / _const(w.config, "ln2")
    return _narrow(res, x.config)


def log10(x: FixedPoint) -> FixedPoint:
    """Return the base-10 logarithm of `x`."""
    w = _widen(x)
    return _narrow(_ln_wide(w, "log10") / _const(w.config, "ln10"), x.config)


def sqrt(x: FixedPoint) -> FixedPoint:
    """
    Return the square root of `x`, truncated to the configuration's resolution.

    Raises
    ------
    InvalidArgumentError
        If `x` is negative.
    """
    if x.sign:
        raise InvalidArgumentError("sqrt", "argument must be non-negative")
    return FixedPoint(math.isqrt(x.mag << x.config.frac_bits), False, x.config)


def sin(x: FixedPoint) -> FixedPoint:
    return _narrow(_sin_wide(_widen(x)), x.config)


def cos(x: FixedPoint) -> FixedPoint:
    return _narrow(_cos_wide(_widen(x)), x.config)


def tan(x: FixedPoint) -> FixedPoint:
    """
    Return ``sin(x) / cos(x)``.

    Raises
    ------
    DivisionByZeroError
        If the widened cosine is exactly zero.
    """
    w = _widen(x)
    c = _cos_wide(w)
    if c.mag == 0:
        raise DivisionByZeroError("tan")
    return _narrow(_sin_wide(w) / c, x.config)


def asin(x: FixedPoint) -> FixedPoint:
    return _narrow(_asin_wide(_widen(x)), x.config)


def acos(x: FixedPoint) -> FixedPoint:
    w = _widen(x)
    try:
        s = _asin_wide(w)
    except InvalidArgumentError:
        raise InvalidArgumentError("acos", "argument must lie in [-1, 1]") from None
    return _narrow(_half_pi(w.config) - s, x.config)


def atan(x: FixedPoint) -> FixedPoint:
    return _narrow(_atan_wide(_widen(x)), x.config)


def sinh(x: FixedPoint) -> FixedPoint:
    w = _widen(x)
    cfg = w.config
    e = _exp_wide(w.abs(), x.config.int_bits + 1, x.config.name)
    res = (e - _one(cfg) / e) / _int(2, cfg)
    return _narrow(FixedPoint(res.mag, x.sign, cfg), x.config)


def cosh(x: FixedPoint) -> FixedPoint:
    w = _widen(x)
    cfg = w.config
    e = _exp_wide(w.abs(), x.config.int_bits + 1, x.config.name)
    return _narrow((e + _one(cfg) / e) / _int(2, cfg), x.config)


def tanh(x: FixedPoint) -> FixedPoint:
    w = _widen(x)
    cfg = w.config
    one = _one(cfg)
    a = w.abs()
    t = _exp_wide(FixedPoint(a.mag << 1, True, cfg), None, x.config.name)
    res = (one - t) / (one + t)
    return _narrow(FixedPoint(res.mag, x.sign, cfg), x.config)


def asinh(x: FixedPoint) -> FixedPoint:
    w = _widen(x)
    cfg = w.config
    a = w.abs()
    res = _ln_wide(a + _sqrt_wide(a * a + _one(cfg)), "asinh")
    return _narrow(FixedPoint(res.mag, x.sign, cfg), x.config)


def acosh(x: FixedPoint) -> FixedPoint:
    """
    Raises
    ------
    InvalidArgumentError
        If ``x < 1``.
    """
    w = _widen(x)
    one = _one(w.config)
    if w < one:
        raise InvalidArgumentError("acosh", "argument must be >= 1")
    return _narrow(_ln_wide(w + _sqrt_wide(w * w - one), "acosh"), x.config)


def atanh(x: FixedPoint) -> FixedPoint:
    """
    Raises
    ------
    InvalidArgumentError
        If ``|x| >= 1``.
    """
    w = _widen(x)
    cfg = w.config
    one = _one(cfg)
    a = w.abs()
    if a >= one:
        raise InvalidArgumentError("atanh", "argument must lie in (-1, 1)")
    res = _ln_wide((one + a) / (one - a), "atanh") / _int(2, cfg)
    return _narrow(FixedPoint(res.mag, x.sign, cfg), x.config)


def sigmoid(x: FixedPoint) -> FixedPoint:
    """Return ``1 / (1 + e**-x)``; exactly one half at zero."""
    w = _widen(x)
    one = _one(w.config)
    if w.sign:
        e = _exp_wide(w, None, x.config.name)
        res = e / (one + e)
    else:
        res = one / (one + _exp_wide(w.neg(), None, x.config.name))
    return _narrow(res, x.config)


def softplus(x: FixedPoint) -> FixedPoint:
    """Return ``ln(1 + e**x)`` as ``max(x, 0) + ln(1 + e**-|x|)``."""
    w = _widen(x)
    one = _one(w.config)
    tail = _ln_wide(one + _exp_wide(FixedPoint(w.mag, True, w.config), None, x.config.name))
    res = tail if w.sign else w + tail
    return _narrow(res, x.config)


def pow(base: FixedPoint, exponent: FixedPoint) -> FixedPoint:
    """
    Return ``base ** exponent``.

    Integral exponents use exact repeated squaring (negative bases allowed);
    other exponents use ``exp(exponent * ln(base))``.

    Raises
    ------
    DivisionByZeroError
        If `base` is zero and `exponent` is negative.
    InvalidArgumentError
        If `base` is negative and `exponent` is not integral.
    """
    config = base.config
    if exponent.config != config:
        raise DTypeMismatchError("pow", config.name, exponent.config.name)
    wb = _widen(base)
    cfg = wb.config
    one = _one(cfg)

    if exponent.mag % exponent.config.one == 0:
        k = exponent.mag >> exponent.config.frac_bits
        if base.mag == 0:
            if k == 0:
                return FixedPoint.one(config)
            if exponent.sign:
                raise DivisionByZeroError("pow")
            return FixedPoint.zero(config)
        # Beyond this magnitude the result overflows (k > 0) or vanishes (k < 0).
        bound = 1 << (2 * cfg.frac_bits + (config.int_bits or 0) + 2)
        acc = one
        sq = wb
        while k:
            if k & 1:
                acc = acc * sq
            k >>= 1
            if k:
                sq = sq * sq
            if acc.mag > bound or (k and sq.mag > bound):
                if exponent.sign:
                    return FixedPoint.zero(config)
                raise NumericOverflowError("pow", config.name)
        if exponent.sign:
            if acc.mag == 0:
                raise NumericOverflowError("pow", config.name)
            acc = one / acc
        return _narrow(acc, config)

    if base.sign:
        raise InvalidArgumentError("pow", "negative base requires an integral exponent")
    if base.mag == 0:
        if exponent.sign:
            raise DivisionByZeroError("pow")
        return FixedPoint.zero(config)
    we = FixedPoint(exponent.mag << GUARD_BITS, exponent.sign, cfg)
    return _narrow(_exp_wide(we * _ln_wide(wb, "pow"), config.int_bits, config.name), config)
