"""
Fixed-point binary-point configurations.

A configuration fixes where the binary point sits in a sign-magnitude
fixed-point number: ``value = (-1 if sign else 1) * magnitude / 2**frac_bits``.
It also bounds the magnitude to ``int_bits + frac_bits`` bits. Four
configurations are exposed (`FP8x23`, `FP16x16`, `FP32x32`, `FP64x64`); a
configuration can be *widened* with guard bits for internal evaluation of
transcendental functions, in which case the magnitude is unbounded.

Mathematical constants are stored as decimal strings with far more precision
than the widest configuration needs and are converted exactly (round half up)
into any configuration on demand.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from ...domain.dtype._dtype import DType


# Decimal expansions, ~200 bits of precision.
PI_DECIMAL = "3.14159265358979323846264338327950288419716939937510582097494459230781640628"
LN2_DECIMAL = "0.69314718055994530941723212145817656807550013436025525412068000949339362196"
LOG2_E_DECIMAL = "1.44269504088896340735992468100189213742664595415298593413544940693110921918"
LN10_DECIMAL = "2.30258509299404568401799145468436420760110148862877297603332790096757260967"


@dataclass(frozen=True)
class FixedConfig:
    """
    Binary-point configuration of a fixed-point number.

    Parameters
    ----------
    name : str
        Display name, e.g. ``"FP16x16"``.
    frac_bits : int
        Number of fractional bits (the scale).
    int_bits : Optional[int]
        Number of integer magnitude bits, or None for an unbounded magnitude
        (widened evaluation configurations).
    """

    name: str
    frac_bits: int
    int_bits: Optional[int]

    @property
    def one(self) -> int:
        """Magnitude representing 1.0."""
        return 1 << self.frac_bits

    @property
    def half(self) -> int:
        """Magnitude representing 0.5."""
        return 1 << (self.frac_bits - 1)

    @property
    def max_mag(self) -> Optional[int]:
        """Largest representable magnitude, or None when unbounded."""
        if self.int_bits is None:
            return None
        return (1 << (self.int_bits + self.frac_bits)) - 1

    @property
    def dtype(self) -> Optional[DType]:
        """The dtype carried by tensors of this configuration, if any."""
        return _DTYPE_BY_NAME.get(self.name)

    def is_bounded(self) -> bool:
        return self.int_bits is not None

    def widened(self, guard_bits: int) -> "FixedConfig":
        """
        Return an unbounded configuration with `guard_bits` extra fractional bits.

        Parameters
        ----------
        guard_bits : int
            Number of fractional bits to add.

        Returns
        -------
        FixedConfig
            Configuration named ``"<name>+<guard_bits>"``.
        """
        return _widened(self, guard_bits)

    def decimal_to_mag(self, text: str) -> tuple[int, bool]:
        """
        Convert a decimal literal exactly into a (magnitude, sign) pair.

        Parameters
        ----------
        text : str
            Decimal literal such as ``"-1.25"`` or ``"3"``.

        Returns
        -------
        tuple[int, bool]
            Magnitude rounded half up at this configuration, and the sign.

        Raises
        ------
        ValueError
            If `text` is not a plain decimal literal.
        """
        s = text.strip()
        sign = s.startswith("-")
        if s[:1] in "+-":
            s = s[1:]
        whole, _, frac = s.partition(".")
        digits = (whole or "0") + frac
        if not digits.isdigit():
            raise ValueError(f"Invalid decimal literal {text!r}")
        num = int(digits)
        den = 10 ** len(frac)
        mag = (num * self.one * 2 + den) // (2 * den)
        return mag, sign and mag != 0

    def constant(self, name: str) -> int:
        """
        Return the magnitude of a named mathematical constant.

        Parameters
        ----------
        name : str
            One of ``"pi"``, ``"ln2"``, ``"log2_e"``, ``"ln10"``.

        Returns
        -------
        int
            The constant's magnitude at this configuration.
        """
        return _constant(self, name)


@lru_cache(maxsize=None)
def _widened(config: FixedConfig, guard_bits: int) -> FixedConfig:
    return FixedConfig(
        name=f"{config.name}+{guard_bits}",
        frac_bits=config.frac_bits + guard_bits,
        int_bits=None,
    )


_CONSTANTS = {
    "pi": PI_DECIMAL,
    "ln2": LN2_DECIMAL,
    "log2_e": LOG2_E_DECIMAL,
    "ln10": LN10_DECIMAL,
}


@lru_cache(maxsize=None)
def _constant(config: FixedConfig, name: str) -> int:
    try:
        text = _CONSTANTS[name]
    except KeyError:
        raise ValueError(f"Unknown constant {name!r}") from None
    return config.decimal_to_mag(text)[0]


FP8x23 = FixedConfig(name="FP8x23", frac_bits=23, int_bits=8)
FP16x16 = FixedConfig(name="FP16x16", frac_bits=16, int_bits=16)
FP32x32 = FixedConfig(name="FP32x32", frac_bits=32, int_bits=32)
FP64x64 = FixedConfig(name="FP64x64", frac_bits=64, int_bits=64)

FIXED_CONFIGS = (FP8x23, FP16x16, FP32x32, FP64x64)

_DTYPE_BY_NAME = {
    "FP8x23": DType.FP8X23,
    "FP16x16": DType.FP16X16,
    "FP32x32": DType.FP32X32,
    "FP64x64": DType.FP64X64,
}

_CONFIG_BY_DTYPE = {_DTYPE_BY_NAME[cfg.name]: cfg for cfg in FIXED_CONFIGS}


def config_for(dtype: DType) -> FixedConfig:
    """
    Return the fixed-point configuration of a fixed-point dtype.

    Raises
    ------
    ValueError
        If `dtype` is not a fixed-point kind.
    """
    try:
        return _CONFIG_BY_DTYPE[dtype]
    except KeyError:
        raise ValueError(f"{dtype} is not a fixed-point dtype") from None
