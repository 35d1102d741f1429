"""
Engine configuration.

`EngineConfig` collects the process-wide knobs of the tensor engine. It can be
built directly, loaded from the ``[keyonnx]`` table of a TOML file, or read
from ``KEYONNX_*`` environment variables:

    KEYONNX_DEFAULT_FIXED_DTYPE=fp32x32
    KEYONNX_STEP_BUDGET=100000
    KEYONNX_LOG_LEVEL=DEBUG
    KEYONNX_WARN_ON_BROADCAST_DIVERGENCE=0

The active configuration is held by :func:`set_config` / :func:`get_config`.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from typing import Mapping, Optional

from ..domain._budget import IBudgetGuard
from ..domain.dtype._dtype import DType, DTypeFamily
from .budget._budget import StepBudget, UnlimitedBudget

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(name: str, text: str) -> bool:
    value = text.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {text!r}")


@dataclass
class EngineConfig:
    """
    Configuration of the tensor engine.

    Attributes
    ----------
    default_fixed_dtype : str
        Fixed-point dtype used by `Tensor.from_numpy` for floating arrays.
    step_budget : int or None
        Step limit of the guard built by :meth:`make_budget`. None is unlimited.
    log_level : str
        Level name passed to `setup_logging`.
    warn_on_broadcast_divergence : bool
        Emit `BroadcastShapeWarning` when an elementwise output shape differs
        from the NumPy broadcast shape.
    """

    default_fixed_dtype: str = "fp16x16"
    step_budget: Optional[int] = None
    log_level: str = "WARNING"
    warn_on_broadcast_divergence: bool = True

    def __post_init__(self):
        """
        Validate and normalize the fields.

        Raises
        ------
        ValueError
            If a field holds an invalid value.
        """
        dtype = DType.parse(self.default_fixed_dtype)
        if dtype.family is not DTypeFamily.FIXED:
            raise ValueError(
                f"default_fixed_dtype must be a fixed-point dtype, got {dtype}"
            )
        self.default_fixed_dtype = dtype.value

        if self.step_budget is not None:
            if isinstance(self.step_budget, bool) or not isinstance(
                self.step_budget, int
            ):
                raise ValueError(
                    f"step_budget must be an int or None, got {self.step_budget!r}"
                )
            if self.step_budget < 0:
                raise ValueError(
                    f"step_budget must be non-negative, got {self.step_budget}"
                )

        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {self.log_level!r}")
        self.log_level = level

        if not isinstance(self.warn_on_broadcast_divergence, bool):
            raise ValueError("warn_on_broadcast_divergence must be a bool")

    @property
    def fixed_dtype(self) -> DType:
        return DType.parse(self.default_fixed_dtype)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def make_budget(self) -> IBudgetGuard:
        """Return a fresh guard matching `step_budget`."""
        if self.step_budget is None:
            return UnlimitedBudget()
        return StepBudget(self.step_budget)

    @classmethod
    def load(cls, config_path: str) -> "EngineConfig":
        """
        Load the engine configuration from a TOML file.

        Parameters
        ----------
        config_path : str
            Filesystem path to a TOML file containing a "keyonnx" table.
            Missing keys keep their defaults.

        Returns
        -------
        EngineConfig
            Instance populated from the "keyonnx" table.

        Raises
        ------
        FileNotFoundError
            If no file exists at `config_path`.
        ValueError
            If the table holds unknown keys or invalid values.
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file not found at {config_path}")

        with open(config_path, "rb") as f:
            data = tomllib.load(f)

        engine_data = data.get("keyonnx", {})
        unknown = set(engine_data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown keyonnx configuration keys: {sorted(unknown)}")
        return cls(**engine_data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EngineConfig":
        """
        Build a configuration from ``KEYONNX_*`` environment variables.

        Parameters
        ----------
        environ : Mapping[str, str] or None, optional
            Variables to read. Defaults to `os.environ`.

        Raises
        ------
        ValueError
            If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        kwargs: dict = {}

        if "KEYONNX_DEFAULT_FIXED_DTYPE" in env:
            kwargs["default_fixed_dtype"] = env["KEYONNX_DEFAULT_FIXED_DTYPE"]
        if "KEYONNX_STEP_BUDGET" in env:
            raw = env["KEYONNX_STEP_BUDGET"].strip()
            if raw.lower() in ("", "none", "unlimited"):
                kwargs["step_budget"] = None
            else:
                try:
                    kwargs["step_budget"] = int(raw)
                except ValueError:
                    raise ValueError(
                        f"KEYONNX_STEP_BUDGET must be an integer, got {raw!r}"
                    ) from None
        if "KEYONNX_LOG_LEVEL" in env:
            kwargs["log_level"] = env["KEYONNX_LOG_LEVEL"]
        if "KEYONNX_WARN_ON_BROADCAST_DIVERGENCE" in env:
            kwargs["warn_on_broadcast_divergence"] = _parse_bool(
                "KEYONNX_WARN_ON_BROADCAST_DIVERGENCE",
                env["KEYONNX_WARN_ON_BROADCAST_DIVERGENCE"],
            )
        return cls(**kwargs)


_ACTIVE_CONFIG = EngineConfig()


def get_config() -> EngineConfig:
    """Return the process-wide engine configuration."""
    return _ACTIVE_CONFIG


def set_config(config: EngineConfig) -> EngineConfig:
    """
    Replace the process-wide engine configuration.

    Returns
    -------
    EngineConfig
        The previous configuration, so callers can restore it.

    Raises
    ------
    TypeError
        If `config` is not an `EngineConfig`.
    """
    global _ACTIVE_CONFIG
    if not isinstance(config, EngineConfig):
        raise TypeError(f"expected EngineConfig, got {type(config).__name__}")
    previous = _ACTIVE_CONFIG
    _ACTIVE_CONFIG = config
    return previous
