"""
Configuration for linmath.

The kernel operations themselves take no configuration. These settings only
affect the conveniences around them: the dtype used when exporting a matrix to
a numpy buffer, the default tolerances for approximate comparison, and the
precision used when pretty-printing.

Usage:
    from linmath.linmath_config import get_config, set_config

    # Export float64 buffers instead of the default float32
    set_config(array_dtype='float64')

    # Tighter default comparison tolerance
    set_config(abs_tol=1e-9)

Environment variables (read once at import):
    LINMATH_ARRAY_DTYPE  - 'float32' or 'float64'
    LINMATH_ABS_TOL      - default absolute tolerance for is_close
    LINMATH_REL_TOL      - default relative tolerance for is_close
"""

import os
import warnings
from dataclasses import dataclass, replace, fields
from typing import Literal, Optional


# =============================================================================
# Configuration
# =============================================================================

ArrayDType = Literal['float32', 'float64']

_VALID_DTYPES = ('float32', 'float64')


@dataclass(frozen=True)
class LinMathConfig:
    """
    Settings for the non-kernel parts of linmath.

    Attributes:
        array_dtype: numpy dtype used by Mat4.to_array when none is given.
            - 'float32': matches GPU uniform buffers (default)
            - 'float64': lossless export of the Python floats

        rel_tol: Default relative tolerance for is_close.

        abs_tol: Default absolute tolerance for is_close.

        repr_precision: Number of decimals shown by Mat4.pretty().
    """
    array_dtype: ArrayDType = 'float32'
    rel_tol: float = 1e-9
    abs_tol: float = 1e-6
    repr_precision: int = 6

    def __post_init__(self):
        if self.array_dtype not in _VALID_DTYPES:
            raise ValueError(f"Unknown array_dtype: {self.array_dtype}. Use 'float32' or 'float64'.")
        if self.rel_tol < 0 or self.abs_tol < 0:
            raise ValueError("Tolerances must be non-negative")
        if self.repr_precision < 0:
            raise ValueError("repr_precision must be non-negative")


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    try:
        return float(raw)
    except ValueError:
        warnings.warn(f"Ignoring invalid {name}={raw!r}, using default {default}")
        return default


def _env_dtype(default: str) -> str:
    raw = os.environ.get('LINMATH_ARRAY_DTYPE', '').lower()
    if not raw:
        return default
    if raw not in _VALID_DTYPES:
        warnings.warn(f"Ignoring invalid LINMATH_ARRAY_DTYPE={raw!r}, using default {default}")
        return default
    return raw


def config_from_env() -> LinMathConfig:
    """Build a config from the LINMATH_* environment variables."""
    defaults = LinMathConfig()
    abs_tol = _env_float('LINMATH_ABS_TOL', defaults.abs_tol)
    rel_tol = _env_float('LINMATH_REL_TOL', defaults.rel_tol)
    if abs_tol < 0 or rel_tol < 0:
        warnings.warn("Ignoring negative tolerance from environment, using defaults")
        abs_tol, rel_tol = defaults.abs_tol, defaults.rel_tol
    return LinMathConfig(
        array_dtype=_env_dtype(defaults.array_dtype),
        rel_tol=rel_tol,
        abs_tol=abs_tol,
    )


_config = config_from_env()


def get_config() -> LinMathConfig:
    """Get the active configuration."""
    return _config


def set_config(config: Optional[LinMathConfig] = None, **overrides) -> LinMathConfig:
    """
    Replace the active configuration.

    Args:
        config: A complete config to install. Defaults to the active one.
        **overrides: Individual fields to change, e.g. array_dtype='float64'.

    Returns:
        The newly active config.

    Raises:
        TypeError: If an override names an unknown field.
        ValueError: If a value is out of range.
    """
    global _config
    known = {f.name for f in fields(LinMathConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown config fields: {', '.join(sorted(unknown))}")

    base = config if config is not None else _config
    _config = replace(base, **overrides)
    return _config


def reset_config() -> LinMathConfig:
    """Restore the configuration derived from the environment."""
    global _config
    _config = config_from_env()
    return _config
