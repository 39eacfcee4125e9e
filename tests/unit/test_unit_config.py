"""
Tests for linmath configuration.
"""
import dataclasses

import numpy as np
import pytest

from linmath.linmath_config import (
    LinMathConfig,
    config_from_env,
    get_config,
    reset_config,
    set_config,
)
from linmath.mathutils import mat4 as M4
from linmath.mathutils.vec3 import Vec3


class TestLinMathConfig:

    def test_defaults(self):
        config = LinMathConfig()
        assert config.array_dtype == 'float32'
        assert config.rel_tol == 1e-9
        assert config.abs_tol == 1e-6
        assert config.repr_precision == 6

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            LinMathConfig().abs_tol = 0.0

    def test_invalid_dtype(self):
        with pytest.raises(ValueError, match="array_dtype"):
            LinMathConfig(array_dtype='float16')

    def test_negative_tolerance(self):
        with pytest.raises(ValueError):
            LinMathConfig(abs_tol=-1.0)


class TestSetConfig:

    def test_override_single_field(self):
        config = set_config(array_dtype='float64')
        assert config.array_dtype == 'float64'
        assert get_config() is config
        assert M4.identity().to_array().dtype == np.float64

    def test_install_complete_config(self):
        custom = LinMathConfig(repr_precision=2)
        set_config(custom)
        assert get_config() == custom
        assert M4.identity().pretty().splitlines()[0] == "[1.00, 0.00, 0.00, 0.00]"

    def test_unknown_field(self):
        with pytest.raises(TypeError, match="bogus"):
            set_config(bogus=1)

    def test_invalid_value_keeps_previous(self):
        before = get_config()
        with pytest.raises(ValueError):
            set_config(array_dtype='int8')
        assert get_config() is before

    def test_tolerance_drives_is_close(self):
        a = Vec3(1.0, 0.0, 0.0)
        b = Vec3(1.001, 0.0, 0.0)
        assert not a.is_close(b)
        set_config(abs_tol=1e-2)
        assert a.is_close(b)
        assert M4.make_translate(a).is_close(M4.make_translate(b))


class TestConfigFromEnv:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv('LINMATH_ARRAY_DTYPE', 'FLOAT64')
        monkeypatch.setenv('LINMATH_ABS_TOL', '1e-3')
        monkeypatch.setenv('LINMATH_REL_TOL', '0')
        config = config_from_env()
        assert config.array_dtype == 'float64'
        assert config.abs_tol == 1e-3
        assert config.rel_tol == 0.0

    def test_empty_values_use_defaults(self, monkeypatch):
        monkeypatch.setenv('LINMATH_ARRAY_DTYPE', '')
        monkeypatch.setenv('LINMATH_ABS_TOL', '')
        monkeypatch.delenv('LINMATH_REL_TOL', raising=False)
        assert config_from_env() == LinMathConfig()

    def test_invalid_dtype_warns(self, monkeypatch):
        monkeypatch.setenv('LINMATH_ARRAY_DTYPE', 'half')
        with pytest.warns(UserWarning, match="LINMATH_ARRAY_DTYPE"):
            config = config_from_env()
        assert config.array_dtype == 'float32'

    def test_invalid_float_warns(self, monkeypatch):
        monkeypatch.setenv('LINMATH_ABS_TOL', 'tiny')
        with pytest.warns(UserWarning, match="LINMATH_ABS_TOL"):
            config = config_from_env()
        assert config.abs_tol == 1e-6

    def test_negative_tolerance_warns(self, monkeypatch):
        monkeypatch.setenv('LINMATH_REL_TOL', '-1')
        with pytest.warns(UserWarning, match="negative"):
            config = config_from_env()
        assert config.rel_tol == 1e-9

    def test_reset_config(self, monkeypatch):
        set_config(repr_precision=1)
        monkeypatch.delenv('LINMATH_ARRAY_DTYPE', raising=False)
        monkeypatch.delenv('LINMATH_ABS_TOL', raising=False)
        monkeypatch.delenv('LINMATH_REL_TOL', raising=False)
        assert reset_config() == LinMathConfig()
        assert get_config() == LinMathConfig()
