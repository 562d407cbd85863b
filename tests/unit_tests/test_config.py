from collections.abc import Mapping

import pytest

import vectfit
from vectfit.config import _default_config


def test_config_basics():
    assert isinstance(vectfit.config, Mapping)
    assert vectfit.config['tol_low'] == 1e-18
    assert vectfit.config['tol_high'] == 1e18
    assert vectfit.config['use_multiprocessing'] is False
    assert vectfit.config['num_processes'] is None
    assert len(vectfit.config) == 4
    with pytest.raises(KeyError, match="Unrecognized config key: nuke"):
        vectfit.config['nuke'] = 1.0
    with pytest.raises(KeyError):
        del vectfit.config['tol_low']


def test_config_validation():
    with pytest.raises(vectfit.InvalidParameterError):
        vectfit.config['tol_low'] = -1.0
    with pytest.raises(vectfit.InvalidParameterError):
        vectfit.config['tol_low'] = 1e20
    with pytest.raises(vectfit.InvalidParameterError):
        vectfit.config['tol_high'] = 1e-20
    with pytest.raises(TypeError):
        vectfit.config['tol_high'] = 'big'
    with pytest.raises(TypeError):
        vectfit.config['use_multiprocessing'] = 1
    with pytest.raises(vectfit.InvalidParameterError):
        vectfit.config['num_processes'] = 0
    with pytest.raises(TypeError):
        vectfit.config['num_processes'] = 2.5
    assert vectfit.config['tol_low'] == 1e-18


def test_config_set_and_clear():
    vectfit.config['tol_low'] = 1e-12
    vectfit.config['num_processes'] = 2
    assert vectfit.config['tol_low'] == 1e-12
    assert vectfit.config['num_processes'] == 2
    vectfit.config.clear()
    assert vectfit.config['tol_low'] == 1e-18
    assert vectfit.config['num_processes'] is None


def test_config_patch():
    with vectfit.config.patch('tol_high', 1e6):
        assert vectfit.config['tol_high'] == 1e6
    assert vectfit.config['tol_high'] == 1e18

    with pytest.raises(RuntimeError):
        with vectfit.config.patch('use_multiprocessing', True):
            raise RuntimeError
    assert vectfit.config['use_multiprocessing'] is False


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv('VECTFIT_TOL_LOW', '1e-15')
    monkeypatch.setenv('VECTFIT_MULTIPROCESSING', 'true')
    monkeypatch.setenv('VECTFIT_NUM_PROCESSES', '3')
    config = _default_config()
    assert config['tol_low'] == 1e-15
    assert config['tol_high'] == 1e18
    assert config['use_multiprocessing'] is True
    assert config['num_processes'] == 3


def test_config_kwargs():
    config = _default_config(tol_high=1e12)
    assert config['tol_high'] == 1e12
