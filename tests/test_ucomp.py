"""
Unit tests for the UComp request container.
"""

import dataclasses

import numpy as np
import pytest

from ucomp import UComp, uc_setup


@pytest.fixture
def request_model(airpassengers):
    return uc_setup(np.log(airpassengers), 12, model="llt/equal/arma", verbose=False)


class TestUCompImmutability:
    """Tests that a request cannot be changed in place."""

    def test_fields_frozen(self, request_model):
        """Test that fields cannot be reassigned."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            request_model.h = 24

    def test_arrays_read_only(self, request_model):
        """Test that owned arrays cannot be written to."""
        with pytest.raises(ValueError):
            request_model.y[0] = 0.0
        with pytest.raises(ValueError):
            request_model.periods[0] = 4.0

    def test_records_frozen(self, request_model):
        """Test that the results and bookkeeping records are frozen."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            request_model.results.p = np.ones(3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            request_model.hidden.estim_ok = "Ok"


class TestUCompEvolve:
    """Tests for building extended copies."""

    def test_evolve_field(self, request_model):
        """Test that evolve returns a modified copy."""
        extended = request_model.evolve(h=24)

        assert isinstance(extended, UComp)
        assert extended.h == 24
        assert request_model.h == 18
        assert extended.model == request_model.model

    def test_evolve_results_from_dict(self, request_model):
        """Test that stage outputs can be merged into the results record."""
        extended = request_model.evolve(results={"p": np.array([0.1, 0.2])})

        np.testing.assert_array_equal(extended.results.p, [0.1, 0.2])
        assert extended.results.table == ""
        assert request_model.results.p is None

    def test_evolve_hidden_from_dict(self, request_model):
        """Test that bookkeeping entries can be updated."""
        extended = request_model.evolve(hidden={"estim_ok": "Q-Newton: Converged"})

        assert extended.hidden.estim_ok == "Q-Newton: Converged"
        assert extended.hidden.inn_variance == 1
        assert request_model.hidden.estim_ok == "Not estimated"


class TestUCompAccessors:
    """Tests for derived properties and conversion."""

    def test_components(self, request_model):
        """Test access to the model by component."""
        components = request_model.components

        assert components.trend == "llt"
        assert components.cycle == "none"
        assert components.seasonal == "equal"
        assert components.irregular == "arma(0,0)"

    def test_to_dict(self, request_model):
        """Test conversion to a nested dictionary."""
        as_dict = request_model.to_dict()

        assert as_dict["model"] == "llt/none/equal/arma(0,0)"
        assert as_dict["hidden"]["estim_ok"] == "Not estimated"
        assert as_dict["results"]["table"] == ""
