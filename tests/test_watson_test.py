"""Tests for watson_test.py"""
import pytest
import numpy as np
from collections import namedtuple
from dataclasses import dataclass
from unittest.mock import patch

from aspect_statistics import watson_test, expansion


@dataclass(frozen=True)
class FakeResult:
    U2: float
    pval: float


def _rad(deg):
    return expansion.to_bearing_radians(deg)


class TestExtractTestValues:
    def test_dataclass_result(self):
        assert watson_test.extract_test_values(FakeResult(0.31, 0.004)) == (0.31, 0.004)

    def test_tuple_result(self):
        assert watson_test.extract_test_values((0.12, 0.25)) == (0.12, 0.25)

    def test_mapping_result(self):
        result = {"statistic": 0.2, "p_value": 0.04}
        assert watson_test.extract_test_values(result) == (0.2, 0.04)

    def test_namedtuple_uses_field_names(self):
        Result = namedtuple("Result", ["pval", "U2"])
        assert watson_test.extract_test_values(Result(0.5, 0.1)) == (0.1, 0.5)

    def test_numpy_scalars(self):
        stat, p = watson_test.extract_test_values((np.float64(0.1), np.array([0.3])))
        assert stat == pytest.approx(0.1)
        assert p == pytest.approx(0.3)

    def test_non_numeric_fields_are_none(self):
        result = {"U2": "n/a", "pval": None}
        assert watson_test.extract_test_values(result) == (None, None)

    def test_nan_is_none(self):
        assert watson_test.extract_test_values((0.2, float("nan"))) == (0.2, None)

    def test_missing_fields(self):
        assert watson_test.extract_test_values(object()) == (None, None)
        assert watson_test.extract_test_values(()) == (None, None)


class TestInterpret:
    def test_significant(self):
        text = " ".join(watson_test.interpret(0.03)).lower()
        assert "significantly different" in text

    def test_not_significant(self):
        text = " ".join(watson_test.interpret(0.20)).lower()
        assert "no significant difference" in text

    def test_threshold_is_not_significant(self):
        text = " ".join(watson_test.interpret(0.05)).lower()
        assert "no significant difference" in text

    def test_missing_p_value(self):
        assert watson_test.interpret(None) == []


class TestRun:
    def test_separated_samples_are_significant(self):
        rng = np.random.default_rng(0)
        pine = _rad(rng.normal(20, 15, 60) % 360)
        fir = _rad(rng.normal(200, 15, 60) % 360)
        result = watson_test.run({"pine": pine, "fir": fir})
        assert result["statistic"] > 0
        assert result["p_value"] < 0.05
        assert result["significant"] is True
        assert result["n_pine"] == 60
        assert result["n_fir"] == 60

    def test_identical_samples_not_significant(self):
        sample = _rad([10, 40, 80, 120, 200, 250, 300, 330])
        result = watson_test.run({"pine": sample, "fir": sample.copy()})
        assert result["statistic"] == pytest.approx(0.0, abs=1e-12)
        assert result["significant"] is False

    def test_p_value_is_a_probability_for_similar_samples(self):
        sample = _rad([10, 40, 80, 120, 200, 250, 300, 330])
        result = watson_test.run({"pine": sample, "fir": sample.copy()})
        assert 0.0 <= result["p_value"] <= 1.0

    def test_p_value_above_one_is_capped(self):
        with patch.object(watson_test, "watson_u2_test",
                          return_value=FakeResult(0.0, 2.0)):
            result = watson_test.run({"pine": _rad([10, 20]), "fir": _rad([30])})
        assert result["p_value"] == 1.0
        assert result["significant"] is False

    def test_deterministic(self, synthetic_zones):
        samples = expansion.convert_samples(expansion.build_species_samples(synthetic_zones))
        first = watson_test.run(samples)
        second = watson_test.run(samples)
        assert first["statistic"] == second["statistic"]
        assert first["p_value"] == second["p_value"]

    def test_unextractable_result_degrades(self, caplog):
        with patch.object(watson_test, "watson_u2_test", return_value={"weird": 1}):
            result = watson_test.run({"pine": _rad([10, 20]), "fir": _rad([30])})
        assert result["statistic"] is None
        assert result["p_value"] is None
        assert result["significant"] is None
        assert result["interpretation"] == []
        assert result["raw"] == {"weird": 1}
        assert "could not be extracted" in caplog.text

    def test_passes_both_samples_to_library(self):
        with patch.object(watson_test, "watson_u2_test",
                          return_value=FakeResult(0.4, 0.01)) as fake:
            result = watson_test.run({"pine": _rad([10, 20]), "fir": _rad([30])})
        (samples,), _ = fake.call_args
        assert len(samples) == 2
        assert len(samples[0]) == 2 and len(samples[1]) == 1
        assert result["p_value"] == 0.01
