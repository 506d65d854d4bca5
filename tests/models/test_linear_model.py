import numpy as np
import pytest

from hill_regression.config import ModelKind
from hill_regression.models import BiasedLinearModel, LinearModel, ModelRegistry, predict


def test_predict_scalar_returns_scalar() -> None:
    assert predict(5, 2.0) == 10.0
    assert predict(5, 2.0, 1.5) == 11.5
    assert isinstance(predict(3, 0.5), float)


def test_predict_sequence_preserves_length_and_order() -> None:
    out = predict([3, 1, 2], 2.0, 1.0)
    assert isinstance(out, np.ndarray)
    assert out.tolist() == [7.0, 3.0, 5.0]


def test_predict_empty_sequence() -> None:
    out = predict([], 3.0, 1.0)
    assert len(out) == 0


def test_predict_does_not_mutate_input() -> None:
    xs = np.array([1.0, 2.0])
    predict(xs, 4.0, 1.0)
    assert xs.tolist() == [1.0, 2.0]


def test_models_expose_parameters_in_search_order() -> None:
    assert LinearModel.parameter_names == ("weight",)
    assert BiasedLinearModel.parameter_names == ("weight", "bias")
    model = BiasedLinearModel(weight=1.5, bias=-2.0)
    assert model.parameters() == (1.5, -2.0)
    assert model.predict([0.0, 2.0]).tolist() == [-2.0, 1.0]
    model.reset()
    assert model.parameters() == (0.0, 0.0)


def test_linear_model_has_zero_bias() -> None:
    model = LinearModel(weight=3.0)
    assert model.bias == 0.0
    assert model.predict(2) == 6.0


def test_state_dict_roundtrip_and_validation() -> None:
    model = BiasedLinearModel(weight=2.0, bias=1.0)
    assert model.state_dict() == {"weight": 2.0, "bias": 1.0}
    model.load_state_dict({"weight": -1.0, "bias": 0.5})
    assert model.parameters() == (-1.0, 0.5)
    with pytest.raises(ValueError):
        model.load_state_dict({"weight": 1.0})
    with pytest.raises(ValueError):
        LinearModel().load_state_dict({"weight": 1.0, "bias": 2.0})
    with pytest.raises(ValueError):
        model.set_parameters([1.0])


def test_model_registry_register_and_create() -> None:
    registry = ModelRegistry()
    assert registry.names() == ["linear", "linear_bias"]
    assert isinstance(registry.create("linear"), LinearModel)
    created = registry.create(ModelKind.LINEAR_BIAS, weight=1.0)
    assert isinstance(created, BiasedLinearModel)
    assert created.weight == 1.0
    assert registry.parameter_names("linear_bias") == ("weight", "bias")
    with pytest.raises(ValueError):
        registry.register("linear", LinearModel)
    with pytest.raises(ValueError, match="quadratic"):
        registry.create("quadratic")


def test_model_registry_custom_factory() -> None:
    registry = ModelRegistry()
    registry.register("through_origin_at_two", lambda: LinearModel(weight=2.0))
    model = registry.create("through_origin_at_two")
    assert model.predict(3) == 6.0
    assert "through_origin_at_two" in registry.names()
