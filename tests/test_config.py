import pytest

from ossim import InvalidConfiguration, SimulationConfig


def test_defaults_are_valid():
    config = SimulationConfig().validate()
    assert (config.page_size, config.max_pages, config.quantum, config.algorithm) == (4.0, 3, 2, "FIFO")


def test_algorithm_is_case_insensitive():
    assert SimulationConfig(algorithm="lru").validate().algorithm == "LRU"


def test_small_positive_values_accepted():
    SimulationConfig(page_size=0.01, max_pages=1, quantum=1).validate()


@pytest.mark.parametrize("kwargs", [
    {"page_size": 0},
    {"page_size": -4},
    {"max_pages": 0},
    {"quantum": 0},
    {"quantum": -1},
    {"page_size": float("nan")},
    {"page_size": float("inf")},
    {"quantum": float("nan")},
    {"quantum": float("inf")},
    {"max_pages": float("nan")},
    {"algorithm": "MRU"},
])
def test_invalid_values(kwargs):
    with pytest.raises(InvalidConfiguration):
        SimulationConfig(**kwargs).validate()


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        SimulationConfig(quantum=0).validate()


def test_from_args():
    config = SimulationConfig.from_args({"page_size": "2.5", "max_pages": "4", "quantum": "3", "algorithm": "lru"})
    assert config == SimulationConfig(page_size=2.5, max_pages=4, quantum=3, algorithm="LRU")


def test_from_args_keeps_defaults():
    assert SimulationConfig.from_args({}) == SimulationConfig()


def test_from_args_rejects_garbage():
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.from_args({"quantum": "two"})


def test_from_args_rejects_non_finite_page_size():
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.from_args({"page_size": "nan"}).validate()
    with pytest.raises(InvalidConfiguration):
        SimulationConfig.from_args({"page_size": "inf"}).validate()
