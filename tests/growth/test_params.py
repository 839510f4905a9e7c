import pytest

from frostbloom.growth.params import GrowthParams, default_params_path


def test_packaged_tunables_match_defaults():
    assert default_params_path().is_file()
    assert GrowthParams.load() == GrowthParams()


def test_mapping_overrides_only_named_fields():
    p = GrowthParams.from_mapping({"grow_speed": 5, "fork": {"alpha_decay": 0.5}})
    assert p.grow_speed == 5.0
    assert p.alpha_decay == 0.5
    assert p.width_decay == GrowthParams().width_decay
    assert p.arm_length == GrowthParams().arm_length


def test_ranges_become_float_pairs():
    p = GrowthParams.from_mapping({"arms": {"length": [10, 20], "count": [2, 4]}})
    assert p.arm_length == (10.0, 20.0)
    assert p.arm_count == (2, 4)


@pytest.mark.parametrize(
    "data",
    [
        {"grow_speed": 0},
        {"spawn_distance": -1},
        {"max_depth": 0},
        {"arms": {"length": [20, 10]}},
        {"arms": {"count": [3, 3]}},
        {"arms": {"length": "long"}},
        {"fork": {"alpha_decay": 1.0}},
        {"fork": {"width_decay": 0}},
        {"fork": {"length": [0.5]}},
        ["not", "a", "mapping"],
    ],
)
def test_malformed_tunables_raise_value_error(data):
    with pytest.raises(ValueError):
        GrowthParams.from_mapping(data)


def test_load_reads_a_custom_file(tmp_path):
    path = tmp_path / "growth.yaml"
    path.write_text("grow_speed: 3\nmax_depth: 2\n", encoding="utf-8")
    p = GrowthParams.load(path)
    assert p.grow_speed == 3.0
    assert p.max_depth == 2


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GrowthParams.load(tmp_path / "nope.yaml")
