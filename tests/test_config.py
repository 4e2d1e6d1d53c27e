import pytest

from spso.algorithm.constants import C, W, default_swarm_size
from spso.config import PSOParams, validate_params, with_overrides
from spso.errors import InvalidConfiguration
from spso.settings import StandardPSO2007Settings, load_properties, parse_properties


def test_defaults_carry_spso_constants():
    p = PSOParams(swarm_size=10, max_iterations=5, number_of_particles_to_inform=3)
    assert p.w == W
    assert p.c == C
    assert validate_params(p) is p


def test_missing_fields_are_listed():
    with pytest.raises(InvalidConfiguration, match="max_iterations"):
        validate_params(PSOParams(swarm_size=3, number_of_particles_to_inform=1))


@pytest.mark.parametrize("field,value", [
    ("w", float("nan")),
    ("c", float("inf")),
    ("seed", 1.5),
    ("seed", -3),
    ("log_every", -1),
    ("swarm_size", True),
])
def test_bad_values(field, value):
    base = dict(swarm_size=4, max_iterations=5, number_of_particles_to_inform=2)
    base[field] = value
    with pytest.raises(InvalidConfiguration):
        validate_params(PSOParams(**base))


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        validate_params(PSOParams())


def test_with_overrides_skips_none_and_rejects_unknown():
    p = PSOParams(swarm_size=4, max_iterations=5, number_of_particles_to_inform=2)
    q = with_overrides(p, swarm_size=8, w=None)
    assert q.swarm_size == 8 and q.w == p.w
    with pytest.raises(InvalidConfiguration):
        with_overrides(p, inertia=0.5)


def test_default_swarm_size():
    assert default_swarm_size(1) == 12
    assert default_swarm_size(30) == 20


def test_settings_defaults():
    settings = StandardPSO2007Settings("sphere", 4)
    assert settings.swarm_size == 14
    assert settings.max_iterations == 80000
    assert settings.number_of_particles_to_inform == 3


def test_settings_configure_with_properties():
    settings = StandardPSO2007Settings("rastrigin", 3)
    pso = settings.configure({
        "swarmSize": "8",
        "maxIterations": "4",
        "number_of_particles_to_inform": "2",
        "seed": "11",
        "unrelated": "ignored",
    })
    assert pso.params.swarm_size == 8
    assert pso.params.max_iterations == 4
    assert pso.params.number_of_particles_to_inform == 2
    assert pso.rng.seed == 11
    best = pso.run()
    assert pso.iteration == 4
    assert best.objective is not None


def test_settings_rejects_unparseable_values():
    settings = StandardPSO2007Settings("sphere", 2)
    with pytest.raises(InvalidConfiguration, match="swarmSize"):
        settings.configure({"swarmSize": "many"})


def test_settings_rejects_out_of_range_k():
    settings = StandardPSO2007Settings("sphere", 2)
    with pytest.raises(InvalidConfiguration):
        settings.configure({"swarmSize": "4", "numberOfParticlesToInform": "5"})


def test_load_properties(tmp_path):
    path = tmp_path / "spso.properties"
    path.write_text(
        "# SPSO settings\n"
        "! legacy comment\n"
        "\n"
        "swarmSize = 20\n"
        "maxIterations: 300\n"
        "w=0.7\n"
    )
    props = load_properties(path)
    assert props == {"swarmSize": "20", "maxIterations": "300", "w": "0.7"}
    assert parse_properties(props) == {"swarm_size": 20, "max_iterations": 300, "w": 0.7}


def test_load_properties_rejects_malformed_lines(tmp_path):
    path = tmp_path / "bad.properties"
    path.write_text("swarmSize 20\n")
    with pytest.raises(InvalidConfiguration):
        load_properties(path)
