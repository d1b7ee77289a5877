from pathlib import Path

import pytest
from pydantic import ValidationError

from cardswarm.config.loader import load_config, merge_overrides
from cardswarm.config.schema import SwarmConfig
from cardswarm.utils.config import get, parse_assignments


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg == SwarmConfig()
    assert cfg.physics.damping == pytest.approx(0.92)
    assert cfg.physics.max_speed == pytest.approx(4.0)
    assert cfg.physics.separation_dist == pytest.approx(120.0)


def test_repo_config_matches_defaults():
    cfg = load_config(Path(__file__).resolve().parents[1] / "configs" / "swarm.yaml")
    d = SwarmConfig()
    assert cfg.physics.attraction == pytest.approx(d.physics.attraction)
    assert cfg.physics.active_radius == pytest.approx(d.physics.active_radius)
    assert all(t.enable for t in cfg.forces.values())


def test_yaml_and_overrides(tmp_path):
    p = tmp_path / "swarm.yaml"
    p.write_text("swarm:\n  physics:\n    damping: 0.8\n  seed: 3\n", encoding="utf-8")
    cfg = load_config(p, overrides={"physics": {"max_speed": 2.0}, "forces": {"ll.separate": {"enable": False}}})
    assert cfg.physics.damping == pytest.approx(0.8)
    assert cfg.physics.max_speed == pytest.approx(2.0)
    assert cfg.seed == 3
    assert cfg.forces["ll.separate"].enable is False
    assert cfg.forces["pointer.attract"].enable is True


def test_rejects_foreign_top_level(tmp_path):
    p = tmp_path / "swarm.yaml"
    p.write_text("compute: {}\n", encoding="utf-8")
    with pytest.raises(ValueError, match="unexpected top-level"):
        load_config(p)


def test_schema_is_strict():
    with pytest.raises(ValidationError):
        SwarmConfig.model_validate({"physics": {"dampning": 0.5}})
    with pytest.raises(ValidationError):
        SwarmConfig.model_validate({"physics": {"damping": 1.5}})
    with pytest.raises(ValidationError):
        SwarmConfig.model_validate({"forces": {"gravity": {"enable": True}}})


def test_merge_overrides_leaves_base_untouched():
    base = {"physics": {"damping": 0.9, "max_speed": 4}}
    out = merge_overrides(base, {"physics": {"damping": 0.5}})
    assert out == {"physics": {"damping": 0.5, "max_speed": 4}}
    assert base["physics"]["damping"] == 0.9


def test_parse_assignments_keeps_dotted_term_names():
    ov = parse_assignments(["physics.damping=0.85", "forces.ll.separate.enable=false", "seed=7"])
    assert ov == {"physics": {"damping": 0.85}, "forces": {"ll.separate": {"enable": False}}, "seed": 7}
    assert get(ov, "forces.ll.separate.enable") is False
    assert get(ov, "physics.missing", 1) == 1
    with pytest.raises(ValueError):
        parse_assignments(["physics.damping"])
