#!/usr/bin/env python3
"""
Tests for the base + override YAML config layering.
"""

import yaml

from util.config import deep_update, override_yaml, read_yaml


def _write_yaml(path, data):
    with open(path, "w") as f:
        yaml.safe_dump(data, f)
    return str(path)


def test_deep_update_nested():
    base = {"GEOMS": {"TANGENT_TOL": 0.0, "OTHER": 1}, "CASES": [1, 2]}
    deep_update(base, {"GEOMS": {"TANGENT_TOL": 1e-9}, "CASES": [3]})
    assert base == {"GEOMS": {"TANGENT_TOL": 1e-9, "OTHER": 1}, "CASES": [3]}


def test_read_yaml_merges_over_base(tmp_path):
    base_path = _write_yaml(
        tmp_path / "base.yaml",
        {"TEST": {"SAVE_NAME": "base"}, "GEOMS": {"TANGENT_TOL": 0.0}, "CASES": []},
    )
    override_path = _write_yaml(
        tmp_path / "override.yaml", {"TEST": {"SAVE_NAME": "override"}}
    )

    config = read_yaml(override_path, base_path=base_path)
    assert config["TEST"]["SAVE_NAME"] == "override"
    assert config["GEOMS"]["TANGENT_TOL"] == 0.0
    assert config["CASES"] == []


def test_read_yaml_empty_override(tmp_path):
    base_path = _write_yaml(tmp_path / "base.yaml", {"PLOT": {"DO_PLOT": False}})
    empty = tmp_path / "empty.yaml"
    empty.write_text("")

    config = read_yaml(str(empty), base_path=base_path)
    assert config == {"PLOT": {"DO_PLOT": False}}


def test_override_yaml_parameters_win(tmp_path):
    base_path = _write_yaml(tmp_path / "base.yaml", {"GEOMS": {"TANGENT_TOL": 0.0}})
    override_path = _write_yaml(tmp_path / "override.yaml", {"GEOMS": {"TANGENT_TOL": 1e-6}})

    config = override_yaml(
        override_path, {"GEOMS": {"TANGENT_TOL": 1e-3}}, base_path=base_path
    )
    assert config["GEOMS"]["TANGENT_TOL"] == 1e-3


def test_base_is_not_modified(tmp_path):
    base_path = _write_yaml(tmp_path / "base.yaml", {"GEOMS": {"TANGENT_TOL": 0.0}})
    override_path = _write_yaml(tmp_path / "override.yaml", {"GEOMS": {"TANGENT_TOL": 1e-6}})

    read_yaml(override_path, base_path=base_path)
    config = read_yaml(base_path, base_path=base_path)
    assert config["GEOMS"]["TANGENT_TOL"] == 0.0
