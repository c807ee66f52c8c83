# tests/core/test_config.py

import pytest

from kubecapacity.core.config import Config
from kubecapacity.models.capacity import OrphanPolicy


@pytest.mark.parametrize("mode, expected", [("always", True), ("never", False), ("auto", None), ("ALWAYS", True)])
def test_color_enabled(monkeypatch, mode, expected):
    monkeypatch.setenv("KUBECAPACITY_COLOR", mode)

    assert Config().color_enabled() is expected


def test_orphan_policy_default():
    assert Config().ORPHAN_POD_POLICY == OrphanPolicy.COUNT_IN_CLUSTER


def test_orphan_policy_from_env(monkeypatch):
    monkeypatch.setenv("ORPHAN_POD_POLICY", "exclude-from-cluster")

    assert Config().ORPHAN_POD_POLICY == OrphanPolicy.EXCLUDE_FROM_CLUSTER


def test_orphan_policy_invalid(monkeypatch):
    monkeypatch.setenv("ORPHAN_POD_POLICY", "ignore")

    with pytest.raises(ValueError):
        Config().ORPHAN_POD_POLICY

    with pytest.raises(ValueError, match="ORPHAN_POD_POLICY"):
        Config().validate_instance()


def test_validate_instance_rejects_bad_color(monkeypatch):
    monkeypatch.setenv("KUBECAPACITY_COLOR", "sometimes")

    with pytest.raises(ValueError, match="KUBECAPACITY_COLOR"):
        Config().validate_instance()


def test_validate_instance_rejects_bad_log_level():
    cfg = Config()
    cfg.LOG_LEVEL = "LOUD"

    with pytest.raises(ValueError, match="LOG_LEVEL"):
        cfg.validate_instance()


def test_validate_instance_accepts_defaults():
    cfg = Config()
    cfg.LOG_LEVEL = "debug"

    cfg.validate_instance()
