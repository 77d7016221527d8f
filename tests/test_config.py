import pytest

from garden.config import (
    PRESETS, ConfigError, GeneratorTuning, RuleSet, check_board, preset,
)

def test_rule_regime_follows_count():
    assert RuleSet.for_count(6, 6).enforce_uniqueness is True
    assert RuleSet.for_count(6, 7).enforce_uniqueness is False

def test_presets():
    assert preset("garden").size == 6 and preset("garden").count == 6
    assert preset("warren").rules.enforce_uniqueness is False
    for p in PRESETS.values():
        check_board(p.size, p.count)
        if p.rules.enforce_uniqueness:
            assert p.count <= p.size

def test_unknown_preset():
    with pytest.raises(ConfigError):
        preset("jungle")

@pytest.mark.parametrize("size,count", [(2, 1), (6, 0), (6, 10), (3, 3), (7, 17)])
def test_impossible_boards(size, count):
    with pytest.raises(ConfigError):
        check_board(size, count)

def test_tuning_limits():
    with pytest.raises(ConfigError):
        GeneratorTuning(jitter=2.0)
    with pytest.raises(ConfigError):
        GeneratorTuning(max_attempts=0)
    assert GeneratorTuning().max_attempts >= 5000
