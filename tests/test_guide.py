import pytest

from pulsecode import Level, Scheme, UnsupportedSchemeError, generate, get_guide


def test_every_scheme_has_a_guide(scheme):
    guide = get_guide(scheme)
    assert guide.title
    assert guide.short_title == scheme.display_name
    assert guide.rules
    assert guide.steps


def test_rails_cover_generated_levels(scheme, random_bits):
    wf = generate(random_bits, scheme)
    rails = set(get_guide(scheme).rails)
    assert set(Level(v) for v in wf.levels.tolist()) <= rails


def test_lookup_by_name():
    guide = get_guide("Manchester")
    assert guide.rails == (Level.HIGH, Level.LOW)
    assert get_guide("nrz") is get_guide(Scheme.NRZ_L)


def test_unknown_scheme():
    with pytest.raises(UnsupportedSchemeError):
        get_guide("HDB3")
