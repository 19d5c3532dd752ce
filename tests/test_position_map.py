import pytest

from keygrid.layout import Layout
from keygrid.presets import INIT_LAYOUT, QWERTY_LAYOUT, get_preset


def test_lookup_both_shift_states():
    pos_map = INIT_LAYOUT.get_position_map()
    assert pos_map.get_key_position('q') == 0
    assert pos_map.get_key_position('Q') == 0
    assert pos_map.get_key_position('=') == 10
    assert pos_map.get_key_position('"') == 21
    assert pos_map.get_key_position('e') == 32


@pytest.mark.parametrize("kc", ['\U0001F600', 'é', '\x80', 'ab', '', None, 1])
def test_unrepresentable_characters_have_no_position(kc):
    pos_map = INIT_LAYOUT.get_position_map()
    assert pos_map.get_key_position(kc) is None
    assert kc not in pos_map


def test_absent_characters_have_no_position():
    pos_map = QWERTY_LAYOUT.get_position_map()
    assert pos_map.get_key_position('=') is None
    assert pos_map.get_key_position('1') is None
    assert pos_map.get_key_position(' ') is None
    assert pos_map.get_key_position('\0') == 32


def test_map_is_a_snapshot():
    layout = get_preset('init')
    pos_map = layout.get_position_map()
    layout.swap(0, 1)
    assert pos_map.get_key_position('q') == 0
    assert layout.get_position_map().get_key_position('q') == 1


def test_upper_layer_wins_shared_characters():
    upper = list(INIT_LAYOUT.upper)
    upper[5] = 'q'
    layout = Layout(list(INIT_LAYOUT.lower), upper)
    assert layout.get_position_map().get_key_position('q') == 5


def test_later_position_wins_within_a_layer():
    lower = list(INIT_LAYOUT.lower)
    lower[20] = 'a'
    layout = Layout(lower, list(INIT_LAYOUT.upper))
    assert layout.get_position_map().get_key_position('a') == 20


def test_to_dict_and_table():
    pos_map = INIT_LAYOUT.get_position_map()
    mapping = pos_map.to_dict()
    assert len(mapping) == 66
    assert mapping['q'] == 0 and mapping['E'] == 32
    assert pos_map.table.shape == (128,)
    assert pos_map.table[ord('1')] == -1
    with pytest.raises(ValueError):
        pos_map.table[0] = 3
