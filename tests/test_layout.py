import random
from collections import Counter

import pytest

from keygrid.geometry import LAYOUT_MASK
from keygrid.key_grid import KeyGrid, NUM_KEYS
from keygrid.layout import Layer, Layout, seed_shuffle_rng
from keygrid.presets import INIT_LAYOUT, PRESETS, get_preset

INIT_DIAGRAM = (
    "q u p g / | z l w y - =\n"
    "a r n s d | f h t i o '\n"
    "j k v c ; | x m b , .\n"
    "        e"
)


def test_init_layout_display():
    assert str(INIT_LAYOUT) == INIT_DIAGRAM
    assert str(get_preset('init')) == INIT_DIAGRAM


def test_display_shows_only_lower_layer():
    assert str(INIT_LAYOUT) == str(INIT_LAYOUT.lower)
    assert str(INIT_LAYOUT.upper).splitlines()[0] == "Q U P G ? | Z L W Y _ +"


@pytest.mark.parametrize("times", [0, 1, 10, 1000])
def test_shuffle_is_a_permutation(times):
    layout = get_preset('init')
    layout.shuffle(times, random.Random(times))
    assert Counter(layout.lower) == Counter(INIT_LAYOUT.lower)
    assert Counter(layout.upper) == Counter(INIT_LAYOUT.upper)


def test_shuffle_zero_times_changes_nothing():
    layout = get_preset('init')
    layout.shuffle(0, random.Random(1))
    assert layout == INIT_LAYOUT


@pytest.mark.parametrize("name", sorted(PRESETS))
def test_shuffle_keeps_fixed_positions(name):
    layout = get_preset(name)
    layout.shuffle(500, random.Random(99))
    for pos in range(NUM_KEYS):
        if not LAYOUT_MASK[pos]:
            assert layout.lower[pos] == PRESETS[name].lower[pos]
            assert layout.upper[pos] == PRESETS[name].upper[pos]


def test_shuffle_keeps_layers_in_lockstep():
    pairs_before = set(zip(INIT_LAYOUT.lower, INIT_LAYOUT.upper))
    layout = get_preset('init')
    layout.shuffle(250, random.Random(5))
    assert set(zip(layout.lower, layout.upper)) == pairs_before
    assert layout != INIT_LAYOUT


def test_shuffle_is_reproducible_with_same_seed():
    first = get_preset('init')
    second = get_preset('init')
    first.shuffle(40, random.Random(2024))
    second.shuffle(40, random.Random(2024))
    assert first == second


def test_fallback_rng_can_be_seeded():
    first = get_preset('qwerty')
    second = get_preset('qwerty')
    seed_shuffle_rng(7)
    first.shuffle(50)
    seed_shuffle_rng(7)
    second.shuffle(50)
    assert first == second


def test_shuffling_a_copy_leaves_original_alone():
    original = get_preset('init')
    clone = original.copy()
    clone.shuffle(100, random.Random(3))
    assert original == INIT_LAYOUT
    assert clone != original


def test_presets_are_read_only():
    with pytest.raises(TypeError):
        INIT_LAYOUT.shuffle(1, random.Random(0))
    with pytest.raises(TypeError):
        INIT_LAYOUT.swap(0, 1)
    assert str(INIT_LAYOUT) == INIT_DIAGRAM


def test_negative_shuffle_count_rejected():
    layout = get_preset('init')
    with pytest.raises(ValueError):
        layout.shuffle(-1)


def test_swap_moves_both_layers():
    layout = get_preset('init')
    layout.swap(0, 32)
    assert layout.lower[0] == 'e' and layout.upper[0] == 'E'
    assert layout.lower[32] == 'q' and layout.upper[32] == 'Q'


def test_swap_same_position_is_noop():
    layout = get_preset('init')
    layout.swap(4, 4)
    assert layout == INIT_LAYOUT


def test_swap_out_of_range_fails_without_mutation():
    layout = get_preset('init')
    with pytest.raises(IndexError):
        layout.swap(0, 33)
    with pytest.raises(IndexError):
        layout.swap(-1, 0)
    assert layout == INIT_LAYOUT


def test_layout_from_strings():
    layout = Layout("abcdefghijklmnopqrstuvwxyz0123456",
                    "ABCDEFGHIJKLMNOPQRSTUVWXYZ!@#$%^&", name='custom')
    assert layout.lower[0] == 'a'
    assert layout.upper[32] == '&'
    assert not layout.is_frozen
    assert layout.name == 'custom'


def test_layout_rejects_wrong_length_layers():
    with pytest.raises(ValueError):
        Layout("abc", "ABC")


def test_layer_rejects_multi_character_keys():
    with pytest.raises(ValueError):
        Layer(['ab'] + ['x'] * 32)


def test_layout_rejects_mixed_frozen_layers():
    with pytest.raises(ValueError):
        Layout(INIT_LAYOUT.lower, INIT_LAYOUT.upper.copy())


def test_shuffle_position_static_method():
    rng = random.Random(11)
    for _ in range(1000):
        i, j = Layout.shuffle_position(rng)
        assert i != j
        assert LAYOUT_MASK[i] and LAYOUT_MASK[j]


def test_layers_cannot_be_swapped_alone():
    layout = get_preset('init')
    with pytest.raises(TypeError):
        layout.lower.swap(0, 1)
    with pytest.raises(TypeError):
        layout.upper.swap(0, 1)
    assert layout == INIT_LAYOUT


def test_shared_grid_is_not_aliased_between_layers():
    grid = KeyGrid(list(INIT_LAYOUT.lower))
    layout = Layout(grid, grid)
    layout.shuffle(50, random.Random(1))
    assert list(layout.lower) != list(INIT_LAYOUT.lower)
    assert list(layout.lower) == list(layout.upper)
    assert grid.to_list() == list(INIT_LAYOUT.lower)


def test_caller_layers_cannot_break_lockstep():
    lower = Layer(list(INIT_LAYOUT.lower))
    upper = Layer(list(INIT_LAYOUT.upper))
    layout = Layout(lower, upper)
    lower.swap(0, 1)
    upper.keys[5] = '!'
    assert layout.lower[0] == 'q' and layout.upper[0] == 'Q'
    assert layout.upper[5] == 'Z'

    layout.swap(0, 1)
    assert lower[0] == 'u' and lower[1] == 'q'
    assert layout.lower[0] == 'u' and layout.upper[0] == 'U'


def test_frozen_layers_are_shared_without_copying():
    layout = Layout(INIT_LAYOUT.lower, INIT_LAYOUT.upper)
    assert layout.is_frozen
    assert layout == INIT_LAYOUT
