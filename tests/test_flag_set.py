import enum

import pytest

from binlogsrv.flag_set import flags_to_string


class Feature(enum.Flag):
    gamma = 4
    alpha = 1
    beta = 2


class Permission(enum.IntFlag):
    read = 1
    write = 2
    everything = 3


def test_single_flag():
    assert flags_to_string(Feature.beta) == "beta"


def test_flags_rendered_in_bit_order():
    assert flags_to_string(Feature.gamma | Feature.alpha) == "alpha | gamma"


def test_all_flags():
    assert flags_to_string(Feature.alpha | Feature.beta | Feature.gamma) == (
        "alpha | beta | gamma"
    )


def test_empty_flag_set_is_empty_string():
    assert flags_to_string(Feature(0)) == ""


def test_multi_bit_alias_is_not_used_as_label():
    assert flags_to_string(Permission.everything) == "read | write"


def test_unknown_bits_are_skipped():
    assert flags_to_string(Permission(1 | 16)) == "read"


@pytest.mark.parametrize("member", list(Feature))
def test_each_member_renders_as_its_name(member):
    assert flags_to_string(member) == member.name