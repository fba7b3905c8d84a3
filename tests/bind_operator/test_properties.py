# SPDX-FileCopyrightText: Copyright (C) 2025 ARDUINO SA <http://www.arduino.cc>
#
# SPDX-License-Identifier: MPL-2.0

"""Property-based tests for argument splicing."""

import hypothesis.strategies as st
from hypothesis import given, settings

from bind_operator import BindConfig, support_bind_operator

arguments = st.lists(
    st.one_of(st.integers(), st.text(max_size=10), st.none(), st.booleans()),
    max_size=8,
)

receivers = st.one_of(
    st.integers(),
    st.text(max_size=10),
    st.builds(object),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
)

positions = st.integers(min_value=0, max_value=10)


def capture(*args, **kwargs):
    return args, kwargs


def expected_splice(args, position, value):
    padded = list(args) + [None] * max(0, position - len(args))
    return tuple(padded[:position]) + (value,) + tuple(padded[position:])


class TestSpliceProperties:
    """Property-based tests for the bindable wrapper."""

    @given(args=arguments)
    @settings(max_examples=50)
    def test_unbound_is_passthrough(self, args):
        """Property: without a receiver the target gets exactly the arguments."""
        fn = support_bind_operator(capture)
        assert fn(*args) == (tuple(args), {})
        assert fn.call(None, *args) == (tuple(args), {})

    @given(args=arguments, receiver=receivers)
    @settings(max_examples=50)
    def test_default_prepends_receiver(self, args, receiver):
        """Property: the default configuration makes the receiver the first argument."""
        received, _ = support_bind_operator(capture).call(receiver, *args)
        assert received[0] is receiver
        assert received[1:] == tuple(args)

    @given(args=arguments, receiver=receivers, position=positions)
    @settings(max_examples=100)
    def test_receiver_at_position(self, args, receiver, position):
        """Property: the receiver lands at the configured index, later arguments shift right."""
        received, _ = support_bind_operator(position, capture).call(receiver, *args)
        assert received == expected_splice(args, position, receiver)
        assert received[position] is receiver

    @given(args=arguments, receiver=receivers, position=positions)
    @settings(max_examples=50)
    def test_dot_path_at_position(self, args, receiver, position):
        """Property: with a path the inserted value nests the receiver at that path."""
        received, _ = support_bind_operator(position, "a.b", capture).call(receiver, *args)
        assert received[position] == {"a": {"b": receiver}}
        assert received[position]["a"]["b"] is receiver
        expected = expected_splice(args, position, None)
        assert received[:position] + received[position + 1:] == expected[:position] + expected[position + 1:]

    @given(args=arguments, receiver=receivers, position=positions)
    @settings(max_examples=50)
    def test_legacy_equals_record(self, args, receiver, position):
        """Property: legacy shorthands behave like the equivalent record."""
        legacy = support_bind_operator(position, "ctx", capture)
        record = support_bind_operator(BindConfig(arg_position=position, path="ctx"), capture)
        assert legacy.config == record.config
        assert legacy.call(receiver, *args) == record.call(receiver, *args)

    @given(args=arguments, receiver=receivers, position=positions)
    @settings(max_examples=50)
    def test_apply_never_mutates_args(self, args, receiver, position):
        """Property: the caller's argument list is unchanged after the call."""
        snapshot = list(args)
        support_bind_operator(position, capture).apply(receiver, args)
        assert args == snapshot

    @given(args=arguments, receiver=receivers)
    @settings(max_examples=50)
    def test_ignored_receiver_is_dropped(self, args, receiver):
        """Property: an ignored receiver leaves the arguments unchanged."""
        for ignore in (receiver, [receiver], lambda value: value is receiver):
            fn = support_bind_operator({"ignore_this": ignore}, capture)
            assert fn.call(receiver, *args) == (tuple(args), {})
