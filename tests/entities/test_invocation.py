"""
Tests for the Invocation entity.
"""

import dataclasses

import pytest

from cmdrepair.entities.Invocation import Invocation
from cmdrepair.exceptions import InvocationError


class TestInvocation:
    """Test cases for the Invocation entity."""

    def test_arguments_are_normalized_to_string_tuple(self):
        invocation = Invocation("prog", [1, "two"])  # type: ignore[arg-type]

        assert invocation.arguments == ("1", "two")

    @pytest.mark.parametrize("command", ["", " ", "\t\n"])
    def test_blank_command_is_empty(self, command):
        assert Invocation(command).is_empty()
        assert Invocation(command, ("",)).is_empty()

    def test_quoted_command_is_not_empty(self):
        assert not Invocation('""x""').is_empty()

    def test_has_arguments(self):
        assert not Invocation("echo").has_arguments()
        assert Invocation("echo", ("",)).has_arguments()

    def test_non_string_command(self):
        with pytest.raises(InvocationError, match="got int"):
            Invocation(42)  # type: ignore[arg-type]

    def test_is_immutable(self):
        invocation = Invocation("echo", ("1",))

        with pytest.raises(dataclasses.FrozenInstanceError):
            invocation.command = "dir"  # type: ignore[misc]

    def test_str(self):
        assert str(Invocation("echo")) == "'echo'"
        assert str(Invocation("echo", ("1", "2"))) == "'echo', '1', '2'"
