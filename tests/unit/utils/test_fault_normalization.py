# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for fault normalisation."""

from __future__ import annotations

import pytest

from omnibase_panics.errors import Panic, PanicError
from omnibase_panics.utils import (
    UNKNOWN_ERROR_MESSAGE,
    error_message,
    normalize_fault,
    unwrap_fault,
)


class TestNormalizeFault:
    """Tests for the three normalisation arms plus the default."""

    def test_none(self) -> None:
        assert normalize_fault(None) is None

    def test_string_becomes_panic_error(self) -> None:
        error = normalize_fault("panic here")

        assert isinstance(error, PanicError)
        assert str(error) == "panic here"

    def test_exception_returned_unchanged(self) -> None:
        original = ValueError("bad value")

        assert normalize_fault(original) is original

    @pytest.mark.parametrize("value", [42, 3.5, ["a"], {"k": "v"}, object()])
    def test_other_values_are_unknown(self, value: object) -> None:
        error = normalize_fault(value)

        assert isinstance(error, PanicError)
        assert str(error) == UNKNOWN_ERROR_MESSAGE == "Unknown error"


class TestUnwrapFault:
    """Tests for Panic carrier unwrapping."""

    def test_unwraps_panic_carrier(self) -> None:
        assert unwrap_fault(Panic(42)) == 42

    def test_passes_other_exceptions(self) -> None:
        error = KeyError("missing")

        assert unwrap_fault(error) is error


class TestErrorMessage:
    """Tests for error_message()."""

    def test_uses_str(self) -> None:
        assert error_message(RuntimeError("boom")) == "boom"

    def test_falls_back_to_class_name(self) -> None:
        """Test that an exception without message reports its class name."""
        assert error_message(RuntimeError()) == "RuntimeError"
