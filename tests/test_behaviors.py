"""Behaviour-layer stories: pure domain function tests."""

from __future__ import annotations

import pytest

from hello_devops.domain import behaviors


@pytest.mark.os_agnostic
def test_build_greeting_returns_canonical_text() -> None:
    assert behaviors.build_greeting() == "Hello DevOps World - Enhanced with New Features!"


@pytest.mark.os_agnostic
def test_build_greeting_is_stable_across_calls() -> None:
    assert behaviors.build_greeting() == behaviors.build_greeting() == behaviors.CANONICAL_GREETING
