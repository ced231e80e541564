"""Shared fixtures for coupon_collector tests."""

import pytest


class ScriptedDraws:
    """Stand-in for random.Random that returns a fixed sequence of draws."""

    def __init__(self, values):
        self._values = list(values)
        self.consumed = 0

    def random(self):
        value = self._values[self.consumed]
        self.consumed += 1
        return value


@pytest.fixture
def scripted():
    return ScriptedDraws
