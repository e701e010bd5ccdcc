import pytest

from .fakes import FakeDisplay, FakeTaskStore


@pytest.fixture()
def store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def display() -> FakeDisplay:
    return FakeDisplay()
