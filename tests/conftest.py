"""Shared fixtures for the presence core tests."""

import pytest

from mumbot.application.services import PresenceSession
from tests.fakes import FakeTimers, RecordingChatClient, build_session


@pytest.fixture
def timers() -> FakeTimers:
    return FakeTimers()


@pytest.fixture
def chat() -> RecordingChatClient:
    return RecordingChatClient()


@pytest.fixture
def session(timers: FakeTimers, chat: RecordingChatClient) -> PresenceSession:
    """Session that has finished priming, with a 300s minimum delay."""
    s = build_session(timers, chat)
    s.finish_priming()
    return s
