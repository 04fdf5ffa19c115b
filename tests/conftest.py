"""Pytest configuration for renderer tests.

This module provides shared fixtures for all test modules: small cameras
that render quickly and a progress sink that records every call.
"""

import pytest


class RecordingProgress:
    """Progress sink that records the calls made by the render loop."""

    def __init__(self):
        self.total = None
        self.increments = []
        self.start_calls = 0
        self.finish_calls = 0

    def start(self, total):
        self.start_calls += 1
        self.total = total

    def increment(self, n=1):
        self.increments.append(n)

    def finish(self):
        self.finish_calls += 1

    @property
    def current(self):
        return sum(self.increments)


@pytest.fixture
def recording_progress():
    """A fresh RecordingProgress for each test."""
    return RecordingProgress()


@pytest.fixture
def square_camera():
    """2x2 camera with a 1:1 aspect ratio."""
    from raycore.camera.camera import Camera

    return Camera(aspect_ratio=1.0, image_width=2)


@pytest.fixture
def widescreen_camera():
    """Small 16:9 camera (40x22) for render loop tests."""
    from raycore.camera.camera import Camera

    return Camera(aspect_ratio=16.0 / 9.0, image_width=40)
