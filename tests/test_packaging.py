"""
Test that every application package ships in the distribution.
"""
from pathlib import Path

from setuptools import find_packages

ROOT = Path(__file__).resolve().parents[1]


def test_all_subpackages_are_discovered():
    packages = set(find_packages(where=str(ROOT), include=["event_board_api*"]))

    for expected in (
        "event_board_api.app.core",
        "event_board_api.app.schemas",
        "event_board_api.app.services",
        "event_board_api.app.api.v1.endpoints",
    ):
        assert expected in packages
