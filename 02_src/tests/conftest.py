"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def schema():
    """The bundled event schema."""
    from positron_events.schema import load_schema

    return load_schema()


@pytest.fixture
def codec(schema):
    """EventCodec built from the bundled schema."""
    from positron_events.wire import EventCodec

    return EventCodec(schema)


@pytest.fixture
def records():
    """One instance of every event record."""
    from positron_events.models import (
        BusyEvent,
        ShowHelpEvent,
        ShowHelpUrlEvent,
        ShowMessageEvent,
    )

    return [
        BusyEvent(busy=True),
        ShowMessageEvent(message="Hello, world."),
        ShowHelpEvent(content="<p>hi</p>", kind="html"),
        ShowHelpUrlEvent(url="https://example.org/doc"),
    ]


@pytest.fixture
def raw_schema():
    """A minimal valid schema document, for mutation in tests."""
    return {
        "events": [
            {
                "name": "ping",
                "description": "A ping.",
                "params": [
                    {"name": "count", "type": "integer", "description": "How many."},
                ],
            }
        ]
    }
