"""Code generation from the event schema."""

from .generator import check_events_module, render_events_module, write_events_module

__all__ = ["check_events_module", "render_events_module", "write_events_module"]
