"""Wire representation of events."""

from .codec import JSONRPC_VERSION, EventCodec
from .params import build_params_model, build_params_models

__all__ = [
    "JSONRPC_VERSION",
    "EventCodec",
    "build_params_model",
    "build_params_models",
]
