from . import connector_api

__all__ = ["connector_api"]
