from .trip_catalog import list_matching

__all__ = ["list_matching"]
