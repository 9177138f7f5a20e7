from __future__ import annotations


class SalatError(Exception):
    """Base class for collaborator failures surfaced to the pages."""


class LocationError(SalatError):
    pass


class TimingsFetchError(SalatError):
    pass


class GeocodeError(SalatError):
    pass
