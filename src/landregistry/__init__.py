"""Land registry backend: parcels, expropriations, inheritance requests and seeding."""

__version__ = "0.1.0"
