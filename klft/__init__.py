"""Lattice gauge theory: gauge and matrix fields, staples, spinors, Metropolis sweeps and kernel tiling."""

__version__ = "0.0.1"

__all__ = [
    "fermion_params",
    "field_types",
    "gauge_field",
    "metropolis",
    "spinor",
    "staple",
    "sun_field",
    "tuner",
]