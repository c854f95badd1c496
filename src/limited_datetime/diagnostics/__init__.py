"""Diagnostics package.

Stand-alone checks and printouts, each with its own ``main(argv)`` so they can
be run through ``limited-datetime diag <tool>`` or ``python -m``.
"""

__all__ = ["pretty_month", "round_trip"]
