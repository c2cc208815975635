"""Diagnostics package.

- diagnostics: text rendering and matplotlib plots built on the public API
- diagnostics.ephem: optional (requires ephemeris extras + DE422 data)
"""

__all__ = ["pretty_year", "leap_months", "plot_deltat"]
