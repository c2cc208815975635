"""Ephemeris adapters (optional).

Thin wrappers around JPL DE422 used to validate the series models.
Install with:
  pip install "nongli[ephemeris]"
"""


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import de422  # noqa: F401
        import jplephem  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "nongli[ephemeris]"') from e
