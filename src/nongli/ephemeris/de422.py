#ephemeris/de422.py
from __future__ import annotations

import math
import pathlib
from dataclasses import dataclass
from typing import Tuple

from ..engines.astro.nutation import nutation_in_longitude
from ..reference import astro_args as aa

# DE422 validity (TT Julian days)
JD_MIN = 625648.5
JD_MAX = 2816816.5

EMRAT_DEFAULT = 81.30056907419062
AU_KM = 149597870.7
ABERRATION_ARCSEC_1AU = 20.4898


def _load_emrat(de422_mod) -> float:
    """Earth/Moon mass ratio from the constants shipped with the de422 package."""
    import numpy as np

    p = pathlib.Path(de422_mod.__file__).resolve().parent / "constants.npy"
    if not p.exists():
        return EMRAT_DEFAULT
    constants = np.load(str(p), allow_pickle=True).item()
    for k in ("EMRAT", "emrat"):
        if k in constants:
            return float(constants[k])
    return EMRAT_DEFAULT


@dataclass
class DE422Ephemeris:
    """
    Geocentric apparent ecliptic longitudes of the Sun and Moon from DE422,
    referred to the true equinox of date.

    Requires optional deps:
      pip install "nongli[ephemeris]"
    """
    eph: object
    emrat: float

    @classmethod
    def load(cls) -> "DE422Ephemeris":
        try:
            import de422  # type: ignore
            from jplephem import Ephemeris  # type: ignore
        except ImportError as e:
            raise RuntimeError(
                "DE422 ephemeris not available. Install extras:\n"
                "  pip install \"nongli[ephemeris]\""
            ) from e
        return cls(eph=Ephemeris(de422), emrat=_load_emrat(de422))

    def _geocentric(self, jd: float):
        if not JD_MIN < jd < JD_MAX:
            raise ValueError(f"JD {jd} outside DE422 range [{JD_MIN}, {JD_MAX}]")
        r_emb = self.eph.compute("earthmoon", jd)[:3]
        r_moon = self.eph.compute("moon", jd)[:3]      # geocentric
        r_sun = self.eph.compute("sun", jd)[:3]        # barycentric
        r_earth = r_emb - r_moon / (self.emrat + 1.0)
        return r_sun - r_earth, r_moon

    def positions_deg(self, jd: float) -> Tuple[float, float, float]:
        """(sun longitude, moon longitude, moon latitude), apparent, degrees."""
        r_sun, r_moon = self._geocentric(jd)
        T = aa.T_centuries(jd)
        rot = aa.matrix_eq_j2000_to_ecl_date(T)
        dpsi = math.degrees(nutation_in_longitude(T))

        sun_lon, _ = aa.ecliptic_lon_lat_deg(aa.apply_matrix(rot, r_sun))
        moon_lon, moon_lat = aa.ecliptic_lon_lat_deg(aa.apply_matrix(rot, r_moon))

        dist_au = math.sqrt(sum(float(c) * float(c) for c in r_sun)) / AU_KM
        sun_lon = aa.wrap_deg(sun_lon + dpsi - ABERRATION_ARCSEC_1AU / 3600.0 / dist_au)
        moon_lon = aa.wrap_deg(moon_lon + dpsi)
        return sun_lon, moon_lon, moon_lat

    def elongation_deg(self, jd: float) -> float:
        sun_lon, moon_lon, _ = self.positions_deg(jd)
        return aa.wrap_deg(moon_lon - sun_lon)


def new_moon_near(eph: DE422Ephemeris, jd_guess: float, halfwidth_days: float = 3.0) -> float:
    """Solve elongation = 0 near jd_guess by bisection on the wrapped elongation."""

    def f(t: float) -> float:
        return aa.wrap180(eph.elongation_deg(t))

    a, b = jd_guess - halfwidth_days, jd_guess + halfwidth_days
    fa, fb = f(a), f(b)
    if fa * fb > 0:
        raise ValueError(f"no sign change of elongation within ±{halfwidth_days} d of JD {jd_guess}")

    for _ in range(140):
        m = 0.5 * (a + b)
        fm = f(m)
        if fa * fm <= 0:
            b, fb = m, fm
        else:
            a, fa = m, fm
        if (b - a) < 1e-9:
            break
    return 0.5 * (a + b)
