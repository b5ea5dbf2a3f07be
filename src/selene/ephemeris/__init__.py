"""Ephemeris adapters/providers (optional).

Used only by diagnostics that check the analytical new-moon series against a
JPL ephemeris. Install with:
  pip install "selene-calendar[ephemeris]"
"""

from selene.core.errors import DiagnosticsUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise DiagnosticsUnavailableError('Ephemeris support requires: pip install "selene-calendar[ephemeris]"') from e


def load_new_moons(jd_start: float, jd_end: float, *, bsp: str = "de440s.bsp"):
    """
    True new moons (JD, TT) between two Julian Dates, from skyfield's
    moon-phase almanac over the given JPL kernel. The kernel is downloaded
    on first use.
    """
    require_ephemeris()
    from skyfield import almanac
    from skyfield.api import load

    ts = load.timescale()
    eph = load(bsp)
    t0 = ts.tt_jd(jd_start)
    t1 = ts.tt_jd(jd_end)
    t, phase = almanac.find_discrete(t0, t1, almanac.moon_phases(eph))
    return [float(ti.tt) for ti, yi in zip(t, phase) if yi == 0]
