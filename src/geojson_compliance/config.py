# -*- coding: utf-8 -*-

"""
geojson_compliance/config.py

Central configuration for GeoJSON compliance processing. Constants used by the
orientation and antimeridian helpers live here together with the
`ProcessingOptions` record that every processing entry point receives.

Contents:
---------
1. ANTIMERIDIAN / FULL_CIRCLE:
   - Longitude of the branch cut (degrees) and the wrap period.

2. MIN_RING_POSITIONS / MIN_OPEN_RING_POSITIONS:
   - A linear ring needs 3 distinct positions plus the closing one.

3. WGS84_CRS_NAME:
   - Name written by `Crs.wgs84()`; RFC 7946 mandates WGS84 and removed `crs`.

4. OPTION_ALIASES:
   - Wire-style option names accepted by `ProcessingOptions.from_mapping`.

5. ProcessingOptions:
   - Immutable switches. Two presets:
       • `legacy()`  - 2008 GeoJSON behavior, nothing is touched
       • `rfc7946()` - validate, auto-fix winding and cut at the antimeridian

Usage:
------
    from geojson_compliance.config import ProcessingOptions

    opts = ProcessingOptions.rfc7946()
    strict = opts.replace(auto_fix_orientation=False)
"""

from dataclasses import dataclass, fields, replace as _replace
from typing import Any, Mapping

ANTIMERIDIAN = 180.0
FULL_CIRCLE = 360.0

MIN_RING_POSITIONS = 4
MIN_OPEN_RING_POSITIONS = 3

WGS84_CRS_NAME = 'urn:ogc:def:crs:OGC::CRS84'

OPTION_ALIASES = {
    'validatePolygonOrientation': 'validate_orientation',
    'autoFixPolygonOrientation': 'auto_fix_orientation',
    'cutAntimeridian': 'cut_antimeridian',
    'warnOnCrsUse': 'warn_on_legacy_crs',
}


@dataclass(frozen=True)
class ProcessingOptions:
    """Switches controlling RFC 7946 processing.

    - validate_orientation: raise if exterior rings are not CCW or holes not CW
    - auto_fix_orientation: reverse rings whose winding is wrong
    - cut_antimeridian: split LineStrings and Polygons crossing 180°
    - warn_on_legacy_crs: log a warning when an object carries a `crs` member
    """
    validate_orientation: bool = False
    auto_fix_orientation: bool = False
    cut_antimeridian: bool = False
    warn_on_legacy_crs: bool = False

    @classmethod
    def legacy(cls) -> 'ProcessingOptions':
        """2008 GeoJSON behavior: every switch off."""
        return cls()

    @classmethod
    def rfc7946(cls) -> 'ProcessingOptions':
        """RFC 7946 compliance: validate, fix winding and cut at the antimeridian."""
        return cls(validate_orientation=True, auto_fix_orientation=True, cut_antimeridian=True)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> 'ProcessingOptions':
        """Build options from a mapping of wire-style or field names.

        Unknown keys raise `KeyError` so typos in configuration files are not
        silently ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in known:
                raise KeyError(f"Unknown processing option '{key}'")
            kwargs[name] = bool(value)
        return cls(**kwargs)

    def replace(self, **changes: bool) -> 'ProcessingOptions':
        """Return a copy with `changes` applied."""
        return _replace(self, **changes)

    def as_mapping(self) -> dict:
        """Wire-style mapping, the inverse of `from_mapping`."""
        return {alias: getattr(self, name) for alias, name in OPTION_ALIASES.items()}
