#!/usr/bin/env python3
"""
Celestial body catalog.

The catalog is a small CSV table embedded in this module. It can be replaced by a file of
the same format named in the ORRERY_CATALOG environment variable (see config.py).

Schema
======
name,mass (kg),diameter (km),semi-major-axis (AU),sidereal-year (d)
Sun,1.9884e30,696342,0.0,0.0
Earth,5.9724e24,12713.50,1.0,365.256

- The first non-blank line is the header and is skipped.
- The semi-major axis is given in astronomical units and stored in kilometers.
- Rows keep their table order: Sun first, then bodies by increasing distance.

A malformed table is a packaging defect, so every problem raises CatalogError instead of
skipping the row.
"""
import csv
import logging
from functools import lru_cache
from typing import List, Optional, Sequence, Tuple

from .config import get_catalog_path
from .constants import KM_PER_AU
from .data_models import CelestialBody

logger = logging.getLogger(__name__)

FIELD_COUNT = 5

BODIES_CSV = """\
name,mass (kg),diameter (km),semi-major-axis (AU),sidereal-year (d)
Sun,1.9884e30,696342,0.0,0.0
Mercury,3.301e23,4879.4,0.3871,87.969
Venus,4.875e24,12103.6,0.723,244.701
Earth,5.9724e24,12713.50,1.0,365.256
Mars,6.417e23,6752.4,1.524,686.980
Jupiter,1.899e27,133708,5.204,4332.816
Saturn,5.685e26,108728,9.5826,10759.345992
Uranus,8.683e25,49946,19.201,32511.801816
Neptune,1.0243e26,48682,30.070,71878.72824
Pluto,1.303e23,2374,39.482,90561.232
"""


class CatalogError(ValueError):
  """Raised when the body table cannot be parsed."""

  def __init__(self, message: str, line: Optional[int] = None):
    self.line = line
    if line is not None:
      message = f"line {line}: {message}"
    super().__init__(message)


def _parse_float(value: str, column: str, line: int) -> float:
  try:
    return float(value)
  except ValueError:
    raise CatalogError(f"{column} is not a number: {value!r}", line) from None


def _parse_row(fields: Sequence[str], line: int) -> CelestialBody:
  if len(fields) != FIELD_COUNT:
    raise CatalogError(f"expected {FIELD_COUNT} fields, got {len(fields)}", line)
  name = fields[0].strip()
  if not name:
    raise CatalogError("empty body name", line)
  mass = _parse_float(fields[1], "mass", line)
  diameter = _parse_float(fields[2], "diameter", line)
  axis_au = _parse_float(fields[3], "semi-major axis", line)
  year = _parse_float(fields[4], "sidereal year", line)

  if diameter <= 0:
    raise CatalogError(f"diameter of {name} must be positive", line)
  if axis_au < 0 or year < 0:
    raise CatalogError(f"orbit values of {name} must not be negative", line)

  return CelestialBody(
    name=name,
    mass=mass,
    diameter=diameter,
    semi_major_axis=axis_au * KM_PER_AU,
    sidereal_year=year,
  )


def _numbered_rows(raw_table: str) -> List[Tuple[int, List[str]]]:
  lines = raw_table.splitlines()
  rows = []
  for line_no, fields in enumerate(csv.reader(lines), start=1):
    if not fields or all(not f.strip() for f in fields):
      continue
    rows.append((line_no, fields))
  return rows


def parse_catalog(raw_table: str) -> List[CelestialBody]:
  """
  Parse a CSV body table into CelestialBody records, in table order.

  Raises CatalogError on a wrong field count, a non-numeric value, a non-positive
  diameter, a negative orbit value or a duplicate name.
  """
  rows = _numbered_rows(raw_table)
  bodies: List[CelestialBody] = []
  seen = set()
  # rows[0] is the header
  for line_no, fields in rows[1:]:
    body = _parse_row(fields, line_no)
    if body.name in seen:
      raise CatalogError(f"duplicate body name {body.name!r}", line_no)
    seen.add(body.name)
    bodies.append(body)
  return bodies


def read_catalog_file(path: str) -> List[CelestialBody]:
  """Parse a catalog CSV file; I/O errors propagate to the caller."""
  with open(path, "r", encoding="utf-8") as f:
    return parse_catalog(f.read())


@lru_cache(maxsize=1)
def load_catalog() -> Tuple[CelestialBody, ...]:
  """
  Return the process-wide catalog, parsed once.

  Uses the file named by ORRERY_CATALOG when set, the embedded table otherwise.
  """
  path = get_catalog_path()
  if path:
    logger.info("Loading body catalog from %s", path)
    bodies = read_catalog_file(path)
  else:
    bodies = parse_catalog(BODIES_CSV)
  if not bodies:
    raise CatalogError("catalog contains no bodies")
  logger.info("Loaded %d celestial bodies", len(bodies))
  return tuple(bodies)


def find_body(bodies: Sequence[CelestialBody], name: str) -> CelestialBody:
  """Return the body with the given name; KeyError if absent."""
  for b in bodies:
    if b.name == name:
      return b
  raise KeyError(name)
