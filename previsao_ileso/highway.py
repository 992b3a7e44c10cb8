"""Ways of entering the federal highway (BR) number.

The page either shows a plain number box or a searchable list of known
highways. Both hand the form an ``int`` (or ``InvalidNumber``), so the rest
of the workflow does not care which one is in use.
"""

from previsao_ileso.catalogs import HIGHWAYS
from previsao_ileso.schema import parse_int


class NumericHighwayInput:
    mode = "numeric"

    def parse(self, raw):
        return parse_int(raw)


class CatalogHighwayInput:
    """Highway picked from ``catalog`` as text, e.g. ``"101"`` or ``"040"``."""

    mode = "catalog"

    def __init__(self, catalog=None):
        self.catalog = list(HIGHWAYS if catalog is None else catalog)

    @property
    def options(self):
        return self.catalog

    def parse(self, raw):
        # "040" -> 40: the predictor keys highways by number, not by sign text
        return parse_int(raw)


def highway_input(mode):
    if mode == "numeric":
        return NumericHighwayInput()
    if mode == "catalog":
        return CatalogHighwayInput()
    raise ValueError(f"Unknown highway input mode: {mode!r}")
