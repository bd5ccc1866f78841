"""Loaders for the HYG star database and for asterism files."""

import csv
import io
from pathlib import Path
from typing import BinaryIO, Dict, List, Union

from ..coordinates import EquatorialCoordinates
from ..errors import CatalogueFormatError, CatalogueLoadError
from ..models import Asterism, Star
from .catalogue import CatalogueBuilder, StarCatalogue

# Column positions of the HYG database, version 3.
HYG_COLUMNS = (
    "ID", "HIP", "HD", "HR", "GL", "BF", "PROPER", "RA", "DEC", "DIST",
    "PMRA", "PMDEC", "RV", "MAG", "ABSMAG", "SPECT", "CI", "X", "Y", "Z",
    "VX", "VY", "VZ", "RARAD", "DECRAD", "PMRARAD", "PMDECRAD", "BAYER",
    "FLAM", "CON", "COMP", "COMP_PRIMARY", "BASE", "LUM", "VAR", "VAR_MIN",
    "VAR_MAX",
)
_COLUMN = {name: i for i, name in enumerate(HYG_COLUMNS)}


def _source_name(stream: BinaryIO) -> str:
    return str(getattr(stream, "name", "<stream>"))


def _read_lines(stream: BinaryIO) -> List[str]:
    """Read the whole stream as ASCII text, closing it in every case.

    Raises:
        CatalogueLoadError: If the stream cannot be read or decoded
    """
    source = _source_name(stream)
    try:
        with io.TextIOWrapper(stream, encoding="ascii", newline="") as text:
            return text.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogueLoadError(source, str(e)) from e


def _or_default(value: str, default: str) -> str:
    return value if value else default


class HygDatabaseLoader:
    """Reads stars from a CSV export of the HYG database.

    The header row is skipped. Missing Hipparcos ids, magnitudes and
    colour indices default to 0; stars without a proper name are named
    after their Bayer designation (or "?") followed by the constellation.
    """

    def load(self, stream: BinaryIO, builder: CatalogueBuilder) -> None:
        source = _source_name(stream)
        lines = _read_lines(stream)

        stars = []
        for line_number, row in enumerate(csv.reader(lines[1:]), start=2):
            try:
                stars.append(self._parse_star(row))
            except (ValueError, IndexError) as e:
                raise CatalogueFormatError(source, line_number, str(e)) from e

        for star in stars:
            builder.add_star(star)

    @staticmethod
    def _parse_star(row: List[str]) -> Star:
        if len(row) < len(HYG_COLUMNS):
            raise IndexError(
                f"expected {len(HYG_COLUMNS)} columns, found {len(row)}"
            )

        def column(name: str) -> str:
            return row[_COLUMN[name]]

        name = column("PROPER")
        if not name:
            name = f"{_or_default(column('BAYER'), '?')} {column('CON')}"

        position = EquatorialCoordinates(
            float(column("RARAD")), float(column("DECRAD"))
        )
        return Star(
            name,
            position,
            float(_or_default(column("MAG"), "0")),
            int(_or_default(column("HIP"), "0")),
            float(_or_default(column("CI"), "0")),
        )


class AsterismLoader:
    """Reads asterisms made of stars already added to the builder.

    Each line lists Hipparcos ids separated by commas, followed by the
    constellation name, or by the unlabelled marker when the constellation
    is labelled by another asterism. Ids that are not positive or that
    match no loaded star are ignored; a line left without any star is
    skipped.
    """

    def load(self, stream: BinaryIO, builder: CatalogueBuilder) -> None:
        source = _source_name(stream)
        lines = _read_lines(stream)

        star_by_id: Dict[int, Star] = {}
        for star in builder.stars:
            star_by_id.setdefault(star.hipparcos_id, star)

        asterisms = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            *ids, constellation = line.split(",")
            stars = []
            try:
                for field in ids:
                    hip = int(field)
                    if hip > 0 and hip in star_by_id:
                        stars.append(star_by_id[hip])
            except ValueError as e:
                raise CatalogueFormatError(source, line_number, str(e)) from e
            if stars:
                asterisms.append(Asterism(stars, constellation.strip()))

        for asterism in asterisms:
            builder.add_asterism(asterism)


HYG_DATABASE = HygDatabaseLoader()
ASTERISMS = AsterismLoader()


def load_catalogue(
    stars_path: Union[str, Path], asterisms_path: Union[str, Path, None] = None
) -> StarCatalogue:
    """Build a catalogue from a HYG database file and an optional asterism file.

    Args:
        stars_path: Path to the HYG CSV file
        asterisms_path: Path to the asterism file, if any

    Returns:
        The finalized catalogue

    Raises:
        CatalogueLoadError: If a file cannot be opened, read or parsed
    """
    builder = CatalogueBuilder()
    sources = [(stars_path, HYG_DATABASE)]
    if asterisms_path is not None:
        sources.append((asterisms_path, ASTERISMS))

    for path, loader in sources:
        try:
            stream = open(path, "rb")
        except OSError as e:
            raise CatalogueLoadError(str(path), e.strerror or str(e)) from e
        with stream:
            builder.load_from(stream, loader)

    return builder.build()
