"""Immutable star catalogue and the builder that assembles it."""

from types import MappingProxyType
from typing import BinaryIO, Dict, Iterable, List, Mapping, Optional, Protocol, Sequence, Tuple

from ..errors import BuilderFinalizedError, StarNotInCatalogueError, UnknownAsterismError
from ..models import Asterism, Star


class StarCatalogue:
    """Stars plus the asterisms drawn between them.

    Every star of every asterism must be one of the catalogue stars, the
    same object and not merely an equal one.

    Args:
        stars: Stars in catalogue order
        asterisms: Asterisms whose stars all belong to ``stars``

    Raises:
        StarNotInCatalogueError: If an asterism references an unknown star
    """

    def __init__(self, stars: Iterable[Star], asterisms: Iterable[Asterism]):
        self._stars: Tuple[Star, ...] = tuple(stars)
        # Stars hash by identity
        index_of_star: Dict[Star, int] = {}
        for i, star in enumerate(self._stars):
            index_of_star.setdefault(star, i)

        indices: Dict[Asterism, Tuple[int, ...]] = {}
        for asterism in asterisms:
            star_indices = []
            for star in asterism.stars:
                i = index_of_star.get(star)
                if i is None:
                    raise StarNotInCatalogueError(star.name, asterism.constellation)
                star_indices.append(i)
            indices[asterism] = tuple(star_indices)
        self._asterism_indices: Mapping[Asterism, Tuple[int, ...]] = MappingProxyType(indices)

    @property
    def stars(self) -> Tuple[Star, ...]:
        return self._stars

    @property
    def asterisms(self) -> Tuple[Asterism, ...]:
        return tuple(self._asterism_indices)

    def asterism_indices(self, asterism: Asterism) -> Tuple[int, ...]:
        """Positions in ``stars`` of the stars of the given asterism.

        Raises:
            UnknownAsterismError: If the asterism is not part of this catalogue
        """
        try:
            return self._asterism_indices[asterism]
        except KeyError:
            raise UnknownAsterismError(asterism.constellation) from None

    def __repr__(self) -> str:
        return (
            f"StarCatalogue({len(self._stars)} stars, "
            f"{len(self._asterism_indices)} asterisms)"
        )


class Loader(Protocol):
    """Reads catalogue entries from a byte stream into a builder."""

    def load(self, stream: BinaryIO, builder: "CatalogueBuilder") -> None:
        ...


class CatalogueBuilder:
    """Accumulates stars and asterisms until ``build`` is called once."""

    def __init__(self):
        self._stars: Optional[List[Star]] = []
        self._asterisms: Optional[List[Asterism]] = []

    def _check_open(self) -> None:
        if self._stars is None:
            raise BuilderFinalizedError()

    def add_star(self, star: Star) -> "CatalogueBuilder":
        self._check_open()
        self._stars.append(star)
        return self

    def add_asterism(self, asterism: Asterism) -> "CatalogueBuilder":
        self._check_open()
        self._asterisms.append(asterism)
        return self

    @property
    def stars(self) -> Sequence[Star]:
        """Read-only view of the stars added so far."""
        self._check_open()
        return tuple(self._stars)

    @property
    def asterisms(self) -> Sequence[Asterism]:
        """Read-only view of the asterisms added so far."""
        self._check_open()
        return tuple(self._asterisms)

    def load_from(self, stream: BinaryIO, loader: Loader) -> "CatalogueBuilder":
        """Let ``loader`` append the entries read from ``stream``.

        Raises:
            CatalogueLoadError: If the stream cannot be read or parsed
        """
        self._check_open()
        loader.load(stream, self)
        return self

    def build(self) -> StarCatalogue:
        """Finalize the builder into an immutable catalogue.

        Raises:
            StarNotInCatalogueError: If an asterism references an unknown star
            BuilderFinalizedError: If the builder was already finalized
        """
        self._check_open()
        catalogue = StarCatalogue(self._stars, self._asterisms)
        self._stars = None
        self._asterisms = None
        return catalogue
