from typing import Iterable, Iterator, List

from miraveja_registrar.domain.enums import AnnotationKind
from miraveja_registrar.domain.exceptions import ConfigurationError


class AnnotationKindRegistry:
    """Closed set of annotation kinds recognized during a generation pass.

    An empty registry means the recognized kinds are unavailable and a pass
    aborts before planning anything.
    """

    def __init__(self, kinds: Iterable[AnnotationKind] = ()) -> None:
        self._kinds: List[AnnotationKind] = []
        for kind in kinds:
            self.register(kind)

    @classmethod
    def default(cls) -> "AnnotationKindRegistry":
        """Registry recognizing every built-in annotation kind."""
        return cls(AnnotationKind)

    def register(self, kind: AnnotationKind) -> None:
        kind = AnnotationKind(kind)
        if kind not in self._kinds:
            self._kinds.append(kind)

    def recognizes(self, tag: object) -> bool:
        return self._find(tag) is not None

    def lookup(self, tag: object) -> AnnotationKind:
        """Return the kind registered for a tag.

        Raises:
            ConfigurationError: If the tag is not one of the recognized kinds.
        """
        kind = self._find(tag)
        if kind is None:
            raise ConfigurationError(tag)
        return kind

    def _find(self, tag: object):
        for kind in self._kinds:
            if kind == tag:
                return kind
        return None

    def __contains__(self, tag: object) -> bool:
        return self.recognizes(tag)

    def __iter__(self) -> Iterator[AnnotationKind]:
        return iter(self._kinds)

    def __len__(self) -> int:
        return len(self._kinds)
