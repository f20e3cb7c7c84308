"""
Derivation paths - BIP-32/SLIP-10 index segments.

Provides:
- PathIndex: a raw 32-bit index, hardened or normal
- DerivationPath: an immutable, non-empty sequence of indices
- make_cosmoshub_path: the default Cosmos Hub path m/44'/118'/0'/0/a

The string form m/44'/118'/0'/0/0 is the only representation that gets
persisted, so parse() must accept everything __str__ produces.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

HARDENED_OFFSET = 2 ** 31
MAX_RAW_INDEX = 2 ** 32 - 1

_COMPONENT_RE = re.compile(r"^(0|[1-9][0-9]*)(')?$")


@dataclass(frozen=True, order=True)
class PathIndex:
    """A raw index in [0, 2^32). Values >= 2^31 are hardened."""
    raw: int

    def __post_init__(self):
        if not isinstance(self.raw, int) or isinstance(self.raw, bool):
            raise TypeError(f"Path index must be an int, got {type(self.raw).__name__}")
        if not 0 <= self.raw <= MAX_RAW_INDEX:
            raise ValueError(f"Raw path index out of range: {self.raw}")

    @classmethod
    def hardened(cls, index: int) -> "PathIndex":
        """Hardened index; `index` must be in [0, 2^31)."""
        _check_index(index)
        return cls(index + HARDENED_OFFSET)

    @classmethod
    def normal(cls, index: int) -> "PathIndex":
        """Non-hardened index; `index` must be in [0, 2^31)."""
        _check_index(index)
        return cls(index)

    def is_hardened(self) -> bool:
        return self.raw >= HARDENED_OFFSET

    @property
    def index(self) -> int:
        """The index without the hardened offset."""
        return self.raw - HARDENED_OFFSET if self.is_hardened() else self.raw

    def to_number(self) -> int:
        return self.raw

    def __str__(self) -> str:
        return f"{self.index}'" if self.is_hardened() else str(self.raw)


def _check_index(index: int) -> None:
    if not isinstance(index, int) or isinstance(index, bool):
        raise TypeError(f"Path index must be an int, got {type(index).__name__}")
    if not 0 <= index < HARDENED_OFFSET:
        raise ValueError(f"Path index must be in [0, 2^31), got {index}")


class DerivationPath:
    """
    Ordered instructions for walking from a seed to one key.

    Immutable and never empty. Two paths with the same indices in a
    different order are different paths.
    """

    __slots__ = ("_components",)

    def __init__(self, components: Iterable[PathIndex]):
        components = tuple(components)
        if not components:
            raise ValueError("Derivation path must have at least one component")
        for component in components:
            if not isinstance(component, PathIndex):
                raise TypeError(f"Expected PathIndex, got {type(component).__name__}")
        object.__setattr__(self, "_components", components)

    def __setattr__(self, name, value):
        raise AttributeError("DerivationPath is immutable")

    @classmethod
    def parse(cls, text: str) -> "DerivationPath":
        """
        Parse the canonical string form, e.g. "m/44'/118'/0'/0/0".

        Raises:
            ValueError: If the text is not a valid path
        """
        if not isinstance(text, str):
            raise TypeError("Derivation path must be a string")

        parts = text.split("/")
        if parts[0] != "m":
            raise ValueError(f"Derivation path must start with 'm': {text!r}")
        if len(parts) < 2:
            raise ValueError(f"Derivation path has no components: {text!r}")

        components = []
        for part in parts[1:]:
            match = _COMPONENT_RE.match(part)
            if not match:
                raise ValueError(f"Invalid path component {part!r} in {text!r}")
            index = int(match.group(1))
            if match.group(2):
                components.append(PathIndex.hardened(index))
            else:
                components.append(PathIndex.normal(index))
        return cls(components)

    @property
    def components(self) -> tuple[PathIndex, ...]:
        return self._components

    def __iter__(self) -> Iterator[PathIndex]:
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __getitem__(self, item):
        return self._components[item]

    def __eq__(self, other) -> bool:
        if not isinstance(other, DerivationPath):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __str__(self) -> str:
        return "/".join(["m"] + [str(c) for c in self._components])

    def __repr__(self) -> str:
        return f"DerivationPath('{self}')"


def path_to_string(path: DerivationPath) -> str:
    """Canonical string form of a path."""
    return str(path)


def make_cosmoshub_path(a: int) -> DerivationPath:
    """
    The Cosmos Hub derivation path in the form m/44'/118'/0'/0/a
    with 0-based account index `a`.
    """
    return make_bip44_path(118, a)


def make_bip44_path(coin_type: int, a: int) -> DerivationPath:
    """BIP-44 path m/44'/coin_type'/0'/0/a."""
    return DerivationPath([
        PathIndex.hardened(44),
        PathIndex.hardened(coin_type),
        PathIndex.hardened(0),
        PathIndex.normal(0),
        PathIndex.normal(a),
    ])
