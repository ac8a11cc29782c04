from typing import Callable, Hashable, Iterable, Protocol, TypeAlias, TypeVar

HashableT = TypeVar('HashableT', bound=Hashable)

Perm: TypeAlias = tuple[HashableT, ...]
PermKernel: TypeAlias = Callable[[tuple[HashableT, ...]], list[Perm]]
# str input gives str permutations, anything else gives tuples
PermSet: TypeAlias = list[str] | list[Perm]


class InvalidArgument(ValueError):
    """Raised for a missing symbol sequence or a negative factorial argument."""


class PermutationFunc(Protocol):
    def __call__(
        self, symbols: Iterable[HashableT] | str,
        include_duplicates: bool = True
    ) -> PermSet:
        pass
