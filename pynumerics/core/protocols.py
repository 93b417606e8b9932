"""
Core protocols for PyNumerics.

These define structural interfaces that containers, views and backends must
satisfy. We use Protocol (structural typing) rather than ABC (nominal typing)
so that owning containers and non-owning views can be passed to the same
algorithm body.

Design Principles:
    - Minimal contracts: prescribe only what the algorithms actually touch
    - Indexing is the only element access the algorithms rely on
    - ndim distinguishes vectors (1), matrices (2) and scalars (0 or absent)
"""

from typing import Protocol, TypeVar, Any, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class VectorLike(Protocol):
    """
    Anything indexable as a one-dimensional sequence of scalars.

    Implemented by FixedVector, UnboundedVector, ColumnView and a
    TransposedView of any of those.
    """

    ndim: int

    @property
    def size(self) -> int:
        """Number of entries."""
        ...

    def __getitem__(self, index: int) -> Any:
        ...


@runtime_checkable
class MatrixLike(Protocol):
    """
    Anything indexable as a two-dimensional array of scalars.

    Implemented by the dense and triangular matrices, BlockView and a
    TransposedView of any of those. For triangular matrices only the
    stored triangle may be indexed.
    """

    ndim: int

    @property
    def rows(self) -> int:
        ...

    @property
    def columns(self) -> int:
        ...

    def __getitem__(self, index: tuple[int, int]) -> Any:
        ...


@runtime_checkable
class ArrayGenerator(Protocol):
    """
    Supplies correctly-shaped result storage for one container representation.

    Every decomposition allocates its results through the generator of its
    input, so the same algorithm body produces fixed-size results for
    fixed-size input and unbounded results for unbounded input.
    """

    @property
    def name(self) -> str:
        """Representation identifier ('fixed' or 'unbounded')."""
        ...

    def vector(self, size: int, *, uninitialized: bool = False,
               dtype: Any = ...) -> Any:
        ...

    def matrix(self, rows: int, columns: int, *, uninitialized: bool = False,
               dtype: Any = ...) -> Any:
        ...

    def lower_triangular(self, rows: int, *, uninitialized: bool = False,
                         dtype: Any = ...) -> Any:
        ...

    def upper_triangular(self, columns: int, *, uninitialized: bool = False,
                         dtype: Any = ...) -> Any:
        ...

    def identity(self, rows: int, columns: int, *, dtype: Any = ...) -> Any:
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends of the dense façade.

    Each backend knows how to take a validated design and produce a
    parameter payload. Backends are stateless apart from their construction
    arguments, which makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{representation}'
        Examples: 'cpu_fixed', 'cpu_unbounded'
        """
        ...

    def solve(self, design: D, **kwargs: Any) -> 'Result[P]':
        """
        Execute the computation.

        Args:
            design: Validated input container

        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
