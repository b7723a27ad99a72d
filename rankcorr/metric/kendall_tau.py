import itertools
import logging
import typing
from functools import cached_property

import numpy

from rankcorr.utils.common import to_sequence

LOGGER = logging.getLogger(__name__)


class SizeMismatchError(ValueError):
    def __init__(self, size_a: int, size_b: int):
        super().__init__(f"Sequence a and b should have the same length, but found {size_a} and {size_b}.")
        self.size_a = size_a
        self.size_b = size_b


def _sign(x, y) -> int:
    return (x > y) - (x < y)


def _divide(numerator, denominator) -> float:
    with numpy.errstate(divide="ignore", invalid="ignore"):
        return float(numpy.float64(numerator) / numpy.float64(denominator))


def tie_groups(values: typing.Sequence) -> typing.List[int]:
    '''
    Sizes of the groups of equal values, singletons included.
    Only ordering and equality are required from the elements.
    '''
    return [len(list(group)) for _, group in itertools.groupby(sorted(values))]


class KendallTau(object):
    '''
    Kendall Tau is a metric to measure the ordinal association between two measured quantities.
    Refer to https://en.wikipedia.org/wiki/Kendall_rank_correlation_coefficient

    Pairs are compared one by one, so this is O(n^2). Tau-c is not supported.
    '''

    def __init__(self, a, b):
        a, b = to_sequence(a), to_sequence(b)
        if len(a) != len(b):
            raise SizeMismatchError(len(a), len(b))
        LOGGER.debug("build kendall tau with %d observations", len(a))
        self._a = a
        self._b = b

    @classmethod
    def build(cls, a, b) -> "KendallTau":
        return cls(a, b)

    def __len__(self) -> int:
        return len(self.a)

    @property
    def a(self) -> typing.Tuple:
        return self._a

    @property
    def b(self) -> typing.Tuple:
        return self._b

    def __repr__(self):
        # counts are only shown once computed
        if "_pair_counts" not in self.__dict__:
            return f"KendallTau(n={len(self)})"
        nc, nd = self._pair_counts
        return f"KendallTau(n={len(self)}, concordant={nc}, discordant={nd})"

    def indices(self) -> typing.Iterator[typing.Tuple[int, int]]:
        '''
        Yield every pair (i, j) with j < i exactly once.
        '''
        for i in range(1, len(self)):
            for j in range(i):
                yield i, j

    def comparisons(self) -> typing.Iterator[int]:
        for i, j in self.indices():
            yield _sign(self.a[i], self.a[j]) * _sign(self.b[i], self.b[j])

    @cached_property
    def _pair_counts(self) -> typing.Tuple[int, int]:
        nc = nd = 0
        for sign in self.comparisons():
            if sign > 0:
                nc += 1
            elif sign < 0:
                nd += 1
        return nc, nd

    @property
    def n_concordant(self) -> int:
        return self._pair_counts[0]

    @property
    def n_discordant(self) -> int:
        return self._pair_counts[1]

    @cached_property
    def t(self) -> typing.List[int]:
        return tie_groups(self.a)

    @cached_property
    def u(self) -> typing.List[int]:
        return tie_groups(self.b)

    @cached_property
    def n0(self) -> int:
        return len(self) * (len(self) - 1) // 2

    @cached_property
    def n1(self) -> int:
        return sum(t * (t - 1) for t in self.t) // 2

    @cached_property
    def n2(self) -> int:
        return sum(u * (u - 1) for u in self.u) // 2

    def tau_a(self) -> float:
        '''
        Tau-a, ties are left in the denominator. NaN for fewer than two observations.
        '''
        if self.n0 == 0:
            LOGGER.debug("tau-a is undefined for %d observations", len(self))
        return _divide(self.n_concordant - self.n_discordant, self.n0)

    def tau_b(self) -> float:
        '''
        Tau-b, adjusted for ties. NaN when either sequence is entirely tied.
        '''
        denominator = (self.n0 - self.n1) * (self.n0 - self.n2)
        if denominator == 0:
            LOGGER.debug("tau-b is undefined, n0=%d, n1=%d, n2=%d", self.n0, self.n1, self.n2)
        return _divide(self.n_concordant - self.n_discordant, numpy.sqrt(numpy.float64(denominator)))


def compute_kendall_tau(a, b, variant: str = "b") -> float:
    kendall_tau = KendallTau.build(a, b)
    if variant == "a":
        return kendall_tau.tau_a()
    elif variant == "b":
        return kendall_tau.tau_b()
    else:
        raise ValueError(f"variant should be 'a' or 'b', but found {variant!r}")
