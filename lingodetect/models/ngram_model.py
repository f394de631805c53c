import math
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from lingodetect.constants import NGRAM_ORDERS, UNSEEN_NGRAM_LOG_PROBABILITY
from lingodetect.errors import ModelLoadError


class NgramModel:
    """
    Character n-gram model of a single language.

    Holds one table per n-gram order, mapping each n-gram to the natural
    log of its relative frequency within that order. The model is built
    once from frequency counts and never changes afterwards, so it can be
    shared by any number of concurrent detections.
    """

    __slots__ = ('_tables', '_unseen_log_probability')

    def __init__(self, tables, unseen_log_probability=UNSEEN_NGRAM_LOG_PROBABILITY):
        """
        Args:
            tables: Mapping order -> {ngram: log_probability}. Every order in
                NGRAM_ORDERS must be present.
            unseen_log_probability: Value returned for n-grams missing from
                their order's table.
        """
        missing = [order for order in NGRAM_ORDERS if order not in tables]
        if missing:
            raise ModelLoadError(f"N-gram model is missing orders {missing}")

        frozen = {}
        for order in NGRAM_ORDERS:
            table = dict(tables[order])
            if table and min(table.values()) <= unseen_log_probability:
                raise ModelLoadError(
                    f"Order {order} has log-probabilities at or below the unseen floor "
                    f"({unseen_log_probability:.3f})"
                )
            frozen[order] = MappingProxyType(table)

        self._tables = MappingProxyType(frozen)
        self._unseen_log_probability = unseen_log_probability

    @classmethod
    def from_frequencies(cls, frequencies: Mapping, unseen_log_probability: float = UNSEEN_NGRAM_LOG_PROBABILITY) -> "NgramModel":
        """
        Build a model from raw n-gram counts.

        Args:
            frequencies: Mapping order -> {ngram: count}. Orders may be given as
                ints or as their string form (as read from JSON).
            unseen_log_probability: Floor for unseen n-grams.

        Returns:
            NgramModel: The frozen model.
        """
        by_order = {}
        for order_key, counts in frequencies.items():
            try:
                order = int(order_key)
            except (TypeError, ValueError):
                raise ModelLoadError(f"Invalid n-gram order: {order_key!r}")
            if order not in NGRAM_ORDERS:
                raise ModelLoadError(f"Unsupported n-gram order: {order}")
            by_order[order] = counts

        tables = {}
        for order in NGRAM_ORDERS:
            counts = by_order.get(order)
            if counts is None:
                raise ModelLoadError(f"Frequency table for order {order} is missing")
            tables[order] = cls._relative_log_frequencies(order, counts)

        return cls(tables, unseen_log_probability=unseen_log_probability)

    @staticmethod
    def _relative_log_frequencies(order, counts):
        table = {}
        for ngram, count in counts.items():
            # Tables are stored lower case, like the text units they are matched against
            key = ngram.lower() if isinstance(ngram, str) else None
            if key is None or len(key) != order:
                raise ModelLoadError(f"N-gram {ngram!r} does not have length {order}")
            if not isinstance(count, (int, float)) or isinstance(count, bool) or count <= 0:
                raise ModelLoadError(f"N-gram {ngram!r} has invalid count {count!r}")
            table[key] = table.get(key, 0) + count

        total = float(sum(table.values()))
        return {ngram: math.log(count / total) for ngram, count in table.items()}

    @property
    def orders(self):
        return tuple(self._tables.keys())

    @property
    def unseen_log_probability(self):
        return self._unseen_log_probability

    def log_probability(self, ngram: str) -> float:
        """
        Log-probability of an n-gram, or the unseen floor when the model has
        never observed it. Never fails for strings of a covered length.
        """
        table: Optional[Mapping[str, float]] = self._tables.get(len(ngram))
        if table is None:
            return self._unseen_log_probability
        return table.get(ngram, self._unseen_log_probability)

    def size(self, order: int) -> int:
        """Number of distinct n-grams of the given order."""
        table = self._tables.get(order)
        return len(table) if table is not None else 0

    def table(self, order: int) -> Dict[str, float]:
        """Copy of the log-probability table of one order."""
        return dict(self._tables.get(order, {}))

    def __contains__(self, ngram):
        table = self._tables.get(len(ngram))
        return table is not None and ngram in table

    def __repr__(self):
        sizes = ', '.join(f"{order}:{len(table)}" for order, table in self._tables.items())
        return f"NgramModel({sizes})"
