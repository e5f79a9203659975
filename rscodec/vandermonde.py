"""Reed-Solomon coding over GF(2^8) built around a Vandermonde matrix.

Evaluation points are the consecutive values 1, 2, 3, ... one per shard.
The encoder is systematic. It keeps the message as the first
``data_shards`` shards. Each parity shard is the value, at that shard's
point, of the polynomial through the message shards. The Vandermonde rows
for the parity points are built and kept for inspection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from rscodec.field import GaloisField
from rscodec.lagrange import _check_counts, _evaluation_points, _interpolate_at, _select

logger = logging.getLogger(__name__)


class VandermondeEncoder:
    """Systematic Reed-Solomon encoder holding a Vandermonde parity matrix."""

    def __init__(self, field: GaloisField, data_shards: int, parity_shards: int) -> None:
        _check_counts(data_shards=data_shards, parity_shards=parity_shards)
        self.field = field
        self.data_shards = data_shards
        self.parity_shards = parity_shards
        self.total_shards = data_shards + parity_shards
        self.alpha_points = _evaluation_points(self.total_shards)
        logger.debug("Vandermonde evaluation points (alpha points):")
        for i, point in enumerate(self.alpha_points):
            logger.debug("  Point[%d] = 0x%02x", i, point)
        self.vandermonde_matrix = self._build_matrix()

    def _build_matrix(self) -> tuple[bytes, ...]:
        """One row per parity point x: 1, x, x^2, ..., x^(data_shards - 1)."""
        rows = []
        for x in self.alpha_points[self.data_shards :]:
            row = bytes(
                1 if power == 0 else self.field.pow(x, power)
                for power in range(self.data_shards)
            )
            rows.append(row)
        return tuple(rows)

    def format_matrix(self) -> str:
        """Return the parity rows of the Vandermonde matrix as hex text."""
        lines = ["Vandermonde Matrix:"]
        for i, row in enumerate(self.vandermonde_matrix):
            cells = " ".join(f"0x{value:02x}" for value in row)
            lines.append(f"Row {i}: [{cells}]")
        return "\n".join(lines)

    def encode(self, message: Iterable[int]) -> bytes:
        """Return the message followed by its parity shards."""
        data = bytes(message)
        if len(data) != self.data_shards:
            raise ValueError("Message length must equal the number of data shards")
        data_points = self.alpha_points[: self.data_shards]
        parity = bytearray()
        for position, x in enumerate(self.alpha_points[self.data_shards :], start=self.data_shards):
            value = _interpolate_at(self.field, data_points, data, x, skip_zero=True)
            logger.debug("Vandermonde encoding at position %d: 0x%02x", position, value)
            parity.append(value)
        return data + bytes(parity)


class VandermondeDecoder:
    """Recovers a message from shards made by :class:`VandermondeEncoder`."""

    def __init__(self, field: GaloisField, data_shards: int, total_shards: int) -> None:
        _check_counts(data_shards=data_shards, total_shards=total_shards)
        self.field = field
        self.data_shards = data_shards
        self.total_shards = total_shards
        self.alpha_points = _evaluation_points(total_shards)
        logger.debug("Vandermonde decoder evaluation points:")
        for i, point in enumerate(self.alpha_points):
            logger.debug("  Point[%d] = 0x%02x", i, point)

    def decode(self, shards: Iterable[int], indices: Iterable[int]) -> bytes:
        """Recover the message from any ``data_shards`` shards and their indices.

        Only the first ``data_shards`` shards given are used.
        """
        chosen, chosen_indices = _select(shards, indices, self.data_shards, self.total_shards)
        xs = [self.alpha_points[index] for index in chosen_indices]
        decoded = bytearray()
        for position, target in enumerate(self.alpha_points[: self.data_shards]):
            value = _interpolate_at(self.field, xs, chosen, target, skip_zero=True)
            logger.debug("Vandermonde decoded data at position %d: 0x%02x", position, value)
            decoded.append(value)
        return bytes(decoded)

    def decode_last_shards(self, encoded: Iterable[int]) -> bytes:
        """Recover the message from the last ``data_shards`` shards of a codeword."""
        data = bytes(encoded)
        if len(data) < self.total_shards:
            raise ValueError("Not enough shards in encoded data")
        start = self.total_shards - self.data_shards
        return self.decode(data[start:], range(start, self.total_shards))