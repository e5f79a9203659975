"""Reed-Solomon coding over GF(2^8) by Lagrange interpolation.

Shard ``i`` is the value of the message polynomial at the point ``i + 1``.
The encoder is systematic: the first ``data_shards`` shards are the message.
Any ``data_shards`` distinct shards are enough to recover it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from rscodec.field import GaloisField

logger = logging.getLogger(__name__)


def _evaluation_points(total_shards: int) -> bytes:
    """Consecutive points 1, 2, 3, ... truncated to a byte, one per shard."""
    return bytes((i + 1) & 0xFF for i in range(total_shards))


def _check_counts(**counts: int) -> None:
    for name, value in counts.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative, got {value}")


def _interpolate_at(
    field: GaloisField,
    xs: Sequence[int],
    ys: Sequence[int],
    target: int,
    *,
    skip_zero: bool,
) -> int:
    """Evaluate at ``target`` the polynomial through the points (xs[j], ys[j])."""
    result = 0
    for j, (x_j, y_j) in enumerate(zip(xs, ys)):
        if skip_zero and y_j == 0:
            continue
        term = y_j
        for k, x_k in enumerate(xs):
            if j == k:
                continue
            factor = field.div(field.sub(target, x_k), field.sub(x_j, x_k))
            term = field.mul(term, factor)
        result = field.add(result, term)
    return result


def _select(
    shards: Iterable[int],
    indices: Iterable[int],
    data_shards: int,
    total_shards: int,
) -> tuple[bytes, list[int]]:
    shard_bytes = bytes(shards)
    index_list = list(indices)
    if len(shard_bytes) < data_shards or len(shard_bytes) != len(index_list):
        raise ValueError("Not enough shards to reconstruct data")
    chosen = index_list[:data_shards]
    for index in chosen:
        if not 0 <= index < total_shards:
            raise IndexError(f"shard index {index} out of range 0..{total_shards - 1}")
    return shard_bytes[:data_shards], chosen


class LagrangeEncoder:
    """Systematic Reed-Solomon encoder using consecutive evaluation points."""

    def __init__(self, field: GaloisField, data_shards: int, parity_shards: int) -> None:
        _check_counts(data_shards=data_shards, parity_shards=parity_shards)
        self.field = field
        self.data_shards = data_shards
        self.parity_shards = parity_shards
        self.total_shards = data_shards + parity_shards
        self.eval_points = _evaluation_points(self.total_shards)

    def _check_message(self, message: Iterable[int]) -> bytes:
        data = bytes(message)
        if len(data) != self.data_shards:
            raise ValueError("Message length must equal the number of data shards")
        return data

    def encode(self, message: Iterable[int]) -> bytes:
        """Return the message followed by parity shards from Lagrange interpolation."""
        data = self._check_message(message)
        data_points = self.eval_points[: self.data_shards]
        parity = bytes(
            _interpolate_at(self.field, data_points, data, x, skip_zero=False)
            for x in self.eval_points[self.data_shards :]
        )
        return data + parity

    def encode_efficient(self, message: Iterable[int]) -> bytes:
        """Return the message followed by parity shards from Horner evaluation.

        Here the message bytes are the polynomial's coefficients, lowest degree
        first, so the parity differs from :meth:`encode`.
        """
        data = self._check_message(message)
        parity = bytearray()
        for x in self.eval_points[self.data_shards :]:
            value = 0
            for coefficient in reversed(data):
                value = self.field.add(self.field.mul(value, x), coefficient)
            parity.append(value)
        return data + bytes(parity)

    def reconstruct_data(self, shards: Iterable[int], indices: Iterable[int]) -> bytes:
        """Recover the message from any ``data_shards`` shards and their indices."""
        chosen, chosen_indices = _select(shards, indices, self.data_shards, self.total_shards)
        xs = [self.eval_points[index] for index in chosen_indices]
        return bytes(
            _interpolate_at(self.field, xs, chosen, target, skip_zero=False)
            for target in self.eval_points[: self.data_shards]
        )


class LagrangeDecoder:
    """Recovers a message from shards made by :class:`LagrangeEncoder`."""

    def __init__(self, field: GaloisField, data_shards: int, total_shards: int) -> None:
        _check_counts(data_shards=data_shards, total_shards=total_shards)
        self.field = field
        self.data_shards = data_shards
        self.total_shards = total_shards
        self.eval_points = _evaluation_points(total_shards)
        logger.debug("Reed-Solomon decoder evaluation points:")
        for i, point in enumerate(self.eval_points):
            logger.debug("  Point[%d] = 0x%02x", i, point)

    def decode(self, shards: Iterable[int], indices: Iterable[int]) -> bytes:
        """Recover the message from any ``data_shards`` shards and their indices.

        Only the first ``data_shards`` shards given are used.
        """
        chosen, chosen_indices = _select(shards, indices, self.data_shards, self.total_shards)
        xs = [self.eval_points[index] for index in chosen_indices]
        decoded = bytearray()
        for position, target in enumerate(self.eval_points[: self.data_shards]):
            value = _interpolate_at(self.field, xs, chosen, target, skip_zero=True)
            logger.debug("Decoded data at position %d: 0x%02x", position, value)
            decoded.append(value)
        return bytes(decoded)

    def decode_last_shards(self, encoded: Iterable[int]) -> bytes:
        """Recover the message from the last ``data_shards`` shards of a codeword."""
        data = bytes(encoded)
        if len(data) < self.total_shards:
            raise ValueError("Not enough shards in encoded data")
        start = self.total_shards - self.data_shards
        indices = range(start, self.total_shards)
        return self.decode(data[start:], indices)