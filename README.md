# rscodec

Systematic Reed-Solomon erasure coding over the finite field GF(2^8).

A message of *k* bytes is treated as the values of a polynomial at the points
1, 2, …, *k*. Parity bytes are the same polynomial evaluated at the following
points (each point is taken modulo 256). The codeword is the message followed
by its parity bytes. Any *k* bytes of the codeword, together with their
positions, are enough to recover the message by Lagrange interpolation.

## Modules

- `rscodec.field.GaloisField(primitive_poly)`: GF(2^8) arithmetic on ints
  0..255 with `add`, `sub`, `mul`, `div`, `pow` (negative powers allowed) and
  `inv`. `primitive_poly` is the low byte of the reduction polynomial, e.g.
  `0x1D`. Dividing a non-zero value by zero, or inverting zero, raises
  `ZeroDivisionError`; values outside 0..255 raise `ValueError`.
- `rscodec.lagrange.LagrangeEncoder(field, data_shards, parity_shards)`:
  `encode(message)` computes parity by Lagrange interpolation.
  `encode_efficient(message)` evaluates the polynomial whose *coefficients*
  are the message bytes (Horner's method), so its parity differs from
  `encode`. `reconstruct_data(shards, indices)` recovers the message.
- `rscodec.lagrange.LagrangeDecoder(field, data_shards, total_shards)`:
  `decode(shards, indices)` and `decode_last_shards(encoded)`.
- `rscodec.vandermonde.VandermondeEncoder(field, data_shards, parity_shards)`:
  `encode(message)` gives the same codeword as `LagrangeEncoder.encode`. It
  also builds the Vandermonde rows `1, x, x^2, …` for each parity point,
  kept in `vandermonde_matrix`; `format_matrix()` returns them as hex text.
- `rscodec.vandermonde.VandermondeDecoder(field, data_shards, total_shards)`:
  `decode(shards, indices)` and `decode_last_shards(encoded)`.
- `rscodec.fileio`: `read_message(path)`, `write_encoded(path, encoded,
  original_message)` and `write_encoded_default(path, encoded)` (which takes
  the first six bytes as the message). They raise `MessageFileError` on
  unreadable files, malformed JSON or bad hex values.

Encoders raise `ValueError` when the message length is not `data_shards`.
Decoders use only the first `data_shards` shards given; they raise
`ValueError` when fewer shards are given, or when the shard and index counts
differ, and `IndexError` for an index outside the codeword. The encoders and
decoders log their points and computed values at debug level on the
`rscodec` logger.

## Library use

```python
from rscodec.field import GaloisField
from rscodec.lagrange import LagrangeEncoder, LagrangeDecoder

field = GaloisField(0x1D)
encoder = LagrangeEncoder(field, data_shards=6, parity_shards=12)
codeword = encoder.encode(bytes([1, 2, 3, 4, 5, 6]))

decoder = LagrangeDecoder(field, data_shards=6, total_shards=18)
assert decoder.decode_last_shards(codeword) == bytes([1, 2, 3, 4, 5, 6])
```

## Command line

Input and output files are JSON, with bytes written as hex strings such as
`"0x1f"`. Entries that cannot be read as a hex byte are taken as 0. All
commands use the field constant `0x1D` and print their progress to standard
output.

Encoding reads `{"message": ["0x01", "0x02", ...]}`, uses the message length
as the number of data shards, adds 12 parity bytes and writes
`{"message": [...], "encoded": [...]}`:

```
rs-lagrange-encode message.json encoded.json
rs-vandermonde-encode message.json encoded.json
```

Decoding reads `{"message": [...], "start_index": 12}`, where `message` holds
consecutive codeword bytes and `start_index` (default 0) is the position of
the first of them. It assumes 6 data shards out of 18, uses the first 6 bytes
given, and writes `{"encoded_shards": [...], "decoded_data": [...]}`:

```
rs-lagrange-decode shards.json decoded.json
rs-vandermonde-decode shards.json decoded.json
```

Each command exits with 0 on success, 1 when a file cannot be read or
written or decoding fails, and 2 (after printing a usage line) when given
fewer than two paths.

## What it does not do

This is erasure coding only: the positions of the surviving bytes must be
known. Nothing detects or corrects corrupted bytes, and decoders trust the
shards and indices they are given. The decode commands are fixed to 6 data
shards out of 18 and take a single run of consecutive positions.