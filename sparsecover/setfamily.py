"""Bit sets held as integers, and families of equally sized bit sets."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import IO

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
_LOOP_MASK = 0x03FF
_ACTIVE_FLAG = 0x2000
_LONGEST_TEXT = 120


def _members(bits: int) -> Iterator[int]:
    """Yield the indices of the set bits, ascending."""
    while bits:
        low = bits & -bits
        yield low.bit_length() - 1
        bits ^= low


def bit_index(word: int) -> int:
    """Index of the lowest set bit of ``word``, or -1 if it is zero."""
    if word == 0:
        return -1
    return (word & -word).bit_length() - 1


def set_ord(bits: int) -> int:
    """Number of elements in the set."""
    return bits.bit_count()


def set_dist(a: int, b: int) -> int:
    """Number of elements the two sets have in common."""
    return (a & b).bit_count()


def full_set(size: int) -> int:
    """The set holding every element below ``size``."""
    if size < 0:
        raise ValueError(f"negative set size {size}")
    return (1 << size) - 1


def format_set(bits: int, size: int) -> str:
    """The elements below ``size`` as ``[a,b,...]``, cut short with ``...`` when long."""
    text = "["
    first = True
    for i in _members(bits):
        if i >= size:
            break
        if not first:
            text += ","
        first = False
        text += str(i)
        if len(text) > _LONGEST_TEXT - 15:
            text += "..."
            break
    return text + "]"


def bit_vector(bits: int, size: int) -> str:
    """The set as a string of ``size`` characters ``1`` and ``0``."""
    return "".join("1" if bits >> i & 1 else "0" for i in range(size))


def adjust_counts(bits: int, counts: MutableSequence[int], weight: int) -> None:
    """Add ``weight`` to ``counts[i]`` for every element ``i`` of the set."""
    for i in _members(bits):
        counts[i] += weight


def _word_count(size: int) -> int:
    return max(1, (size + _WORD_BITS - 1) // _WORD_BITS)


class SetFamily:
    """An ordered collection of sets over ``range(size)``.

    Each set carries an *active* flag; sets start out inactive.
    """

    def __init__(self, size: int, sets: Iterable[int] = ()) -> None:
        if size < 0:
            raise ValueError(f"negative set size {size}")
        self._size = size
        self._sets: list[int] = []
        self._active: list[bool] = []
        for bits in sets:
            self.add(bits)

    @property
    def size(self) -> int:
        """Number of possible elements in each set."""
        return self._size

    def _check(self, bits: int) -> int:
        bits = int(bits)
        if bits < 0 or bits >> self._size:
            raise ValueError(f"set {bits:#x} does not fit in {self._size} elements")
        return bits

    def _append(self, bits: int, active: bool) -> None:
        self._sets.append(bits)
        self._active.append(active)

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[int]:
        return iter(self._sets)

    def __getitem__(self, index: int) -> int:
        return self._sets[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SetFamily):
            return NotImplemented
        return self._size == other._size and self._sets == other._sets

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SetFamily({self._size}, {self._sets!r})"

    def add(self, bits: int) -> None:
        """Append an inactive set."""
        self._append(self._check(bits), False)

    def delete(self, index: int) -> None:
        """Remove the set at ``index``, moving the last set into its place."""
        pos = range(len(self._sets))[index]
        last_bits = self._sets.pop()
        last_active = self._active.pop()
        if pos < len(self._sets):
            self._sets[pos] = last_bits
            self._active[pos] = last_active

    def copy(self) -> SetFamily:
        """Return an independent copy, flags included."""
        result = SetFamily(self._size)
        result._sets = list(self._sets)
        result._active = list(self._active)
        return result

    def union_all(self) -> int:
        """The union of all sets."""
        result = 0
        for bits in self._sets:
            result |= bits
        return result

    def intersection_all(self) -> int:
        """The intersection of all sets; the full set if there are none."""
        result = full_set(self._size)
        for bits in self._sets:
            result &= bits
        return result

    def activate_all(self) -> None:
        """Mark every set active."""
        self._active = [True] * len(self._sets)

    def set_active(self, index: int, active: bool) -> None:
        """Set the active flag of the set at ``index``."""
        self._active[index] = bool(active)

    def drop_inactive(self) -> None:
        """Remove every inactive set, keeping the order of the others."""
        kept = [(b, a) for b, a in zip(self._sets, self._active) if a]
        self._sets = [b for b, _ in kept]
        self._active = [a for _, a in kept]

    def _same_size(self, other: SetFamily, what: str) -> None:
        if self._size != other._size:
            raise ValueError(f"{what}: set size mismatch ({self._size} vs {other._size})")

    def join(self, other: SetFamily) -> SetFamily:
        """A new family holding the sets of this family followed by those of ``other``."""
        self._same_size(other, "join")
        result = self.copy()
        result._sets.extend(other._sets)
        result._active.extend(other._active)
        return result

    def append(self, other: SetFamily) -> None:
        """Add the sets of ``other`` to the end of this family."""
        self._same_size(other, "append")
        self._sets.extend(other._sets)
        self._active.extend(other._active)

    def column_counts(self) -> list[int]:
        """For each element, the number of sets holding it."""
        counts = [0] * self._size
        for bits in self._sets:
            adjust_counts(bits, counts, 1)
        return counts

    def column_counts_restricted(self, restrict: int) -> list[int]:
        """Column counts over ``restrict`` only, each set weighted 1024 // (order - 1).

        A set of a single element has no defined weight and raises ZeroDivisionError.
        """
        counts = [0] * self._size
        for bits in self._sets:
            weight = 1024 // (set_ord(bits) - 1)
            adjust_counts(bits & restrict, counts, weight)
        return counts

    def delete_columns(self, first: int, last: int) -> SetFamily:
        """A new family without columns ``first`` to ``last`` inclusive."""
        return self.shift_columns(first, last - first + 1)

    def add_columns(self, first: int, n: int) -> SetFamily:
        """A new family with ``n`` empty columns inserted at ``first``."""
        if first == self._size:
            if n < 0:
                raise ValueError(f"cannot add {n} columns")
            result = self.copy()
            result._size += n
            return result
        return self.shift_columns(first, -n)

    def shift_columns(self, first: int, n: int) -> SetFamily:
        """Delete ``n`` columns from ``first`` on, or insert ``-n`` empty ones if ``n`` is negative."""
        if first < 0 or first > self._size:
            raise ValueError(f"column {first} outside 0..{self._size}")
        if n > 0 and first + n > self._size:
            raise ValueError(f"cannot delete {n} columns from column {first}")
        result = SetFamily(self._size - n)
        start = first + n if n > 0 else first
        low_mask = (1 << first) - 1
        for bits in self._sets:
            moved = (bits & low_mask) | ((bits >> start) << (start - n))
            result._append(moved, False)
        return result

    def copy_column(self, dst_col: int, src: SetFamily, src_col: int) -> None:
        """Set column ``dst_col`` in each set wherever the matching set of ``src`` has ``src_col``."""
        if not 0 <= dst_col < self._size:
            raise ValueError(f"column {dst_col} outside 0..{self._size - 1}")
        if len(self._sets) < len(src._sets):
            raise ValueError("destination family has fewer sets than the source")
        if src_col < 0:
            raise ValueError(f"negative column {src_col}")
        for k, bits in enumerate(src._sets):
            if bits >> src_col & 1:
                self._sets[k] |= 1 << dst_col

    def compress(self, keep: int) -> SetFamily:
        """A new family holding only the columns in ``keep``, renumbered in order."""
        result = SetFamily(set_ord(keep))
        result._sets = [0] * len(self._sets)
        result._active = [False] * len(self._sets)
        kept = [i for i in _members(keep) if i < self._size]
        for bcol, col in enumerate(kept):
            result.copy_column(bcol, self, col)
        return result

    def transpose(self) -> SetFamily:
        """The bit matrix with rows and columns exchanged."""
        result = SetFamily(len(self._sets))
        rows = [0] * self._size
        for i, bits in enumerate(self._sets):
            for j in _members(bits):
                rows[j] |= 1 << i
        for bits in rows:
            result._append(bits, False)
        return result

    def permute(self, columns: Sequence[int]) -> SetFamily:
        """A new family whose column ``j`` is column ``columns[j]`` of this one."""
        if any(c < 0 for c in columns):
            raise ValueError("negative column in permutation")
        result = SetFamily(len(columns))
        for bits in self._sets:
            moved = 0
            for j, col in enumerate(columns):
                if bits >> col & 1:
                    moved |= 1 << j
            result._append(moved, False)
        return result

    def format(self) -> str:
        """One ``A[i] = [elements]`` line per set."""
        return "".join(
            f"A[{i}] = {format_set(bits, self._size)}\n" for i, bits in enumerate(self._sets)
        )

    def format_bits(self) -> str:
        """One ``[   i] 0101...`` line per set."""
        return "".join(
            f"[{i:4d}] {bit_vector(bits, self._size)}\n" for i, bits in enumerate(self._sets)
        )

    def write(self, fp: IO[str]) -> None:
        """Write the family as hexadecimal words.

        The header holds the set count and size; each set then starts with a
        word giving its number of data words, with 0x2000 marking an active set.
        """
        nwords = _word_count(self._size)
        if nwords > _LOOP_MASK:
            raise ValueError(f"sets of {self._size} elements are too large to write")
        fp.write(f"{len(self._sets)} {self._size}\n")
        for bits, active in zip(self._sets, self._active):
            words = [nwords | (_ACTIVE_FLAG if active else 0)]
            words.extend((bits >> (_WORD_BITS * k)) & _WORD_MASK for k in range(nwords))
            parts = []
            for j, word in enumerate(words):
                parts.append(f"{word:x} ")
                if (j + 1) % 8 == 0 and j != nwords:
                    parts.append("\n\t")
            fp.write("".join(parts) + "\n")
        flush = getattr(fp, "flush", None)
        if flush is not None:
            flush()

    @classmethod
    def read(cls, fp: IO[str]) -> SetFamily:
        """Read a family written by :meth:`write`."""
        tokens = iter(fp.read().split())

        def next_int(base: int) -> int:
            try:
                text = next(tokens)
            except StopIteration:
                raise ValueError("unexpected end of set family") from None
            try:
                return int(text, base)
            except ValueError as exc:
                raise ValueError(f"bad number {text!r}") from exc

        count = next_int(10)
        size = next_int(10)
        if count < 0 or size < 0:
            raise ValueError(f"bad set family header {count} {size}")
        family = cls(size)
        for _ in range(count):
            head = next_int(16)
            bits = 0
            for k in range(head & _LOOP_MASK):
                bits |= (next_int(16) & _WORD_MASK) << (_WORD_BITS * k)
            family._append(family._check(bits), bool(head & _ACTIVE_FLAG))
        return family

    @classmethod
    def read_bits(cls, fp: IO[str]) -> SetFamily:
        """Read ``rows cols`` then one line of ``cols`` characters ``0``/``1`` per set."""
        text = fp.read()
        header = re.match(r"\s*(-?\d+)\s+(-?\d+)\s*", text)
        if header is None:
            raise ValueError("Error reading set family header")
        rows, cols = int(header.group(1)), int(header.group(2))
        if rows < 0 or cols < 0:
            raise ValueError(f"bad set family header {rows} {cols}")
        family = cls(cols)
        pos = header.end()
        for _ in range(rows):
            line = text[pos:pos + cols]
            if len(line) != cols or set(line) - {"0", "1"}:
                raise ValueError("Error reading set family")
            bits = 0
            for j, char in enumerate(line):
                if char == "1":
                    bits |= 1 << j
            pos += cols
            if text[pos:pos + 1] != "\n":
                raise ValueError("Error reading set family (at end of line)")
            pos += 1
            family._append(bits, False)
        return family