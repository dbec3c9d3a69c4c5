"""Fixed-size binary records of gene samples: sorting, indexing and in-place edits."""

import argparse
import bisect
import heapq
import sys
from collections import Counter
from dataclasses import dataclass, replace
from functools import partial
from pathlib import Path
from typing import BinaryIO, Callable, Iterator, List, Optional, Sequence

from treebench.errors import StructureError

MAX_RESEARCHER_NAME = 20
RECORD = struct_format = None  # replaced below; kept for a single definition point
import struct as _struct  # noqa: E402

RECORD = _struct.Struct(f"<iif{MAX_RESEARCHER_NAME}s")
RECORD_SIZE = RECORD.size
RUN = 32
SPECIES = ("H_SAP", "M_MUS", "D_MEL", "E_COL", "A_THA")
DELETED_ID = -1
DELETED_NAME = "DELETED"

_READ_ERROR = "ERROR: Cannot open binary file for reading."
_RED = "\033[1;31m"
_RESET = "\033[0m"


def _encode_name(name: str) -> bytes:
    return name.encode("utf-8")[: MAX_RESEARCHER_NAME - 1]


@dataclass
class Sample:
    """One gene sample record as stored on disk (28 bytes, little-endian)."""

    sample_id: int
    species_code: int
    purity_score: float
    researcher: str = ""

    def pack(self) -> bytes:
        """Encode the record; the researcher name keeps at most 19 bytes."""
        return RECORD.pack(
            self.sample_id,
            self.species_code,
            self.purity_score,
            _encode_name(self.researcher),
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Sample":
        """Decode one record of exactly RECORD_SIZE bytes."""
        if len(data) != RECORD_SIZE:
            raise StructureError(
                f"ERROR: a record is {RECORD_SIZE} bytes, got {len(data)}."
            )
        sample_id, species_code, purity, raw = RECORD.unpack(data)
        name = raw.split(b"\0", 1)[0].decode("utf-8", "ignore")
        return cls(sample_id, species_code, purity, name)

    @property
    def deleted(self) -> bool:
        return self.sample_id == DELETED_ID

    def __str__(self) -> str:
        return (
            f"SampleID: {self.sample_id}, SpeciesCode: {self.species_code}, "
            f"Purity: {self.purity_score:g}, Researcher: {self.researcher}"
        )


def _code(sample: Sample) -> int:
    return sample.species_code


def _insertion_sorted(run: Sequence[Sample]) -> List[Sample]:
    result: List[Sample] = []
    for sample in run:
        bisect.insort_right(result, sample, key=_code)
    return result


def tim_sort(samples: Sequence[Sample]) -> List[Sample]:
    """Stable sort by species code: insertion-sorted runs of 32, merged pairwise."""
    runs = [
        _insertion_sorted(samples[start : start + RUN])
        for start in range(0, len(samples), RUN)
    ]
    while len(runs) > 1:
        runs = [
            list(heapq.merge(*runs[start : start + 2], key=_code))
            for start in range(0, len(runs), 2)
        ]
    return runs[0] if runs else []


def read_samples(path) -> List[Sample]:
    """Read every whole record of a binary sample file."""
    with open(path, "rb") as handle:
        return [
            Sample.unpack(chunk)
            for chunk in iter(partial(handle.read, RECORD_SIZE), b"")
            if len(chunk) == RECORD_SIZE
        ]


def write_samples(path, samples: Sequence[Sample]) -> None:
    """Write the records one after another."""
    with open(path, "wb") as handle:
        handle.writelines(sample.pack() for sample in samples)


def _open(path, mode: str, message: str) -> BinaryIO:
    try:
        return open(path, mode)
    except OSError as error:
        raise StructureError(message) from error


def _read_record(handle: BinaryIO, offset: int) -> Optional[Sample]:
    if offset < 0:
        return None
    handle.seek(offset * RECORD_SIZE)
    data = handle.read(RECORD_SIZE)
    if len(data) < RECORD_SIZE:
        return None
    return Sample.unpack(data)


class GeneBank:
    """Operations on a sample file addressed by record position."""

    def __init__(self) -> None:
        self.file_size = 0
        self.entry_bytes = RECORD_SIZE

    def sort(self, samples: List[Sample]) -> None:
        """Sort ``samples`` in place by species code."""
        if not samples:
            raise StructureError("ERROR: Empty file to sort!")
        self.file_size = len(samples)
        samples[:] = tim_sort(samples)

    def index_samples(self, samples: Sequence[Sample]) -> List[Optional[int]]:
        """Position of the first record of each species, or None if it has none."""
        index: List[Optional[int]] = [None] * len(SPECIES)
        for position, sample in enumerate(samples):
            code = sample.species_code
            if not 0 <= code < len(SPECIES):
                raise StructureError(f"ERROR: Invalid species code {code}")
            if index[code] is None:
                index[code] = position
        return index

    def search_sample(self, species_code: int, offset: int, path) -> bool:
        """Whether record ``offset`` exists and belongs to ``species_code``."""
        with _open(path, "rb", _READ_ERROR) as handle:
            record = _read_record(handle, offset)
        return record is not None and record.species_code == species_code

    def researcher(self, species_code: int, offset: int, path) -> str:
        """The researcher name of record ``offset``."""
        with _open(path, "rb", _READ_ERROR) as handle:
            record = _read_record(handle, offset)
        if record is None or record.species_code != species_code:
            raise StructureError(
                "Sample record doesn't exist! Can't display researcher name."
            )
        return record.researcher

    def _rewrite(
        self,
        species_code: int,
        offset: int,
        path,
        missing: str,
        open_error: str,
        change: Callable[[Sample], Sample],
    ) -> Sample:
        if not self.search_sample(species_code, offset, path):
            raise StructureError(missing)
        with _open(path, "r+b", open_error) as handle:
            record = _read_record(handle, offset)
            if record is None or record.species_code != species_code:
                raise StructureError(missing)
            updated = change(record)
            handle.seek(offset * RECORD_SIZE)
            handle.write(updated.pack())
        return Sample.unpack(updated.pack())

    def update_researcher(
        self, species_code: int, offset: int, new_name: str, path
    ) -> Sample:
        """Store a new researcher name (at most 19 bytes) and return the record."""
        return self._rewrite(
            species_code,
            offset,
            path,
            "Sample record to be updated doesn't exist!",
            "ERROR: Cannot open file for updating.",
            lambda record: replace(record, researcher=new_name),
        )

    def delete_sample(self, species_code: int, offset: int, path) -> Sample:
        """Mark record ``offset`` deleted and return the marked record."""
        return self._rewrite(
            species_code,
            offset,
            path,
            "Sample record to be deleted doesn't exist!",
            "ERROR: Cannot open file for deletion.",
            lambda record: replace(
                record, sample_id=DELETED_ID, researcher=DELETED_NAME
            ),
        )

    def sample_range(
        self, species_code: int, start: int, end: int, path
    ) -> List[Sample]:
        """Live records of ``species_code`` at positions start..end-1."""
        if start >= end:
            raise StructureError("ERROR: start index is larger than end index!")
        found: List[Sample] = []
        with _open(path, "rb", "ERROR: Cannot open file for reading range.") as handle:
            for position in range(start, end):
                record = _read_record(handle, position)
                if (
                    record is not None
                    and not record.deleted
                    and record.species_code == species_code
                ):
                    found.append(record)
        return found


def _report(error: Exception) -> None:
    print(f"{_RED}{error}{_RESET}")


def _position(index: Sequence[Optional[int]], sizes: Sequence[int], code: int, offset: int) -> int:
    base = index[code]
    if base is None or not 0 <= offset < sizes[code]:
        raise StructureError("ERROR: Invalid offset")
    return base + offset


def _for_each_species(index, sizes, offset: int, action: Callable[[int, int], None]) -> None:
    for code in range(len(SPECIES)):
        try:
            action(code, _position(index, sizes, code, offset))
        except StructureError as error:
            _report(error)


def _demo(bank: GeneBank, index, sizes, path: Path) -> None:
    def show(code: int, position: int) -> None:
        print(f"Researcher: {bank.researcher(code, position, path)}")

    def update(code: int, position: int) -> None:
        bank.update_researcher(code, position, "Carol", path)
        print("Researcher updated successfully.")

    def delete(code: int, position: int) -> None:
        bank.delete_sample(code, position, path)
        print("Sample deleted (marked) successfully.")

    print("-----------Printing the 53rd Sample from each species code")
    _for_each_species(index, sizes, 53, show)
    print()
    print("-----------Printing the 102nd Sample from each species code")
    _for_each_species(index, sizes, 102, show)
    print()
    print("----------------------Printing each record with the researcher name updated to 'Carol'")
    _for_each_species(index, sizes, 102, update)
    _for_each_species(index, sizes, 102, show)
    print()
    print("-----------Printing the 13th Sample from each species code")
    _for_each_species(index, sizes, 13, show)
    print()
    print("----------------------Printing after deletion")
    _for_each_species(index, sizes, 13, delete)
    _for_each_species(index, sizes, 13, show)
    print()
    print("-----------Printing the last 20 records from each species code")
    for code, base in enumerate(index):
        if base is None:
            continue
        start = base + max(sizes[code] - 20, 0)
        try:
            for record in bank.sample_range(code, start, base + sizes[code], path):
                print(record)
        except StructureError as error:
            _report(error)
        print()


_MENU = (
    "\n\n---------------- Please choose from 1 - 4 for Sample Records ---------------- \n"
    "1: Print Researcher Name\n"
    "2. Update Researcher Name\n"
    "3. Delete Sample Record\n"
    "4. Print certain range of Samples\n"
    "0. Exit"
)


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    token = next(tokens, None)
    if token is None:
        raise EOFError
    return token


def _next_int(tokens: Iterator[str], prompt: str = "") -> int:
    if prompt:
        print(prompt, end="")
    token = _next_token(tokens)
    try:
        return int(token)
    except ValueError:
        raise StructureError(f"ERROR: '{token}' is not a number") from None


def _ask_code(tokens: Iterator[str], sizes: Sequence[int]) -> int:
    for code, name in enumerate(SPECIES):
        print(f"{name} species({code}) offset range is: 0-{sizes[code] - 1}")
    print("\n")
    code = _next_int(tokens, "Enter Sample's species code (0, 1, 2, 3 or 4): ")
    if not 0 <= code < len(SPECIES):
        print("ERROR: Invalid species code")
        raise StructureError("Error: Invalid species No!")
    return code


def _menu(bank: GeneBank, index, sizes, path: Path) -> int:
    tokens = _tokens()
    try:
        while True:
            print(_MENU)
            choice = _next_int(tokens)
            if choice == 0:
                return 0
            if choice in (1, 2, 3):
                code = _ask_code(tokens, sizes)
                offset = _next_int(tokens, "Enter the offset: ")
                position = _position(index, sizes, code, offset)
                if choice == 1:
                    print(f"Researcher: {bank.researcher(code, position, path)}")
                elif choice == 2:
                    print("Enter a 20 char name to update record: ", end="")
                    bank.update_researcher(code, position, _next_token(tokens), path)
                    print("Researcher updated successfully.")
                else:
                    bank.delete_sample(code, position, path)
                    print("Sample deleted (marked) successfully.")
            elif choice == 4:
                code = _ask_code(tokens, sizes)
                base = index[code]
                if base is None:
                    raise StructureError("ERROR: Invalid offset")
                while True:
                    start = _next_int(tokens, "Enter the start of range: ")
                    end = _next_int(tokens, "Enter the end of range: ")
                    if start >= 0 and end <= sizes[code]:
                        break
                    print("Please re-enter a valid range")
                for record in bank.sample_range(code, base + start, base + end, path):
                    print(record)
            else:
                print("Invalid choice!")
    except StructureError as error:
        _report(error)
        return 0
    except EOFError:
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort a sample file into Sorted_<name>, run a demonstration, then a menu."""
    parser = argparse.ArgumentParser(description="Manage a binary gene sample file.")
    parser.add_argument("file")
    args = parser.parse_args(argv)
    source = Path(args.file)
    try:
        samples = read_samples(source)
    except OSError:
        _report(StructureError(_READ_ERROR))
        return 1

    bank = GeneBank()
    try:
        bank.sort(samples)
        index = bank.index_samples(samples)
    except StructureError as error:
        _report(error)
        return 1

    sorted_path = source.with_name("Sorted_" + source.name)
    write_samples(sorted_path, samples)
    counts = Counter(sample.species_code for sample in samples)
    sizes = [counts.get(code, 0) for code in range(len(SPECIES))]

    _demo(bank, index, sizes, sorted_path)
    print("\n")
    return _menu(bank, index, sizes, sorted_path)


if __name__ == "__main__":
    sys.exit(main())