"""Interactive menu comparing a trie and a hash map over county data."""

from __future__ import annotations

import argparse
import re
import sys
import time
from dataclasses import dataclass
from typing import TextIO

from countysearch.hashmap import HashMap
from countysearch.trie import Trie

DEFAULT_DATA_FILE = "county_demographics.csv"
_WHITESPACE = " \t\n\v\f\r"
_POPULATION_COLUMN = 31
_EXIT_CHOICE = 9
_EMPTY_DATASET = "Dataset is empty. Please load a dataset first."
_WORD_PATTERN = re.compile(r"\S+")
_INTEGER = re.compile(r"[+-]?\d+")


@dataclass(frozen=True)
class CountyData:
    """One county row: name, state and 2020 population."""

    county_name: str
    state_name: str
    population: str


def trim(text: str) -> str:
    """Strip surrounding whitespace, then one pair of enclosing double quotes."""
    stripped = text.strip(_WHITESPACE)
    if len(stripped) >= 2 and stripped[0] == '"' and stripped[-1] == '"':
        return stripped[1:-1]
    return stripped


def load_data(filename: str) -> list[CountyData]:
    """Read county rows from a CSV file, skipping the header line.

    Raises OSError when the file cannot be opened.
    """
    rows: list[CountyData] = []
    with open(filename, encoding="utf-8", newline="") as handle:
        next(handle, None)
        for line in handle:
            fields = line.rstrip("\r\n").split(",")
            county = trim(fields[0]) if fields else ""
            state = trim(fields[1]) if len(fields) > 1 else ""
            population = (
                trim(fields[_POPULATION_COLUMN]) if len(fields) > _POPULATION_COLUMN else ""
            )
            if county and state:
                rows.append(CountyData(county, state, population))
    return rows


class _Input:
    """Reads whitespace-separated words and whole lines from one stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> None:
        line = self._stream.readline()
        if not line:
            raise EOFError
        self._buffer += line

    def _skip_whitespace(self) -> None:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return
            self._fill()

    def word(self) -> str:
        self._skip_whitespace()
        match = _WORD_PATTERN.match(self._buffer)
        assert match is not None
        self._buffer = self._buffer[match.end():]
        return match.group()

    def line(self) -> str:
        if not self._buffer:
            self._fill()
        text, _, self._buffer = self._buffer.partition("\n")
        return text.rstrip("\r")

    def line_after_whitespace(self) -> str:
        self._skip_whitespace()
        return self.line()

    def ignore_line(self) -> None:
        _, _, self._buffer = self._buffer.partition("\n")


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class CountyApp:
    """Menu-driven session holding a dataset, a trie and a hash map."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        data_file: str = DEFAULT_DATA_FILE,
    ) -> None:
        self._input = _Input(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self._data_file = data_file
        self.dataset: list[CountyData] = []
        self.trie = Trie()
        self.hashmap: HashMap[str, str] = HashMap()

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _menu(self) -> None:
        for line in (
            "\n=============== Trie vs. Hashmap Menu ===============",
            "1. Load dataset from file",
            "2. Load into Trie",
            "3. Load into Hashmap ",
            "4. Insert new Trie entry",
            "5. Insert new Hashmap entry",
            "6. Search for exact match in Trie",
            "7. Search for prefix match in Trie",
            "8. Search for exact match in Hashmap",
            "9. Exit",
            "=====================================================",
            "Please enter a number from 1-9 as your choice: ",
        ):
            self._say(line)

    def _read_choice(self) -> int:
        word = self._input.word()
        self._input.ignore_line()
        match = _INTEGER.match(word)
        return int(match.group()) if match else 0

    def _confirm(self) -> bool:
        return self._input.word()[0] == "y"

    def run(self) -> int:
        """Run the menu loop until the user exits or input ends; return 0."""
        choice = 0
        try:
            while choice != _EXIT_CHOICE:
                self._menu()
                choice = self._read_choice()
                self._dispatch(choice)
        except EOFError:
            pass
        return 0

    def _dispatch(self, choice: int) -> None:
        needs_data = {
            2: self._load_trie,
            3: self._load_hashmap,
            4: self._trie_insert,
            5: self._hashmap_insert,
            6: self._trie_exact_prompt,
            7: self._trie_prefix_prompt,
            8: self._hashmap_search_prompt,
        }
        if choice == 1:
            self._load_dataset()
        elif choice in needs_data:
            if not self.dataset:
                self._say(_EMPTY_DATASET)
            else:
                needs_data[choice]()
        elif choice == _EXIT_CHOICE:
            self._say("Exiting...")
        elif choice == 10:
            if self.trie.is_empty():
                self._say("The countyTrie is currently empty.")
            else:
                self._say("The countyTrie contains data.")
        else:
            self._say("Invalid menu choice, please enter a valid number (1-9) from the menu.")

    def _load_dataset(self) -> None:
        try:
            self.dataset = load_data(self._data_file)
        except OSError:
            self.dataset = []
            self._say(f"Error: Could not open file {self._data_file}")
        self._say("Loading dataset...")
        if self.dataset:
            self._say(f"Successfully loaded {len(self.dataset)} entries.")

    def _load_trie(self) -> None:
        self._say("Inserting All County Data...")
        start = time.perf_counter()
        for row in self.dataset:
            self.trie.insert(row.county_name, row.state_name, row.population)
        elapsed = _elapsed_ms(start)
        self._say(f"Total Insertion Time: {elapsed} ms")
        self._say(f"Average Insertion Time: {elapsed / len(self.dataset):g} ms")

    def _load_hashmap(self) -> None:
        self._say("Testing insertion...")
        start = time.perf_counter()
        for row in self.dataset:
            self.hashmap.insert(row.county_name, row.state_name)
        elapsed = _elapsed_ms(start)
        self._say(f"Total insertion time: {elapsed} ms")
        self._say(f"Average insertion time: {elapsed / len(self.dataset):g} ms per entry")
        self._say(self.hashmap.format_stats())

    def _trie_insert(self) -> None:
        self._say("\nPlease input the requested county details")
        self._say("Enter County Name: ")
        name = self._input.line_after_whitespace()
        self._say("Enter County State (Format: XX): ")
        state = self._input.word()
        self._say("Enter County Population: ")
        population = self._input.word()
        self._say("Inserting New County...")
        start = time.perf_counter()
        self.trie.insert(name, state, population)
        self._say(f"Total Insertion Time {_elapsed_ms(start)} ms ")
        self._say("Insertion Complete")

    def _hashmap_insert(self) -> None:
        self._say("\nPlease input the requested county details")
        self._say("Enter County Name: ")
        name = self._input.line_after_whitespace()
        self._say("Enter County State (Format: XX): ")
        state = self._input.word()
        self._say("Inserting New County...")
        start = time.perf_counter()
        self.hashmap.insert(name, state)
        self._say(f"Total insertion time: {_elapsed_ms(start)} ms")

    def _trie_exact_prompt(self) -> None:
        self._say("Enter County Name (Exact Search): ")
        name = self._input.line()
        self._trie_exact_search(name)

    def _trie_exact_search(self, name: str) -> None:
        self._say(f"Exact Searching for... '{name}'")
        start = time.perf_counter()
        populations = self.trie.search_full(name)
        self._say(f"Total Exact Search Time {_elapsed_ms(start)} ms ")
        if not populations:
            self._say(f"Could Not Find: {name}")
        else:
            self._say(f"Found Entry(s): {name}")
            self._say("Print Results? (y/n)")
            if self._confirm():
                self._say(f"Matching Results: {len(populations)}")
                self._say("County Populations as of 2020: ")
                for state, population in populations.items():
                    self._say(f"{name}, {state}, Population: {population}")
        self._say("Exact Search Complete")

    def _trie_prefix_prompt(self) -> None:
        self._say("Enter County Prefix (Prefix Search): ")
        prefix = self._input.line()
        self._say(prefix)
        self._trie_prefix_search(prefix)

    def _trie_prefix_search(self, prefix: str) -> None:
        self._say("\nPrefix Searching...")
        start = time.perf_counter()
        matches = self.trie.search_prefix(prefix)
        self._say(f"Total Prefix Search Time {_elapsed_ms(start)} ms ")
        if not matches:
            self._say(f"Could Not Find Entry(s) with Prefix: {prefix}")
        else:
            self._say(f"Found Entry(s) with Prefix: {prefix}")
            self._say("Print Results? (y/n)")
            if self._confirm():
                self._say(f"Matching Counties: {len(matches)}")
                for county in matches:
                    self._say(county)
        self._say("Prefix Search Complete")

    def _hashmap_search_prompt(self) -> None:
        self._say("Enter County Name (Exact Search): ")
        name = self._input.line()
        self._say(name)
        self._say("\nTesting search...")
        start = time.perf_counter()
        state = self.hashmap.search(name)
        micros = int((time.perf_counter() - start) * 1_000_000)
        if state is not None:
            self._say(f"Found '{name}'. State: '{state}'. Search took {micros} us.")
        else:
            self._say(f"Did not find '{name}'. Search took {micros} us.")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu."""
    parser = argparse.ArgumentParser(description="Compare trie and hash map county lookups.")
    parser.add_argument(
        "data_file",
        nargs="?",
        default=DEFAULT_DATA_FILE,
        help="CSV file with county demographics",
    )
    args = parser.parse_args(argv)
    return CountyApp(sys.stdin, sys.stdout, args.data_file).run()


if __name__ == "__main__":
    sys.exit(main())