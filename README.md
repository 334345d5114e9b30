# countysearch

An interactive tool and small library for comparing two ways of looking up
US county data:

- a **trie** keyed by county name. It supports exact and prefix searches and
  records a population for each state that has a county of that name.
- a **chained hash map** with prime capacities. It maps county names to a
  state and reports statistics on its bucket chains.

Each operation in the interactive menu is timed, so you can compare the two
structures side by side.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command-line use

```
countysearch [DATA_FILE]
```

`DATA_FILE` defaults to `county_demographics.csv` in the current directory.
The command opens a numbered menu that reads its answers from standard input:

1. Load dataset from file
2. Load into Trie
3. Load into Hashmap
4. Insert new Trie entry
5. Insert new Hashmap entry
6. Search for exact match in Trie
7. Search for prefix match in Trie
8. Search for exact match in Hashmap
9. Exit

Options 2–8 report that the dataset is empty until option 1 has loaded it.
If the file cannot be opened, option 1 prints an error and leaves the dataset
empty. When a search finds matches, the menu asks `Print Results? (y/n)` and
lists them only if the answer starts with `y`. Entering `10` reports whether
the trie holds any data. The session ends at option 9 or when input runs out.

## Data file

The CSV file needs a header row, and the first line is always skipped. Each
row is split on commas:

- column 1 holds the county name;
- column 2 holds the state;
- column 32 holds the 2020 population.

Each value has surrounding whitespace and one pair of enclosing double quotes
removed. Rows without a county name or state are dropped. Quoted fields that
contain commas are not supported.

## Library use

```python
from countysearch.cli import load_data
from countysearch.hashmap import HashMap
from countysearch.trie import Trie

rows = load_data("county_demographics.csv")   # list of CountyData; OSError if unreadable

trie = Trie()
for row in rows:
    trie.insert(row.county_name, row.state_name, row.population)

trie.search_full("Alachua County")   # {state: population}, or {} when absent
trie.search_prefix("Ala")            # names of every stored county starting with "Ala"
trie.is_empty()

counties = HashMap(101)
for row in rows:
    counties.insert(row.county_name, row.state_name)

counties.search("Alachua County")    # the state, or None when absent
"Alachua County" in counties
len(counties)
counties.remove("Alachua County")    # True if the key was present
print(counties.format_stats())
```

`HashMap(initial_capacity)` raises `ValueError` when the capacity is below 1.
Otherwise it starts with the first prime at or above `2 * initial_capacity + 1`.
Before each insert, if the load factor is above 0.75, the map grows the same
way from its current capacity and rehashes every entry. `clear()` empties the
map and keeps its capacity. `capacity()` returns the bucket count. `stats()`
returns a `HashMapStats` record with the capacity, the element count, the load
factor, the average and longest chain length, and the number of empty buckets.

`cli.trim(text)` applies the same whitespace and quote stripping that is used
when the data file is read. `cli.CountyApp(stdin, stdout, data_file)` runs the
menu over any pair of text streams through `run()`.

## What it does not do

The package keeps everything in memory. It does not save the trie or the hash
map, or changes made through the insert options, between sessions. It also
cannot remove entries from the menu.