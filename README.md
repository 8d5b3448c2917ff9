# adventofcode

Solutions to Advent of Code puzzles (days 1 to 6) together with the
`adventofcode` command, which handles the daily workflow: creating the files
for a new day, fetching inputs and puzzle descriptions, running solutions,
and keeping a benchmark table in `README.md` up to date.

## Installation

```
pip install .
```

The package has no dependencies beyond the Python standard library.

## Data layout

Run every command from the project root, the directory that holds the
`adventofcode/` package and the `data/` directory. The commands use:

- `adventofcode/solutions/dayNN.py` – the solution module for day `NN`
- `data/inputs/NN.txt` – your puzzle input for day `NN`
- `data/examples/NN.txt` – the example input from the puzzle text
- `data/puzzles/NN.md` – the downloaded puzzle description
- `data/timings.json` – stored benchmark results

Days are numbers from 1 to 25 (`7` and `07` are both accepted) and are
written with two digits in file names. The `data/inputs` and
`data/examples` directories must already exist; no directories are created.

## Commands

Create the files for a day: a solution module from a template with empty
`part_one` and `part_two`, plus empty input and example files.
`--overwrite` replaces an existing solution module (otherwise the command
fails if it exists); `--download` also fetches the input and puzzle:

```
adventofcode scaffold 7 --download
```

Fetch the input and description, or show the description in the terminal:

```
adventofcode download 7
adventofcode read 7
```

During the 1st to 25th of December (in UTC−5), `today` scaffolds, downloads
and reads the current day:

```
adventofcode today
```

Run a day's solution against `data/inputs/NN.txt`. `--release` runs Python
with `-O`; `--dhat` runs it with `tracemalloc` enabled and reports the peak
heap size of each part on stderr. `--submit 1` or `--submit 2` submits that
part's answer:

```
adventofcode solve 1
adventofcode solve 1 --submit 2
```

Run every day that has a solution module (others print "Not solved."):

```
adventofcode all
adventofcode all --release
```

Benchmark solutions. Each part is run repeatedly for about a second (between
10 and 10,000 samples) and the mean time is shown. Without a day, only days
that lack stored timings for both parts are run; `--all` runs every day.
`--store` merges the results into `data/timings.json` and rewrites the
benchmark table in `README.md`:

```
adventofcode time
adventofcode time 3 --store
adventofcode time --all --store
```

The table is written between the first and last of two marker lines that
you add to `README.md` once:

```
<!--- benchmarking table --->
<!--- benchmarking table --->
```

Unknown extra arguments are reported as a warning and otherwise ignored.

## The `aoc` client

Downloading, reading and submitting are not done by this package itself:
they call the external `aoc` command-line client, which must be installed
and configured with your session separately. If the `AOC_YEAR` environment
variable holds a year, it is passed on as `--year`.

## Using the library

- `adventofcode.day.Day` – a validated day (1–25) that prints as two digits;
  `Day.parse("07")`, `Day.today()` and `all_days()` are provided.
- `adventofcode.files.read_file(folder, day)` reads `data/<folder>/NN.txt`.
- `adventofcode.timings.Timings` loads, merges and stores benchmark results.
- `adventofcode.runner.solution_main(day, part_one, part_two)` runs the parts
  of a solution against its input and prints the results.

Each solution module `adventofcode.solutions.dayNN` provides `part_one` and
`part_two`, which take the puzzle input as a string and return the answer,
and a `main` that runs them; it accepts `--time` to benchmark and
`--submit N` to submit.

## Running the tests

```
pip install .[test]
pytest
```