"""Counting and lookup problems solved with sets, maps and counters."""

from __future__ import annotations

import string
from collections import Counter, defaultdict, deque
from collections.abc import Iterable, Sequence

_COWS = ("Bessie", "Elsie", "Daisy", "Gertie", "Annabelle", "Maggie", "Henrietta")

_ZODIAC = (
    "Ox",
    "Tiger",
    "Rabbit",
    "Dragon",
    "Snake",
    "Horse",
    "Goat",
    "Monkey",
    "Rooster",
    "Dog",
    "Pig",
    "Rat",
)
_ZODIAC_INDEX = {animal: i for i, animal in enumerate(_ZODIAC)}


def cities_and_states(pairs: Iterable[tuple[str, str]]) -> int:
    """Count special pairs of cities.

    Two cities from different states form a special pair when the first two
    letters of each city name are the code of the other city's state.
    """
    waiting: Counter[tuple[str, str]] = Counter()
    total = 0
    for city, state in pairs:
        prefix, code = city[:2], state[:2]
        if prefix == code:
            continue
        total += waiting[(prefix, code)]
        waiting[(code, prefix)] += 1
    return total


def dont_be_last(records: Iterable[tuple[str, int]]) -> str:
    """Name the cow with the second-smallest milk total, or ``"Tie"``.

    Every one of the seven herd members starts with a total of zero.
    """
    totals = dict.fromkeys(_COWS, 0)
    for name, amount in records:
        totals[name] = totals.get(name, 0) + amount

    by_total: defaultdict[int, list[str]] = defaultdict(list)
    for name in sorted(totals):
        by_total[totals[name]].append(name)
    levels = sorted(by_total)
    if len(levels) < 2:
        return "Tie"
    names = by_total[levels[1]]
    return names[0] if len(names) == 1 else "Tie"


def into_blocks(values: Sequence[int]) -> int:
    """Return the fewest changes that leave equal values in one contiguous block.

    Changing a value means changing every occurrence of it to the same other value.
    """
    items = list(values)
    last = {value: i for i, value in enumerate(items)}
    total = 0
    start = 0
    end = -1
    counts: Counter[int] = Counter()
    for i, value in enumerate(items):
        counts[value] += 1
        end = max(end, last[value])
        if i == end:
            total += (i - start + 1) - max(counts.values())
            counts.clear()
            start = i + 1
    return total


def jury_marks(marks: Sequence[int], remembered: Iterable[int]) -> int:
    """Count the possible initial scores.

    Each jury mark is added in turn; every remembered score must equal the
    score after some number (at least one) of marks.
    """
    prefixes = set()
    running = 0
    for mark in marks:
        running += mark
        prefixes.add(running)
    wanted = list(remembered)
    origins: Counter[int] = Counter()
    for score in wanted:
        for prefix in prefixes:
            origins[score - prefix] += 1
    return sum(1 for hits in origins.values() if hits == len(wanted))


def made_up(a: Sequence[int], b: Sequence[int], c: Sequence[int]) -> int:
    """Count pairs ``(i, j)`` with ``a[i] == b[c[j]]``, where ``c`` holds 1-based indices."""
    occurrences = Counter(a)
    total = 0
    for index in c:
        if not 1 <= index <= len(b):
            raise IndexError(f"index {index} is outside 1..{len(b)}")
        total += occurrences[b[index - 1]]
    return total


def _size_rank(size: str) -> tuple[int, int]:
    if not size or size[-1] not in "SML":
        raise ValueError(f"not a size: {size!r}")
    letter = size[-1]
    if letter == "S":
        return 0, -len(size)
    if letter == "M":
        return 1, 0
    return 2, len(size)


def compare_sizes(first: str, second: str) -> str:
    """Compare two T-shirt sizes such as ``XXS``, ``M`` or ``XL``.

    Returns ``"<"``, ``">"`` or ``"="``.
    """
    a, b = _size_rank(first), _size_rank(second)
    if a < b:
        return "<"
    if a > b:
        return ">"
    return "="


def _board_lines(board: Sequence[str]) -> list[str]:
    rows = list(board)
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("board must be three rows of three cells")
    columns = ["".join(column) for column in zip(*rows)]
    diagonals = [
        "".join(rows[i][i] for i in range(3)),
        "".join(rows[i][2 - i] for i in range(3)),
    ]
    return rows + columns + diagonals


def tic_tac_toe(board: Sequence[str]) -> tuple[int, int]:
    """Count single cows and two-cow teams that claim a winning line.

    Returns ``(individual winners, team winners)``.
    """
    letters = set(string.ascii_uppercase)
    solo: set[str] = set()
    teams: set[frozenset[str]] = set()
    for line in _board_lines(board):
        cells = set(line)
        if not cells <= letters:
            continue
        if len(cells) == 1:
            solo |= cells
        elif len(cells) == 2:
            teams.add(frozenset(cells))
    return len(solo), len(teams)


def where_am_i(road: str) -> int:
    """Return the smallest k for which every run of k letters appears only once."""
    if not road:
        raise ValueError("road must not be empty")
    for k in range(1, len(road) + 1):
        windows = [road[i : i + k] for i in range(len(road) - k + 1)]
        if len(set(windows)) == len(windows):
            return k
    return len(road)


def _parse_statement(statement: str) -> tuple[str, bool, int, str]:
    words = statement.split()
    if (
        len(words) != 8
        or words[1:3] != ["born", "in"]
        or words[5:7] != ["year", "from"]
        or words[3] not in ("next", "previous")
        or words[4] not in _ZODIAC_INDEX
    ):
        raise ValueError(f"cannot read statement {statement!r}")
    name, _, _, direction, animal, _, _, parent = words
    return name, direction == "next", _ZODIAC_INDEX[animal], parent


def year_of_the_cow(statements: Iterable[str]) -> int:
    """Return how many years apart Bessie and Elsie were born.

    Statements read like ``"Mildred born in previous Dragon year from Bessie"``;
    Bessie was born in an Ox year.
    """
    children: defaultdict[str, list[tuple[str, bool, int]]] = defaultdict(list)
    for statement in statements:
        name, forward, animal, parent = _parse_statement(statement)
        children[parent].append((name, forward, animal))

    seen = {"Bessie"}
    queue = deque([("Bessie", 0, _ZODIAC_INDEX["Ox"])])
    while queue:
        name, offset, animal = queue.popleft()
        if name == "Elsie":
            return abs(offset)
        for child, forward, child_animal in children[name]:
            if child in seen:
                continue
            seen.add(child)
            if forward:
                step = (child_animal - animal) % 12 or 12
                queue.append((child, offset + step, child_animal))
            else:
                step = (animal - child_animal) % 12 or 12
                queue.append((child, offset - step, child_animal))
    raise ValueError("Elsie cannot be related to Bessie")