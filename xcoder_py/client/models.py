"""Data models for contest assistant entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class ContestType(str, Enum):
    """Contest category selecting which problem set is browsed."""

    ABC = "ABC"
    ARC = "ARC"
    AGC = "AGC"

    @classmethod
    def parse(cls, value: str) -> "ContestType":
        """Parse a contest type case-insensitively."""
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValueError(f"invalid contest type: {value!r}") from None


PROBLEM_IDS: Tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G", "H", "Ex")
MAX_PROBLEM_IDS = 3


def normalize_problem_id(value: str) -> str:
    """Map 'ex', 'EX', 'a' ... onto the canonical problem identifier."""
    value = value.strip()
    for problem_id in PROBLEM_IDS:
        if problem_id.upper() == value.upper():
            return problem_id
    # Unknown ids are passed through so the backend can reject them
    return value


def select_problem_ids(ids: List[str]) -> Tuple[str, ...]:
    """
    Normalize a problem id selection.
    Duplicates are dropped, order is kept and at most MAX_PROBLEM_IDS survive.
    """
    selected: List[str] = []
    for raw in ids:
        problem_id = normalize_problem_id(raw)
        if problem_id and problem_id not in selected:
            selected.append(problem_id)
    return tuple(selected[:MAX_PROBLEM_IDS])


@dataclass
class ProblemFilter:
    """Current contest/problem filter; survives navigation."""

    contest_type: ContestType = ContestType.ABC
    problem_ids: Tuple[str, ...] = ("A", "B", "C")
    show_solved: bool = True

    @property
    def hide_solved(self) -> bool:
        return not self.show_solved


@dataclass(frozen=True)
class Problem:
    """Immutable snapshot of the backend's current problem."""

    contest_id: int
    contest_type: str
    problem_id: str
    title: str
    description: str
    time_limit: float
    memory_limit: int
    test_cases_link: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Problem":
        return cls(
            contest_id=int(data["contest_id"]),
            contest_type=str(data["contest_type"]).upper(),
            problem_id=str(data["problem_id"]),
            title=data.get("title", ""),
            description=data.get("description", ""),
            time_limit=float(data.get("time_limit", 0)),
            memory_limit=int(data.get("memory_limit", 0)),
            test_cases_link=data.get("test_cases_link", ""),
        )

    @property
    def contest_slug(self) -> str:
        """Contest slug as used in URLs, e.g. 'abc123'."""
        return f"{self.contest_type.lower()}{self.contest_id:03d}"

    @property
    def task_url(self) -> str:
        return (
            f"https://atcoder.jp/contests/{self.contest_slug}"
            f"/tasks/{self.contest_slug}_{self.problem_id.lower()}"
        )

    @property
    def source_stem(self) -> str:
        """Solution file name without extension, e.g. 'abc123_A'."""
        return f"{self.contest_type.lower()}{self.contest_id}_{self.problem_id}"


@dataclass(frozen=True)
class Verdict:
    """Represents a judged test case."""

    input: str
    output: str
    answer: str
    status: str
    time: float = 0.0
    memory: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "Verdict":
        return cls(
            input=data.get("input") or "",
            output=data.get("output") or "",
            answer=data.get("answer") or "",
            status=data.get("status") or "",
            time=float(data.get("time") or 0.0),
            memory=int(data.get("memory") or 0),
        )

    @property
    def passed(self) -> bool:
        return self.status == "AC"


@dataclass(frozen=True)
class Language:
    """Represents a supported solution language."""

    id: str
    label: str


LANGUAGES: Tuple[Language, ...] = (
    Language("c", "C"),
    Language("cpp", "C++"),
    Language("dart", "Dart"),
    Language("elixir", "Elixir"),
    Language("fortran", "Fortran"),
    Language("f#", "F#"),
    Language("go", "Go"),
    Language("haskell", "Haskell"),
    Language("julia", "Julia"),
    Language("kotlin", "Kotlin"),
    Language("ocaml", "OCaml"),
    Language("python", "Python"),
    Language("rust", "Rust"),
    Language("swift", "Swift"),
    Language("zig", "Zig"),
)
DEFAULT_LANGUAGE = "cpp"


def find_language(language_id: str) -> Optional[Language]:
    """Look up a catalog entry by id (case-insensitive)."""
    language_id = language_id.strip().lower()
    for language in LANGUAGES:
        if language.id == language_id:
            return language
    return None


class Tab(str, Enum):
    DESCRIPTION = "description"
    RESULT = "result"


RUN_CODE = "Run Code"
ACCEPTED = "Accepted"
WRONG_ANSWER = "Wrong Answer"


@dataclass
class SessionViewState:
    """Presentation state of the problem/result view."""

    current_tab: Tab = Tab.DESCRIPTION
    result_tab_enabled: bool = False
    selected_case_index: int = 0
    aggregate_verdict: str = RUN_CODE
    verdicts: Tuple[Verdict, ...] = field(default_factory=tuple)
    testing: bool = False

    def reset(self) -> None:
        """Back to the fresh-problem view. The testing lock is not touched."""
        self.current_tab = Tab.DESCRIPTION
        self.result_tab_enabled = False
        self.selected_case_index = 0
        self.aggregate_verdict = RUN_CODE
        self.verdicts = ()
