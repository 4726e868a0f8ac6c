"""In-memory registry of timeline datasets, populated once at start-up."""

from dataclasses import dataclass, field
from pathlib import Path
import logging

from models import Person
from parsing import load_people

logger = logging.getLogger(__name__)


# Initial visible range per dataset file
DEFAULT_RANGES: dict[str, tuple[str, str]] = {
    "han.json": ("-256-01-01", "-195-12-31"),
    "tang.json": ("566-01-01", "649-07-10"),
    "song.json": ("875-01-01", "895-03-19"),
}

FALLBACK_RANGE = ("850-01-01", "1000-12-31")


@dataclass
class Dataset:
    name: str
    people: list[Person]
    start: str
    end: str


@dataclass
class DatasetRegistry:
    """
    Explicit mapping from dataset identifier to its people and default range.

    Datasets are registered up front; nothing is discovered lazily at render time.
    """

    datasets: dict[str, Dataset] = field(default_factory=dict)

    def register(
        self,
        name: str,
        people: list[Person],
        start: str | None = None,
        end: str | None = None,
    ) -> Dataset:
        default_start, default_end = DEFAULT_RANGES.get(name, FALLBACK_RANGE)
        dataset = Dataset(
            name=name,
            people=list(people),
            start=start or default_start,
            end=end or default_end,
        )
        self.datasets[name] = dataset
        return dataset

    def get(self, name: str) -> Dataset:
        if name not in self.datasets:
            raise KeyError(f"Unknown dataset: {name}")
        return self.datasets[name]

    def names(self) -> list[str]:
        return sorted(self.datasets)

    def default_range(self, name: str) -> tuple[str, str]:
        dataset = self.get(name)
        return dataset.start, dataset.end

    def __contains__(self, name: str) -> bool:
        return name in self.datasets

    def __len__(self) -> int:
        return len(self.datasets)


def load_registry(data_dir: Path) -> DatasetRegistry:
    """Register every *.json file in data_dir, skipping files that fail to load."""
    registry = DatasetRegistry()

    for path in sorted(Path(data_dir).glob("*.json")):
        try:
            people = load_people(path)
        except ValueError as e:
            logger.warning(f"Skipping dataset {path.name}: {e}")
            continue
        registry.register(path.name, people)
        logger.info(f"Loaded dataset {path.name} ({len(people)} people)")

    return registry
