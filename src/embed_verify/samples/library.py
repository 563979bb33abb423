import logging
from pathlib import Path

import yaml

from .models import SampleSet

logger = logging.getLogger(__name__)

BUILTIN_DIRECTORY = Path(__file__).parent / "data"

SCENIC_TEXTS = "scenic_texts"
CAPTIONED_IMAGES = "captioned_images"


class SampleLibrary:
    """Named sample sets loaded from ``*.yaml`` files in one directory."""

    def __init__(self, directory: str | Path = BUILTIN_DIRECTORY) -> None:
        self._sets: dict[str, SampleSet] = {}
        logger.info("Initializing SampleLibrary from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d sample sets", len(self._sets))

    def get(self, name: str) -> SampleSet:
        logger.debug("Getting sample set: %s", name)
        try:
            return self._sets[name]
        except KeyError:
            logger.error("Sample set not found: %s", name)
            raise KeyError(f"Sample set '{name}' not found")

    def list(self) -> list[str]:
        return sorted(self._sets)

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            sample_set = self._load_sample_set(file_path)
            if sample_set.name in self._sets:
                raise ValueError(
                    f"Duplicate sample set '{sample_set.name}' in {file_path}"
                )
            self._sets[sample_set.name] = sample_set
            logger.debug(
                "Loaded sample set: %s (%d samples) from %s",
                sample_set.name,
                len(sample_set.samples),
                file_path,
            )

    def _load_sample_set(self, file_path: Path) -> SampleSet:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return SampleSet(**data)
