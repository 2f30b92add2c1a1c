"""Label registry mapping integer training labels to display names."""

import json
from pathlib import Path
from typing import Dict, Iterator, Optional, Tuple

from configs.config import LABELS_SUFFIX


def sidecar_path(model_path: Path) -> Path:
    """Return the registry file stored next to a model file."""
    model_path = Path(model_path)
    return model_path.with_name(model_path.name + LABELS_SUFFIX)


class LabelRegistry:
    """Manages the ordered label -> name lookup used when reporting matches."""

    def __init__(self):
        self.labels: Dict[int, str] = {}

    def __len__(self) -> int:
        return len(self.labels)

    def __contains__(self, label: int) -> bool:
        return label in self.labels

    def items(self) -> Iterator[Tuple[int, str]]:
        """Iterate (label, name) pairs in ascending label order."""
        return iter(sorted(self.labels.items()))

    def register(self, label: int, name: str) -> None:
        """Record a name for a label. The first name seen for a label is kept."""
        self.labels.setdefault(label, name)

    def get(self, label: int) -> Optional[str]:
        return self.labels.get(label)

    def clear(self) -> None:
        self.labels.clear()

    def save(self, path: Path) -> None:
        """Write the registry as JSON."""
        data = {str(label): name for label, name in self.items()}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    def load(self, path: Path) -> int:
        """
        Replace the registry contents from a JSON file.

        Args:
            path: File written by save()

        Returns:
            Number of labels loaded
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        self.labels = {int(label): name for label, name in data.items()}
        return len(self.labels)
