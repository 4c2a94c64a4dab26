"""Text road repository adapter.

Reads the line-oriented bulk-load format, one road per line:

    roadName,weight;town1Name;town2Name

The road name ends at the first comma, so town names may contain
commas ("Lastname, Firstname") but road names may not.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError, RoadFormatError
from ...domain.models import RoadRecord


def parse_road_line(line: str, line_number: int = 0) -> RoadRecord:
    """Parse one bulk-load line into a RoadRecord.

    Raises:
        RoadFormatError: If a separator is missing, a field is empty or
            the weight is not an integer.
    """
    text = line.strip()
    name, comma, rest = text.partition(",")
    weight_text, semicolon, towns = rest.partition(";")
    town1, second_semicolon, town2 = towns.partition(";")

    if not (comma and semicolon and second_semicolon):
        raise RoadFormatError(
            f"Line {line_number}: expected 'road,weight;town1;town2'",
            line_number=line_number,
            line=text,
        )

    try:
        weight = int(weight_text.strip())
    except ValueError as e:
        raise RoadFormatError(
            f"Line {line_number}: weight is not an integer",
            cause=e,
            line_number=line_number,
            line=text,
        )

    name, town1, town2 = name.strip(), town1.strip(), town2.strip()
    if not name or not town1 or not town2:
        raise RoadFormatError(
            f"Line {line_number}: road and town names must not be empty",
            line_number=line_number,
            line=text,
        )

    return RoadRecord(
        name=name,
        weight=weight,
        town1=town1,
        town2=town2,
        line_number=line_number,
    )


@dataclass
class TextRoadRepository:
    """Road repository that reads the bulk-load text format.

    This adapter implements RoadRepositoryPort.

    Attributes:
        config: Graph configuration (paths, encoding, strictness)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self, path: Optional[Path] = None) -> Iterator[RoadRecord]:
        """Yield road records from the file in order.

        Blank lines are ignored. Malformed lines raise RoadFormatError,
        or are logged and skipped when ``skip_malformed_lines`` is set.

        Args:
            path: File to read; defaults to the configured roads_path.

        Raises:
            GraphLoadError: If the file cannot be read.
            RoadFormatError: On a malformed line in strict mode.
        """
        source = Path(path) if path is not None else self.config.roads_path
        self._logger.debug("Loading roads", extra={"roads_path": str(source)})

        try:
            lines = source.read_text(encoding=self.config.encoding).splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise GraphLoadError(
                f"Failed to read road file {source}",
                cause=e,
                file_path=str(source),
            )

        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                yield parse_road_line(line, line_number)
            except RoadFormatError as e:
                if not self.config.skip_malformed_lines:
                    raise
                self._logger.warning(
                    "Skipping malformed road line",
                    extra={"line_number": line_number, "error": str(e)},
                )
