"""Run result log owned by the driver."""

import csv
from typing import List, TextIO

from core.models import RunStats


class ResultLog:
    """Stats of every completed run in one program invocation."""

    def __init__(self):
        self.results: List[RunStats] = []

    def __len__(self) -> int:
        return len(self.results)

    def append(self, stats: RunStats) -> None:
        self.results.append(stats)

    def write_csv(self, stream: TextIO) -> int:
        """Write one `<wpm>,<cpm>,<accuracy>` line per run.

        Args:
            stream: Text stream to write to

        Returns:
            Number of rows written
        """
        writer = csv.writer(stream, lineterminator="\n")
        for stats in self.results:
            writer.writerow([stats.wpm, stats.cpm, f"{stats.accuracy:.2f}"])
        return len(self.results)
