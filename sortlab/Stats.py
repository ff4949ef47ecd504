from collections import namedtuple

from sortlab.logger import get_logger

logger = get_logger(__name__)

PassRecord = namedtuple("PassRecord", ["number", "comparisons", "swaps"])


def format_vector(values):
    # [ 1 2 3 ]
    return "[ " + "".join(f"{value} " for value in values) + "]"


class SortStats:
    def __init__(self, algorithm, verbose=False):
        self.algorithm = algorithm
        self.verbose = verbose

        # Counters for the pass in progress, the engines bump these directly
        self.comparisons = 0
        self.swaps = 0

        self.passes = []
        self.elapsed_ms = None

    def end_pass(self, items=None):
        """
        Closes the current pass: records its counters, adds them into the running
        totals and resets them for the next pass.

        :param items: the sequence being sorted, only used for verbose output
        :return: the record of the pass that was just closed
        """
        record = PassRecord(len(self.passes) + 1, self.comparisons, self.swaps)
        self.passes.append(record)

        if self.verbose:
            logger.info(f"Pass: {record.number} | Comparisons: {record.comparisons} | Swaps: {record.swaps}")
            if items is not None:
                logger.info(format_vector(items))

        self.comparisons = 0
        self.swaps = 0
        return record

    @property
    def pass_count(self):
        return len(self.passes)

    @property
    def total_comparisons(self):
        """
        Comparisons over every closed pass plus the pass in progress
        """
        return sum(record.comparisons for record in self.passes) + self.comparisons

    @property
    def total_swaps(self):
        return sum(record.swaps for record in self.passes) + self.swaps

    def report(self):
        logger.info("-------------------------------")
        logger.info(f"{self.algorithm} | Total Comparisons: {self.total_comparisons}")
        logger.info(f"{self.algorithm} | Total Swaps: {self.total_swaps}")
        logger.info("-------------------------------")

    def as_dict(self):
        return {
            "algorithm": self.algorithm,
            "passes": self.pass_count,
            "comparisons": self.total_comparisons,
            "swaps": self.total_swaps,
            "elapsed_ms": self.elapsed_ms,
        }

    @staticmethod
    def get_totals(all_stats):
        # Sum the counters of several runs
        comparisons = sum(stats.total_comparisons for stats in all_stats)
        swaps = sum(stats.total_swaps for stats in all_stats)
        passes = sum(stats.pass_count for stats in all_stats)

        return passes, comparisons, swaps

    def __str__(self):
        return (f"{self.algorithm}: Passes {self.pass_count} \nComparisons {self.total_comparisons} "
                f"\nSwaps {self.total_swaps}")
