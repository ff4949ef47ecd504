import math
import time

import numpy as np
from matplotlib import pyplot as plt

from sortlab.Stats import format_vector
from sortlab.errors import DataFileError


def load_values(input_file, parse=float):
    """
    Reads whitespace separated values from a text file.

    Reading stops at the end of the file or at the first token that can't be
    parsed, whatever was read before it is kept. Digit separators ("1_000")
    and non-finite numbers ("nan", "inf") count as unparseable.

    Args:
        input_file (str): path of the data file.
        parse (callable): turns one token into a value.

    :return:
        list: the values in file order.
    """
    values = []
    try:
        with open(input_file, mode='r', encoding='utf-8') as file:
            for line in file:
                for token in line.split():
                    if "_" in token:
                        return values
                    try:
                        value = parse(token)
                    except ValueError:
                        return values
                    if isinstance(value, float) and not math.isfinite(value):
                        return values
                    values.append(value)
    except OSError as e:
        raise DataFileError(input_file, e.strerror or str(e)) from e
    return values


def dump_values(values, output_file):
    # One value per line
    try:
        with open(output_file, mode='w', encoding='utf-8') as out:
            for value in values:
                out.write(f"{value}\n")
    except OSError as e:
        raise DataFileError(output_file, e.strerror or str(e)) from e


def write_list(output_file, count, reverse=False):
    """
    Writes the integers 0..count (inclusive), one per line.
    Reversed, this is the worst case input for the bubble and shuttle sorts.
    """
    numbers = range(count, -1, -1) if reverse else range(count + 1)
    dump_values(numbers, output_file)


def generate_values(count, seed=None, low=0.0, high=1000.0):
    rng = np.random.default_rng(seed)
    return rng.uniform(low, high, size=count).tolist()


def timevaldiff(start_time, finish_time):
    # Both readings come from time.perf_counter()
    return (finish_time - start_time) * 1000


def time_sort(engine, items, **kwargs):
    """
    Runs a sort engine and stores the wall clock time it took on its statistics.
    """
    t1 = time.perf_counter()
    stats = engine(items, **kwargs)
    t2 = time.perf_counter()

    stats.elapsed_ms = timevaldiff(t1, t2)
    return stats


def print_vector(values):
    print(format_vector(values))


def plot_timings(all_stats, output_file=None):
    names = [stats.algorithm for stats in all_stats]
    timings = [stats.elapsed_ms or 0.0 for stats in all_stats]

    plt.figure()
    plt.bar(names, timings)
    plt.title("Time taken per Algorithm")
    plt.xlabel("Algorithm")
    plt.ylabel("Time (ms)")

    if output_file is not None:
        plt.savefig(output_file)
        plt.close()
    else:
        plt.show()
