import argparse
import sys

from sortlab.Utils import dump_values, generate_values, load_values, plot_timings, print_vector, time_sort, write_list
from sortlab.config import (CATS_FILE, DEBUGGING, GENERATE_COUNT, GENERATE_SEED, INPUT_FILE, MODE, OUTPUT_FILES,
                            Mode, API_HOST, API_PORT)
from sortlab.demo_files.cat import load_cats
from sortlab.errors import DataFileError
from sortlab.Stats import SortStats
from sortlab.sort_utils import ALGORITHMS, bubble_sort, get_algorithm


def print_banner(text):
    print("-------------------------------")
    print(text)
    print("-------------------------------")


def test_sorting_algorithms(input_file=INPUT_FILE, output_files=OUTPUT_FILES, verbose=DEBUGGING):
    """
    Sorts the values of a data file with every engine, each on its own copy,
    and writes the sorted lists to the output files.

    :return:
        list: the statistics of each run, empty if a file couldn't be used.
    """
    try:
        values = load_values(input_file)
    except DataFileError as e:
        print(f"Error! {e}")
        return []

    all_stats = []
    for name, output_file in zip(ALGORITHMS, output_files):
        items = list(values)

        print(f"\nSorting using the {name.capitalize()} Sort.")
        stats = time_sort(get_algorithm(name), items, verbose=verbose)
        print_banner(f"Time taken (ms): {stats.elapsed_ms:.3f}")

        try:
            dump_values(items, output_file)
        except DataFileError as e:
            print(f"Error! {e}")
            return []
        all_stats.append(stats)

    passes, comparisons, swaps = SortStats.get_totals(all_stats)
    print_banner(f"All algorithms | Passes: {passes} | Comparisons: {comparisons} | Swaps: {swaps}")
    return all_stats


def test_class_sort(cats_file=CATS_FILE, verbose=DEBUGGING):
    print("\nSorting a user defined class using the bubble sort.\n")
    try:
        cats = load_cats(cats_file)
    except DataFileError as e:
        print(f"Error! {e}")
        return []

    bubble_sort(cats, verbose=verbose)
    print_vector(cats)
    return cats


def generate_data_file(output_file=INPUT_FILE, count=GENERATE_COUNT, seed=GENERATE_SEED, worst_case=False):
    if worst_case:
        write_list(output_file, count, reverse=True)
    else:
        dump_values(generate_values(count, seed=seed), output_file)
    print(f"Wrote {output_file}")


def build_parser():
    parser = argparse.ArgumentParser(prog="sortlab", description="Bubble, shuttle and quick sort demonstration")
    parser.add_argument("--verbose", action="store_true", default=DEBUGGING, help="Log every pass of every sort")
    sub = parser.add_subparsers(dest="command")

    p_bench = sub.add_parser("benchmark", help="Sort a data file with every algorithm and time them")
    p_bench.add_argument("input_file", nargs="?", default=INPUT_FILE)
    p_bench.add_argument("--out", nargs=3, default=list(OUTPUT_FILES), metavar=("BUBBLE", "SHUTTLE", "QUICK"))
    p_bench.add_argument("--plot", default=None, help="Save a chart of the timings to this file")

    p_cats = sub.add_parser("cats", help="Sort the cats of a data file by weight")
    p_cats.add_argument("cats_file", nargs="?", default=CATS_FILE)

    p_gen = sub.add_parser("generate", help="Write a data file")
    p_gen.add_argument("output_file", nargs="?", default=INPUT_FILE)
    p_gen.add_argument("--count", type=int, default=GENERATE_COUNT)
    p_gen.add_argument("--seed", type=int, default=GENERATE_SEED)
    p_gen.add_argument("--worst-case", action="store_true", help="Write count..0 instead of random floats")

    p_serve = sub.add_parser("serve", help="Run the Sort API")
    p_serve.add_argument("--host", default=API_HOST)
    p_serve.add_argument("--port", type=int, default=API_PORT)

    return parser


_MODE_COMMANDS = {
    Mode.BENCHMARK: "benchmark",
    Mode.CLASS_DEMO: "cats",
    Mode.GENERATE: "generate",
    Mode.SERVE: "serve",
}


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    command = args.command
    if command is None:
        if MODE == Mode.NONE:
            parser.print_help()
            return 0
        command = _MODE_COMMANDS[MODE]
        args = parser.parse_args([*argv, command])

    if command == "benchmark":
        all_stats = test_sorting_algorithms(args.input_file, args.out, verbose=args.verbose)
        if not all_stats:
            return 1
        if args.plot:
            plot_timings(all_stats, output_file=args.plot)
    elif command == "cats":
        test_class_sort(args.cats_file, verbose=args.verbose)
    elif command == "generate":
        try:
            generate_data_file(args.output_file, args.count, seed=args.seed, worst_case=args.worst_case)
        except DataFileError as e:
            print(f"Error! {e}")
            return 1
    elif command == "serve":
        # uvicorn and fastapi are only needed here
        from sortlab.api import serve
        serve(args.host, args.port)
    return 0


# --- Main Execution ---
if __name__ == "__main__":
    raise SystemExit(main())
