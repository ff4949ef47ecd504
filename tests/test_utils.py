import pytest

from sortlab.Utils import (dump_values, generate_values, load_values, plot_timings, print_vector, time_sort,
                           timevaldiff, write_list)
from sortlab.errors import DataFileError
from sortlab.sort_utils import bubble_sort, quick_sort


def test_load_values_reads_whitespace_separated_numbers(data_file):
    path = data_file("3.5\n1\n  2 7.25\n\n-4\n")
    assert load_values(path) == [3.5, 1.0, 2.0, 7.25, -4.0]


def test_load_values_stops_at_first_bad_token(data_file):
    path = data_file("1\n2\nabc\n3\n")
    assert load_values(path) == [1.0, 2.0]


@pytest.mark.parametrize("bad_token", ["nan", "NaN", "inf", "-inf", "1_000"])
def test_load_values_stops_at_non_finite_or_separated_numbers(data_file, bad_token):
    path = data_file(f"1\n2.5\n{bad_token}\n3\n")
    assert load_values(path) == [1.0, 2.5]


def test_load_values_int_parser_stops_at_separated_numbers(data_file):
    path = data_file("4 1_0 6")
    assert load_values(path, parse=int) == [4]


def test_load_values_with_custom_parser(data_file):
    path = data_file("1 2 3")
    assert load_values(path, parse=int) == [1, 2, 3]


def test_load_values_empty_file(data_file):
    assert load_values(data_file("")) == []


def test_load_values_missing_file(tmp_path):
    missing = tmp_path / "missing.dat"
    with pytest.raises(DataFileError) as exc_info:
        load_values(missing)
    assert exc_info.value.path == str(missing)
    assert isinstance(exc_info.value, OSError)


def test_dump_values_one_per_line(tmp_path):
    path = tmp_path / "out.dat"
    dump_values([1.5, 2, 3], path)
    assert path.read_text(encoding="utf-8") == "1.5\n2\n3\n"


def test_dump_values_unwritable_destination(tmp_path):
    with pytest.raises(DataFileError):
        dump_values([1], tmp_path / "no_such_dir" / "out.dat")


def test_dump_then_load(tmp_path):
    path = tmp_path / "out.dat"
    dump_values([0.5, -2.0], path)
    assert load_values(path) == [0.5, -2.0]


def test_write_list(tmp_path):
    path = tmp_path / "list.dat"
    write_list(path, 4)
    assert load_values(path, parse=int) == [0, 1, 2, 3, 4]

    write_list(path, 4, reverse=True)
    assert load_values(path, parse=int) == [4, 3, 2, 1, 0]


def test_generate_values_is_reproducible():
    first = generate_values(50, seed=3)
    second = generate_values(50, seed=3)

    assert first == second
    assert len(first) == 50
    assert all(isinstance(value, float) for value in first)
    assert all(0.0 <= value < 1000.0 for value in first)


def test_timevaldiff_is_in_milliseconds():
    assert timevaldiff(1.0, 1.25) == pytest.approx(250.0)


def test_time_sort_records_elapsed_time():
    items = [3, 1, 2]
    stats = time_sort(quick_sort, items)
    assert items == [1, 2, 3]
    assert stats.elapsed_ms >= 0


def test_time_sort_passes_keyword_arguments():
    items = [1, 2, 3]
    time_sort(bubble_sort, items, less_than=lambda a, b: a > b)
    assert items == [3, 2, 1]


def test_print_vector(capsys):
    print_vector([3, 1])
    assert capsys.readouterr().out == "[ 3 1 ]\n"


def test_plot_timings_saves_chart(tmp_path):
    runs = [time_sort(bubble_sort, [2, 1]), time_sort(quick_sort, [2, 1])]
    path = tmp_path / "timings.png"
    plot_timings(runs, output_file=path)
    assert path.exists()
