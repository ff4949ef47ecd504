import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def data_file(tmp_path):
    def _write(content, name="floats.dat"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
