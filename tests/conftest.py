import pytest
import structlog


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def csv_file(tmp_path):
    def write(text: str):
        path = tmp_path / "samples.csv"
        path.write_text(text, encoding="utf-8")
        return path

    return write
