import pytest

from strmatch.search.registry import available_algorithms


@pytest.fixture(params=available_algorithms())
def algorithm(request):
    """Every registered algorithm name."""
    return request.param


@pytest.fixture
def sample_text():
    return (
        b"It was late in the autumn when the old ferryman came down to the river. "
        b"People said he was a good man; the miller said he was a good man but a "
        b"stubborn one. abracadabra abracadabra aaaaabaaaab \x00\xff\x00\xff\x00"
    )


@pytest.fixture
def sample_file(tmp_path, sample_text):
    path = tmp_path / "sample.txt"
    path.write_bytes(sample_text)
    return str(path)
