import pytest

from color_blocks.scores import ScoreStore


@pytest.fixture
def store(tmp_path):
    return ScoreStore(str(tmp_path / "scores.json"))


@pytest.fixture
def reports():
    calls = []

    def reporter(game_id, score):
        calls.append((game_id, score))

    reporter.calls = calls
    return reporter
