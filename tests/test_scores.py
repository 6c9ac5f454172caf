import json

from color_blocks.scores import ScoreStore


def test_only_higher_scores_stick(store):
    assert store.best_score(1) == 0
    assert store.update_score(1, 300)
    assert not store.update_score(1, 300)
    assert not store.update_score(1, 120)
    assert store.best_score(1) == 300
    assert store.get(1)["lastPlayed"] is not None


def test_scores_survive_a_reload(store):
    store.update_score(4, 2048)
    store.increment_play_count(4)
    store.increment_play_count(4)
    again = ScoreStore(store.path)
    assert again.get(4)["highScore"] == 2048
    assert again.get(4)["playCount"] == 2


def test_games_are_kept_apart(store):
    store.report_score(1, 500)
    store.report_score(3, 700)
    assert store.best_score(1) == 500
    assert store.best_score(3) == 700
    assert store.best_score(4) == 0


def test_resets(store):
    store.update_score(1, 10)
    store.update_score(3, 20)
    store.reset_game_stats(1)
    assert store.best_score(1) == 0
    assert store.best_score(3) == 20
    store.reset_all()
    assert store.best_score(3) == 0
    assert ScoreStore(store.path).data == {}


def test_corrupt_file_starts_empty(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text("{not json")
    assert ScoreStore(str(path)).data == {}
    path.write_text(json.dumps([1, 2, 3]))
    assert ScoreStore(str(path)).data == {}


def test_missing_fields_get_defaults(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"1": {"highScore": 90}}))
    assert ScoreStore(str(path)).get(1) == {"highScore": 90, "playCount": 0, "lastPlayed": None}


def test_unwritable_file_does_not_raise(tmp_path):
    store = ScoreStore(str(tmp_path / "missing-dir" / "scores.json"))
    assert store.update_score(1, 50)
    assert store.best_score(1) == 50
    assert not store.save()
