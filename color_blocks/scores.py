"""
scores.py
Best scores and play counts per game, kept in a small JSON file.
"""

import json
import logging
import os
from datetime import datetime

from .config import SCORES_FILE

log = logging.getLogger(__name__)


def _blank():
    return {"highScore": 0, "playCount": 0, "lastPlayed": None}


class ScoreStore:
    def __init__(self, path=SCORES_FILE):
        self.path = path
        self.data = self.load()

    # ----------------------- file helpers -----------------------
    def load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("could not read %s: %s", self.path, e)
            return {}
        if not isinstance(raw, dict):
            log.warning("ignoring malformed score file %s", self.path)
            return {}
        return {str(k): dict(_blank(), **v) for k, v in raw.items() if isinstance(v, dict)}

    def save(self):
        try:
            with open(self.path, "w") as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            # a failed save must never end the session
            log.warning("could not save %s: %s", self.path, e)
            return False
        return True

    # ----------------------- per game -----------------------
    def get(self, game_id):
        return dict(self.data.get(str(game_id), _blank()))

    def best_score(self, game_id):
        return self.get(game_id)["highScore"]

    def update_score(self, game_id, score):
        entry = self.data.setdefault(str(game_id), _blank())
        if score <= entry["highScore"]:
            return False
        entry["highScore"] = score
        entry["lastPlayed"] = datetime.now().isoformat()
        self.save()
        log.info("new best for game %s: %d", game_id, score)
        return True

    report_score = update_score

    def increment_play_count(self, game_id):
        entry = self.data.setdefault(str(game_id), _blank())
        entry["playCount"] += 1
        entry["lastPlayed"] = datetime.now().isoformat()
        self.save()

    def reset_game_stats(self, game_id):
        if str(game_id) in self.data:
            self.data[str(game_id)] = _blank()
            self.save()

    def reset_all(self):
        self.data = {}
        self.save()
