from .store import ScoreEntry, LeaderboardFile, Leaderboard

__all__ = ["ScoreEntry", "LeaderboardFile", "Leaderboard"]
