"""Festival leaderboard: score entries, podiums and the overall ranking."""
