"""
Default squad - loaded into an empty store and restored by a reset.
12 players: 4 batsmen, 4 bowlers, 2 all-rounders, 2 wicket-keepers.
Per-match lists run oldest to newest (last 10 matches).
"""

# ── Batsmen ─────────────────────────────────────────────────────────
_BATSMEN = [
    {"id": "1", "name": "Arjun Mehta", "role": "Batsman",
     "batting_average": 48.6, "strike_rate": 138.2, "total_runs": 5832, "wickets": 2,
     "bowling_economy": 8.9, "fielding_rating": 86, "fitness_score": 92,
     "matches_played": 142, "fours": 512, "sixes": 168, "catches": 64,
     "runs_per_match": [45, 62, 12, 88, 34, 51, 73, 9, 66, 58],
     "wickets_per_match": [0, 0, 0, 0, 1, 0, 0, 0, 0, 0],
     "advanced_batting": {"balls_faced": 4220, "balls_in_pressure": 610, "runs_in_pressure": 742,
                          "dot_balls_played": 1390, "boundary_balls": 680,
                          "powerplay_runs": 2150, "middle_overs_runs": 2460, "death_overs_runs": 1222},
     "advanced_fielding": {"catch_attempts": 72, "catches_taken": 64, "run_out_attempts": 18,
                           "direct_hits": 7, "ground_fielding_actions": 940, "runs_saved": 310,
                           "misfields": 21}},
    {"id": "2", "name": "Rohan Kapoor", "role": "Batsman",
     "batting_average": 41.3, "strike_rate": 131.5, "total_runs": 3717, "wickets": 0,
     "bowling_economy": 0, "fielding_rating": 78, "fitness_score": 85,
     "matches_played": 98, "fours": 355, "sixes": 97, "catches": 38,
     "runs_per_match": [22, 41, 56, 18, 37, 44, 29, 61, 35, 40],
     "wickets_per_match": [0, 0, 0, 0, 0, 0, 0, 0, 0, 0]},
    {"id": "3", "name": "Vikram Singh", "role": "Batsman",
     "batting_average": 36.8, "strike_rate": 152.7, "total_runs": 2465, "wickets": 5,
     "bowling_economy": 9.4, "fielding_rating": 82, "fitness_score": 88,
     "matches_played": 74, "fours": 201, "sixes": 132, "catches": 31,
     "runs_per_match": [15, 8, 27, 33, 48, 52, 71, 39, 64, 80],
     "wickets_per_match": [0, 1, 0, 0, 0, 1, 0, 0, 0, 0]},
    {"id": "4", "name": "Karan Desai", "role": "Batsman",
     "batting_average": 29.4, "strike_rate": 124.9, "total_runs": 1029, "wickets": 0,
     "bowling_economy": 0, "fielding_rating": 74, "fitness_score": 79,
     "matches_played": 41, "fours": 98, "sixes": 31, "catches": 17,
     "runs_per_match": [34, 21, 45, 12, 30, 8, 5, 14, 3, 11],
     "wickets_per_match": [0, 0, 0, 0, 0, 0, 0, 0, 0, 0]},
]

# ── Bowlers ─────────────────────────────────────────────────────────
_BOWLERS = [
    {"id": "5", "name": "Siddharth Rao", "role": "Bowler",
     "batting_average": 11.2, "strike_rate": 104.6, "total_runs": 448, "wickets": 168,
     "bowling_economy": 6.8, "fielding_rating": 76, "fitness_score": 90,
     "matches_played": 121, "fours": 31, "sixes": 12, "catches": 29,
     "runs_per_match": [4, 0, 12, 7, 2, 18, 5, 9, 0, 6],
     "wickets_per_match": [2, 3, 1, 4, 2, 0, 3, 2, 1, 3],
     "advanced_bowling": {"balls_bowled": 2760, "death_overs_bowled": 620, "death_overs_runs": 842,
                          "match_turning_wickets": 41, "dot_balls_bowled": 1180,
                          "boundaries_conceded": 298, "powerplay_wickets": 58,
                          "middle_overs_wickets": 49, "death_overs_wickets": 61}},
    {"id": "6", "name": "Imran Sheikh", "role": "Bowler",
     "batting_average": 8.7, "strike_rate": 96.1, "total_runs": 261, "wickets": 112,
     "bowling_economy": 7.4, "fielding_rating": 71, "fitness_score": 83,
     "matches_played": 86, "fours": 18, "sixes": 7, "catches": 19,
     "runs_per_match": [2, 5, 0, 11, 3, 1, 8, 0, 4, 2],
     "wickets_per_match": [1, 2, 2, 0, 3, 1, 1, 2, 0, 1]},
    {"id": "7", "name": "Nikhil Joshi", "role": "Bowler",
     "batting_average": 6.4, "strike_rate": 88.3, "total_runs": 115, "wickets": 57,
     "bowling_economy": 7.9, "fielding_rating": 69, "fitness_score": 74,
     "matches_played": 44, "fours": 9, "sixes": 2, "catches": 11,
     "runs_per_match": [0, 3, 1, 0, 6, 2, 0, 4, 1, 0],
     "wickets_per_match": [1, 0, 2, 1, 1, 0, 2, 1, 0, 1]},
    {"id": "8", "name": "Dev Malhotra", "role": "Bowler",
     "batting_average": 9.1, "strike_rate": 101.2, "total_runs": 173, "wickets": 38,
     "bowling_economy": 8.3, "fielding_rating": 72, "fitness_score": 81,
     "matches_played": 27, "fours": 14, "sixes": 5, "catches": 8,
     "runs_per_match": [5, 0, 9, 2, 14, 0, 3, 7, 1, 4],
     "wickets_per_match": [0, 2, 1, 1, 3, 2, 1, 2, 3, 2]},
]

# ── All-rounders ────────────────────────────────────────────────────
_ALL_ROUNDERS = [
    {"id": "9", "name": "Aditya Nair", "role": "All-Rounder",
     "batting_average": 32.5, "strike_rate": 145.8, "total_runs": 3185, "wickets": 96,
     "bowling_economy": 7.6, "fielding_rating": 88, "fitness_score": 91,
     "matches_played": 118, "fours": 236, "sixes": 141, "catches": 57,
     "runs_per_match": [28, 44, 19, 51, 36, 12, 47, 63, 22, 39],
     "wickets_per_match": [1, 2, 0, 1, 3, 1, 0, 2, 1, 1]},
    {"id": "10", "name": "Manish Pandey", "role": "All-Rounder",
     "batting_average": 24.7, "strike_rate": 133.4, "total_runs": 889, "wickets": 29,
     "bowling_economy": 8.1, "fielding_rating": 80, "fitness_score": 87,
     "matches_played": 39, "fours": 72, "sixes": 38, "catches": 16,
     "runs_per_match": [11, 26, 31, 9, 18, 40, 25, 33, 29, 21],
     "wickets_per_match": [1, 0, 1, 1, 0, 2, 1, 0, 1, 0]},
]

# ── Wicket-keepers ──────────────────────────────────────────────────
_KEEPERS = [
    {"id": "11", "name": "Rahul Verma", "role": "Wicket-Keeper",
     "batting_average": 38.9, "strike_rate": 141.3, "total_runs": 4278, "wickets": 0,
     "bowling_economy": 0, "fielding_rating": 90, "fitness_score": 89,
     "matches_played": 131, "fours": 372, "sixes": 149, "catches": 112,
     "runs_per_match": [38, 55, 21, 47, 30, 66, 14, 42, 59, 33],
     "wickets_per_match": [0, 0, 0, 0, 0, 0, 0, 0, 0, 0]},
    {"id": "12", "name": "Sameer Khan", "role": "Wicket-Keeper",
     "batting_average": 22.1, "strike_rate": 118.7, "total_runs": 420, "wickets": 0,
     "bowling_economy": 0, "fielding_rating": 84, "fitness_score": 77,
     "matches_played": 23, "fours": 38, "sixes": 11, "catches": 27,
     "runs_per_match": [7, 19, 24, 3, 31, 12, 26, 9, 17, 22],
     "wickets_per_match": [0, 0, 0, 0, 0, 0, 0, 0, 0, 0]},
]

INITIAL_PLAYERS = _BATSMEN + _BOWLERS + _ALL_ROUNDERS + _KEEPERS
