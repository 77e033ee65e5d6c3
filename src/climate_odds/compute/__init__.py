from climate_odds.compute.day_of_year import day_of_year, parse_date_key
from climate_odds.compute.odds import compute_odds, match_day_records, score_records, summarize

__all__ = [
    "compute_odds",
    "day_of_year",
    "match_day_records",
    "parse_date_key",
    "score_records",
    "summarize",
]
