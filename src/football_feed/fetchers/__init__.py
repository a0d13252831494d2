from football_feed.fetchers.matches import MatchesFetcher
from football_feed.fetchers.standings import StandingsFetcher
from football_feed.fetchers.synthetic import SyntheticDataGenerator

__all__ = ["MatchesFetcher", "StandingsFetcher", "SyntheticDataGenerator"]
