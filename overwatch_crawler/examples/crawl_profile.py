#!/usr/bin/env python3
"""
Example: Crawling an Overwatch profile or searching accounts

    python -m overwatch_crawler.examples.crawl_profile profile pc Player-1234 --region us
    python -m overwatch_crawler.examples.crawl_profile search Player
"""

import argparse
import sys

from overwatch_crawler.core import OverwatchCrawler, OverwatchError
from overwatch_crawler.utils import DataExporter, setup_logging

def crawl_profile(crawler: OverwatchCrawler, args) -> int:
    """Crawl one career page, print a summary and save it as JSON"""
    try:
        report = crawler.get_all(args.platform, args.region, args.tag, overall_only=args.overall)
    except OverwatchError as e:
        print(f"Failed to crawl {args.tag}: {e}")
        return 1

    profile = report['profile']
    print(f"Player: {profile['nick']} (level {profile['level']}, {profile['platform'] or args.platform})")
    if profile['rank'] is not None:
        print(f"Competitive: {profile['rank']} {profile['ranking']}".rstrip())
    else:
        print("Competitive: not placed this season")
    for game_type in ('quickplay', 'competitive'):
        stats = report[game_type]
        print(f"{game_type}: {len(stats['global'])} global stats, {len(stats['heroes'])} heroes")
    acquired = sum(1 for a in report['achievements'] if a['acquired'])
    print(f"Achievements: {acquired}/{len(report['achievements'])}")

    json_path = DataExporter.save_report_to_json(report, data_dir=args.output)
    print(f"Data saved to JSON: {json_path}")
    return 0

def search_players(crawler: OverwatchCrawler, args) -> int:
    """Search accounts by nickname and save the results as CSV"""
    try:
        players = crawler.search(args.nickname)
    except OverwatchError as e:
        print(f"Search failed for {args.nickname}: {e}")
        return 1

    for player in players:
        print(f"{player.get('name', '?')}: {player['platform']}/{player['region']} tier {player['tier']} level {player['level']}")

    csv_path = DataExporter.save_search_to_csv(players, data_dir=args.output)
    print(f"Data saved to CSV: {csv_path}")
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Crawl playoverwatch.com career profiles")
    parser.add_argument('--log-level', default='INFO', help="Logging level")
    parser.add_argument('--output', default='data', help="Directory for saved files")
    subparsers = parser.add_subparsers(dest='command', required=True)

    profile_parser = subparsers.add_parser('profile', help="Crawl a career profile")
    profile_parser.add_argument('platform', choices=['pc', 'xbl', 'psn'])
    profile_parser.add_argument('tag', help="Player tag, e.g. Name-1234")
    profile_parser.add_argument('--region', default='us', help="Region for PC profiles (us, eu, kr)")
    profile_parser.add_argument('--overall', action='store_true', help="Only keep the all heroes aggregate")
    profile_parser.set_defaults(handler=crawl_profile)

    search_parser = subparsers.add_parser('search', help="Search accounts by nickname")
    search_parser.add_argument('nickname')
    search_parser.set_defaults(handler=search_players)

    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    crawler = OverwatchCrawler()
    try:
        return args.handler(crawler, args)
    finally:
        crawler.close()

if __name__ == "__main__":
    sys.exit(main())
