"""
Export helpers for profile reports and search results
"""

import json
import csv
import os
from typing import List, Dict, Any, Optional

from overwatch_crawler.config.settings import DEFAULT_DATA_DIR, DEFAULT_SEARCH_CSV_FIELDS

class DataExporter:
    """Writes crawler results to JSON and CSV files"""

    @staticmethod
    def save_report_to_json(report: Dict[str, Any], filename: Optional[str] = None,
                            data_dir: str = DEFAULT_DATA_DIR) -> str:
        """
        Save a profile report to a JSON file.

        Args:
            report: Report returned by OverwatchCrawler.get_all
            filename: Output filename (optional, derived from the nickname)
            data_dir: Directory to save files in

        Returns:
            str: Path to saved file
        """
        os.makedirs(data_dir, exist_ok=True)

        if not filename:
            nick = report.get('profile', {}).get('nick') or 'unknown'
            filename = f"overwatch_profile_{nick}.json"

        filepath = os.path.join(data_dir, filename)

        # NaN stays as the bare NaN token, same as json.dump's default
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2, ensure_ascii=False)

        return filepath

    @staticmethod
    def save_search_to_csv(results: List[Dict[str, Any]], filename: Optional[str] = None,
                           data_dir: str = DEFAULT_DATA_DIR, fieldnames: List[str] = None) -> str:
        """
        Save normalized search results to a CSV file.

        Args:
            results: Records returned by OverwatchCrawler.search
            filename: Output CSV filename (optional)
            data_dir: Directory to save files in
            fieldnames: CSV columns (optional, uses default if not provided)

        Returns:
            str: Path to saved file
        """
        os.makedirs(data_dir, exist_ok=True)

        if not filename:
            filename = "overwatch_search_results.csv"

        if not fieldnames:
            fieldnames = DEFAULT_SEARCH_CSV_FIELDS

        filepath = os.path.join(data_dir, filename)

        with open(filepath, 'w', newline='', encoding='utf-8') as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=fieldnames, extrasaction='ignore')
            writer.writeheader()

            for player in results:
                writer.writerow({field: player.get(field, '') for field in fieldnames})

        return filepath

    @staticmethod
    def load_from_json(filepath: str) -> Dict[str, Any]:
        """Load a previously saved report"""
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
