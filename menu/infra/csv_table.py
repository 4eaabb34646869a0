"""Lenient CSV table parsing shared by the category and recipe repositories.

The first row holds the field names and every value is text. A short row
yields None for its missing fields; a long row keeps the surplus values in a
list under the None key. Blank lines are skipped. Nothing is validated.
"""
import csv
import io
from typing import Dict, List, Optional


def parse_table(text: str) -> List[Dict[Optional[str], object]]:
    reader = csv.DictReader(io.StringIO(text), restval=None)
    return [row for row in reader]


__all__ = ['parse_table']
