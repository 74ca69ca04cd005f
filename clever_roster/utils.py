from typing import Dict, Tuple
from urllib.parse import parse_qsl, urlsplit


API_URL = 'https://api.clever.com'
TOKENS_ENDPOINT = 'https://clever.com/oauth/tokens?owner_type=district'
STUDENTS_ENDPOINT = '/v2.0/students'
TEACHERS_ENDPOINT = '/v2.0/teachers'
COURSES_ENDPOINT = '/v2.0/courses'
SECTIONS_ENDPOINT = '/v2.0/sections'
GRADES_ENDPOINT = 'https://grades-api.beta.clever.com/v1/grade'
# How many records to request per page of a listing
PAGE_LIMIT = 10000

ENDPOINTS = {
    'tokens': TOKENS_ENDPOINT,
    'students': STUDENTS_ENDPOINT,
    'teachers': TEACHERS_ENDPOINT,
    'courses': COURSES_ENDPOINT,
    'sections': SECTIONS_ENDPOINT,
    'grades': GRADES_ENDPOINT
}


def get_header(token) -> dict:
    return {
        'Authorization': f'Bearer {token}',
        'Accept': 'application/json'
    }


def split_next_uri(uri: str) -> Tuple[str, Dict[str, str]]:
    """
    Splits a `next` link returned by Clever, e.g.
    "/v2.0/students?limit=100&starting_after=58b6", into its path and
    its query parameters so the page can be requested again with a
    different limit.
    """
    parts = urlsplit(uri)
    path = parts.path
    if parts.scheme:
        path = f'{parts.scheme}://{parts.netloc}{parts.path}'
    return path, dict(parse_qsl(parts.query))
