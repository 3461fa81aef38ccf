import requests
from requests.adapters import HTTPAdapter


def new_session() -> requests.Session:
    """Create a new requests session that never retries a failed request"""
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session
