# api_client.py
# A function to sort a list through the Sort API

import requests

from sortlab.config import API_URL


def sort_remote(values, algorithm="quick", base_url=API_URL, timeout=10):
    """
    Sends values to a running Sort API and returns its response as a dict.
    """
    try:
        url = f"{base_url}/sort"
        response = requests.post(url, json={"values": list(values), "algorithm": algorithm}, timeout=timeout)
        response.raise_for_status()  # Raise an exception for bad status codes
        return response.json()
    except requests.exceptions.RequestException as e:
        print(f"Error sorting remotely: {e}")
        return None
