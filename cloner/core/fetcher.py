#!/usr/bin/env python3
"""
etherscan api transport: one GET per clone, raw body returned undecoded
"""

import logging
from typing import Optional

import requests

from cloner.config import Config
from cloner.errors import NetworkError

logger = logging.getLogger(__name__)

class SourceFetcher:
    """fetches the getsourcecode response body from the explorer"""
    
    def __init__(self, api_key: Optional[str] = None, timeout: int = Config.REQUEST_TIMEOUT):
        """
        args:
            api_key: etherscan api key (get at https://etherscan.io/myapikey), sent as apikey
            timeout: request timeout in seconds
        """
        self.api_key = api_key
        self.timeout = timeout
    
    def fetch(self, url: str) -> str:
        """
        issue the request and return the raw response body
        
        args:
            url: fully built query url (see build_url)
        
        returns:
            response body text
        """
        # api key goes in params so it never shows up in the logged url
        params = {'apikey': self.api_key} if self.api_key else None
        
        logger.debug(f"GET {url} (timeout {self.timeout}s)")
        
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise NetworkError(f"request timed out after {self.timeout}s")
        except requests.exceptions.HTTPError as e:
            raise NetworkError(f"explorer returned HTTP {getattr(e.response, 'status_code', 'error')}")
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"network error: {e}")
        
        # requests only raises for 4xx/5xx; unfollowed redirects land here
        if not 200 <= response.status_code < 300:
            raise NetworkError(f"explorer returned HTTP {response.status_code}")
        
        logger.debug(f"received {len(response.text)} bytes")
        return response.text
