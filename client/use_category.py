import logging
from typing import Any, Dict, List, Optional

import requests

from config import API_URL
from logger import LOGGER_NAME

CATEGORY_LIST_PATH = "/api/v1/category/get-category"


class CategoryFeed:
    """
    Danh sách category phía client.

    `categories` ban đầu rỗng. `mount()` gọi GET endpoint danh sách đúng
    một lần, các lần sau không làm gì. Payload thiếu `category` hoặc request
    lỗi thì danh sách vẫn rỗng.
    """

    def __init__(self, base_url: str = API_URL, logger: Optional[logging.Logger] = None, timeout: float = 10):
        self.base_url = base_url.rstrip("/")
        self.logger = logger or logging.getLogger(LOGGER_NAME)
        self.timeout = timeout
        self.categories: List[Dict[str, Any]] = []
        self.mounted = False

    def mount(self) -> List[Dict[str, Any]]:
        if self.mounted:
            return self.categories
        self.mounted = True
        try:
            response = requests.get(f"{self.base_url}{CATEGORY_LIST_PATH}", timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
            if data.get("category"):
                self.categories = data["category"]
        except (requests.RequestException, ValueError, AttributeError) as e:
            self.logger.error("Error while fetching categories: %s", e)
        return self.categories


def use_category(base_url: str = API_URL, logger: Optional[logging.Logger] = None) -> List[Dict[str, Any]]:
    return CategoryFeed(base_url, logger).mount()
